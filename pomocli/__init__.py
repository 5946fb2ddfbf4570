"""
Pomocli: a personal task tracker with a Pomodoro timer.

Tasks live in a local JSON file; the timer runs one blocking work interval
followed by a short or long break and counts the interval against a task.
"""

__version__ = "1.0.0"
__author__ = "Pomocli Team"

# Import the main CLI app for entry point
from .pomocli import app

__all__ = ["app", "__version__"]
