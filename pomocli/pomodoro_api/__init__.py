"""
Pomodoro API layer package.
Implements the JSON task store and the countdown/break sequencing.
"""

from .data_models import Task
from .exceptions import CorruptStoreError, PomocliError
from .session import (
    LONG_BREAK_SECONDS,
    SHORT_BREAK_SECONDS,
    WORK_SECONDS,
    Phase,
    PomodoroSession,
    SessionResult,
    break_phase_for,
    countdown,
    format_remaining,
)
from .task_store import TaskStore

__all__ = [
    'Task',
    'TaskStore',
    'PomodoroSession',
    'SessionResult',
    'Phase',
    'break_phase_for',
    'countdown',
    'format_remaining',
    'WORK_SECONDS',
    'SHORT_BREAK_SECONDS',
    'LONG_BREAK_SECONDS',
    'CorruptStoreError',
    'PomocliError',
]
