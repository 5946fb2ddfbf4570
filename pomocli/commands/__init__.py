"""
This __init__.py file makes the 'commands' directory a Python package.

Each module defines a handler for one CLI command. Handlers take an args
object (attributes named after the command's options), open the task store
and render the outcome. Handlers for id-based commands return False when the
task does not exist so the caller can choose an exit code.
"""
from typing import Any

from ..pomodoro_api.task_store import TaskStore
from ..utils.config import get_data_file, get_report_file


def open_store(args: Any) -> TaskStore:
    """Build a TaskStore from ``args.file``/``args.report``, falling back to config.

    Without an explicit report path the report sits next to the data file.
    An already open store passed as ``args.store`` is reused as is.
    """
    store = getattr(args, 'store', None)
    if store is not None:
        return store
    data_file = getattr(args, 'file', None) or get_data_file()
    report_file = getattr(args, 'report', None) or get_report_file()
    return TaskStore(data_file, report_file)


def not_found(console, task_id: int) -> bool:
    console.print(f"[red]Task {task_id} not found.[/red]")
    return False
