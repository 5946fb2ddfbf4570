from rich.console import Console

from . import open_store, not_found
from ..pomodoro_api.report import format_task_block


def handle_show(args) -> bool:
    """Print the details of one task."""
    console = Console()
    task = open_store(args).find(args.task_id)
    if task is None:
        return not_found(console, args.task_id)
    console.print(f"ID: {task.id}")
    console.print(format_task_block(task), markup=False, highlight=False)
    return True
