"""
Handles the logic for the 'delete' command.
"""
from rich.console import Console

from . import open_store, not_found


def handle_delete(args) -> bool:
    """Delete a task by id. Deleted ids are not handed out again."""
    console = Console()
    if not open_store(args).delete(args.task_id):
        return not_found(console, args.task_id)
    console.print(f"Task {args.task_id} deleted.")
    return True
