from rich.console import Console
from rich.markup import escape

from . import open_store


def handle_add(args) -> int:
    """
    Creates a new task with the provided name and prints its id.
    """
    store = open_store(args)
    task_id = store.add(args.name)
    Console().print(f"Task '{escape(args.name)}' added (ID: {task_id}).")
    return task_id
