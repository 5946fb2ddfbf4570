import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import open_store
from ..pomodoro_api.report import status_glyph


def handle_list(args) -> None:
    """
    Lists tasks in insertion order, as a table or as JSON.
    """
    store = open_store(args)
    tasks = store.list()
    if getattr(args, 'json', False):
        print(json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False))
        return

    console = Console()
    if not tasks:
        console.print("No tasks found.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Task", style="green")
    table.add_column("Pomodoros", justify="right")
    table.add_column("Status", style="magenta", justify="center")
    table.add_column("Created", style="yellow")

    for task in tasks:
        table.add_row(
            str(task.id),
            escape(task.name),
            str(task.pomodoros),
            status_glyph(task),
            task.created_at,
        )

    console.print(table)
    console.print(f"\n{len(tasks)} task(s)")
