"""
Interactive numbered menu that loops over the other command handlers.
"""
from types import SimpleNamespace

import typer
from rich.console import Console

from . import open_store
from .add_command import handle_add
from .complete_command import handle_complete
from .delete_command import handle_delete
from .export_command import handle_export
from .list_command import handle_list
from .pomodoro_command import handle_start
from .stats_command import handle_stats

MENU_OPTIONS = [
    ("1", "Add task"),
    ("2", "List tasks"),
    ("3", "Start pomodoro"),
    ("4", "Complete task"),
    ("5", "Delete task"),
    ("6", "Statistics"),
    ("7", "Export report"),
    ("8", "Exit"),
]
EXIT_CHOICE = "8"


def print_menu(console: Console) -> None:
    console.print("\n[bold]Pomodoro Task Manager[/bold]")
    for key, label in MENU_OPTIONS:
        console.print(f"  {key}. {label}")


def _with(store, **extra) -> SimpleNamespace:
    return SimpleNamespace(store=store, **extra)


def handle_menu(args) -> None:
    """Prompt for a menu choice until the user picks Exit."""
    console = Console()
    # one store for the whole menu so deleted ids stay retired
    store = open_store(args)
    valid = [key for key, _ in MENU_OPTIONS]
    while True:
        print_menu(console)
        choice = typer.prompt("Choose an option").strip()
        if choice == EXIT_CHOICE:
            console.print("Goodbye.")
            return
        if choice not in valid:
            console.print(f"Please enter one of: {', '.join(valid)}")
            continue

        if choice == "1":
            name = typer.prompt("Task name")
            handle_add(_with(store, name=name))
        elif choice == "2":
            handle_list(_with(store, json=False))
        elif choice == "6":
            handle_stats(_with(store, json=False))
        elif choice == "7":
            handle_export(_with(store))
        else:
            task_id = typer.prompt("Task ID", type=int)
            handler = {"3": handle_start, "4": handle_complete, "5": handle_delete}[choice]
            handler(_with(store, task_id=task_id))
