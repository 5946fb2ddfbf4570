from rich.console import Console

from . import open_store, not_found


def handle_complete(args) -> bool:
    """Mark a task complete. Its pomodoro count is left untouched."""
    console = Console()
    if not open_store(args).complete(args.task_id):
        return not_found(console, args.task_id)
    console.print(f"[green]✔[/green] Task {args.task_id} marked complete.")
    return True
