#!/usr/bin/env python3
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Optional

import typer

from . import __version__
from .utils.config import load_env_vars, get_log_level
from .utils.logger import configure_logging, get_logger
from .commands.add_command import handle_add
from .commands.list_command import handle_list
from .commands.show_command import handle_show
from .commands.pomodoro_command import handle_start
from .commands.complete_command import handle_complete
from .commands.delete_command import handle_delete
from .commands.stats_command import handle_stats
from .commands.export_command import handle_export
from .commands.menu_command import handle_menu

# Exit code used when a countdown is interrupted with Ctrl-C
INTERRUPTED_EXIT_CODE = 130

log = get_logger(__name__)

# Create app instance
app = typer.Typer(
    name="pomocli",
    help="Pomocli - Track tasks and focus on them with a Pomodoro timer.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pomocli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Path to the JSON task file (default: $POMOCLI_DATA_FILE or ~/.pomocli/tasks.json)."),
    report: Optional[Path] = typer.Option(None, "--report", "-r", help="Path of the exported report (default: $POMOCLI_REPORT_FILE)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
):
    """Pomocli - Track tasks and focus on them with a Pomodoro timer."""
    load_env_vars()
    configure_logging(logging.DEBUG if verbose else get_log_level())
    ctx.obj = {"file": file, "report": report}
    log.debug("Task file: %s", file or "(from config)")


def _args(ctx: typer.Context, **kwargs) -> SimpleNamespace:
    """Bundle the global options with a command's own options for its handler."""
    return SimpleNamespace(**(ctx.obj or {}), **kwargs)


def _exit_if_missing(found: bool) -> None:
    if not found:
        raise typer.Exit(code=1)


@app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the new task."),
):
    """Add a new task and print its id."""
    handle_add(_args(ctx, name=name))


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List tasks in the order they were added."""
    handle_list(_args(ctx, json=json_output))


@app.command("show")
def show(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID to show."),
):
    """Show one task's details."""
    _exit_if_missing(handle_show(_args(ctx, task_id=task_id)))


@app.command("start")
def start(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID to focus on."),
):
    """Run a 25 minute pomodoro against a task, followed by a break."""
    try:
        found = handle_start(_args(ctx, task_id=task_id))
    except KeyboardInterrupt:
        typer.echo("\nInterrupted.")
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE)
    _exit_if_missing(found)


@app.command("complete")
def complete(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID to mark complete."),
):
    """Mark a task as complete."""
    _exit_if_missing(handle_complete(_args(ctx, task_id=task_id)))


@app.command("delete")
def delete(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task ID to delete."),
):
    """Delete a task. Its id is not reused."""
    _exit_if_missing(handle_delete(_args(ctx, task_id=task_id)))


@app.command("stats")
def stats(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """Show task and pomodoro totals."""
    handle_stats(_args(ctx, json=json_output))


@app.command("export")
def export(ctx: typer.Context):
    """Write a plain-text report of all tasks."""
    handle_export(_args(ctx))


@app.command("menu")
def menu(ctx: typer.Context):
    """Interactive menu over all commands."""
    try:
        handle_menu(_args(ctx))
    except KeyboardInterrupt:
        typer.echo("\nInterrupted.")
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE)


if __name__ == "__main__":
    app()
