"""
Handles the 'start' command: one blocking work interval plus its break.
"""
from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from . import open_store, not_found
from ..pomodoro_api.session import Phase, PomodoroSession, format_remaining

PHASE_STYLES = {
    Phase.WORK: "bold red",
    Phase.SHORT_BREAK: "bold green",
    Phase.LONG_BREAK: "bold blue",
}


class CountdownDisplay:
    """Renders countdown ticks in place, one Live region per phase."""

    def __init__(self, console: Console):
        self.console = console
        self._live: Optional[Live] = None

    def tick(self, phase: Phase, remaining: int) -> None:
        text = Text(f"{phase.value}  {format_remaining(remaining)}", style=PHASE_STYLES[phase])
        if self._live is None:
            self._live = Live(text, console=self.console, refresh_per_second=4, transient=True)
            self._live.start()
        else:
            self._live.update(text)

    def phase_end(self, phase: Phase) -> None:
        self.close()
        self.console.print(f"[{PHASE_STYLES[phase]}]{phase.value} complete![/]")

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None


def handle_start(args) -> bool:
    """
    Runs a pomodoro against one task, then the short or long break it earned.
    Blocks for the whole sequence.
    """
    console = Console()
    store = open_store(args)
    task = store.find(args.task_id)
    if task is None:
        return not_found(console, args.task_id)

    console.print(f"🍅 Focus on '{escape(task.name)}' (ID: {task.id}). Press Ctrl-C to abort.")
    display = CountdownDisplay(console)
    session = PomodoroSession(store, on_tick=display.tick, on_phase_end=display.phase_end)
    try:
        result = session.start(task.id)
    finally:
        display.close()

    if result is None:
        return not_found(console, args.task_id)
    console.print(
        f"Task {result.task.id} now has {result.task.pomodoros} pomodoro(s); "
        f"took a {result.break_phase.value.lower()}."
    )
    return True
