"""Plain-text task report."""
from typing import Iterable, Optional
from datetime import datetime

from .data_models import Task

REPORT_TITLE = "Pomodoro Task Report"
RULE = "=" * 40
DONE_GLYPH = "✓"
PENDING_GLYPH = "○"


def status_glyph(task: Task) -> str:
    return DONE_GLYPH if task.completed else PENDING_GLYPH


def format_task_block(task: Task) -> str:
    """Format one task as the block written to the report file."""
    lines = [
        f"[{status_glyph(task)}] {task.name}",
        f"    Pomodoros: {task.pomodoros}",
        f"    Time spent: {task.minutes_spent} minutes",
        f"    Created: {task.created_at}",
        "",
    ]
    return "\n".join(lines)


def build_report(tasks: Iterable[Task], generated_at: Optional[str] = None) -> str:
    generated_at = generated_at or datetime.now().isoformat(timespec="seconds")
    output = [REPORT_TITLE, f"Generated: {generated_at}", RULE, ""]
    blocks = [format_task_block(task) for task in tasks]
    if not blocks:
        output.append("No tasks.")
        output.append("")
    output.extend(blocks)
    return "\n".join(output) + "\n"
