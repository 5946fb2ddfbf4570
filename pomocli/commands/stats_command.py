import json

from rich.console import Console
from rich.table import Table

from . import open_store

STAT_LABELS = {
    "total": "Total tasks",
    "completed": "Completed",
    "pending": "Pending",
    "total_pomodoros": "Pomodoros",
    "total_minutes": "Minutes focused",
}


def handle_stats(args) -> dict:
    stats = open_store(args).statistics()
    if getattr(args, 'json', False):
        print(json.dumps(stats, indent=2))
        return stats

    table = Table(show_header=False)
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")
    for key, label in STAT_LABELS.items():
        table.add_row(label, str(stats[key]))
    Console().print(table)
    return stats
