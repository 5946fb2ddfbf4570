from rich.console import Console

from . import open_store


def handle_export(args) -> str:
    """Write the plain-text report and print where it went."""
    store = open_store(args)
    store.export_report()
    Console().print(f"Report written to {store.report_path}", highlight=False, soft_wrap=True)
    return str(store.report_path)
