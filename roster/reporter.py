from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from roster.domain.models import DemoResult, RosterSnapshot


def _storage_cell(snapshot: RosterSnapshot, is_reference: bool) -> str:
    if is_reference:
        return "[dim]-[/dim]"
    return "[bold red]shared[/bold red]" if snapshot.shares_storage else "[green]own copy[/green]"


def build_table(result: DemoResult) -> Table:
    """
    Render a demo result as a rich table, one row per holder.
    """
    caption_parts = []
    if result.added:
        caption_parts.append("added via duplicate: " + ", ".join(result.added))
    if result.removed:
        caption_parts.append("removed via duplicate: " + ", ".join(result.removed))

    table = Table(
        title=f"Employee Roster Clone ({result.mode.value})",
        box=box.ROUNDED,
        caption=" │ ".join(caption_parts) or None,
    )

    table.add_column("Holder", style="cyan", no_wrap=True)
    table.add_column("Type", style="blue")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Names", style="green")
    table.add_column("Storage", justify="center")

    for snapshot, is_reference in ((result.original, True), (result.duplicate, False)):
        table.add_row(
            snapshot.label,
            snapshot.holder_type,
            str(snapshot.size),
            ", ".join(snapshot.names) or "[dim](empty)[/dim]",
            _storage_cell(snapshot, is_reference),
        )
    return table


def print_result(result: DemoResult, console: Console | None = None) -> None:
    """Print a demo result to the console."""
    console = console or Console()
    console.print(build_table(result))
    if not result.distinct_instances:
        console.print("[yellow]Duplicate is the same object as the original.[/yellow]")


__all__ = ["build_table", "print_result"]
