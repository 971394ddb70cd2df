"""
Console report of a comparison (rich)
"""
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .schemas import ComparisonReport


def render_report(report: ComparisonReport, console: Optional[Console] = None) -> Console:
    """Prints property names and the three counts"""
    console = console or Console()

    console.print(Panel(
        f"[cyan]{report.left_type}[/cyan]  vs  [green]{report.right_type}[/green]",
        title="Class Comparator"
    ))

    names = Table(title="Properties")
    names.add_column(report.left_type, style="cyan")
    names.add_column(report.right_type, style="green")
    for idx in range(max(len(report.left_properties), len(report.right_properties))):
        names.add_row(
            report.left_properties[idx] if idx < len(report.left_properties) else "",
            report.right_properties[idx] if idx < len(report.right_properties) else ""
        )
    console.print(names)

    counts = Table(title="Alike properties")
    counts.add_column("Rule", style="yellow")
    counts.add_column("Count", style="magenta", justify="right")
    counts.add_row("by name", str(report.by_name))
    counts.add_row("by name and value type", str(report.by_name_and_value_type))
    counts.add_row("by name and property type", str(report.by_name_and_declared_type))
    console.print(counts)

    return console
