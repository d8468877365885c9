"""Rich rendering of space trees and project reports."""

from rich.table import Table
from rich.tree import Tree

from ..metrics import CyclomaticSummary
from ..models import FuncSpace, ProjectReport
from ._common import console, format_number


def _summary_cells(summary: CyclomaticSummary) -> list[str]:
    return [
        format_number(summary.sum),
        format_number(summary.average),
        format_number(summary.min),
        format_number(summary.max),
    ]


def _space_label(space: FuncSpace) -> str:
    name = space.name or "<anonymous>"
    return (
        f"[cyan]{space.kind.value}[/cyan] [bold]{name}[/bold] "
        f"[dim]lines {space.start_line}-{space.end_line}[/dim] "
        f"cyclomatic [yellow]{format_number(space.cyclomatic)}[/yellow]"
    )


def build_space_tree_view(unit: FuncSpace) -> Tree:
    """Rich tree mirroring the space nesting of one file."""
    root = Tree(_space_label(unit))
    pending = [(root, child) for child in unit.spaces]
    while pending:
        branch, space = pending.pop(0)
        node = branch.add(_space_label(space))
        pending.extend((node, child) for child in space.spaces)
    return root


def print_report(report: ProjectReport, show_spaces: bool = False) -> None:
    table = Table(title="Cyclomatic complexity", show_lines=False)
    table.add_column("File", style="bold")
    table.add_column("Spaces", justify="right")
    for column in ("Sum", "Average", "Min", "Max"):
        table.add_column(column, justify="right")

    for path in sorted(report.files):
        unit = report.files[path]
        table.add_row(path, str(unit.space_count), *_summary_cells(unit.metrics))

    summary = report.summary
    if summary is not None and len(report.files) > 1:
        table.add_section()
        table.add_row("[bold]total[/bold]", str(summary.n), *_summary_cells(summary))

    console.print(table)

    if show_spaces:
        for path in sorted(report.files):
            console.print()
            console.print(build_space_tree_view(report.files[path]))

    if report.errors:
        console.print()
        console.print(f"[yellow]{len(report.errors)} file(s) could not be analyzed:[/yellow]")
        for path, reason in sorted(report.errors.items()):
            console.print(f"  [dim]{path}[/dim]: {reason}")
