"""List supported languages and grammar availability."""

import typer
from rich.table import Table

from ..grammars import LANGUAGE_RULES
from ..parser import TreeSitterParser
from . import app
from ._common import console


@app.command()
def languages():
    """Show supported languages, their extensions and grammar status."""
    parser = TreeSitterParser()

    table = Table(title="Languages")
    table.add_column("Language", style="bold")
    table.add_column("Extensions")
    table.add_column("Decisions")
    table.add_column("Grammar")

    for name in sorted(LANGUAGE_RULES):
        rules = LANGUAGE_RULES[name]
        installed = parser.is_grammar_available(rules.grammar)
        table.add_row(
            name,
            " ".join(rules.extensions),
            "classified" if rules.classifies else "[dim]structural only[/dim]",
            "[green]installed[/green]" if installed else "[red]missing[/red]",
        )

    console.print(table)
    if not parser.grammars:
        console.print("[yellow]No grammars installed: pip install cyclospace[/yellow]")
        raise typer.Exit(1)
