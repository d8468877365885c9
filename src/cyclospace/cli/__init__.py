"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="cyclospace",
    help="cyclospace - per-scope cyclomatic complexity for multi-language codebases",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402
