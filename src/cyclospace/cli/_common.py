"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..grammars import get_rules

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    language: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build config from CLI options.

    Raises:
        UnsupportedLanguageError: If ``language`` names no known language
    """
    overrides: dict = {"verbose": verbose, "quiet": quiet}
    if workers is not None:
        overrides["workers"] = workers
    if language is not None:
        get_rules(language)
        overrides["languages"] = [language]
    return load_config(config_file=config, **overrides)


def format_number(value: float) -> str:
    """Render a metric without trailing zeros (3.0 -> 3, 2.25 -> 2.25)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")
