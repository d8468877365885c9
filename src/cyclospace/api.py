"""One-call entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .analyzer import SpaceAnalyzer
from .config import AnalysisConfig, load_config
from .models import ProjectReport

PathLike = Union[str, Path]


def analyze(
    paths: Union[PathLike, Iterable[PathLike]],
    config: Optional[AnalysisConfig] = None,
) -> ProjectReport:
    """Analyze one or more files or directories.

    Example:
        >>> report = analyze("src/")
        >>> print(report.summary)
        sum: 42.0, average: 2.1, min: 1.0, max: 9.0
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]
    analyzer = SpaceAnalyzer(config or load_config())
    return analyzer.analyze_paths(Path(p) for p in paths)
