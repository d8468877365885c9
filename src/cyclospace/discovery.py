"""Source file discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .config import AnalysisConfig
from .exceptions import InvalidPathError
from .grammars import detect_language
from .logging_config import get_logger

logger = get_logger(__name__)

SKIP_DIRS = frozenset(
    {
        "vendor",
        "node_modules",
        "venv",
        ".venv",
        "__pycache__",
        ".git",
        ".hg",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        "dist",
        "build",
        "target",
        ".eggs",
    }
)


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """Check if a file matches any exclusion glob."""
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def _walk(root: Path, config: AnalysisConfig) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        dirnames[:] = sorted(
            d
            for d in dirnames
            if d not in SKIP_DIRS and (config.allow_hidden_files or not d.startswith("."))
        )
        for filename in sorted(filenames):
            if not config.allow_hidden_files and filename.startswith("."):
                continue
            yield Path(dirpath) / filename


def _accept(filepath: Path, config: AnalysisConfig) -> bool:
    language = detect_language(filepath)
    if language == "unknown":
        return False
    if config.languages is not None and language not in config.languages:
        return False
    if should_skip_file(filepath, config.exclude_patterns):
        logger.debug(f"Skipped (pattern): {filepath}")
        return False
    if not config.follow_symlinks and filepath.is_symlink():
        logger.debug(f"Skipped (symlink): {filepath}")
        return False
    try:
        size = filepath.stat().st_size
    except OSError as e:
        logger.warning(f"Cannot stat {filepath}: {e}")
        return False
    if size > config.max_file_size_bytes:
        logger.debug(f"Skipped (size): {filepath} ({size} bytes)")
        return False
    return True


def discover_files(paths: Iterable[Path], config: AnalysisConfig) -> list[Path]:
    """Expand files and directories into the list of analyzable sources.

    Files named explicitly are kept when their extension is known, even if
    hidden. Directories are walked recursively.

    Raises:
        InvalidPathError: If a path does not exist
    """
    found: set[Path] = set()
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise InvalidPathError(path, "does not exist")
        if path.is_file():
            candidates: Iterable[Path] = [path]
        else:
            candidates = _walk(path, config)
        for candidate in candidates:
            if _accept(candidate, config):
                found.add(candidate)

    files = sorted(found)
    if len(files) > config.max_files:
        logger.warning(f"Reached max files limit ({config.max_files})")
        files = files[: config.max_files]
    return files
