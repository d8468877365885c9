"""Exception hierarchy for cyclospace."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
    SpaceStateError,
    UnsupportedLanguageError,
)
from .base import CyclospaceError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "CyclospaceError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "UnsupportedLanguageError",
    "SpaceStateError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
