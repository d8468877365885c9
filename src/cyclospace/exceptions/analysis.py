"""Analysis-related exceptions: file access, parsing, space bookkeeping."""

from pathlib import Path
from typing import List, Union

from .base import CyclospaceError


class AnalysisError(CyclospaceError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Union[Path, str], reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be turned into a syntax tree."""

    def __init__(self, filepath: Union[Path, str], language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when attempting to analyze a language without rules or grammar."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages


class SpaceStateError(AnalysisError):
    """Raised when a space is finalized twice or the space stack is unbalanced."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid space state: {reason}", details={"reason": reason})
        self.reason = reason
