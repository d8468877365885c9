"""Tests for the exception hierarchy."""

from pathlib import Path

from cyclospace.exceptions import (
    AnalysisError,
    ConfigurationError,
    CyclospaceError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    ParsingError,
    SpaceStateError,
    UnsupportedLanguageError,
)


class TestHierarchy:
    """Every error is catchable as CyclospaceError."""

    def test_analysis_errors(self):
        for error in (
            FileAccessError(Path("a.py"), "denied"),
            ParsingError("a.py", "python", "broken"),
            UnsupportedLanguageError("cobol", ["python"]),
            SpaceStateError("already finalized"),
        ):
            assert isinstance(error, AnalysisError)
            assert isinstance(error, CyclospaceError)

    def test_configuration_errors(self):
        for error in (
            InvalidPathError(Path("x"), "does not exist"),
            InvalidConfigError("workers", 0, "must be at least 1"),
        ):
            assert isinstance(error, ConfigurationError)
            assert isinstance(error, CyclospaceError)


class TestMessages:
    """String rendering includes details."""

    def test_plain_message(self):
        assert str(CyclospaceError("boom")) == "boom"

    def test_details_appended(self):
        error = UnsupportedLanguageError("cobol", ["c", "python"])
        assert str(error) == "Unsupported language: cobol (language=cobol, supported=c, python)"
        assert error.supported_languages == ["c", "python"]

    def test_file_access(self):
        error = FileAccessError(Path("src/a.py"), "denied")
        assert error.details == {"filepath": "src/a.py", "reason": "denied"}
        assert str(error).startswith("Cannot access file: src/a.py")

    def test_space_state(self):
        assert SpaceStateError("twice").message == "Invalid space state: twice"
