"""Configuration loading and management for cyclospace.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.cyclospace.toml)
    3. Project config (./cyclospace.toml)
    4. Explicit config file
    5. Environment variables (CYCLOSPACE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=2)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import CyclospaceError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

# Upper bound for auto-detected workers
_MAX_AUTO_WORKERS = 8


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        Performance tuning:
            workers: Number of parallel file workers (None = auto-detect)

        File filtering:
            exclude_patterns: Glob patterns to exclude from discovery
            max_file_size_mb: Maximum file size to analyze (MB)
            max_files: Maximum number of files to analyze
            languages: Restrict discovery to these languages (None = all)
            allow_hidden_files: Include hidden files (starting with .)
            follow_symlinks: Follow symbolic links during discovery

        Parsing:
            strict_parsing: Reject trees that contain syntax errors

        Output control:
            verbosity: Logging verbosity level
    """

    # Performance tuning
    workers: Optional[int] = None

    # File filtering
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "*.min.js",
            "*.bundle.js",
            "*.generated.*",
            "*_pb2.py",
        ]
    )
    max_file_size_mb: float = 10.0
    max_files: int = 10000
    languages: Optional[list[str]] = None
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    # Parsing
    strict_parsing: bool = False

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITY_LEVELS)}"
            )
        if self.languages is not None and not self.languages:
            raise InvalidConfigError("languages", self.languages, "must not be empty")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_workers(self) -> int:
        """Worker count with auto-detection applied."""
        if self.workers is not None:
            return self.workers
        return min(os.cpu_count() or 4, _MAX_AUTO_WORKERS)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        CyclospaceError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".cyclospace.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "cyclospace.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise CyclospaceError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise CyclospaceError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except CyclospaceError:
        raise
    except Exception as e:
        raise CyclospaceError(f"Invalid {label} '{path}': {e}")
    # Settings may live at top level or under a [cyclospace] table
    section = data.get("cyclospace", data)
    if not isinstance(section, dict):
        raise CyclospaceError(f"Invalid {label} '{path}': [cyclospace] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CYCLOSPACE_* environment variables.

    Supported environment variables:
        CYCLOSPACE_WORKERS: int
        CYCLOSPACE_MAX_FILE_SIZE_MB: float
        CYCLOSPACE_MAX_FILES: int
        CYCLOSPACE_LANGUAGES: comma-separated language names
        CYCLOSPACE_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        CYCLOSPACE_FOLLOW_SYMLINKS: bool
        CYCLOSPACE_STRICT_PARSING: bool
        CYCLOSPACE_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CYCLOSPACE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"CYCLOSPACE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise CyclospaceError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        if field_name == "languages":
            items = [item.strip() for item in value.split(",") if item.strip()]
            return items or None
        # exclude_patterns is too easy to get wrong from a shell
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        CyclospaceError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise CyclospaceError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)


default_config = AnalysisConfig()
