"""Language rule registry.

Maps language names and file extensions to their ``LanguageRules``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..exceptions import UnsupportedLanguageError
from . import c_cpp, java, javascript, python, rust, structural
from .base import LanguageRules

LANGUAGE_RULES: dict[str, LanguageRules] = {
    rules.name: rules
    for rules in (
        python.RULES,
        javascript.JAVASCRIPT,
        javascript.MOZJS,
        javascript.TYPESCRIPT,
        javascript.TSX,
        java.RULES,
        c_cpp.C,
        c_cpp.CPP,
        rust.RULES,
        structural.GO,
        structural.RUBY,
    )
}

_EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ext: name for name, rules in LANGUAGE_RULES.items() for ext in rules.extensions
}


def get_rules(language: str) -> LanguageRules:
    """Look up rules by language name."""
    try:
        return LANGUAGE_RULES[language]
    except KeyError:
        raise UnsupportedLanguageError(language, supported_languages())


def detect_language(filepath: Union[str, Path]) -> str:
    """Detect language from file extension; "unknown" when unmapped."""
    return _EXTENSION_TO_LANGUAGE.get(Path(filepath).suffix.lower(), "unknown")


def known_extensions() -> set[str]:
    return set(_EXTENSION_TO_LANGUAGE)


def supported_languages() -> list[str]:
    return sorted(LANGUAGE_RULES)


__all__ = [
    "LANGUAGE_RULES",
    "LanguageRules",
    "detect_language",
    "get_rules",
    "known_extensions",
    "supported_languages",
]
