"""Structural-only languages.

These grammars have space tables but no decision table, so every space
keeps the baseline complexity of 1.
"""

from ..models import SpaceKind
from .base import LanguageRules

GO = LanguageRules(
    name="go",
    grammar="go",
    extensions=(".go",),
    space_kinds={
        "function_declaration": SpaceKind.FUNCTION,
        "method_declaration": SpaceKind.FUNCTION,
        "func_literal": SpaceKind.CLOSURE,
    },
)

RUBY = LanguageRules(
    name="ruby",
    grammar="ruby",
    extensions=(".rb",),
    space_kinds={
        "method": SpaceKind.FUNCTION,
        "singleton_method": SpaceKind.FUNCTION,
        "class": SpaceKind.CLASS,
        "module": SpaceKind.NAMESPACE,
        "lambda": SpaceKind.CLOSURE,
    },
)
