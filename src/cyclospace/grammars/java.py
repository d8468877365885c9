"""Java rules.

Anonymous class bodies (``new A() { ... }``) open no space of their own;
their methods are spaces nested directly in the enclosing method.
"""

from ..models import SpaceKind
from .base import LOGICAL_OPERATOR_GUARDS, LanguageRules

DECISION_KINDS = frozenset(
    {"if", "for", "while", "case", "catch", "ternary_expression", "&&", "||"}
)

SPACE_KINDS = {
    "class_declaration": SpaceKind.CLASS,
    "enum_declaration": SpaceKind.CLASS,
    "record_declaration": SpaceKind.CLASS,
    "interface_declaration": SpaceKind.INTERFACE,
    "method_declaration": SpaceKind.FUNCTION,
    "constructor_declaration": SpaceKind.FUNCTION,
    "lambda_expression": SpaceKind.CLOSURE,
}

RULES = LanguageRules(
    name="java",
    grammar="java",
    extensions=(".java",),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=SPACE_KINDS,
)
