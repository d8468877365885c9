"""JavaScript-family rules: JavaScript, Mozjs, TypeScript and TSX.

The four grammars use different vocabularies for spaces but classify
decisions identically.
"""

from ..models import SpaceKind
from .base import LOGICAL_OPERATOR_GUARDS, LanguageRules

DECISION_KINDS = frozenset(
    {"if", "for", "while", "case", "catch", "ternary_expression", "&&", "||"}
)

SPACE_KINDS = {
    "function_declaration": SpaceKind.FUNCTION,
    "generator_function_declaration": SpaceKind.FUNCTION,
    "method_definition": SpaceKind.FUNCTION,
    "function_expression": SpaceKind.CLOSURE,
    "function": SpaceKind.CLOSURE,
    "generator_function": SpaceKind.CLOSURE,
    "arrow_function": SpaceKind.CLOSURE,
    "class_declaration": SpaceKind.CLASS,
    "class": SpaceKind.CLASS,
}

TYPESCRIPT_SPACE_KINDS = {
    **SPACE_KINDS,
    "abstract_class_declaration": SpaceKind.CLASS,
    "interface_declaration": SpaceKind.INTERFACE,
}

JAVASCRIPT = LanguageRules(
    name="javascript",
    grammar="javascript",
    extensions=(".js", ".mjs", ".cjs", ".jsx"),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=SPACE_KINDS,
)

# SpiderMonkey dialect; parsed with the JavaScript grammar
MOZJS = LanguageRules(
    name="mozjs",
    grammar="javascript",
    extensions=(".jsm",),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=SPACE_KINDS,
)

TYPESCRIPT = LanguageRules(
    name="typescript",
    grammar="typescript",
    extensions=(".ts", ".mts", ".cts"),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=TYPESCRIPT_SPACE_KINDS,
)

TSX = LanguageRules(
    name="tsx",
    grammar="tsx",
    extensions=(".tsx",),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=TYPESCRIPT_SPACE_KINDS,
)
