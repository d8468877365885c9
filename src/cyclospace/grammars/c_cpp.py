"""C and C++ rules.

Struct, union and class specifiers are also used to name a type
(``struct point p;``); only specifiers with a body open a space.
"""

from ..models import SpaceKind
from .base import LOGICAL_OPERATOR_GUARDS, LanguageRules

DECISION_KINDS = frozenset(
    {"if", "for", "while", "case", "catch", "conditional_expression", "&&", "||"}
)

C_SPACE_KINDS = {
    "function_definition": SpaceKind.FUNCTION,
    "struct_specifier": SpaceKind.STRUCT,
    "union_specifier": SpaceKind.STRUCT,
}

CPP_SPACE_KINDS = {
    **C_SPACE_KINDS,
    "class_specifier": SpaceKind.CLASS,
    "namespace_definition": SpaceKind.NAMESPACE,
    "lambda_expression": SpaceKind.CLOSURE,
}

_BODY_REQUIRED = frozenset({"struct_specifier", "union_specifier", "class_specifier"})

C = LanguageRules(
    name="c",
    grammar="c",
    extensions=(".c", ".h"),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=C_SPACE_KINDS,
    body_required=_BODY_REQUIRED,
)

CPP = LanguageRules(
    name="cpp",
    grammar="cpp",
    extensions=(".cpp", ".cc", ".cxx", ".c++", ".hpp", ".hh", ".hxx", ".h++"),
    decision_kinds=DECISION_KINDS,
    guards=LOGICAL_OPERATOR_GUARDS,
    space_kinds=CPP_SPACE_KINDS,
    body_required=_BODY_REQUIRED,
)
