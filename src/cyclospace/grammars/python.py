"""Python rules.

``else`` is only a decision point when it closes a ``for``/``while`` loop;
the ``else`` of ``if``, ``try`` and conditional expressions is already paid
for by its opening keyword.
"""

from ..models import SpaceKind
from ..nodes import has_ancestor, kind_in, kind_not_in
from .base import LanguageRules

DECISION_KINDS = frozenset(
    {"if", "elif", "for", "while", "except", "with", "assert", "and", "or", "else"}
)

_LOOP = kind_in("for_statement", "while_statement")
_LEAVES_ELSE_CLAUSE = kind_not_in("else_clause")


def is_loop_else(node) -> bool:
    return has_ancestor(node, _LOOP, _LEAVES_ELSE_CLAUSE)


SPACE_KINDS = {
    "function_definition": SpaceKind.FUNCTION,
    "class_definition": SpaceKind.CLASS,
    "lambda": SpaceKind.CLOSURE,
}

RULES = LanguageRules(
    name="python",
    grammar="python",
    extensions=(".py", ".pyi", ".pyw"),
    decision_kinds=DECISION_KINDS,
    guards={"else": is_loop_else},
    space_kinds=SPACE_KINDS,
)
