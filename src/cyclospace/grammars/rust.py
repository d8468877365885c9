"""Rust rules.

The grammar aliases the last arm of a ``match`` to ``match_arm``, so a
single kind covers both arm forms. ``for`` is also the keyword of
``impl Trait for Type`` and higher-ranked bounds; only loop heads count.
Likewise ``&&`` and ``||`` count only as binary operators, not in closure
parameter lists or reference patterns. Token-counting tools that score every
``for``, ``&&`` and ``||`` report higher values for such code.
"""

from ..models import SpaceKind
from .base import LOGICAL_OPERATOR_GUARDS, LanguageRules, parent_is

DECISION_KINDS = frozenset(
    {"if", "for", "while", "loop", "match_arm", "try_expression", "&&", "||"}
)

SPACE_KINDS = {
    "function_item": SpaceKind.FUNCTION,
    "closure_expression": SpaceKind.CLOSURE,
    "impl_item": SpaceKind.IMPL,
    "trait_item": SpaceKind.TRAIT,
}

RULES = LanguageRules(
    name="rust",
    grammar="rust",
    extensions=(".rs",),
    decision_kinds=DECISION_KINDS,
    guards={**LOGICAL_OPERATOR_GUARDS, "for": parent_is("for_expression")},
    space_kinds=SPACE_KINDS,
)
