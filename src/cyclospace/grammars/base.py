"""Shared shape of a language's classification rules.

Every language is described by data: which node kinds are decision points,
which of those need an extra context check, and which node kinds open a new
space. One generic classifier reads these tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..models import SpaceKind
from ..nodes import NodePredicate, SyntaxNode


@dataclass(frozen=True)
class LanguageRules:
    """Decision and space tables for one language."""

    name: str
    grammar: str
    extensions: tuple[str, ...] = ()
    decision_kinds: frozenset[str] = frozenset()
    guards: Mapping[str, NodePredicate] = field(default_factory=dict)
    space_kinds: Mapping[str, SpaceKind] = field(default_factory=dict)
    body_required: frozenset[str] = frozenset()

    @property
    def classifies(self) -> bool:
        """False for structural-only languages whose classifier is a no-op."""
        return bool(self.decision_kinds)

    def is_decision(self, node: SyntaxNode) -> bool:
        kind = node.type
        if kind not in self.decision_kinds:
            return False
        guard = self.guards.get(kind)
        return guard is None or guard(node)

    def space_kind(self, node: SyntaxNode) -> Optional[SpaceKind]:
        """SpaceKind opened by ``node``, or None when it opens no space."""
        # Keyword tokens share names with nodes ("class", "lambda")
        if not node.is_named:
            return None
        kind = self.space_kinds.get(node.type)
        if kind is None:
            return None
        if node.type in self.body_required and node.child_by_field_name("body") is None:
            return None
        return kind


def parent_is(*kinds: str) -> NodePredicate:
    """Guard accepting a token only when its direct parent has one of ``kinds``."""
    wanted = frozenset(kinds)

    def guard(node: SyntaxNode) -> bool:
        parent = node.parent
        return parent is not None and parent.type in wanted

    return guard


# Short-circuit operators are only decisions inside a binary expression
BINARY_OPERATOR = parent_is("binary_expression")

LOGICAL_OPERATOR_GUARDS: Mapping[str, NodePredicate] = {
    "&&": BINARY_OPERATOR,
    "||": BINARY_OPERATOR,
}
