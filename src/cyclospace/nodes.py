"""Syntax node boundary.

The engine reads tree-sitter nodes but only through the small surface
described by ``SyntaxNode``, so hand-built trees work the same way.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

NodePredicate = Callable[["SyntaxNode"], bool]

# Walk limit for ancestor searches; deeper trees stop with "not found"
MAX_ANCESTOR_DEPTH = 10_000


class SyntaxNode(Protocol):
    """Read-only view of a parsed syntax node."""

    @property
    def type(self) -> str: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def children(self) -> Sequence[Any]: ...

    @property
    def parent(self) -> Optional[Any]: ...

    @property
    def start_point(self) -> Any: ...

    @property
    def end_point(self) -> Any: ...

    @property
    def text(self) -> Optional[bytes]: ...

    def child_by_field_name(self, name: str) -> Optional[Any]: ...


def has_ancestor(node: SyntaxNode, match: NodePredicate, stop: NodePredicate) -> bool:
    """Report whether an ancestor satisfies ``match`` before one satisfies ``stop``.

    The walk starts at ``node.parent``. Each ancestor is tested against
    ``match`` first, so an ancestor satisfying both predicates counts as a
    match. Reaching the root without a match returns False.
    """
    current = node.parent
    depth = 0
    while current is not None and depth < MAX_ANCESTOR_DEPTH:
        if match(current):
            return True
        if stop(current):
            return False
        current = current.parent
        depth += 1
    return False


def kind_in(*kinds: str) -> NodePredicate:
    """Build a predicate matching any of the given node kinds."""
    wanted = frozenset(kinds)
    return lambda node: node.type in wanted


def kind_not_in(*kinds: str) -> NodePredicate:
    """Build a predicate matching every node kind except the given ones."""
    unwanted = frozenset(kinds)
    return lambda node: node.type not in unwanted


def node_text(node: Optional[SyntaxNode]) -> Optional[str]:
    if node is None or node.text is None:
        return None
    return node.text.decode("utf-8", errors="replace")


def node_lines(node: SyntaxNode) -> tuple[int, int]:
    """1-based inclusive line span of a node."""
    return node.start_point[0] + 1, node.end_point[0] + 1


def space_name(node: SyntaxNode) -> Optional[str]:
    """Best-effort name of a space-introducing node.

    Uses the ``name`` field, then follows C-style ``declarator`` chains, then
    falls back to the ``type`` field (Rust ``impl`` blocks).
    """
    name = node.child_by_field_name("name")
    if name is not None:
        return node_text(name)

    declarator = node.child_by_field_name("declarator")
    while declarator is not None:
        inner = declarator.child_by_field_name("declarator")
        if inner is None:
            return node_text(declarator)
        declarator = inner

    type_node = node.child_by_field_name("type")
    if type_node is not None:
        return node_text(type_node)
    return None
