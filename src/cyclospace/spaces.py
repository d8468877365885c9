"""Space-tree construction.

Walks a syntax tree depth-first with an explicit work stack, opening a
space when a space-introducing node is entered and closing it once the walk
leaves that node's subtree. Every node is classified against the innermost
open space, so each decision point belongs to exactly one space.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .exceptions import SpaceStateError
from .logging_config import get_logger
from .metrics import CyclomaticStats, compute
from .models import FuncSpace, SpaceKind
from .nodes import SyntaxNode, node_lines, space_name

if TYPE_CHECKING:
    from .grammars.base import LanguageRules

logger = get_logger(__name__)


class _OpenSpace:
    """A space whose subtree is still being walked."""

    __slots__ = ("name", "kind", "start_line", "end_line", "stats", "children")

    def __init__(self, node: SyntaxNode, kind: SpaceKind, name: Optional[str]) -> None:
        self.name = name
        self.kind = kind
        self.start_line, self.end_line = node_lines(node)
        self.stats = CyclomaticStats()
        self.children: list[FuncSpace] = []

    def adopt(self, child: FuncSpace) -> None:
        self.stats.merge(child.metrics)
        self.children.append(child)

    def finalize(self) -> FuncSpace:
        local = self.stats.cyclomatic
        summary = self.stats.finalize()
        return FuncSpace(
            name=self.name,
            kind=self.kind,
            start_line=self.start_line,
            end_line=self.end_line,
            cyclomatic=local,
            metrics=summary,
            spaces=self.children,
        )


def _close(open_spaces: list[_OpenSpace], count: int) -> None:
    """Finalize the ``count`` innermost spaces into their parents.

    The unit space at the bottom of the stack is never closed here.
    """
    for _ in range(count):
        if len(open_spaces) < 2:
            raise SpaceStateError("attempted to close the unit space before the walk ended")
        finished = open_spaces.pop().finalize()
        open_spaces[-1].adopt(finished)


def build_space_tree(
    root: SyntaxNode, rules: LanguageRules, name: Optional[str] = None
) -> FuncSpace:
    """Build the finalized space tree for one parsed file.

    Args:
        root: Root node of the syntax tree; always becomes the unit space
        rules: Decision and space tables of the file's language
        name: Name of the unit space (usually the file path)

    Returns:
        The unit FuncSpace, whose ``metrics`` aggregate the whole file
    """
    open_spaces = [_OpenSpace(root, SpaceKind.UNIT, name)]
    compute(root, open_spaces[0].stats, rules)

    # Level = number of open spaces that enclose the node
    work: list[tuple[SyntaxNode, int]] = [(child, 1) for child in reversed(root.children)]
    depth = 1

    while work:
        node, level = work.pop()
        if level < depth:
            _close(open_spaces, depth - level)
            depth = level

        kind = rules.space_kind(node)
        if kind is not None:
            label = None if kind is SpaceKind.CLOSURE else space_name(node)
            open_spaces.append(_OpenSpace(node, kind, label))
            depth = level + 1

        compute(node, open_spaces[-1].stats, rules)

        child_level = depth if kind is not None else level
        work.extend((child, child_level) for child in reversed(node.children))

    _close(open_spaces, len(open_spaces) - 1)
    unit = open_spaces.pop().finalize()
    logger.debug(f"Built {unit.metrics.n} spaces for {name or '<unit>'}: {unit.metrics}")
    return unit
