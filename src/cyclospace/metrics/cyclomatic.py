"""Cyclomatic complexity accumulation.

Two types keep the finalize-before-merge ordering explicit:

- ``CyclomaticStats`` is the open accumulator of a space that is still being
  traversed. Decision points bump its local ``cyclomatic`` value and
  finalized children are merged into it.
- ``CyclomaticSummary`` is the immutable result of finalizing an accumulator.
  Only summaries can be merged, so the ``min`` sentinel of an unfinalized
  accumulator never reaches a real minimum.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Iterable, Optional

from ..exceptions import SpaceStateError

if TYPE_CHECKING:
    from ..grammars.base import LanguageRules
    from ..nodes import SyntaxNode

# "No space finalized yet"
MIN_SENTINEL = sys.float_info.max


@dataclass(frozen=True)
class CyclomaticSummary:
    """Finalized cyclomatic statistic over one or more spaces."""

    sum: float
    n: int
    min: float
    max: float

    @property
    def average(self) -> float:
        return self.sum / self.n

    def merge(self, other: CyclomaticSummary) -> CyclomaticSummary:
        """Union of the spaces summarized by ``self`` and ``other``.

        Commutative and associative, so per-file summaries may be combined
        in any order or grouping.
        """
        return CyclomaticSummary(
            sum=self.sum + other.sum,
            n=self.n + other.n,
            min=min(self.min, other.min),
            max=max(self.max, other.max),
        )

    @classmethod
    def combine(cls, summaries: Iterable[CyclomaticSummary]) -> Optional[CyclomaticSummary]:
        """Merge any number of summaries; None when there are none."""
        return reduce(_merge_optional, summaries, None)

    def to_dict(self) -> dict[str, float]:
        return {
            "sum": self.sum,
            "average": self.average,
            "min": self.min,
            "max": self.max,
        }

    def __str__(self) -> str:
        return f"sum: {self.sum}, average: {self.average}, min: {self.min}, max: {self.max}"


def _merge_optional(
    acc: Optional[CyclomaticSummary], item: CyclomaticSummary
) -> CyclomaticSummary:
    return item if acc is None else acc.merge(item)


class CyclomaticStats:
    """Running cyclomatic statistic of an open space.

    Starts at one linear path (``cyclomatic == 1``) representing the space
    itself (``n == 1``), with empty extrema.
    """

    __slots__ = ("cyclomatic", "cyclomatic_sum", "n", "cyclomatic_max", "cyclomatic_min", "_final")

    def __init__(self) -> None:
        self.cyclomatic = 1.0
        self.cyclomatic_sum = 0.0
        self.n = 1
        self.cyclomatic_max = 0.0
        self.cyclomatic_min = MIN_SENTINEL
        self._final: Optional[CyclomaticSummary] = None

    @property
    def is_finalized(self) -> bool:
        return self._final is not None

    def increment(self) -> None:
        self._ensure_open("increment")
        self.cyclomatic += 1.0

    def merge(self, child: CyclomaticSummary) -> None:
        """Fold a finalized child space into this accumulator."""
        self._ensure_open("merge")
        self.cyclomatic_max = max(self.cyclomatic_max, child.max)
        self.cyclomatic_min = min(self.cyclomatic_min, child.min)
        self.cyclomatic_sum += child.sum
        self.n += child.n

    def finalize(self) -> CyclomaticSummary:
        """Record the local value into the extrema and sum, exactly once."""
        self._ensure_open("finalize")
        self.cyclomatic_max = max(self.cyclomatic_max, self.cyclomatic)
        self.cyclomatic_min = min(self.cyclomatic_min, self.cyclomatic)
        self.cyclomatic_sum += self.cyclomatic
        self._final = CyclomaticSummary(
            sum=self.cyclomatic_sum,
            n=self.n,
            min=self.cyclomatic_min,
            max=self.cyclomatic_max,
        )
        return self._final

    def _ensure_open(self, action: str) -> None:
        if self._final is not None:
            raise SpaceStateError(f"cannot {action} a finalized cyclomatic accumulator")

    def __repr__(self) -> str:
        return (
            f"CyclomaticStats(cyclomatic={self.cyclomatic}, sum={self.cyclomatic_sum}, "
            f"n={self.n}, min={self.cyclomatic_min}, max={self.cyclomatic_max})"
        )


def compute(node: SyntaxNode, stats: CyclomaticStats, rules: LanguageRules) -> None:
    """Add one path to ``stats`` when ``node`` is a decision point."""
    if rules.is_decision(node):
        stats.increment()
