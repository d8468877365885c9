"""Result models: finalized spaces and project reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from .metrics import CyclomaticSummary


class SpaceKind(str, Enum):
    """Kind of program unit a space represents."""

    UNKNOWN = "unknown"
    UNIT = "unit"
    FUNCTION = "function"
    CLASS = "class"
    STRUCT = "struct"
    TRAIT = "trait"
    IMPL = "impl"
    INTERFACE = "interface"
    NAMESPACE = "namespace"
    CLOSURE = "closure"


@dataclass
class FuncSpace:
    """A finalized space and the finalized spaces nested in it.

    ``cyclomatic`` is the space's own local complexity; ``metrics``
    summarizes the space together with all of its descendants.
    """

    name: Optional[str]
    kind: SpaceKind
    start_line: int
    end_line: int
    cyclomatic: float
    metrics: CyclomaticSummary
    spaces: list[FuncSpace] = field(default_factory=list)

    def walk(self) -> Iterator[FuncSpace]:
        """Yield this space and every descendant, pre-order."""
        pending = [self]
        while pending:
            space = pending.pop()
            yield space
            pending.extend(reversed(space.spaces))

    def find(self, name: str) -> Optional[FuncSpace]:
        """First space (pre-order) with the given name."""
        return next((space for space in self.walk() if space.name == name), None)

    @property
    def space_count(self) -> int:
        return self.metrics.n

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "cyclomatic": self.cyclomatic,
            "metrics": {"cyclomatic": self.metrics.to_dict()},
            "spaces": [child.to_dict() for child in self.spaces],
        }


@dataclass
class ProjectReport:
    """Per-file space trees plus the combined project statistic."""

    files: dict[str, FuncSpace] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def summary(self) -> Optional[CyclomaticSummary]:
        return CyclomaticSummary.combine(
            self.files[path].metrics for path in sorted(self.files)
        )

    def to_dict(self, include_spaces: bool = True) -> dict[str, Any]:
        summary = self.summary
        files: dict[str, Any] = {}
        for path in sorted(self.files):
            space = self.files[path]
            files[path] = space.to_dict() if include_spaces else space.metrics.to_dict()
        return {
            "summary": summary.to_dict() if summary is not None else None,
            "files": files,
            "errors": dict(sorted(self.errors.items())),
        }
