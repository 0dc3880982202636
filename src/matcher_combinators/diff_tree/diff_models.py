"""Difference tree and outcome entities."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum


class DiffTag(str, Enum):
    """Per-node verdict inside a difference tree."""

    OK = "ok"
    MISMATCH = "mismatch"
    MISSING = "missing"
    UNEXPECTED = "unexpected"


class NodeKind(str, Enum):
    """Shape of the actual value a node stands for."""

    LEAF = "leaf"
    MAP = "map"
    SEQUENCE = "sequence"
    SET = "set"


class Verdict(str, Enum):
    """Two-state verdict of one evaluation."""

    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class UnmatchedEntry:
    """Synthetic child key for a matcher entry that found no actual element."""

    position: int

    def __repr__(self) -> str:
        return f"<unmatched #{self.position}>"


@dataclass(frozen=True)
class DiffNode:
    """One node of a structurally faithful difference tree.

    Leaf nodes carry ``expected`` and ``actual``; container nodes carry
    ``children`` keyed by map key, sequence index or set element position.
    """

    tag: DiffTag
    kind: NodeKind = NodeKind.LEAF
    expected: object | None = None
    actual: object | None = None
    children: Mapping[Hashable, DiffNode] = field(default_factory=dict)
    note: str | None = None

    @property
    def is_ok(self) -> bool:
        """Return True when neither this node nor any descendant diverges."""
        return self.tag == DiffTag.OK

    @property
    def is_leaf(self) -> bool:
        return self.kind == NodeKind.LEAF

    def failures(
        self, path: tuple[Hashable, ...] = ()
    ) -> Iterator[tuple[tuple[Hashable, ...], DiffNode]]:
        """Yield ``(path, node)`` for every diverging leaf below this node."""
        if self.is_leaf:
            if not self.is_ok:
                yield path, self
            return
        for key, child in self.children.items():
            yield from child.failures(path + (key,))


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating one matcher against one actual value."""

    verdict: Verdict
    diff: DiffNode

    @property
    def passed(self) -> bool:
        """Return True when the actual value satisfied the matcher."""
        return self.verdict == Verdict.MATCH

    def __iter__(self) -> Iterator[object]:
        yield self.passed
        yield self.diff
