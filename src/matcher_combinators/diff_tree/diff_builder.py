"""Helpers composing child results into difference tree nodes."""

from __future__ import annotations

from collections.abc import Hashable, Mapping

from .diff_models import DiffNode, DiffTag, NodeKind, Outcome, Verdict


def ok_leaf(actual: object, expected: object | None = None) -> DiffNode:
    return DiffNode(tag=DiffTag.OK, expected=expected, actual=actual)


def mismatch_leaf(expected: object, actual: object, note: str | None = None) -> DiffNode:
    return DiffNode(tag=DiffTag.MISMATCH, expected=expected, actual=actual, note=note)


def missing_leaf(expected: object) -> DiffNode:
    return DiffNode(tag=DiffTag.MISSING, expected=expected)


def unexpected_leaf(actual: object, expected: object | None = None) -> DiffNode:
    return DiffNode(tag=DiffTag.UNEXPECTED, expected=expected, actual=actual)


def container_node(kind: NodeKind, children: Mapping[Hashable, DiffNode]) -> DiffNode:
    """Build a container node; it is OK only when every child is OK."""
    tag = DiffTag.OK if all(child.is_ok for child in children.values()) else DiffTag.MISMATCH
    return DiffNode(tag=tag, kind=kind, children=dict(children))


def to_outcome(diff: DiffNode) -> Outcome:
    """Derive the verdict of an evaluation from the root of its diff."""
    verdict = Verdict.MATCH if diff.is_ok else Verdict.MISMATCH
    return Outcome(verdict=verdict, diff=diff)
