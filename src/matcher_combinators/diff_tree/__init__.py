"""Difference tree domain exports."""

from .diff_builder import (
    container_node,
    missing_leaf,
    mismatch_leaf,
    ok_leaf,
    to_outcome,
    unexpected_leaf,
)
from .diff_models import DiffNode, DiffTag, NodeKind, Outcome, UnmatchedEntry, Verdict

__all__ = [
    "DiffNode",
    "DiffTag",
    "NodeKind",
    "Outcome",
    "UnmatchedEntry",
    "Verdict",
    "container_node",
    "missing_leaf",
    "mismatch_leaf",
    "ok_leaf",
    "to_outcome",
    "unexpected_leaf",
]
