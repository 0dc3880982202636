"""Difference tree entity tests."""

from __future__ import annotations

from matcher_combinators.diff_tree import (
    DiffTag,
    NodeKind,
    UnmatchedEntry,
    Verdict,
    container_node,
    missing_leaf,
    mismatch_leaf,
    ok_leaf,
    to_outcome,
    unexpected_leaf,
)


def test_container_is_ok_only_when_every_child_is_ok() -> None:
    passing = container_node(NodeKind.MAP, {"a": ok_leaf(1), "b": ok_leaf(2)})
    failing = container_node(NodeKind.MAP, {"a": ok_leaf(1), "b": missing_leaf(2)})

    assert passing.tag == DiffTag.OK
    assert failing.tag == DiffTag.MISMATCH
    assert not failing.is_leaf


def test_empty_container_is_ok() -> None:
    assert container_node(NodeKind.SEQUENCE, {}).is_ok


def test_failures_yield_paths_of_diverging_leaves() -> None:
    diff = container_node(
        NodeKind.MAP,
        {
            "name": ok_leaf("Ada"),
            "tags": container_node(
                NodeKind.SEQUENCE,
                {0: mismatch_leaf("a", "b"), 1: unexpected_leaf("c")},
            ),
            "id": missing_leaf(7),
        },
    )

    failures = [(path, node.tag) for path, node in diff.failures()]

    assert failures == [
        (("tags", 0), DiffTag.MISMATCH),
        (("tags", 1), DiffTag.UNEXPECTED),
        (("id",), DiffTag.MISSING),
    ]


def test_outcome_verdict_follows_root_and_unpacks_as_pair() -> None:
    passed, diff = to_outcome(ok_leaf(1, expected=1))
    failed = to_outcome(mismatch_leaf(1, 2, note="different"))

    assert passed is True
    assert diff.actual == 1
    assert failed.verdict == Verdict.MISMATCH
    assert not failed.passed
    assert failed.diff.note == "different"


def test_unmatched_entry_keys_are_distinct_per_position() -> None:
    assert UnmatchedEntry(0) != UnmatchedEntry(1)
    assert repr(UnmatchedEntry(2)) == "<unmatched #2>"
