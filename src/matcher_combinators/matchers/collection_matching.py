"""Container traversal shared by the map, sequence and unordered variants.

Every child is evaluated even after a failure so the diff keeps the full
shape of the actual value.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence

from matcher_combinators.assignment import Coverage, solve_assignment
from matcher_combinators.diff_tree import (
    DiffNode,
    NodeKind,
    Outcome,
    UnmatchedEntry,
    container_node,
    mismatch_leaf,
    missing_leaf,
    ok_leaf,
    to_outcome,
    unexpected_leaf,
)

from .matcher_protocol import EvaluationContext, describe_expected
from .scalar_matchers import Absent


def shape_mismatch(expected: object, actual: object, note: str) -> Outcome:
    return to_outcome(mismatch_leaf(expected, actual, note=note))


def match_map(
    expected: Mapping,
    actual: object,
    context: EvaluationContext,
    *,
    exact: bool,
) -> Outcome:
    """Match keys of ``expected`` against a mapping.

    With ``exact`` every extra actual key is reported as unexpected;
    otherwise extra keys are kept as OK nodes.
    """
    if not isinstance(actual, Mapping):
        return shape_mismatch(expected, actual, "expected a mapping")

    children: dict[Hashable, DiffNode] = {}
    for key, value in actual.items():
        if key in expected:
            children[key] = context.evaluate(expected[key], value).diff
        elif exact:
            children[key] = unexpected_leaf(value)
        else:
            children[key] = ok_leaf(value)

    for key, expected_value in expected.items():
        if key in actual:
            continue
        matcher = context.resolve(expected_value)
        if isinstance(matcher, Absent):
            continue
        children[key] = missing_leaf(describe_expected(matcher))
    return to_outcome(container_node(NodeKind.MAP, children))


def match_positional(
    expected: Sequence,
    actual: object,
    context: EvaluationContext,
    *,
    allow_extra: bool,
) -> Outcome:
    """Match ``expected`` position by position against a sequence.

    Positions the actual sequence does not reach are missing; positions past
    the expected length are unexpected unless ``allow_extra``.
    """
    if not isinstance(actual, Sequence) or isinstance(actual, str | bytes | bytearray):
        return shape_mismatch(expected, actual, "expected a sequence")

    children: dict[Hashable, DiffNode] = {}
    for index in range(max(len(expected), len(actual))):
        if index < len(expected) and index < len(actual):
            children[index] = context.evaluate(expected[index], actual[index]).diff
        elif index < len(actual) and allow_extra:
            children[index] = ok_leaf(actual[index])
        elif index < len(actual):
            children[index] = unexpected_leaf(actual[index])
        else:
            children[index] = missing_leaf(describe_expected(context.resolve(expected[index])))
    return to_outcome(container_node(NodeKind.SEQUENCE, children))


def match_by_assignment(
    entries: Sequence[object],
    elements: Sequence[object],
    context: EvaluationContext,
    *,
    coverage: Coverage,
    kind: NodeKind,
    ordered: bool = False,
) -> Outcome:
    """Pair expected entries with actual elements through the assignment solver.

    Children are keyed by actual element position; entries left without an
    element get an ``UnmatchedEntry`` key.
    """
    matchers = [context.resolve(entry) for entry in entries]
    passing: dict[tuple[int, int], DiffNode] = {}
    compatibility: list[list[bool]] = []
    for entry, matcher in enumerate(matchers):
        row = []
        for position, element in enumerate(elements):
            outcome = matcher.attempt_match(element, context)
            if outcome.passed:
                passing[entry, position] = outcome.diff
            row.append(outcome.passed)
        compatibility.append(row)
    assignment = solve_assignment(compatibility, len(elements), coverage, ordered=ordered)

    owners = assignment.matcher_for_actual()
    children: dict[Hashable, DiffNode] = {}
    for position, element in enumerate(elements):
        owner = owners.get(position)
        if owner is not None:
            children[position] = passing[owner, position]
        elif coverage == Coverage.COMPLETE:
            children[position] = unexpected_leaf(element)
        else:
            children[position] = ok_leaf(element)
    for entry in assignment.unmatched_matchers:
        children[UnmatchedEntry(entry)] = missing_leaf(describe_expected(matchers[entry]))
    return to_outcome(container_node(kind, children))
