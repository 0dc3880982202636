"""Container matcher variants: exact, embedded, prefix and unordered."""

from __future__ import annotations

from collections.abc import Sequence, Set
from dataclasses import dataclass

from matcher_combinators.assignment import Coverage
from matcher_combinators.classification import (
    ValueShape,
    classify_shape,
    is_sequence,
    stable_elements,
)
from matcher_combinators.diff_tree import NodeKind, Outcome, mismatch_leaf, ok_leaf, to_outcome

from .collection_matching import match_by_assignment, match_map, match_positional, shape_mismatch
from .matcher_protocol import EvaluationContext, MatcherConstructionError


@dataclass(frozen=True)
class Equals:
    """Exact coverage: no missing and no extra keys, elements or members.

    Nested unwrapped values are still classified by default, so a map nested
    inside ``Equals`` embeds unless wrapped itself.
    """

    expected: object

    def display(self) -> object:
        return self.expected

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        shape = classify_shape(self.expected)
        if shape == ValueShape.MAPPING:
            return match_map(self.expected, actual, context, exact=True)  # type: ignore[arg-type]
        if shape == ValueShape.SEQUENCE:
            return match_positional(
                self.expected, actual, context, allow_extra=False  # type: ignore[arg-type]
            )
        if shape == ValueShape.UNORDERED:
            if not isinstance(actual, Set):
                return shape_mismatch(self.expected, actual, "expected a set")
            return match_by_assignment(
                stable_elements(self.expected),
                stable_elements(actual),
                context,
                coverage=Coverage.COMPLETE,
                kind=NodeKind.SET,
            )
        return _match_scalar(self.expected, actual)


@dataclass(frozen=True)
class Embeds:
    """Subset coverage: every expected part must be found, extras are ignored.

    Sequences match an ordered subsequence of the actual value (gaps allowed).
    """

    expected: object

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        shape = classify_shape(self.expected)
        if shape == ValueShape.MAPPING:
            return match_map(self.expected, actual, context, exact=False)  # type: ignore[arg-type]
        if shape == ValueShape.SEQUENCE:
            if not is_sequence(actual):
                return shape_mismatch(self.expected, actual, "expected a sequence")
            return match_by_assignment(
                list(self.expected),  # type: ignore[call-overload]
                list(actual),  # type: ignore[call-overload]
                context,
                coverage=Coverage.PARTIAL,
                kind=NodeKind.SEQUENCE,
                ordered=True,
            )
        if shape == ValueShape.UNORDERED:
            if not isinstance(actual, Set):
                return shape_mismatch(self.expected, actual, "expected a set")
            return match_by_assignment(
                stable_elements(self.expected),
                stable_elements(actual),
                context,
                coverage=Coverage.PARTIAL,
                kind=NodeKind.SET,
            )
        return _match_scalar(self.expected, actual)


@dataclass(frozen=True)
class Prefix:
    """Matches the first ``len(expected)`` elements in order; the rest is ignored."""

    expected: Sequence

    def __post_init__(self) -> None:
        _require_sequence("Prefix", self.expected)
        object.__setattr__(self, "expected", tuple(self.expected))

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        return match_positional(self.expected, actual, context, allow_extra=True)


@dataclass(frozen=True)
class InAnyOrder:
    """Matches a sequence holding exactly the expected elements in any order."""

    expected: Sequence

    def __post_init__(self) -> None:
        _require_sequence("InAnyOrder", self.expected)
        object.__setattr__(self, "expected", tuple(self.expected))

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        if not is_sequence(actual):
            return shape_mismatch(self, actual, "expected a sequence")
        return match_by_assignment(
            list(self.expected),
            list(actual),  # type: ignore[call-overload]
            context,
            coverage=Coverage.COMPLETE,
            kind=NodeKind.SEQUENCE,
        )


@dataclass(frozen=True)
class SetEquals:
    """Unordered exact coverage over a list of entries.

    Entries are kept as a list so equal entries (two ``is_odd`` predicates)
    each need their own actual member.
    """

    entries: tuple[object, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", _entries_tuple("SetEquals", self.entries))

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        return _match_entries(self, self.entries, actual, context, Coverage.COMPLETE)


@dataclass(frozen=True)
class SetEmbeds:
    """Unordered subset coverage over a list of entries."""

    entries: tuple[object, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", _entries_tuple("SetEmbeds", self.entries))

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        return _match_entries(self, self.entries, actual, context, Coverage.PARTIAL)


def _match_entries(
    matcher: object,
    entries: Sequence[object],
    actual: object,
    context: EvaluationContext,
    coverage: Coverage,
) -> Outcome:
    shape = classify_shape(actual)
    if shape not in (ValueShape.UNORDERED, ValueShape.SEQUENCE):
        return shape_mismatch(matcher, actual, "expected a set or a sequence")
    kind = NodeKind.SET if shape == ValueShape.UNORDERED else NodeKind.SEQUENCE
    return match_by_assignment(
        entries, stable_elements(actual), context, coverage=coverage, kind=kind
    )


def _match_scalar(expected: object, actual: object) -> Outcome:
    if _scalars_equal(expected, actual):
        return to_outcome(ok_leaf(actual, expected=expected))
    return to_outcome(mismatch_leaf(expected, actual))


def _scalars_equal(expected: object, actual: object) -> bool:
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    return bool(expected == actual)


def _require_sequence(variant: str, value: object) -> None:
    if not is_sequence(value):
        raise MatcherConstructionError(f"{variant} expects a sequence, got {value!r}.")


def _entries_tuple(variant: str, value: object) -> tuple[object, ...]:
    if classify_shape(value) not in (ValueShape.SEQUENCE, ValueShape.UNORDERED):
        raise MatcherConstructionError(f"{variant} expects a list of entries, got {value!r}.")
    return tuple(stable_elements(value))
