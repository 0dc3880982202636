"""Leaf matcher variants: regex, absence, numeric tolerance and predicates."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction

from matcher_combinators.diff_tree import (
    Outcome,
    mismatch_leaf,
    ok_leaf,
    to_outcome,
    unexpected_leaf,
)

from .matcher_protocol import EvaluationContext, MatcherConstructionError

_NUMBER_TYPES = (int, float, Decimal, Fraction)


@dataclass(frozen=True)
class Regex:
    """Matches text containing ``pattern`` anywhere (search, not full match)."""

    pattern: re.Pattern
    flags: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.pattern, re.Pattern):
            if self.flags:
                raise MatcherConstructionError(
                    "Regex flags cannot be combined with an already compiled pattern."
                )
            return
        if not isinstance(self.pattern, str | bytes):
            raise MatcherConstructionError(
                f"Regex pattern must be text or a compiled pattern, got {self.pattern!r}."
            )
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as exc:
            raise MatcherConstructionError(f"Invalid regex {self.pattern!r}: {exc}") from exc
        object.__setattr__(self, "pattern", compiled)

    def display(self) -> object:
        return self.pattern

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        text_type = type(self.pattern.pattern)
        if not isinstance(actual, text_type):
            return to_outcome(
                mismatch_leaf(self.pattern, actual, note=f"expected {text_type.__name__}")
            )
        if self.pattern.search(actual) is None:
            return to_outcome(mismatch_leaf(self.pattern, actual))
        return to_outcome(ok_leaf(actual, expected=self.pattern))


@dataclass(frozen=True)
class Absent:
    """Asserts that a map key is not present.

    Only meaningful as a map value: map matchers skip it when the key is
    missing, so any call to ``attempt_match`` means the key was there.
    """

    def __repr__(self) -> str:
        return "ABSENT"

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        return to_outcome(unexpected_leaf(actual, expected=self))


ABSENT = Absent()


@dataclass(frozen=True)
class WithinDelta:
    """Matches numbers no further than ``delta`` from ``center`` (inclusive)."""

    center: int | float | Decimal | Fraction
    delta: int | float | Decimal | Fraction

    def __post_init__(self) -> None:
        if not _is_number(self.center):
            raise MatcherConstructionError(f"WithinDelta center must be numeric: {self.center!r}")
        if not _is_number(self.delta):
            raise MatcherConstructionError(f"WithinDelta delta must be numeric: {self.delta!r}")
        if _is_nan(self.center) or _is_nan(self.delta):
            raise MatcherConstructionError(
                f"WithinDelta center and delta must not be NaN: {self.center!r}, {self.delta!r}"
            )
        if self.delta < 0:
            raise MatcherConstructionError(f"WithinDelta delta must not be negative: {self.delta}")

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        if not _is_number(actual):
            return to_outcome(mismatch_leaf(self, actual, note="expected a number"))
        if _is_nan(actual):
            return to_outcome(mismatch_leaf(self, actual, note="actual is NaN"))
        if _within(actual, self.center, self.delta):  # type: ignore[arg-type]
            return to_outcome(ok_leaf(actual, expected=self))
        return to_outcome(mismatch_leaf(self, actual))


@dataclass(frozen=True)
class Predicate:
    """Matches when ``function(actual)`` is truthy.

    Errors raised by the function become a mismatch leaf for that value only.
    """

    function: Callable[[object], object]

    def __post_init__(self) -> None:
        if not callable(self.function):
            raise MatcherConstructionError(f"Predicate needs a callable, got {self.function!r}.")

    def __repr__(self) -> str:
        name = getattr(self.function, "__qualname__", None) or repr(self.function)
        return f"Predicate({name})"

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        try:
            result = self.function(actual)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            note = f"predicate raised an error: {type(exc).__name__}: {exc}"
            return to_outcome(mismatch_leaf(self, actual, note=note))
        if result:
            return to_outcome(ok_leaf(actual, expected=self))
        return to_outcome(mismatch_leaf(self, actual))


def _is_number(value: object) -> bool:
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, bool)


def _is_nan(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _within(actual: object, center: object, delta: object) -> bool:
    values = (actual, center, delta)
    if any(isinstance(value, Decimal) for value in values):
        actual, center, delta = (_to_decimal(value) for value in values)
    if actual == center:
        return True
    return abs(actual - center) <= delta  # type: ignore[operator]


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(str(value))
