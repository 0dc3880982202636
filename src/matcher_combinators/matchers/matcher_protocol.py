"""Matcher capability shared by built-in and user-defined variants."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from matcher_combinators.diff_tree import Outcome


class MatcherConstructionError(Exception):
    """Raised when a matcher is built with malformed parameters."""


class EvaluationContext(Protocol):
    """What a matcher may ask of the engine while matching."""

    def resolve(self, expected: object) -> Matcher:
        """Turn an unwrapped expected value into a matcher."""

    def evaluate(self, expected: object, actual: object) -> Outcome:
        """Resolve ``expected`` and match it against ``actual``."""

    def with_overrides(self, overrides: Iterable[OverrideRule]) -> EvaluationContext:
        """Return a context whose default dispatch is shadowed by ``overrides``."""


@runtime_checkable
class Matcher(Protocol):
    """Anything that can judge an actual value.

    Implement ``attempt_match`` on any class to add a custom variant; the
    engine never looks at concrete matcher types.
    """

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        """Match ``actual`` and return the verdict with its diff."""


OverrideRule = tuple[object, object]


def is_matcher(value: object) -> bool:
    """Return True for matcher instances (classes defining the capability excluded)."""
    return not isinstance(value, type) and isinstance(value, Matcher)


def describe_expected(matcher: Matcher) -> object:
    """Return what a diff shows as the expectation of ``matcher``."""
    display = getattr(matcher, "display", None)
    if callable(display):
        return display()
    return matcher
