"""Matching engine entry points."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from matcher_combinators.classification import MatcherKind, classify
from matcher_combinators.diff_tree import DiffNode, Outcome
from matcher_combinators.matchers import (
    Embeds,
    Equals,
    Matcher,
    MatcherConstructionError,
    OverrideRule,
    Predicate,
    Regex,
    is_matcher,
    normalize_overrides,
)

_DEFAULT_BUILDERS: dict[MatcherKind, Callable[[object], Matcher]] = {
    MatcherKind.EQUALS: Equals,
    MatcherKind.EMBEDS: Embeds,
    MatcherKind.REGEX: Regex,  # type: ignore[dict-item]
    MatcherKind.PREDICATE: Predicate,  # type: ignore[dict-item]
}


def default_matcher(value: object) -> Matcher:
    """Wrap an unwrapped expected value in its default matcher variant."""
    return _DEFAULT_BUILDERS[classify(value)](value)


@dataclass(frozen=True)
class MatchContext:
    """Read-only state threaded through one evaluation.

    ``overrides`` holds the active match-with rules, innermost first.
    """

    overrides: tuple[OverrideRule, ...] = ()

    def with_overrides(self, overrides: Iterable[OverrideRule]) -> MatchContext:
        return MatchContext(overrides=normalize_overrides(overrides) + self.overrides)

    def resolve(self, expected: object) -> Matcher:
        if is_matcher(expected):
            return expected  # type: ignore[return-value]
        for applies, build in self.overrides:
            if applies(expected):  # type: ignore[operator]
                return _built_matcher(build(expected), expected)  # type: ignore[operator]
        return default_matcher(expected)

    def evaluate(self, expected: object, actual: object) -> Outcome:
        return self.resolve(expected).attempt_match(actual, self)


def evaluate(expected: object, actual: object, context: MatchContext | None = None) -> Outcome:
    """Match ``actual`` against a matcher or an unwrapped expected value.

    Never raises for a mismatch; the verdict and the diff are returned as data.
    """
    return (context or MatchContext()).evaluate(expected, actual)


def match(expected: object, actual: object) -> tuple[bool, DiffNode]:
    """Return ``(passed, diff)`` for ``actual`` against ``expected``."""
    outcome = evaluate(expected, actual)
    return outcome.passed, outcome.diff


def _built_matcher(candidate: object, expected: object) -> Matcher:
    if not is_matcher(candidate):
        raise MatcherConstructionError(
            f"Override for {expected!r} built {candidate!r}, which is not a matcher."
        )
    return candidate  # type: ignore[return-value]
