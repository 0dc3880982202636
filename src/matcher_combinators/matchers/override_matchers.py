"""Scoped replacement of the default dispatch rule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from matcher_combinators.classification import ValueShape, classify_shape
from matcher_combinators.diff_tree import Outcome

from .matcher_protocol import EvaluationContext, MatcherConstructionError, OverrideRule


@dataclass(frozen=True)
class ShapeIs:
    """Override predicate selecting raw values of one shape."""

    shape: ValueShape

    def __call__(self, value: object) -> bool:
        return classify_shape(value) == self.shape


@dataclass(frozen=True)
class MatchWith:
    """Evaluates ``expected`` with ``overrides`` consulted before the default rule.

    ``overrides`` is a mapping or a sequence of ``(applies, build)`` pairs where
    ``applies`` is a ``ValueShape`` or a one-argument predicate and ``build``
    turns the raw value into a matcher. The table covers every unwrapped value
    below this point, and inner tables shadow outer ones.
    """

    overrides: tuple[OverrideRule, ...]
    expected: object

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", normalize_overrides(self.overrides))

    def display(self) -> object:
        return self.expected

    def attempt_match(self, actual: object, context: EvaluationContext) -> Outcome:
        return context.with_overrides(self.overrides).evaluate(self.expected, actual)


def normalize_overrides(overrides: object) -> tuple[OverrideRule, ...]:
    """Validate an override table and return it as ordered ``(predicate, build)`` pairs."""
    pairs = overrides.items() if isinstance(overrides, Mapping) else overrides
    try:
        rules = [tuple(pair) for pair in pairs]  # type: ignore[union-attr]
    except TypeError as exc:
        raise MatcherConstructionError(f"Invalid override table: {overrides!r}") from exc

    normalized: list[OverrideRule] = []
    for rule in rules:
        if len(rule) != 2:
            raise MatcherConstructionError(
                f"Override rules are (predicate, build) pairs: {rule!r}"
            )
        applies, build = rule
        if isinstance(applies, str):
            applies = ShapeIs(_shape_named(applies))
        if not callable(applies) or not callable(build):
            raise MatcherConstructionError(f"Override rule members must be callable: {rule!r}")
        normalized.append((applies, build))
    return tuple(normalized)


def _shape_named(name: str) -> ValueShape:
    try:
        return ValueShape(name)
    except ValueError as exc:
        raise MatcherConstructionError(f"Unknown value shape: {name!r}") from exc
