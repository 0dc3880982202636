"""Matcher construction API, one builder per variant."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal
from fractions import Fraction

from .override_matchers import MatchWith
from .scalar_matchers import ABSENT, Absent, Predicate, Regex, WithinDelta
from .structural_matchers import Embeds, Equals, InAnyOrder, Prefix, SetEmbeds, SetEquals

_Number = int | float | Decimal | Fraction


def equals(expected: object) -> Equals:
    return Equals(expected)


def embeds(expected: object) -> Embeds:
    return Embeds(expected)


def prefix(expected: Sequence) -> Prefix:
    return Prefix(expected)


def in_any_order(expected: Sequence) -> InAnyOrder:
    return InAnyOrder(expected)


def set_equals(entries: Iterable[object]) -> SetEquals:
    return SetEquals(entries)  # type: ignore[arg-type]


def set_embeds(entries: Iterable[object]) -> SetEmbeds:
    return SetEmbeds(entries)  # type: ignore[arg-type]


def regex(pattern: object, flags: int = 0) -> Regex:
    return Regex(pattern, flags)  # type: ignore[arg-type]


def absent() -> Absent:
    return ABSENT


def within_delta(center: _Number, delta: _Number) -> WithinDelta:
    return WithinDelta(center, delta)


def match_with(overrides: object, expected: object) -> MatchWith:
    """Evaluate ``expected`` with ``overrides`` shadowing the default dispatch.

    Example::

        match_with({ValueShape.MAPPING: equals}, {"user": {"id": 1}})
    """
    return MatchWith(overrides, expected)  # type: ignore[arg-type]


def predicate(function: Callable[[object], object]) -> Predicate:
    return Predicate(function)
