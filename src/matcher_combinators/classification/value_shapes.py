"""Default-dispatch rule for unwrapped expected values."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence, Set
from enum import Enum


class ValueShape(str, Enum):
    """Closed set of value shapes the matching engine distinguishes."""

    SCALAR = "scalar"
    REGEX = "regex"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    UNORDERED = "unordered"
    CALLABLE = "callable"


class MatcherKind(str, Enum):
    """Matcher variant tags."""

    EQUALS = "equals"
    EMBEDS = "embeds"
    PREFIX = "prefix"
    IN_ANY_ORDER = "in-any-order"
    SET_EQUALS = "set-equals"
    SET_EMBEDS = "set-embeds"
    REGEX = "regex"
    ABSENT = "absent"
    WITHIN_DELTA = "within-delta"
    MATCH_WITH = "match-with"
    PREDICATE = "predicate"


_TEXT_TYPES = (str, bytes, bytearray)


def classify_shape(value: object) -> ValueShape:
    """Return the shape of a raw value.

    Text is always a scalar. Classes are scalars even though they are
    callable.
    """
    if isinstance(value, re.Pattern):
        return ValueShape.REGEX
    if isinstance(value, Mapping):
        return ValueShape.MAPPING
    if isinstance(value, _TEXT_TYPES):
        return ValueShape.SCALAR
    if isinstance(value, Sequence):
        return ValueShape.SEQUENCE
    if isinstance(value, Set):
        return ValueShape.UNORDERED
    if callable(value) and not isinstance(value, type):
        return ValueShape.CALLABLE
    return ValueShape.SCALAR


_DEFAULT_KINDS = {
    ValueShape.REGEX: MatcherKind.REGEX,
    ValueShape.MAPPING: MatcherKind.EMBEDS,
    ValueShape.CALLABLE: MatcherKind.PREDICATE,
}


def classify(value: object) -> MatcherKind:
    """Return the default matcher variant for an unwrapped expected value."""
    return _DEFAULT_KINDS.get(classify_shape(value), MatcherKind.EQUALS)


def is_sequence(value: object) -> bool:
    return classify_shape(value) == ValueShape.SEQUENCE


def stable_elements(collection: object) -> list[object]:
    """List the elements of a collection in a run-independent order.

    Sequences keep their own order; sets are sorted by type name and repr.
    Members that share both keep the set's iteration order.
    """
    if isinstance(collection, Set):
        return sorted(collection, key=lambda element: (type(element).__qualname__, repr(element)))
    return list(collection)  # type: ignore[call-overload]
