"""Value classification exports."""

from .value_shapes import (
    MatcherKind,
    ValueShape,
    classify,
    classify_shape,
    is_sequence,
    stable_elements,
)

__all__ = [
    "MatcherKind",
    "ValueShape",
    "classify",
    "classify_shape",
    "is_sequence",
    "stable_elements",
]
