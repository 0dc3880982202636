"""Matcher variant exports."""

from .builders import (
    absent,
    embeds,
    equals,
    in_any_order,
    match_with,
    predicate,
    prefix,
    regex,
    set_embeds,
    set_equals,
    within_delta,
)
from .matcher_protocol import (
    EvaluationContext,
    Matcher,
    MatcherConstructionError,
    OverrideRule,
    describe_expected,
    is_matcher,
)
from .override_matchers import MatchWith, ShapeIs, normalize_overrides
from .scalar_matchers import ABSENT, Absent, Predicate, Regex, WithinDelta
from .structural_matchers import Embeds, Equals, InAnyOrder, Prefix, SetEmbeds, SetEquals

__all__ = [
    "ABSENT",
    "Absent",
    "Embeds",
    "Equals",
    "EvaluationContext",
    "InAnyOrder",
    "MatchWith",
    "Matcher",
    "MatcherConstructionError",
    "OverrideRule",
    "Predicate",
    "Prefix",
    "Regex",
    "SetEmbeds",
    "SetEquals",
    "ShapeIs",
    "WithinDelta",
    "absent",
    "describe_expected",
    "embeds",
    "equals",
    "in_any_order",
    "is_matcher",
    "match_with",
    "normalize_overrides",
    "predicate",
    "prefix",
    "regex",
    "set_embeds",
    "set_equals",
    "within_delta",
]
