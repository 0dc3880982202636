"""Composable matchers that compare nested values and explain every difference."""

import logging

from .diff_tree import DiffNode, DiffTag, NodeKind, Outcome, UnmatchedEntry, Verdict
from .matchers import (
    ABSENT,
    Matcher,
    MatcherConstructionError,
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
from .matching_engine import (
    ThrownErrorKind,
    ThrownErrorOutcome,
    evaluate,
    match,
    match_thrown,
)
from .results_writing import render_diff

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "DiffNode",
    "DiffTag",
    "Matcher",
    "MatcherConstructionError",
    "NodeKind",
    "Outcome",
    "ThrownErrorKind",
    "ThrownErrorOutcome",
    "UnmatchedEntry",
    "Verdict",
    "absent",
    "embeds",
    "equals",
    "evaluate",
    "in_any_order",
    "match",
    "match_thrown",
    "match_with",
    "predicate",
    "prefix",
    "regex",
    "render_diff",
    "set_embeds",
    "set_equals",
    "within_delta",
]
