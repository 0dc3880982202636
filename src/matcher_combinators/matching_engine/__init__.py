"""Matching engine exports."""

from .evaluation import MatchContext, default_matcher, evaluate, match
from .thrown_errors import ThrownErrorKind, ThrownErrorOutcome, error_payload, match_thrown

__all__ = [
    "MatchContext",
    "ThrownErrorKind",
    "ThrownErrorOutcome",
    "default_matcher",
    "error_payload",
    "evaluate",
    "match",
    "match_thrown",
]
