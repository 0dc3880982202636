"""Matching the payload of an error raised by a computation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from matcher_combinators.diff_tree import DiffNode

from .evaluation import evaluate


class ThrownErrorKind(str, Enum):
    """How a thrown-error check ended."""

    PAYLOAD_MATCHED = "payload_matched"
    PAYLOAD_MISMATCHED = "payload_mismatched"
    NO_ERROR_RAISED = "no_error_raised"


@dataclass(frozen=True)
class ThrownErrorOutcome:
    """Result of ``match_thrown``; ``diff`` is None when nothing was raised."""

    kind: ThrownErrorKind
    error: Exception | None = None
    diff: DiffNode | None = None
    returned: object | None = None

    @property
    def passed(self) -> bool:
        return self.kind == ThrownErrorKind.PAYLOAD_MATCHED


def error_payload(error: Exception) -> object:
    """Return the structured payload of ``error``.

    A ``payload`` attribute wins; otherwise the constructor ``args`` are used.
    """
    if hasattr(error, "payload"):
        return error.payload  # type: ignore[attr-defined]
    return error.args


def match_thrown(
    error_type: type[Exception] | None,
    expected_payload: object,
    computation: Callable[[], object],
    *,
    payload_of: Callable[[Exception], object] | None = None,
) -> ThrownErrorOutcome:
    """Run ``computation`` and match the payload of the error it raises.

    Args:
      error_type: Error class to expect, or None for any ``Exception``.
      expected_payload: Matcher or unwrapped value for the payload.
      computation: Zero-argument callable to run.
      payload_of: Optional extractor replacing ``error_payload``.

    Returns:
      ``PAYLOAD_MATCHED`` or ``PAYLOAD_MISMATCHED`` with the diff, or
      ``NO_ERROR_RAISED`` with the value the computation returned.

    Raises:
      Exception: Any error not of ``error_type`` propagates unchanged.
    """
    caught_type = error_type or Exception
    try:
        returned = computation()
    except caught_type as error:
        payload = (payload_of or error_payload)(error)
        outcome = evaluate(expected_payload, payload)
        kind = (
            ThrownErrorKind.PAYLOAD_MATCHED
            if outcome.passed
            else ThrownErrorKind.PAYLOAD_MISMATCHED
        )
        return ThrownErrorOutcome(kind=kind, error=error, diff=outcome.diff)
    return ThrownErrorOutcome(kind=ThrownErrorKind.NO_ERROR_RAISED, returned=returned)
