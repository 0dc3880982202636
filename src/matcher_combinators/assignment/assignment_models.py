"""Assignment solver entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Coverage(str, Enum):
    """How much of each side an assignment has to pair."""

    COMPLETE = "complete"
    PARTIAL = "partial"


@dataclass(frozen=True)
class Assignment:
    """One-to-one pairing between matcher entries and actual elements."""

    pairs: Mapping[int, int]
    unmatched_matchers: tuple[int, ...]
    unmatched_actuals: tuple[int, ...]
    coverage: Coverage

    @property
    def is_satisfying(self) -> bool:
        """Return True when the pairing meets the requested coverage."""
        if self.unmatched_matchers:
            return False
        if self.coverage == Coverage.COMPLETE:
            return not self.unmatched_actuals
        return True

    def matcher_for_actual(self) -> dict[int, int]:
        """Return the inverse pairing, actual index to matcher index."""
        return {actual: entry for entry, actual in self.pairs.items()}
