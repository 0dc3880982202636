"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from matcher_combinators.diff_tree import DiffNode


class CaseStatus(str, Enum):
    """Rendered status of one check case."""

    OK = "OK"
    MISMATCH = "MISMATCH"
    SKIPPED = "SKIPPED"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one configured check case."""

    case_id: str
    status: CaseStatus
    diff: DiffNode | None = None
    notes: str = ""

    @property
    def failure_count(self) -> int:
        if self.diff is None:
            return 0
        return sum(1 for _ in self.diff.failures())


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    config_path: Path
    output_path: Path
