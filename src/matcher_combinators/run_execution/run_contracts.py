"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from matcher_combinators.results_writing import CaseResult, CaseStatus


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one check suite run."""

    config_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    case_results: tuple[CaseResult, ...]
    output_path: Path | None

    @property
    def failed_case_ids(self) -> tuple[str, ...]:
        return tuple(
            result.case_id for result in self.case_results if result.status == CaseStatus.MISMATCH
        )

    @property
    def passed(self) -> bool:
        return not self.failed_case_ids
