"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CaseSettings:
    """One check case: an expectation file matched against an actual value file."""

    case_id: str
    expected_path: Path
    actual_path: Path
    enabled: bool
    notes: str


@dataclass(frozen=True)
class ReportSettings:
    """Where the run report workbook goes, if anywhere."""

    output_dir: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level check suite configuration aggregate."""

    path: Path
    cases: tuple[CaseSettings, ...]
    report: ReportSettings
