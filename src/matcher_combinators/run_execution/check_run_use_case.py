"""Check suite run use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from matcher_combinators.configuration import (
    CaseSettings,
    Configuration,
    ConfigurationError,
    load_configuration,
)
from matcher_combinators.expectation_files import (
    ExpectationFileError,
    load_actual,
    load_expectation,
)
from matcher_combinators.matching_engine import evaluate
from matcher_combinators.results_writing import (
    CaseResult,
    CaseStatus,
    RunMetadata,
    write_report_workbook,
)

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_check_run(request: RunRequest) -> RunOutcome:
    """Evaluate every enabled case of a check suite and write the optional report."""
    run_start = datetime.now(UTC)
    configuration = _load_configuration(request.config_path)
    case_results = tuple(_evaluate_case(case) for case in configuration.cases)

    output_path = _resolve_output_path(configuration, request.output_dir)
    if output_path is not None:
        run_metadata = RunMetadata(
            run_start=run_start,
            config_path=configuration.path.resolve(),
            output_path=output_path.resolve(),
        )
        try:
            write_report_workbook(output_path, case_results, run_metadata)
        except OSError as exc:
            raise RunExecutionError(str(exc)) from exc
    return RunOutcome(
        case_results=case_results,
        output_path=output_path.resolve() if output_path is not None else None,
    )


def _load_configuration(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _evaluate_case(case: CaseSettings) -> CaseResult:
    if not case.enabled:
        _LOGGER.info("case %s skipped", case.case_id)
        return CaseResult(case_id=case.case_id, status=CaseStatus.SKIPPED, notes=case.notes)
    try:
        expected = load_expectation(case.expected_path)
        actual = load_actual(case.actual_path)
    except (ExpectationFileError, OSError) as exc:
        raise RunExecutionError(f"Case {case.case_id}: {exc}") from exc

    outcome = evaluate(expected, actual)
    status = CaseStatus.OK if outcome.passed else CaseStatus.MISMATCH
    _LOGGER.info("case %s: %s", case.case_id, status.value)
    return CaseResult(case_id=case.case_id, status=status, diff=outcome.diff, notes=case.notes)


def _resolve_output_path(configuration: Configuration, output_dir: str | None) -> Path | None:
    destination = Path(output_dir) if output_dir else configuration.report.output_dir
    if destination is None:
        return None
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    return destination / f"{configuration.path.stem}-results-{timestamp}.xlsx"
