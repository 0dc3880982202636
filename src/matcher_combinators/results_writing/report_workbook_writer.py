"""Check run report workbook writer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import CaseResult, CaseStatus, RunMetadata
from .text_renderer import display_value, format_path

RESULTS_SHEET_NAME = "Results"
DIFFERENCES_SHEET_NAME = "Differences"
RUN_INFO_SHEET_NAME = "RunInfo"

RESULTS_COLUMNS: tuple[str, ...] = ("ID", "Status", "Failures", "Notes")
DIFFERENCES_COLUMNS: tuple[str, ...] = ("ID", "Path", "Kind", "Expected", "Actual", "Note")


@dataclass(frozen=True)
class _RunCounts:
    """Computed run-level counters for the RunInfo sheet."""

    total: int
    passed: int
    failed: int
    skipped: int


def write_report_workbook(
    output_path: Path | str,
    case_results: Sequence[CaseResult],
    run_metadata: RunMetadata,
) -> None:
    """Write the per-case results, every difference and the run metadata."""
    workbook = Workbook()
    results_sheet = workbook.active
    if results_sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(results_sheet, Worksheet)
    results_sheet.title = RESULTS_SHEET_NAME

    _write_header_row(results_sheet, RESULTS_COLUMNS)
    for row, result in enumerate(case_results, start=2):
        results_sheet.cell(row=row, column=1, value=_cell_text(result.case_id))
        results_sheet.cell(row=row, column=2, value=result.status.value)
        results_sheet.cell(row=row, column=3, value=result.failure_count)
        results_sheet.cell(row=row, column=4, value=_cell_text(result.notes))

    _write_differences_sheet(workbook.create_sheet(DIFFERENCES_SHEET_NAME), case_results)
    _write_run_info_sheet(workbook.create_sheet(RUN_INFO_SHEET_NAME), run_metadata, case_results)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_header_row(sheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )


def _write_differences_sheet(sheet, case_results: Sequence[CaseResult]) -> None:
    _write_header_row(sheet, DIFFERENCES_COLUMNS)
    row = 2
    for result in case_results:
        if result.diff is None:
            continue
        for path, node in result.diff.failures():
            entries = (
                result.case_id,
                format_path(path),
                node.tag.value,
                display_value(node.expected),
                display_value(node.actual),
                node.note or "",
            )
            for column, value in enumerate(entries, start=1):
                sheet.cell(row=row, column=column, value=_cell_text(value))
            row += 1


def _write_run_info_sheet(
    sheet, run_metadata: RunMetadata, case_results: Sequence[CaseResult]
) -> None:
    counts = _calculate_run_counts(case_results)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("config_path", str(run_metadata.config_path)),
        ("output_path", str(run_metadata.output_path)),
        ("total", counts.total),
        ("passed", counts.passed),
        ("failed", counts.failed),
        ("skipped", counts.skipped),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(
            row=row, column=2, value=_cell_text(value) if isinstance(value, str) else value
        )


def _calculate_run_counts(case_results: Sequence[CaseResult]) -> _RunCounts:
    return _RunCounts(
        total=len(case_results),
        passed=sum(1 for result in case_results if result.status == CaseStatus.OK),
        failed=sum(1 for result in case_results if result.status == CaseStatus.MISMATCH),
        skipped=sum(1 for result in case_results if result.status == CaseStatus.SKIPPED),
    )


def _cell_text(value: str) -> str:
    """Drop control characters that worksheets cannot store."""
    return ILLEGAL_CHARACTERS_RE.sub("", value)
