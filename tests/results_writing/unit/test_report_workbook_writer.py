"""Results workbook writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from matcher_combinators.matchers import equals
from matcher_combinators.matching_engine import evaluate
from matcher_combinators.results_writing import (
    DIFFERENCES_SHEET_NAME,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    CaseResult,
    CaseStatus,
    RunMetadata,
    write_report_workbook,
)
from openpyxl import load_workbook


def _case_results() -> list[CaseResult]:
    passing = evaluate({"id": 1}, {"id": 1, "name": "Ada"})
    failing = evaluate(equals({"id": 1, "tags": ["a"]}), {"id": 2, "tags": ["a", "b"]})
    return [
        CaseResult(case_id="TC-1", status=CaseStatus.OK, diff=passing.diff),
        CaseResult(case_id="TC-2", status=CaseStatus.MISMATCH, diff=failing.diff, notes="n"),
        CaseResult(case_id="TC-3", status=CaseStatus.SKIPPED),
    ]


def _run_metadata(tmp_path: Path, output_path: Path) -> RunMetadata:
    return RunMetadata(
        run_start=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        config_path=tmp_path / "checks.yaml",
        output_path=output_path,
    )


def test_write_report_workbook_writes_results_sheet(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "results.xlsx"

    write_report_workbook(output_path, _case_results(), _run_metadata(tmp_path, output_path))

    sheet = load_workbook(output_path)[RESULTS_SHEET_NAME]
    rows = [tuple(cell.value for cell in row) for row in sheet.iter_rows()]
    assert rows[0] == ("ID", "Status", "Failures", "Notes")
    assert rows[1][:3] == ("TC-1", "OK", 0)
    assert rows[2] == ("TC-2", "MISMATCH", 2, "n")
    assert rows[3][:3] == ("TC-3", "SKIPPED", 0)


def test_write_report_workbook_lists_every_difference(tmp_path: Path) -> None:
    output_path = tmp_path / "results.xlsx"

    write_report_workbook(output_path, _case_results(), _run_metadata(tmp_path, output_path))

    sheet = load_workbook(output_path)[DIFFERENCES_SHEET_NAME]
    rows = [tuple(cell.value for cell in row) for row in sheet.iter_rows()]
    assert rows[0] == ("ID", "Path", "Kind", "Expected", "Actual", "Note")
    assert [row[:5] for row in rows[1:]] == [
        ("TC-2", "id", "mismatch", "1", "2"),
        ("TC-2", "tags[1]", "unexpected", "None", "'b'"),
    ]


def test_write_report_workbook_writes_run_info(tmp_path: Path) -> None:
    output_path = tmp_path / "results.xlsx"

    write_report_workbook(output_path, _case_results(), _run_metadata(tmp_path, output_path))

    sheet = load_workbook(output_path)[RUN_INFO_SHEET_NAME]
    info = {row[0].value: row[1].value for row in sheet.iter_rows()}
    assert info["run_start"] == "2026-01-02T03:04:05+00:00"
    assert info["config_path"] == str(tmp_path / "checks.yaml")
    assert info["output_path"] == str(output_path)
    assert (info["total"], info["passed"], info["failed"], info["skipped"]) == (3, 1, 1, 1)


def test_write_report_workbook_drops_control_characters(tmp_path: Path) -> None:
    output_path = tmp_path / "results.xlsx"
    failing = evaluate(equals({"x": 1}), {"x": 1, "a\x01b": "c\x02d"})
    results = [
        CaseResult(
            case_id="TC\x03-4", status=CaseStatus.MISMATCH, diff=failing.diff, notes="n\x04"
        )
    ]

    write_report_workbook(output_path, results, _run_metadata(tmp_path, output_path))

    workbook = load_workbook(output_path)
    assert workbook[RESULTS_SHEET_NAME]["A2"].value == "TC-4"
    assert workbook[RESULTS_SHEET_NAME]["D2"].value == "n"
    differences = workbook[DIFFERENCES_SHEET_NAME]
    rows = [tuple(cell.value for cell in row) for row in differences.iter_rows()]
    assert rows[1][:3] == ("TC-4", "ab", "unexpected")
