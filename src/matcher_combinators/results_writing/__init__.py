"""Results writing exports."""

from .report_models import CaseResult, CaseStatus, RunMetadata
from .report_workbook_writer import (
    DIFFERENCES_SHEET_NAME,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_report_workbook,
)
from .text_renderer import format_leaf, format_path, render_diff

__all__ = [
    "CaseResult",
    "CaseStatus",
    "RunMetadata",
    "DIFFERENCES_SHEET_NAME",
    "RESULTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "write_report_workbook",
    "format_leaf",
    "format_path",
    "render_diff",
]
