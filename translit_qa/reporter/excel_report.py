"""Spreadsheet report: writes results back into a copy of the fixture workbook."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.workbook import Workbook

from translit_qa.errors import FixtureError
from translit_qa.fixtures.store import (
    COL_ACTUAL,
    COL_ID,
    COL_STATUS,
    TEST_CASES_SHEET,
    header_index,
    header_key,
)
from translit_qa.models.test_result import CaseResult, RunSummary

logger = logging.getLogger(__name__)

SUMMARY_SHEET = "Summary"


def _ensure_column(ws, index: dict[str, int], title: str) -> int:
    key = header_key(title)
    if key not in index:
        column = ws.max_column + 1
        ws.cell(row=1, column=column, value=title)
        index[key] = column
    return index[key]


def apply_results(
    wb: Workbook,
    results: list[CaseResult],
    sheet_name: str = TEST_CASES_SHEET,
) -> int:
    """Populate ``Actual output``/``Status`` for every row with a result.

    Returns the number of rows updated.
    """
    if sheet_name not in wb.sheetnames:
        raise FixtureError(f"Sheet '{sheet_name}' not found")
    ws = wb[sheet_name]
    index = header_index(ws)
    if header_key(COL_ID) not in index:
        raise FixtureError(f"Missing '{COL_ID}' column")
    id_col = index[header_key(COL_ID)]
    actual_col = _ensure_column(ws, index, COL_ACTUAL)
    status_col = _ensure_column(ws, index, COL_STATUS)

    by_id = {r.case.case_id: r for r in results}
    updated = 0
    for row in range(2, ws.max_row + 1):
        case_id = ws.cell(row=row, column=id_col).value
        if case_id is None:
            continue
        result = by_id.get(str(case_id).strip())
        if result is None:
            continue
        ws.cell(row=row, column=actual_col, value=result.actual_output)
        ws.cell(row=row, column=status_col, value=result.status.value)
        updated += 1
    return updated


def summary_rows(summary: RunSummary) -> list[list]:
    start = summary.start_time.isoformat() if summary.start_time else ""
    end = summary.end_time.isoformat() if summary.end_time else ""
    return [
        ["Test Execution Summary"],
        [""],
        ["Total Tests:", summary.total],
        ["Passed:", summary.passed],
        ["Failed:", summary.failed],
        ["Errors:", summary.errors],
        ["Pass Rate:", f"{summary.pass_rate:.2f}%"],
        ["Start Time:", start],
        ["End Time:", end],
        ["Total Duration:", f"{summary.duration_seconds:.2f} seconds"],
    ]


def write_summary_sheet(wb: Workbook, summary: RunSummary) -> None:
    if SUMMARY_SHEET in wb.sheetnames:
        del wb[SUMMARY_SHEET]
    ws = wb.create_sheet(SUMMARY_SHEET)
    for row in summary_rows(summary):
        ws.append(row)
    ws.column_dimensions["A"].width = 20
    ws.column_dimensions["B"].width = 32


def render_results_workbook(
    fixture_path: str | Path,
    results: list[CaseResult],
    summary: RunSummary | None = None,
    sheet_name: str = TEST_CASES_SHEET,
) -> bytes:
    """Return the fixture workbook with results (and optionally a Summary sheet) as bytes."""
    fixture_path = Path(fixture_path)
    if not fixture_path.exists():
        raise FixtureError("Fixture workbook not found", path=str(fixture_path))
    wb = load_workbook(fixture_path)
    updated = apply_results(wb, results, sheet_name)
    logger.debug("Updated %d rows in '%s'", updated, sheet_name)
    if summary is not None:
        write_summary_sheet(wb, summary)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
