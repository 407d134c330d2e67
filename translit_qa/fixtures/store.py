"""Fixture store: reads translation cases from the ``Test cases`` sheet."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.worksheet.worksheet import Worksheet
from pydantic import ValidationError

from translit_qa.errors import FixtureError
from translit_qa.models.test_case import TranslationCase

logger = logging.getLogger(__name__)

TEST_CASES_SHEET = "Test cases"

COL_ID = "TC ID"
COL_NAME = "Test case name"
COL_LENGTH = "Input length type"
COL_INPUT = "Input"
COL_EXPECTED = "Expected output"
COL_ACTUAL = "Actual output"
COL_STATUS = "Status"
COL_JUSTIFICATION = "Accuracy justification/Description of issue type"
COL_COVERAGE = "What is covered by the test"

HEADER = [
    COL_ID,
    COL_NAME,
    COL_LENGTH,
    COL_INPUT,
    COL_EXPECTED,
    COL_ACTUAL,
    COL_STATUS,
    COL_JUSTIFICATION,
    COL_COVERAGE,
]

# Column -> TranslationCase field
_FIELD_MAP = {
    COL_ID: "case_id",
    COL_NAME: "name",
    COL_LENGTH: "length_class",
    COL_INPUT: "input_text",
    COL_EXPECTED: "expected_output",
    COL_JUSTIFICATION: "justification",
    COL_COVERAGE: "coverage",
}


def header_key(value: Any) -> str:
    """Canonical form of a header cell: lower case, whitespace removed."""
    if value is None:
        return ""
    return re.sub(r"\s+", "", str(value)).lower()


def header_index(ws: Worksheet) -> dict[str, int]:
    """Map canonical header keys to 1-based column numbers from row 1."""
    index: dict[str, int] = {}
    for cell in ws[1]:
        key = header_key(cell.value)
        if key and key not in index:
            index[key] = cell.column
    return index


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FixtureStore:
    """Loads :class:`TranslationCase` rows from an ``.xlsx`` workbook."""

    def __init__(self, path: str | Path, sheet_name: str = TEST_CASES_SHEET):
        self.path = Path(path)
        self.sheet_name = sheet_name

    def load_cases(self) -> list[TranslationCase]:
        """Read every row with a non-empty ``TC ID``, in sheet order.

        Raises FixtureError if the file or sheet is missing, a required
        column is absent, a row fails validation, or an id repeats.
        """
        if not self.path.exists():
            raise FixtureError("Fixture workbook not found", path=str(self.path))

        try:
            wb = load_workbook(self.path, read_only=True, data_only=True)
        except Exception as e:
            raise FixtureError(f"Could not open fixture workbook: {e}", path=str(self.path)) from e

        try:
            if self.sheet_name not in wb.sheetnames:
                raise FixtureError(f"Sheet '{self.sheet_name}' not found", path=str(self.path))
            ws = wb[self.sheet_name]
            rows = ws.iter_rows(values_only=True)
            header_row = next(rows, None)
            if header_row is None:
                raise FixtureError(f"Sheet '{self.sheet_name}' is empty", path=str(self.path))

            columns: dict[str, int] = {}
            for pos, value in enumerate(header_row):
                key = header_key(value)
                if key and key not in columns:
                    columns[key] = pos
            if header_key(COL_ID) not in columns:
                raise FixtureError(f"Missing '{COL_ID}' column", path=str(self.path))

            cases: list[TranslationCase] = []
            seen: set[str] = set()
            for row_number, row in enumerate(rows, start=2):
                data = {}
                for column, field in _FIELD_MAP.items():
                    pos = columns.get(header_key(column))
                    value = row[pos] if pos is not None and pos < len(row) else None
                    data[field] = _cell_text(value)

                if not data["case_id"].strip():
                    continue

                try:
                    case = TranslationCase(**data)
                except ValidationError as e:
                    raise FixtureError(
                        f"Invalid test case: {e.errors()[0]['msg']}",
                        path=str(self.path), row=row_number,
                    ) from e

                if case.case_id in seen:
                    raise FixtureError(
                        f"Duplicate test case id '{case.case_id}'",
                        path=str(self.path), row=row_number,
                    )
                seen.add(case.case_id)
                cases.append(case)
        finally:
            wb.close()

        logger.info("Loaded %d test cases from %s", len(cases), self.path)
        return cases
