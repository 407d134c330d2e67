"""Tests for the built-in catalogue and fixture workbook generation."""

from openpyxl import Workbook, load_workbook

from translit_qa.fixtures.catalog import (
    COVERAGE_SHEET,
    INSTRUCTIONS_SHEET,
    builtin_cases,
    write_fixture_workbook,
)
from translit_qa.fixtures.store import HEADER, FixtureStore
from translit_qa.models.test_case import CaseKind, Polarity


class TestBuiltinCases:

    def test_catalogue_size(self):
        cases = builtin_cases()
        assert len(cases) == 35
        assert sum(1 for c in cases if c.polarity is Polarity.NEGATIVE) == 10
        assert sum(1 for c in cases if c.kind is CaseKind.UI) == 1

    def test_ids_unique(self):
        ids = [c.case_id for c in builtin_cases()]
        assert len(ids) == len(set(ids))

    def test_every_case_has_input(self):
        assert all(c.input_text for c in builtin_cases())


class TestWriteFixtureWorkbook:

    def test_writes_all_sheets(self, tmp_path):
        path = write_fixture_workbook(tmp_path / "data" / "cases.xlsx")
        wb = load_workbook(path)
        assert wb.sheetnames == ["Test cases", INSTRUCTIONS_SHEET, COVERAGE_SHEET]
        assert [c.value for c in wb["Test cases"][1]] == HEADER
        assert wb["Test cases"].max_row == 36

    def test_round_trips_through_store(self, tmp_path):
        path = write_fixture_workbook(tmp_path / "cases.xlsx")
        assert FixtureStore(path).load_cases() == builtin_cases()

    def test_coverage_counts(self, tmp_path, sample_cases):
        path = write_fixture_workbook(tmp_path / "cases.xlsx", sample_cases)
        rows = list(load_workbook(path)[COVERAGE_SHEET].iter_rows(values_only=True))
        counts = {r[0]: r[1] for r in rows if r and len(r) > 1 and r[1] is not None}
        assert counts == {"Positive cases": 2, "Negative cases": 1, "Total cases": 3}

    def test_custom_sheet_name(self, tmp_path, sample_cases):
        path = write_fixture_workbook(tmp_path / "cases.xlsx", sample_cases, sheet_name="Sprint 2")
        assert load_workbook(path).sheetnames[0] == "Sprint 2"
        assert FixtureStore(path, "Sprint 2").load_cases() == sample_cases

    def test_keeps_unrelated_sheets(self, tmp_path, sample_cases):
        path = tmp_path / "cases.xlsx"
        wb = Workbook()
        wb.active.title = "Notes"
        wb["Notes"]["A1"] = "keep me"
        wb.save(path)

        write_fixture_workbook(path, sample_cases)
        wb = load_workbook(path)
        assert wb["Notes"]["A1"].value == "keep me"
        assert wb["Test cases"].max_row == 4
