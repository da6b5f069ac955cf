"""Tests for spreadsheet export."""

from datetime import date, datetime
from decimal import Decimal

import openpyxl

from worktime_sync.engine import aggregate, compute_required_hours
from worktime_sync.excel.generator import (
    DATA_START_ROW,
    DAY_HEADERS,
    HEADER_ROW,
    YEAR_HEADERS,
    export_day_report,
    export_year_report,
)
from worktime_sync.models import RawTimeEntry


class TestExportDayReport:
    def test_rows_and_total(self, tmp_path):
        report = aggregate([
            RawTimeEntry(employee_id=1, date=date(2024, 11, 5), hours=Decimal("7.5")),
            RawTimeEntry(employee_id=1, date=date(2024, 11, 4), hours=Decimal("8")),
        ])
        out = export_day_report(report, tmp_path / "hours.xlsx")

        ws = openpyxl.load_workbook(str(out)).active
        assert [ws.cell(row=HEADER_ROW, column=c).value for c in range(1, 4)] == DAY_HEADERS
        assert ws.cell(row=DATA_START_ROW, column=1).value == datetime(2024, 11, 4)
        assert ws.cell(row=DATA_START_ROW, column=2).value == "Monday"
        assert ws.cell(row=DATA_START_ROW, column=3).value == 8.0
        assert ws.cell(row=DATA_START_ROW + 1, column=3).value == 7.5
        assert ws.cell(row=DATA_START_ROW + 2, column=1).value == "Total"
        assert ws.cell(row=DATA_START_ROW + 2, column=3).value == 15.5

    def test_empty_report(self, tmp_path):
        out = export_day_report(aggregate([]), tmp_path / "empty.xlsx")
        ws = openpyxl.load_workbook(str(out)).active
        assert ws.cell(row=DATA_START_ROW, column=1).value == "Total"
        assert ws.cell(row=DATA_START_ROW, column=3).value == 0


class TestExportYearReport:
    def test_twelve_months_and_total(self, tmp_path):
        report = compute_required_hours(2024, {date(2024, 2, 8): "x"})
        out = export_year_report(report, tmp_path / "year.xlsx")

        wb = openpyxl.load_workbook(str(out))
        ws = wb["2024"]
        assert [ws.cell(row=HEADER_ROW, column=c).value for c in range(1, 7)] == YEAR_HEADERS
        assert ws.cell(row=DATA_START_ROW, column=1).value == "January"
        feb = DATA_START_ROW + 1
        assert [ws.cell(row=feb, column=c).value for c in range(2, 7)] == [20, 160, 1, 8, 168]
        total_row = DATA_START_ROW + 12
        assert ws.cell(row=total_row, column=1).value == "Total"
        assert ws.cell(row=total_row, column=6).value == 262 * 8
        assert ws.cell(row=total_row, column=4).value == 1
