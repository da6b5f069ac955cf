"""Spreadsheet export for day and year reports.

Writes a fresh workbook per report. All values are computed in Python;
the totals row holds numbers, not formulas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from worktime_sync.models import Report, YearReport

TITLE_ROW = 1
HEADER_ROW = 3
DATA_START_ROW = 4

THIN_BORDER = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin'),
)

HEADER_FONT = Font(name='Calibri', size=11, bold=True)
DATA_FONT = Font(name='Calibri', size=11)
TITLE_FONT = Font(name='Calibri', size=12, bold=True)
HEADER_FILL = PatternFill(start_color='D9E1F2', end_color='D9E1F2', fill_type='solid')
CENTER_ALIGN = Alignment(horizontal='center', vertical='center')
NUMBER_FORMAT = '#,##0.00'
DATE_FORMAT = 'yyyy-mm-dd'

DAY_HEADERS = ["Date", "Weekday", "Hours"]
YEAR_HEADERS = ["Month", "Work Days", "Work Hours", "Holidays", "Holiday Hours", "Total Hours"]


def _write_title(ws, title: str, num_cols: int) -> None:
    ws.merge_cells(start_row=TITLE_ROW, start_column=1, end_row=TITLE_ROW, end_column=num_cols)
    cell = ws.cell(row=TITLE_ROW, column=1)
    cell.value = title
    cell.font = TITLE_FONT
    cell.alignment = CENTER_ALIGN


def _write_headers(ws, headers: list[str]) -> None:
    for col, label in enumerate(headers, start=1):
        cell = ws.cell(row=HEADER_ROW, column=col)
        cell.value = label
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = THIN_BORDER
        cell.alignment = CENTER_ALIGN
        ws.column_dimensions[get_column_letter(col)].width = max(14, len(label) + 4)


def _style_row(ws, row: int, num_cols: int, font: Font = DATA_FONT) -> None:
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row, column=col)
        cell.font = font
        cell.border = THIN_BORDER
        cell.alignment = CENTER_ALIGN


def export_day_report(report: Report, output_path: str | Path) -> Path:
    """Write logged hours per day, sorted by date, with a total row."""
    output_path = Path(output_path)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Logged Hours"

    num_cols = len(DAY_HEADERS)
    _write_title(ws, "Logged Working Hours", num_cols)
    _write_headers(ws, DAY_HEADERS)

    row = DATA_START_ROW
    for day in report.sorted_days():
        ws.cell(row=row, column=1).value = datetime(day.date.year, day.date.month, day.date.day)
        ws.cell(row=row, column=1).number_format = DATE_FORMAT
        ws.cell(row=row, column=2).value = day.date.strftime("%A")
        ws.cell(row=row, column=3).value = float(day.work_hours)
        ws.cell(row=row, column=3).number_format = NUMBER_FORMAT
        _style_row(ws, row, num_cols)
        row += 1

    ws.cell(row=row, column=1).value = "Total"
    ws.cell(row=row, column=3).value = float(report.total_work_hours or Decimal("0"))
    ws.cell(row=row, column=3).number_format = NUMBER_FORMAT
    _style_row(ws, row, num_cols, HEADER_FONT)

    wb.save(str(output_path))
    return output_path


def export_year_report(year_report: YearReport, output_path: str | Path) -> Path:
    """Write the monthly required-hours baseline with a yearly total row."""
    output_path = Path(output_path)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = str(year_report.year)

    num_cols = len(YEAR_HEADERS)
    _write_title(ws, f"Required Working Hours {year_report.year}", num_cols)
    _write_headers(ws, YEAR_HEADERS)

    row = DATA_START_ROW
    for key in sorted(year_report.months):
        month = year_report.months[key]
        values = [
            datetime.strptime(key, "%Y-%m").strftime("%B"),
            month.work_days,
            month.work_hours,
            month.holidays,
            month.total_holiday_hours,
            month.total_hours,
        ]
        for col, value in enumerate(values, start=1):
            ws.cell(row=row, column=col).value = value
        _style_row(ws, row, num_cols)
        row += 1

    totals = [
        "Total",
        sum(m.work_days for m in year_report.months.values()),
        year_report.total_work_hours,
        sum(m.holidays for m in year_report.months.values()),
        year_report.total_holiday_hours,
        year_report.total_hours,
    ]
    for col, value in enumerate(totals, start=1):
        ws.cell(row=row, column=col).value = value
    _style_row(ws, row, num_cols, HEADER_FONT)

    wb.save(str(output_path))
    return output_path
