"""Report rendering and JSON output.

Text tables for the console and JSON-ready dictionaries. Rows are always
ordered by date / month key.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from worktime_sync.models import Report, SyntheticEntry, YearReport

COLUMN_GAP = 5


class DecimalEncoder(json.JSONEncoder):
    """JSON encoder that handles Decimal values."""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        return super().default(obj)


def format_decimal_hours(hours: Decimal | float) -> str:
    """7.75 -> "7 hours and 45 minutes"."""
    hours = Decimal(str(hours))
    whole = int(hours)
    minutes = int(((hours - whole) * 60).quantize(Decimal("1"), ROUND_HALF_UP))
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return f"{whole} hours and {minutes} minutes"


def _table(header: Sequence[str], rows: list[Sequence[str]]) -> list[str]:
    widths = [len(h) for h in header]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    lines = []
    for row in [header, *rows]:
        cells = [cell.ljust(w + COLUMN_GAP) for cell, w in zip(row, widths)]
        lines.append("".join(cells).rstrip())
    return lines


def render_day_report(report: Report) -> str:
    rows = [
        (day.date.isoformat(), day.date.strftime("%A"), format_decimal_hours(day.work_hours))
        for day in report.sorted_days()
    ]
    lines = _table(("Date", "Weekday", "Total"), rows)
    lines.append("")
    lines.append(f"Your total working hours: {format_decimal_hours(report.total_work_hours)}")
    return "\n".join(lines)


def render_year_report(year_report: YearReport) -> str:
    rows = []
    for key in sorted(year_report.months):
        month = year_report.months[key]
        label = datetime.strptime(key, "%Y-%m").strftime("%Y %B")
        rows.append((
            label,
            f"{month.work_days} days",
            f"{month.work_hours}h",
            f"{month.holidays} days",
            f"{month.total_holiday_hours}h",
            f"{month.total_hours}h",
        ))
    header = ("Month", "Work Days", "Work Hours", "Holidays", "Holiday Hours", "Total")
    return "\n".join(_table(header, rows))


def render_entries(entries: Sequence[SyntheticEntry]) -> str:
    """Preview shown before asking for confirmation."""
    lines = ["Generated work entries:", ""]
    for entry in entries:
        lines.append(f"Date: {entry.date.isoformat()} ; Start: {entry.start} ; End: {entry.end}")
    return "\n".join(lines)


def day_report_dict(report: Report) -> dict:
    return {
        "days": {
            day.date.isoformat(): {"work_hours": day.work_hours}
            for day in report.sorted_days()
        },
        "total_work_hours": report.total_work_hours,
    }


def year_report_dict(year_report: YearReport) -> dict:
    """Build a JSON-ready dictionary for a year report (no file I/O)."""
    return {
        "year": year_report.year,
        "months": {
            key: {
                "work_days": m.work_days,
                "holidays": m.holidays,
                "work_hours": m.work_hours,
                "total_holiday_hours": m.total_holiday_hours,
                "total_hours": m.total_hours,
            }
            for key, m in sorted(year_report.months.items())
        },
        "summary": {
            "total_work_hours": year_report.total_work_hours,
            "total_holiday_hours": year_report.total_holiday_hours,
            "total_hours": year_report.total_hours,
        },
    }


def write_json(data: dict, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.write_text(json.dumps(data, indent=2, cls=DecimalEncoder), encoding="utf-8")
    return output_path
