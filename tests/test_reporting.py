"""Tests for text rendering and JSON output."""

import json
from datetime import date
from decimal import Decimal

from worktime_sync.engine import aggregate, compute_required_hours
from worktime_sync.models import RawTimeEntry, SyntheticEntry
from worktime_sync.reporting import (
    day_report_dict,
    format_decimal_hours,
    render_day_report,
    render_entries,
    render_year_report,
    write_json,
    year_report_dict,
)


def _make_report():
    return aggregate([
        RawTimeEntry(employee_id=1, date=date(2024, 11, 5), hours=Decimal("7.5")),
        RawTimeEntry(employee_id=1, date=date(2024, 11, 4), hours=Decimal("8")),
    ])


class TestFormatDecimalHours:
    def test_whole_hours(self):
        assert format_decimal_hours(Decimal("8")) == "8 hours and 0 minutes"

    def test_fraction(self):
        assert format_decimal_hours(Decimal("7.75")) == "7 hours and 45 minutes"

    def test_rounding(self):
        assert format_decimal_hours(7.7) == "7 hours and 42 minutes"

    def test_rounding_up_to_next_hour(self):
        assert format_decimal_hours(Decimal("7.999")) == "8 hours and 0 minutes"


class TestRenderDayReport:
    def test_sorted_rows_and_total(self):
        text = render_day_report(_make_report())
        lines = text.splitlines()
        assert lines[0].split() == ["Date", "Weekday", "Total"]
        assert lines[1].startswith("2024-11-04")
        assert "Monday" in lines[1]
        assert lines[2].startswith("2024-11-05")
        assert "Tuesday" in lines[2]
        assert lines[-1] == "Your total working hours: 15 hours and 30 minutes"

    def test_empty_report(self):
        text = render_day_report(aggregate([]))
        assert text.endswith("Your total working hours: 0 hours and 0 minutes")


class TestRenderYearReport:
    def test_months_in_order(self):
        text = render_year_report(compute_required_hours(2024, {date(2024, 2, 8): "x"}))
        lines = text.splitlines()
        assert len(lines) == 13
        assert lines[1].startswith("2024 January")
        assert lines[12].startswith("2024 December")
        assert lines[2].split() == [
            "2024", "February", "20", "days", "160h", "1", "days", "8h", "168h",
        ]


class TestRenderEntries:
    def test_lines(self):
        entries = [SyntheticEntry(employee_id=1, date=date(2024, 11, 4), start="08:15", end="11:55")]
        text = render_entries(entries)
        assert "Date: 2024-11-04 ; Start: 08:15 ; End: 11:55" in text


class TestJsonOutput:
    def test_year_report_dict(self):
        data = year_report_dict(compute_required_hours(2024, {}))
        assert list(data["months"]) == [f"2024-{m:02d}" for m in range(1, 13)]
        assert data["summary"]["total_hours"] == 262 * 8

    def test_write_json_handles_decimal(self, tmp_path):
        path = write_json(day_report_dict(_make_report()), tmp_path / "report.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["total_work_hours"] == 15.5
        assert data["days"]["2024-11-05"]["work_hours"] == 7.5
