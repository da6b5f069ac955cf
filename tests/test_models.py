"""Tests for canonical data models."""

from datetime import date
from decimal import Decimal

import pytest

from worktime_sync.models import (
    ApiError,
    AuthError,
    DayReport,
    MonthReport,
    ParseError,
    Report,
    SyntheticEntry,
    WorktimeSyncError,
    YearReport,
)


class TestSyntheticEntry:
    def test_payload_keys(self):
        entry = SyntheticEntry(employee_id=42, date=date(2024, 11, 4), start="08:15", end="11:55")
        assert entry.to_payload() == {
            "employeeId": 42,
            "date": "2024-11-04",
            "start": "08:15",
            "end": "11:55",
        }


class TestReport:
    def test_logged_dates(self):
        report = Report(
            days={date(2024, 11, 5): DayReport(date=date(2024, 11, 5), work_hours=Decimal("7.7"))},
            total_work_hours=Decimal("7.7"),
        )
        assert report.logged_dates == frozenset({date(2024, 11, 5)})

    def test_empty_report(self):
        report = Report()
        assert report.days == {}
        assert report.total_work_hours == Decimal("0")

    def test_days_are_read_only(self):
        day = date(2024, 11, 5)
        source = {day: DayReport(date=day, work_hours=Decimal("7.7"))}
        report = Report(days=source, total_work_hours=Decimal("7.7"))
        with pytest.raises(TypeError):
            report.days[date(2024, 11, 6)] = DayReport(date=date(2024, 11, 6))
        with pytest.raises(AttributeError):
            report.days[day].work_hours = Decimal("99")
        source.clear()
        assert report.logged_dates == frozenset({day})


class TestYearReport:
    def test_totals(self):
        months = {
            "2024-01": MonthReport(22, 1, 176, 8, 184),
            "2024-02": MonthReport(20, 1, 160, 8, 168),
        }
        report = YearReport(year=2024, months=months)
        assert report["2024-02"].holidays == 1
        assert report.total_work_hours == 336
        assert report.total_holiday_hours == 16
        assert report.total_hours == 352


class TestErrors:
    def test_parse_error_single(self):
        err = ParseError("bad date")
        assert str(err) == "bad date"
        assert err.errors == ["bad date"]

    def test_parse_error_many(self):
        err = ParseError(["one", "two"])
        assert "2 error(s)" in str(err)
        assert "  - two" in str(err)

    def test_hierarchy(self):
        assert issubclass(AuthError, ApiError)
        assert issubclass(ApiError, WorktimeSyncError)
        with pytest.raises(WorktimeSyncError):
            raise AuthError("nope", status_code=401)
