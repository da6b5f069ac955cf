"""Required working hours baseline.

For every month of a year:
- total days = weekdays in the month
- holidays   = weekdays present in the holiday map
- work days  = total days - holidays
Each day counts as 8 hours.
"""

from __future__ import annotations

import calendar
from collections.abc import Mapping
from datetime import date

from worktime_sync.engine.calendar_policy import is_weekend
from worktime_sync.models import WORK_HOURS_PER_DAY, MonthReport, YearReport


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def compute_month(year: int, month: int, holidays: Mapping[date, str]) -> MonthReport:
    total_days = 0
    holiday_days = 0

    for day_num in range(1, days_in_month(year, month) + 1):
        day = date(year, month, day_num)
        if is_weekend(day):
            continue
        if day in holidays:
            holiday_days += 1
        total_days += 1

    work_days = total_days - holiday_days
    return MonthReport(
        work_days=work_days,
        holidays=holiday_days,
        work_hours=work_days * WORK_HOURS_PER_DAY,
        total_holiday_hours=holiday_days * WORK_HOURS_PER_DAY,
        total_hours=total_days * WORK_HOURS_PER_DAY,
    )


def compute_required_hours(year: int, holidays: Mapping[date, str]) -> YearReport:
    """Build the per-month baseline for ``year``; always 12 months."""
    months = {
        month_key(year, month): compute_month(year, month, holidays)
        for month in range(1, 13)
    }
    return YearReport(year=year, months=months)
