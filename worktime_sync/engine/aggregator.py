"""Report aggregation.

Folds the raw time-tracking rows fetched from the HR API into one
DayReport per calendar day plus a running total.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from worktime_sync.models import DayReport, RawTimeEntry, Report


def aggregate(entries: Iterable[RawTimeEntry]) -> Report:
    """Group raw entries by date and sum their hours."""
    hours_by_date: dict[date, Decimal] = {}
    total = Decimal("0")

    for entry in entries:
        hours_by_date[entry.date] = hours_by_date.get(entry.date, Decimal("0")) + entry.hours
        total += entry.hours

    days = {d: DayReport(date=d, work_hours=hours) for d, hours in hours_by_date.items()}
    return Report(days=days, total_work_hours=total)
