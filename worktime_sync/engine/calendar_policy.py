"""Workday eligibility rules.

A day may receive generated clock entries only if it is:
- a weekday (Monday through Friday)
- not already logged in the HR system
- not a public holiday (or time off, when merged into the holiday map)
- not excluded by the user

Rules are checked in that order and the first match decides the reason.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from datetime import date

from worktime_sync.models import Eligibility

WEEKEND_DAYS = (5, 6)  # Saturday, Sunday

REASON_WEEKEND = "weekend"
REASON_LOGGED = "already logged"
REASON_EXCLUDED = "user-excluded"


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def check_eligibility(
    day: date,
    existing_days: Collection[date],
    holidays: Mapping[date, str],
    excluded: Collection[date],
) -> Eligibility:
    """Decide whether entries may be generated for ``day``."""
    if is_weekend(day):
        return Eligibility(False, REASON_WEEKEND)
    if day in existing_days:
        return Eligibility(False, REASON_LOGGED)
    if day in holidays:
        return Eligibility(False, f"holiday: {holidays[day]}")
    if day in excluded:
        return Eligibility(False, REASON_EXCLUDED)
    return Eligibility(True)


def is_eligible(
    day: date,
    existing_days: Collection[date],
    holidays: Mapping[date, str],
    excluded: Collection[date],
) -> bool:
    return check_eligibility(day, existing_days, holidays, excluded).eligible
