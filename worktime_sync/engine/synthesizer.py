"""Synthetic clock entry generation.

Business rules:
- Working span (lunch excluded) is 440-460 minutes: an 8 hour day minus a
  30 minute lunch, with +/- 10 minutes of jitter
- Day starts at a random minute between 08:00 and 09:59
- Span is split in half around a fixed 30 minute lunch break
- Three entries per day: morning, lunch, afternoon
- The end date of the requested range is never included
"""

from __future__ import annotations

import logging
import random
from collections.abc import Collection, Mapping
from datetime import date, datetime, time, timedelta
from time import time_ns
from typing import Optional

from worktime_sync.engine.calendar_policy import check_eligibility
from worktime_sync.models import InvalidRangeError, Report, SyntheticEntry

logger = logging.getLogger(__name__)

MAX_RANGE_DAYS = 31
MIN_WORK_MINUTES = 440
MAX_WORK_MINUTES = 460
LUNCH_MINUTES = 30
START_HOURS = (8, 9)

TIME_FORMAT = "%H:%M"


def validate_range(start: date, end: date) -> None:
    """Raise InvalidRangeError unless ``start <= end`` and the span fits."""
    if end < start:
        raise InvalidRangeError(f"End date {end} cannot be before start date {start}")
    if (end - start).days > MAX_RANGE_DAYS:
        raise InvalidRangeError(
            f"Max difference between start and end date is {MAX_RANGE_DAYS} days, "
            f"got {(end - start).days} ({start} - {end})"
        )


def date_range(start: date, end: date):
    """Yield every day from ``start`` up to, but excluding, ``end``."""
    day = start
    while day < end:
        yield day
        day += timedelta(days=1)


def synthesize_day(
    day: date,
    employee_id: int,
    rng: random.Random,
) -> list[SyntheticEntry]:
    """Build the morning, lunch and afternoon entries for one day."""
    work_minutes = rng.randint(MIN_WORK_MINUTES, MAX_WORK_MINUTES)
    start_hour = rng.choice(START_HOURS)
    start_minute = rng.randint(0, 59)

    first_half = work_minutes // 2
    second_half = work_minutes - first_half

    morning_start = datetime.combine(day, time(start_hour, start_minute))
    morning_end = morning_start + timedelta(minutes=first_half)
    lunch_end = morning_end + timedelta(minutes=LUNCH_MINUTES)
    afternoon_end = lunch_end + timedelta(minutes=second_half)

    segments = [
        (morning_start, morning_end),
        (morning_end, lunch_end),
        (lunch_end, afternoon_end),
    ]
    return [
        SyntheticEntry(
            employee_id=employee_id,
            date=day,
            start=seg_start.strftime(TIME_FORMAT),
            end=seg_end.strftime(TIME_FORMAT),
        )
        for seg_start, seg_end in segments
    ]


def generate_entries(
    report: Report,
    start: date,
    end: date,
    holidays: Mapping[date, str],
    excluded: Collection[date],
    employee_id: int,
    rng: Optional[random.Random] = None,
) -> list[SyntheticEntry]:
    """Generate entries for every eligible day in ``[start, end)``.

    Days that are weekends, already logged, holidays or excluded are
    skipped and reported in the log. Returns an empty list when no day
    qualifies.
    """
    validate_range(start, end)

    if rng is None:
        rng = random.Random(time_ns())

    existing = report.logged_dates
    entries: list[SyntheticEntry] = []

    for day in date_range(start, end):
        verdict = check_eligibility(day, existing, holidays, excluded)
        if not verdict.eligible:
            logger.info("Excluded %s because of %s", day.isoformat(), verdict.reason)
            continue
        entries.extend(synthesize_day(day, employee_id, rng))

    return entries
