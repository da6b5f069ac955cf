"""Canonical data model for the work-hour sync tool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Optional

WORK_HOURS_PER_DAY = 8

# Mapping of calendar day -> holiday name
HolidayMap = dict[date, str]
# Days the user asked to leave out (PTO, collective leave, ...)
ExclusionSet = frozenset[date]


@dataclass(frozen=True)
class RawTimeEntry:
    """Single time-tracking row as returned by the HR API."""
    employee_id: int
    date: date
    hours: Decimal


@dataclass(frozen=True)
class DayReport:
    """Hours logged on one calendar day."""
    date: date
    work_hours: Decimal = Decimal("0")


@dataclass(frozen=True)
class Report:
    """Logged hours grouped by day.

    ``days`` is copied into a read-only mapping on construction.
    """
    days: Mapping[date, DayReport] = field(default_factory=dict)
    total_work_hours: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", MappingProxyType(dict(self.days)))

    @property
    def logged_dates(self) -> frozenset[date]:
        return frozenset(self.days)

    def sorted_days(self) -> list[DayReport]:
        return [self.days[d] for d in sorted(self.days)]


@dataclass(frozen=True)
class SyntheticEntry:
    """Generated clock-in/clock-out segment, times as HH:MM."""
    employee_id: int
    date: date
    start: str
    end: str

    def to_payload(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "date": self.date.isoformat(),
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True)
class Eligibility:
    """Outcome of the workday policy check for a single day."""
    eligible: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class MonthReport:
    """Required working time for one calendar month."""
    work_days: int
    holidays: int
    work_hours: int
    total_holiday_hours: int
    total_hours: int


@dataclass(frozen=True)
class YearReport:
    """Required working time for a full year, keyed by "YYYY-MM"."""
    year: int
    months: dict[str, MonthReport]

    def __getitem__(self, month_key: str) -> MonthReport:
        return self.months[month_key]

    def __len__(self) -> int:
        return len(self.months)

    @property
    def total_work_hours(self) -> int:
        return sum(m.work_hours for m in self.months.values())

    @property
    def total_holiday_hours(self) -> int:
        return sum(m.total_holiday_hours for m in self.months.values())

    @property
    def total_hours(self) -> int:
        return sum(m.total_hours for m in self.months.values())


class WorktimeSyncError(Exception):
    """Base class for all errors raised by the tool."""


class InvalidRangeError(WorktimeSyncError):
    """Raised when a requested date range is reversed or too long."""


class ParseError(WorktimeSyncError):
    """Raised when user or file input cannot be parsed."""
    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        if len(errors) == 1:
            super().__init__(errors[0])
        else:
            super().__init__(f"Parsing failed with {len(errors)} error(s):\n" +
                             "\n".join(f"  - {e}" for e in errors))


class ConfigError(WorktimeSyncError):
    """Raised when the configuration is missing or malformed."""


class ApiError(WorktimeSyncError):
    """Raised when the HR API returns an unexpected response."""
    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class AuthError(ApiError):
    """HR API rejected the API key (401)."""


class ApiValidationError(ApiError):
    """HR API rejected the request payload (400)."""
