"""Holiday providers.

A provider is any callable ``(start, end) -> HolidayMap``. The CSV
calendar and the HR time-off endpoint are both providers; the CLI merges
them with ``combine_providers``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from pathlib import Path

from worktime_sync.client import HRClient
from worktime_sync.models import HolidayMap
from worktime_sync.parsers.holiday_parser import load_holidays_csv

HolidayProvider = Callable[[date, date], HolidayMap]


def csv_provider(csv_path: str | Path) -> HolidayProvider:
    """Provider backed by the public holiday CSV file.

    The file is read once; the range arguments are ignored because the
    calendar is small.
    """
    cache: dict[str, HolidayMap] = {}

    def provide(start: date, end: date) -> HolidayMap:
        if "holidays" not in cache:
            cache["holidays"] = load_holidays_csv(csv_path)
        return dict(cache["holidays"])

    return provide


def time_off_provider(client: HRClient) -> HolidayProvider:
    return client.fetch_time_off


def static_provider(holidays: HolidayMap) -> HolidayProvider:
    def provide(start: date, end: date) -> HolidayMap:
        return dict(holidays)

    return provide


def combine_providers(*providers: HolidayProvider) -> HolidayProvider:
    """Merge several providers; later providers win on the same date."""
    def provide(start: date, end: date) -> HolidayMap:
        merged: HolidayMap = {}
        for provider in providers:
            merged.update(provider(start, end))
        return merged

    return provide
