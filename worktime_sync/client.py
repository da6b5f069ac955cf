"""HTTP client for the HR time-tracking API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from worktime_sync.config import SyncConfig
from worktime_sync.models import (
    ApiError,
    ApiValidationError,
    AuthError,
    HolidayMap,
    ParseError,
    RawTimeEntry,
    SyntheticEntry,
)
from worktime_sync.parsers.exclusion_parser import parse_iso_date

logger = logging.getLogger(__name__)

TIME_OFF_LABEL = "time off"


def build_submission_payload(entries: Iterable[SyntheticEntry]) -> dict[str, Any]:
    """JSON body accepted by the clock entries endpoint."""
    return {"entries": [entry.to_payload() for entry in entries]}


def _raise_for_status(response: httpx.Response, action: str) -> None:
    if response.status_code == 401:
        raise AuthError(
            f"Invalid 'apiKey' provided - API returned 401 (Unauthorized) while trying to {action}",
            status_code=401,
            body=response.text,
        )
    if response.status_code == 400:
        raise ApiValidationError(
            f"Received Bad request (400) while trying to {action}: {response.text}",
            status_code=400,
            body=response.text,
        )
    if response.is_error:
        raise ApiError(
            f"HR API error {response.status_code} while trying to {action}",
            status_code=response.status_code,
            body=response.text,
        )


def _json(response: httpx.Response, action: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ApiError(f"Unable to decode JSON response while trying to {action}: {e}") from e


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ParseError(f"Invalid hours value: {value!r}") from e


class HRClient:
    """Thin synchronous wrapper around the HR gateway endpoints."""

    def __init__(self, config: SyncConfig, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.config = config
        base = config.base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{base}/api/gateway.php/{config.company_domain}/v1/",
            auth=(config.api_key, "x"),
            headers={"Accept": "application/json"},
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HRClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, url: str, action: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(f"Unable to reach HR API while trying to {action}: {e}") from e
        _raise_for_status(response, action)
        return response

    def fetch_time_entries(self, start: date, end: date) -> list[RawTimeEntry]:
        """Return logged timesheet rows for the configured employee."""
        action = "fetch tracked working hours"
        response = self._request(
            "GET", "time_tracking/timesheet_entries", action,
            params={
                "employeeIds": self.config.employee_id,
                "start": start.isoformat(),
                "end": end.isoformat(),
            },
        )
        data = _json(response, action)
        if not isinstance(data, list):
            raise ApiError(f"Unexpected response while trying to {action}: expected a list")

        entries = []
        for row in data:
            try:
                entries.append(RawTimeEntry(
                    employee_id=int(row.get("employeeId", self.config.employee_id)),
                    date=parse_iso_date(str(row["date"])),
                    hours=_to_decimal(row.get("hours")),
                ))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise ParseError(f"Malformed timesheet entry {row!r}: {e}") from e

        logger.info("Fetched %d timesheet entries between %s and %s", len(entries), start, end)
        return entries

    def fetch_time_off(self, start: date, end: date) -> HolidayMap:
        """Return days the configured employee is out, as a holiday map."""
        action = "fetch time off"
        response = self._request(
            "GET", "time_off/whos_out", action,
            params={"start": start.isoformat(), "end": end.isoformat()},
        )
        data = _json(response, action)
        if not isinstance(data, list):
            raise ApiError(f"Unexpected response while trying to {action}: expected a list")

        out_days: HolidayMap = {}
        for row in data:
            if row.get("employeeId") != self.config.employee_id:
                continue
            out_start = parse_iso_date(str(row.get("start", "")), "time off start")
            out_end = parse_iso_date(str(row.get("end", "")), "time off end")
            if out_start > out_end:
                raise ParseError(
                    f"Time off start {out_start} should not be after time off end {out_end}"
                )
            day = out_start
            while day <= out_end:
                out_days[day] = TIME_OFF_LABEL
                day += timedelta(days=1)

        logger.info("Fetched %d time off day(s) between %s and %s", len(out_days), start, end)
        return out_days

    def submit_entries(self, entries: list[SyntheticEntry]) -> None:
        """Store generated clock entries in one batch."""
        action = "store clock entries"
        self._request(
            "POST", "time_tracking/clock_entries/store", action,
            json=build_submission_payload(entries),
        )
        logger.info("Submitted %d clock entries", len(entries))
