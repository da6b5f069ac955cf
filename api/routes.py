"""API routes for the work-hour sync tool."""

from __future__ import annotations

import random
from decimal import Decimal

from fastapi import APIRouter, File, Form, UploadFile

from worktime_sync.client import build_submission_payload
from worktime_sync.engine import compute_required_hours, generate_entries
from worktime_sync.holidays import static_provider
from worktime_sync.models import DayReport, InvalidRangeError, ParseError, Report
from worktime_sync.parsers import parse_holiday_text

from api.schemas import (
    EntryOut,
    MonthSummary,
    PreviewRequest,
    PreviewResponse,
    RequiredHoursResponse,
)

router = APIRouter(prefix="/api/v1")


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@router.post("/required-hours", response_model=RequiredHoursResponse)
async def required_hours(
    year: int = Form(..., ge=1, le=9999, description="Calendar year"),
    holidays_csv: UploadFile | None = File(None, description="Public holiday CSV (semicolon-delimited)"),
):
    """Compute the monthly required-hours baseline for a year.

    Without a holiday file every weekday counts as a working day.
    """
    holidays = {}
    if holidays_csv is not None:
        try:
            text = (await holidays_csv.read()).decode("utf-8-sig")
            holidays = parse_holiday_text(text)
        except UnicodeDecodeError as e:
            return RequiredHoursResponse(
                success=False, error_type="parse_error", errors=[f"Holiday file is not UTF-8: {e}"],
            )
        except ParseError as e:
            return RequiredHoursResponse(success=False, error_type="parse_error", errors=e.errors)

    report = compute_required_hours(year, holidays)
    months = [
        MonthSummary(
            month=key,
            work_days=m.work_days,
            holidays=m.holidays,
            work_hours=m.work_hours,
            total_holiday_hours=m.total_holiday_hours,
            total_hours=m.total_hours,
        )
        for key, m in sorted(report.months.items())
    ]
    return RequiredHoursResponse(
        success=True,
        year=year,
        months=months,
        total_work_hours=report.total_work_hours,
        total_hours=report.total_hours,
    )


@router.post("/preview", response_model=PreviewResponse)
async def preview(body: PreviewRequest):
    """Generate clock entries without submitting them."""
    report = Report(
        days={d: DayReport(date=d, work_hours=Decimal("0")) for d in body.logged_dates},
    )
    holidays = static_provider(body.holidays)(body.start, body.end)
    rng = random.Random(body.seed) if body.seed is not None else None
    try:
        entries = generate_entries(
            report,
            body.start,
            body.end,
            holidays,
            frozenset(body.excluded),
            body.employee_id,
            rng=rng,
        )
    except InvalidRangeError as e:
        return PreviewResponse(success=False, error_type="invalid_range", errors=[str(e)])

    payload = build_submission_payload(entries)
    return PreviewResponse(
        success=True,
        entries=[EntryOut(**item) for item in payload["entries"]],
        days=len({e.date for e in entries}),
    )
