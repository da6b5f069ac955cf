"""Pydantic request/response models for the work-hour API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class MonthSummary(BaseModel):
    month: str
    work_days: int
    holidays: int
    work_hours: int
    total_holiday_hours: int
    total_hours: int


class RequiredHoursResponse(BaseModel):
    success: bool
    year: int | None = None
    months: list[MonthSummary] | None = None
    total_work_hours: int | None = None
    total_hours: int | None = None
    error_type: str | None = None
    errors: list[str] | None = None


class PreviewRequest(BaseModel):
    start: date
    end: date
    employee_id: int = Field(..., gt=0)
    logged_dates: list[date] = Field(default_factory=list)
    holidays: dict[date, str] = Field(default_factory=dict)
    excluded: list[date] = Field(default_factory=list)
    seed: int | None = None


class EntryOut(BaseModel):
    employeeId: int
    date: str
    start: str
    end: str


class PreviewResponse(BaseModel):
    success: bool
    entries: list[EntryOut] | None = None
    days: int | None = None
    error_type: str | None = None
    errors: list[str] | None = None
