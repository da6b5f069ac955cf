"""Public holiday calendar parser.

Reads the semicolon-delimited public holiday export:
    DATUM;IME_PRAZNIKA;DAN_V_TEDNU;DELA_PROST_DAN;DAN;MESEC;LETO
    01.01.2024;novo leto;ponedeljek;da;1;1;2024

Column mapping:
    1 -> holiday name
    3 -> day-off flag ("da" = day off, "ne" = working holiday)
    4, 5, 6 -> day, month, year

Working holidays (flag not a day-off value) are skipped.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from worktime_sync.models import HolidayMap, ParseError

NAME_COL = 1
DAY_OFF_COL = 3
DAY_COL = 4
MONTH_COL = 5
YEAR_COL = 6

DAY_OFF_VALUES = {"da", "yes", "y", "true"}


def is_day_off(flag: str) -> bool:
    return flag.strip().lower() in DAY_OFF_VALUES


def _parse_row(row: list[str], line_no: int) -> tuple[date, str] | None:
    if len(row) <= YEAR_COL:
        raise ValueError(
            f"line {line_no}: expected at least {YEAR_COL + 1} columns, got {len(row)}"
        )
    try:
        day = date(
            int(row[YEAR_COL].strip()),
            int(row[MONTH_COL].strip()),
            int(row[DAY_COL].strip()),
        )
    except ValueError as e:
        raise ValueError(f"line {line_no}: invalid date ({e})") from e
    if not is_day_off(row[DAY_OFF_COL]):
        return None
    return day, row[NAME_COL].strip()


def parse_holiday_rows(lines: Iterable[str]) -> HolidayMap:
    """Parse CSV lines (header included) into a date -> name mapping."""
    reader = csv.reader(lines, delimiter=";")
    if next(reader, None) is None:
        raise ParseError("Holiday file is empty, header row missing")

    holidays: HolidayMap = {}
    errors: list[str] = []

    for row in reader:
        if not any(cell.strip() for cell in row):
            continue
        try:
            parsed = _parse_row(row, reader.line_num)
        except ValueError as e:
            errors.append(str(e))
            continue
        if parsed is not None:
            day, name = parsed
            holidays[day] = name

    if errors:
        raise ParseError(errors)

    return holidays


def parse_holiday_text(text: str) -> HolidayMap:
    return parse_holiday_rows(io.StringIO(text))


def load_holidays_csv(csv_path: str | Path) -> HolidayMap:
    """Load a holiday CSV file from disk."""
    csv_path = Path(csv_path)
    try:
        with csv_path.open(encoding="utf-8-sig", newline="") as f:
            return parse_holiday_rows(f)
    except OSError as e:
        raise ParseError(f"Unable to open holiday file {csv_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Holiday file {csv_path} is not valid UTF-8: {e}") from e
