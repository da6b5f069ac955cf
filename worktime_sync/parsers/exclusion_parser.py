"""Parser for the user-supplied list of excluded days."""

from __future__ import annotations

from datetime import date

from worktime_sync.models import ExclusionSet, ParseError


def parse_iso_date(value: str, label: str = "date") -> date:
    """Parse a strict YYYY-MM-DD string."""
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ParseError(f"Cannot parse {label} '{value}', expected YYYY-MM-DD") from e


def parse_excluded_days(raw: str | None) -> ExclusionSet:
    """Parse "YYYY-MM-DD,YYYY-MM-DD" into a set of dates.

    An empty value means no exclusions. A trailing comma is rejected.
    """
    if not raw:
        return frozenset()
    if raw.endswith(","):
        raise ParseError(
            f"Excluded days must be a comma-separated list without a trailing comma: '{raw}'"
        )

    days: set[date] = set()
    errors: list[str] = []
    for part in raw.split(","):
        try:
            days.add(parse_iso_date(part, "excluded day"))
        except ParseError as e:
            errors.extend(e.errors)

    if errors:
        raise ParseError(errors)

    return frozenset(days)
