"""Input parsing layer."""
from worktime_sync.parsers.exclusion_parser import parse_excluded_days, parse_iso_date
from worktime_sync.parsers.holiday_parser import load_holidays_csv, parse_holiday_text

__all__ = ["parse_excluded_days", "parse_iso_date", "load_holidays_csv", "parse_holiday_text"]
