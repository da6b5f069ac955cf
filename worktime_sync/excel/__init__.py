"""Spreadsheet export layer."""
from worktime_sync.excel.generator import export_day_report, export_year_report

__all__ = ["export_day_report", "export_year_report"]
