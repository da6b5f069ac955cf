"""CLI entry point.

Usage:
    python -m worktime_sync list \
        --start 2024-10-01 --end 2024-10-31

    python -m worktime_sync add \
        --start 2024-10-01 --end 2024-10-31 \
        --exclude-days 2024-10-14,2024-10-15

    python -m worktime_sync required-hours --year 2024 --xlsx hours_2024.xlsx

API key and employee id are read from config.json (``apiToken``,
``employeeId``), the WORKTIME_API_KEY / WORKTIME_EMPLOYEE_ID environment
variables, or the --api-key / --employee-id flags, in increasing priority.
"""

from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import typer

from worktime_sync.client import HRClient
from worktime_sync.config import SyncConfig, load_config
from worktime_sync.models import (
    ApiError,
    HolidayMap,
    InvalidRangeError,
    WorktimeSyncError,
)

app = typer.Typer(help="Sync working hours with the HR time-tracking API.", no_args_is_help=True)

CONFIG_OPTION = typer.Option(None, "--config", help="Path to config.json")
API_KEY_OPTION = typer.Option(None, "--api-key", help="HR API key")
EMPLOYEE_OPTION = typer.Option(None, "--employee-id", help="HR employee ID")
START_OPTION = typer.Option(..., "--start", help="Start date (YYYY-MM-DD)")
END_OPTION = typer.Option(..., "--end", help="End date (YYYY-MM-DD), not included in generated entries")
HOLIDAYS_OPTION = typer.Option(None, "--holidays", help="Public holiday CSV (semicolon-delimited)")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show skipped-day notices and API calls")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _fail(message: str, code: int = 1) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code)


def _resolve_config(
    config_file: Optional[str],
    api_key: Optional[str],
    employee_id: Optional[int],
    holidays_file: Optional[str] = None,
    require_credentials: bool = True,
) -> SyncConfig:
    config = load_config(config_file).with_overrides(
        api_key=api_key,
        employee_id=employee_id,
        holidays_file=Path(holidays_file) if holidays_file else None,
    )
    if require_credentials:
        config.require_credentials()
    return config


def _parse_range(start: str, end: str) -> tuple[date, date]:
    from worktime_sync.parsers import parse_iso_date

    start_date = parse_iso_date(start, "'start' date")
    end_date = parse_iso_date(end, "'end' date")
    if start_date > end_date:
        raise InvalidRangeError("'end' date cannot be before 'start' date")
    return start_date, end_date


def _load_holidays(
    config: SyncConfig,
    client: Optional[HRClient],
    start: date,
    end: date,
) -> HolidayMap:
    from worktime_sync.holidays import combine_providers, csv_provider, time_off_provider

    providers = []
    if client is not None:
        providers.append(time_off_provider(client))
    # Public holiday names win over time off on the same day
    providers.append(csv_provider(config.holidays_file))
    try:
        return combine_providers(*providers)(start, end)
    except WorktimeSyncError as e:
        _fail(f"Cannot load holidays: {e}. Aborting", code=2)


@app.command("list")
def list_hours(
    start: str = START_OPTION,
    end: str = END_OPTION,
    config_file: Optional[str] = CONFIG_OPTION,
    api_key: Optional[str] = API_KEY_OPTION,
    employee_id: Optional[int] = EMPLOYEE_OPTION,
    xlsx: Optional[str] = typer.Option(None, "--xlsx", help="Also export the report to .xlsx"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List hours already logged between two dates."""
    from worktime_sync.engine import aggregate
    from worktime_sync.excel import export_day_report
    from worktime_sync.reporting import render_day_report

    _setup_logging(verbose)
    try:
        config = _resolve_config(config_file, api_key, employee_id)
        start_date, end_date = _parse_range(start, end)
        with HRClient(config) as client:
            entries = client.fetch_time_entries(start_date, end_date)
    except ApiError as e:
        _fail(f"Failed fetching working hours: {e}")
    except WorktimeSyncError as e:
        _fail(str(e))

    report = aggregate(entries)
    typer.echo(render_day_report(report))

    if xlsx:
        export_day_report(report, xlsx)
        typer.echo(f"\nReport saved to: {xlsx}")


@app.command("add")
def add_hours(
    start: str = START_OPTION,
    end: str = END_OPTION,
    config_file: Optional[str] = CONFIG_OPTION,
    api_key: Optional[str] = API_KEY_OPTION,
    employee_id: Optional[int] = EMPLOYEE_OPTION,
    exclude_days: str = typer.Option(
        "", "--exclude-days",
        help="Comma-separated days to skip (YYYY-MM-DD,YYYY-MM-DD), e.g. PTO or collective leave",
    ),
    holidays_file: Optional[str] = HOLIDAYS_OPTION,
    time_off: bool = typer.Option(True, "--time-off/--no-time-off", help="Skip days with approved time off"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Submit without asking for confirmation"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate clock entries for unlogged workdays and submit them."""
    from worktime_sync.engine import aggregate, generate_entries
    from worktime_sync.parsers import parse_excluded_days
    from worktime_sync.reporting import render_entries

    _setup_logging(verbose)
    try:
        config = _resolve_config(config_file, api_key, employee_id, holidays_file)
        start_date, end_date = _parse_range(start, end)
        excluded = parse_excluded_days(exclude_days)
    except WorktimeSyncError as e:
        _fail(str(e))

    with HRClient(config) as client:
        holidays = _load_holidays(config, client if time_off else None, start_date, end_date)
        try:
            report = aggregate(client.fetch_time_entries(start_date, end_date))
            entries = generate_entries(
                report, start_date, end_date, holidays, excluded, config.employee_id,
            )
        except ApiError as e:
            _fail(f"Failed fetching working hours: {e}")
        except WorktimeSyncError as e:
            _fail(f"Unable to create entries: {e}")

        if not entries:
            typer.echo("There are no generated entries for specified dates. Exiting the program...")
            raise typer.Exit(0)

        typer.echo(render_entries(entries))
        typer.echo("")
        if not yes and not typer.confirm(
            "Are you sure you want to populate your work hours with the generated entries listed above?"
        ):
            typer.echo("Exiting the program...")
            raise typer.Exit(0)

        typer.echo("Pushing hours to the HR system. Please wait...")
        try:
            client.submit_entries(entries)
        except ApiError as e:
            _fail(str(e))

    typer.echo("Successfully populated working hour entries between two dates. Please double-check in the HR system")


@app.command("required-hours")
def required_hours(
    year: int = typer.Option(..., "--year", min=1, max=9999, help="Year to compute the baseline for"),
    config_file: Optional[str] = CONFIG_OPTION,
    holidays_file: Optional[str] = HOLIDAYS_OPTION,
    xlsx: Optional[str] = typer.Option(None, "--xlsx", help="Also export the table to .xlsx"),
    json_out: Optional[str] = typer.Option(None, "--json", help="Also write the report as JSON"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print required working hours per month for a year."""
    from worktime_sync.engine import compute_required_hours
    from worktime_sync.excel import export_year_report
    from worktime_sync.reporting import render_year_report, write_json, year_report_dict

    _setup_logging(verbose)
    try:
        config = _resolve_config(config_file, None, None, holidays_file, require_credentials=False)
    except WorktimeSyncError as e:
        _fail(str(e))

    holidays = _load_holidays(config, None, date(year, 1, 1), date(year, 12, 31))
    report = compute_required_hours(year, holidays)
    typer.echo(render_year_report(report))

    if xlsx:
        export_year_report(report, xlsx)
        typer.echo(f"\nTable saved to: {xlsx}")
    if json_out:
        write_json(year_report_dict(report), json_out)
        typer.echo(f"JSON saved to: {json_out}")


if __name__ == "__main__":
    app()
