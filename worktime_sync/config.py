"""Runtime configuration for the sync tool.

Values come from a JSON file (``config.json``), can be overridden from
the environment, and finally from command line flags.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from worktime_sync.models import ConfigError

DEFAULT_CONFIG_FILE = Path("config.json")
DEFAULT_BASE_URL = "https://api.bamboohr.com"
DEFAULT_COMPANY = "flaviar"
DEFAULT_HOLIDAYS_FILE = Path("slovenian_public_work_off_days.csv")

ENV_API_KEY = "WORKTIME_API_KEY"
ENV_EMPLOYEE_ID = "WORKTIME_EMPLOYEE_ID"


@dataclass(frozen=True)
class SyncConfig:
    """Immutable per-run settings."""
    api_key: str = ""
    employee_id: int = 0
    company_domain: str = DEFAULT_COMPANY
    base_url: str = DEFAULT_BASE_URL
    holidays_file: Path = DEFAULT_HOLIDAYS_FILE
    timeout: float = 30.0

    def with_overrides(self, **overrides) -> SyncConfig:
        """Return a copy with every non-empty override applied."""
        values = {k: v for k, v in overrides.items() if v not in (None, "", 0)}
        return replace(self, **values)

    def require_credentials(self) -> None:
        if not self.api_key:
            raise ConfigError("Invalid 'apiKey' provided. Aborting")
        if self.employee_id <= 0:
            raise ConfigError("Invalid 'employeeId' provided. Aborting")


def parse_config(text: str) -> SyncConfig:
    """Build a SyncConfig from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Unable to parse JSON config: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object")

    api_key = data.get("apiToken", "")
    employee_id = data.get("employeeId", 0)
    if not isinstance(api_key, str):
        raise ConfigError(f"'apiToken' must be a string, got {type(api_key).__name__}")
    if isinstance(employee_id, bool) or not isinstance(employee_id, int):
        raise ConfigError(f"'employeeId' must be an integer, got {employee_id!r}")

    return SyncConfig(
        api_key=api_key,
        employee_id=employee_id,
        company_domain=data.get("companyDomain", DEFAULT_COMPANY),
        base_url=data.get("baseUrl", DEFAULT_BASE_URL),
        holidays_file=Path(data.get("holidaysFile", DEFAULT_HOLIDAYS_FILE)),
    )


def _env_overrides() -> dict:
    overrides: dict = {}
    if os.environ.get(ENV_API_KEY):
        overrides["api_key"] = os.environ[ENV_API_KEY]
    raw_id = os.environ.get(ENV_EMPLOYEE_ID, "").strip()
    if raw_id:
        try:
            overrides["employee_id"] = int(raw_id)
        except ValueError as e:
            raise ConfigError(f"{ENV_EMPLOYEE_ID} must be an integer, got '{raw_id}'") from e
    return overrides


def load_config(config_path: Optional[str | Path] = None) -> SyncConfig:
    """Load config from file (if present) and apply environment overrides.

    An explicitly given path must exist; the default ``config.json`` is
    optional.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_FILE
    if path.exists():
        config = parse_config(path.read_text(encoding="utf-8"))
    elif config_path:
        raise ConfigError(f"Config file not found: {path}")
    else:
        config = SyncConfig()

    return config.with_overrides(**_env_overrides())
