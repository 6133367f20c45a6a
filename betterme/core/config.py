"""Configuration lookup for the dashboard: Streamlit secrets, env vars, env file."""
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path("secrets/dashboard.env")
DEFAULT_SHEET_NAME = "BetterMe_Log"
DEFAULT_FETCH_TIMEOUT = 15.0
DEFAULT_ROLLING_WINDOW = 7
DEFAULT_WARNING_WINDOW = 14
_ENV_LOADED = False


def load_env_file(path: Path) -> None:
    """Load environment variables from a file if it exists."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)


def _ensure_env() -> None:
    """Populate dashboard env vars from secrets/dashboard.env once per process."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    load_env_file(Path(os.getenv("BETTERME_ENV_FILE", DEFAULT_ENV_FILE)))


def get_config_value(key: str, default: str = "") -> str:
    """Get configuration value from Streamlit secrets or environment variables.

    Checks Streamlit secrets first (for cloud deployment), then falls back
    to environment variables (for local development).
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    _ensure_env()
    return os.getenv(key, default)


def _number(key: str, default: float) -> float:
    raw = get_config_value(key, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", key, raw, default)
        return default


def _window(key: str, default: int) -> int:
    """Read a window size; anything that is not a finite count of at least 1 is ignored."""

    value = _number(key, default)
    if not math.isfinite(value) or value < 1:
        logger.warning("Ignoring %s=%r, window sizes must be at least 1; using %s", key, value, default)
        return default
    return int(value)


@dataclass(frozen=True)
class DashboardSettings:
    """Where to read the daily log from and how to summarize it."""

    csv_url: Optional[str] = None
    sheet_id: Optional[str] = None
    sheet_name: str = DEFAULT_SHEET_NAME
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    rolling_window: int = DEFAULT_ROLLING_WINDOW
    warning_window: int = DEFAULT_WARNING_WINDOW

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        return cls(
            csv_url=get_config_value("BETTERME_CSV_URL") or None,
            sheet_id=get_config_value("BETTERME_SHEET_ID") or None,
            sheet_name=get_config_value("BETTERME_SHEET_NAME") or DEFAULT_SHEET_NAME,
            fetch_timeout=_number("BETTERME_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
            rolling_window=_window("BETTERME_ROLLING_WINDOW", DEFAULT_ROLLING_WINDOW),
            warning_window=_window("BETTERME_WARNING_WINDOW", DEFAULT_WARNING_WINDOW),
        )

    def resolved_csv_url(self) -> str:
        """Return the CSV export URL, building it from the sheet id when needed."""

        if self.csv_url:
            return self.csv_url
        if not self.sheet_id:
            raise ValueError(
                "No data source configured. Set BETTERME_CSV_URL or BETTERME_SHEET_ID "
                f"(environment, Streamlit secrets, or {DEFAULT_ENV_FILE})."
            )
        from betterme.ingestion.fetch import sheet_csv_url

        return sheet_csv_url(self.sheet_id, self.sheet_name)
