"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import betterme.core.config as config
from betterme.cli import main as cli_main

CONFIG_KEYS = [
    "BETTERME_CSV_URL",
    "BETTERME_SHEET_ID",
    "BETTERME_SHEET_NAME",
    "BETTERME_FETCH_TIMEOUT",
    "BETTERME_ROLLING_WINDOW",
    "BETTERME_WARNING_WINDOW",
    "GOOGLE_SHEETS_SPREADSHEET_ID",
    "GOOGLE_SHEETS_WORKSHEET",
    "GOOGLE_SHEETS_SERVICE_ACCOUNT",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and secrets file out of the tests."""

    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("BETTERME_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setattr(config, "_ENV_LOADED", False)


@pytest.fixture
def sample_csv_path() -> Path:
    """Return the bundled sample export of the daily log."""

    return ROOT / "sample_data" / "betterme_log.csv"


@pytest.fixture
def sample_csv_text(sample_csv_path: Path) -> str:
    return sample_csv_path.read_text(encoding="utf-8")


@pytest.fixture
def two_day_csv() -> str:
    """Minimal export with one good day followed by a rough one."""

    return (
        "Date,SleepHours,Steps,NoEscalationYN,NoImpulseYN\n"
        "2026-01-02,5.5,3000,0,0\n"
        "2026-01-01,7.5,8000,1,1\n"
    )


@pytest.fixture
def fake_service_account_file(tmp_path: Path) -> Path:
    """Create a stub Google service account file for Sheets tests."""

    path = tmp_path / "service_account.json"
    path.write_text('{"type": "service_account", "client_email": "test@example.com"}', encoding="utf-8")
    return path


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> None:
        monkeypatch.setattr(sys, "argv", ["betterme.cli", *args])
        cli_main()

    return _run
