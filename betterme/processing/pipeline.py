"""Pipeline orchestration: raw CSV text in, one dashboard result out."""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from betterme.core.config import (
    DEFAULT_ROLLING_WINDOW,
    DEFAULT_WARNING_WINDOW,
    DashboardSettings,
    get_config_value,
)
from betterme.core.models import EMPTY_NO_DATA, EMPTY_NO_USABLE_ROWS, DashboardResult
from betterme.ingestion.csv_parser import parse_csv
from betterme.ingestion.fetch import fetch_csv_text
from betterme.ingestion.normalize import normalize_rows
from betterme.processing.aggregation import calc_streak, rolling_avg, warning_totals
from betterme.processing.scoring import score_entries
from betterme.reporting.sinks import push_to_google_sheets, write_csv, write_excel
from betterme.reporting.templates import EXPORT_HEADERS, entries_to_export_rows

DEFAULT_SERVICE_ACCOUNT_PATHS = [
    Path("secrets/service_account.json"),
    Path("credentials/service_account.json"),
]


logger = logging.getLogger(__name__)


def build_dashboard(
    text: str,
    rolling_window: int = DEFAULT_ROLLING_WINDOW,
    warning_window: int = DEFAULT_WARNING_WINDOW,
) -> DashboardResult:
    """Parse, normalize, score, and aggregate one CSV export.

    An export without data rows, or whose rows all lack a usable date, yields
    an empty result with ``empty_reason`` set instead of raising.
    """

    table = parse_csv(text)
    logger.info("Parsed %d rows across %d columns", len(table.rows), len(table.headers))
    if not table.rows:
        logger.warning("Daily log export contained no data rows")
        return DashboardResult(empty_reason=EMPTY_NO_DATA)

    entries = normalize_rows(table.rows)
    dropped = len(table.rows) - len(entries)
    if not entries:
        logger.warning("None of the %d rows had a usable date", len(table.rows))
        return DashboardResult(
            row_count=len(table.rows),
            dropped_count=dropped,
            empty_reason=EMPTY_NO_USABLE_ROWS,
        )

    scored = score_entries(entries)
    totals = [entry.total for entry in scored]
    result = DashboardResult(
        entries=tuple(scored),
        rolling_average=tuple(rolling_avg(totals, rolling_window)),
        streak=calc_streak([entry.date for entry in scored]),
        warnings=warning_totals(scored, warning_window),
        row_count=len(table.rows),
        dropped_count=dropped,
    )
    logger.info(
        "Scored %d entries through %s (streak %d)",
        len(scored),
        result.latest.date,
        result.streak,
    )
    return result


def load_dashboard(settings: DashboardSettings) -> DashboardResult:
    """Fetch the configured sheet and run the pipeline over it.

    Fetch failures propagate as ``SheetFetchError``/``SheetTimeoutError``.
    """

    text = fetch_csv_text(settings.resolved_csv_url(), timeout=settings.fetch_timeout)
    return build_dashboard(
        text,
        rolling_window=settings.rolling_window,
        warning_window=settings.warning_window,
    )


def _default_service_account_path() -> Optional[Path]:
    for candidate in DEFAULT_SERVICE_ACCOUNT_PATHS:
        if candidate.exists():
            return candidate
    return None


def _resolve_sheets_target(
    spreadsheet_id: Optional[str],
    worksheet_title: Optional[str],
    explicit_account_path: Optional[Path],
) -> Dict[str, Any]:
    spreadsheet_id = spreadsheet_id or get_config_value("GOOGLE_SHEETS_SPREADSHEET_ID")
    if not spreadsheet_id:
        raise ValueError("spreadsheet_id is required when sink='sheets'")

    account_env = get_config_value("GOOGLE_SHEETS_SERVICE_ACCOUNT")
    account_path = (
        explicit_account_path
        or (Path(account_env) if account_env else None)
        or _default_service_account_path()
    )
    if not account_path:
        raise ValueError(
            "Provide --service-account pointing to your Google credentials or place a file at "
            f"{DEFAULT_SERVICE_ACCOUNT_PATHS[0]}"
        )

    return {
        "spreadsheet_id": spreadsheet_id,
        "worksheet_title": worksheet_title or get_config_value("GOOGLE_SHEETS_WORKSHEET", "Scores"),
        "service_account_path": account_path,
    }


def export_result(
    result: DashboardResult,
    output_path: Path,
    sink: str = "csv",
    spreadsheet_id: str | None = None,
    worksheet_title: str | None = None,
    service_account_path: Path | None = None,
    excel_path: Path | None = None,
) -> Path:
    """Write the scored entries to CSV and optionally forward them to Excel or Sheets."""

    rows = entries_to_export_rows(result.entries)
    write_csv(rows, output_path, EXPORT_HEADERS)
    logger.info("Wrote %d scored rows to %s", len(rows), output_path)

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    elif sink == "sheets":
        target = _resolve_sheets_target(spreadsheet_id, worksheet_title, service_account_path)
        _push_rows_to_sheets(rows, target)
    return output_path


def _push_rows_to_sheets(rows: Iterable[Dict[str, Any]], target: Dict[str, Any]) -> None:
    rows = list(rows)
    push_to_google_sheets(
        rows,
        spreadsheet_id=target["spreadsheet_id"],
        worksheet_title=target["worksheet_title"],
        service_account_path=target["service_account_path"],
    )
    logger.info(
        "Pushed %d rows to Google Sheets document %s (worksheet %s)",
        len(rows),
        target["spreadsheet_id"],
        target["worksheet_title"],
    )
