"""Daily wellbeing score dashboard fed by a Google Sheets log export."""
from betterme.core import (
    COLUMN_FIELDS,
    DashboardResult,
    DashboardSettings,
    LogEntry,
    ScoredEntry,
    WarningTotals,
    configure_logging,
)
from betterme.ingestion import (
    SheetFetchError,
    SheetTimeoutError,
    as_num,
    fetch_csv_text,
    normalize_rows,
    parse_csv,
    to_iso_date,
)
from betterme.processing.aggregation import calc_streak, rolling_avg, warning_totals
from betterme.processing.pipeline import build_dashboard, export_result, load_dashboard
from betterme.processing.scoring import compute_scores, score_entries

__all__ = [
    "COLUMN_FIELDS",
    "DashboardResult",
    "DashboardSettings",
    "LogEntry",
    "ScoredEntry",
    "SheetFetchError",
    "SheetTimeoutError",
    "WarningTotals",
    "as_num",
    "build_dashboard",
    "calc_streak",
    "compute_scores",
    "configure_logging",
    "export_result",
    "fetch_csv_text",
    "load_dashboard",
    "normalize_rows",
    "parse_csv",
    "rolling_avg",
    "score_entries",
    "to_iso_date",
    "warning_totals",
]
