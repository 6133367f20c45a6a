"""Shape pipeline results into the text, tables, and rows the dashboard shows."""
import html
from typing import Any, Dict, Iterable, List, Optional, Sequence

from betterme.core.models import (
    COLUMN_FIELDS,
    EMPTY_NO_USABLE_ROWS,
    DashboardResult,
    ScoredEntry,
    WarningTotals,
)
from betterme.ingestion.fetch import SheetTimeoutError
from betterme.processing.scoring import PILLAR_MAX


TABLE_COLUMNS = [
    "Date",
    "total",
    "health",
    "family",
    "wealth",
    "creation",
    "SleepHours",
    "Steps",
    "KidsMinutes",
    "DeepWorkMinutes",
]

EXPORT_HEADERS = [
    "Date",
    "total",
    "health",
    "family",
    "wealth",
    "creation",
    "lowSleep",
    "lowDeep",
    "escalation",
    "impulse",
    *COLUMN_FIELDS.keys(),
]

PILLAR_LABELS = {
    "health": "Health",
    "family": "Family",
    "wealth": "Wealth",
    "creation": "Creation",
}

WARNING_LABELS = {
    "low_sleep": "Low sleep",
    "low_deep": "Low deep work",
    "escalation": "Escalations",
    "impulse": "Impulse spends",
}

NO_DATA_MESSAGE = "No data rows found in the sheet export."
NO_USABLE_ROWS_MESSAGE = (
    "No usable rows after parsing. Confirm your sheet has Date or Timestamp values."
)


def format_number(value: Any) -> str:
    """Render whole floats without a trailing ``.0``; other floats keep every digit."""

    if value is None:
        return ""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def _formatted(row: Dict[str, Any], columns: Sequence[str]) -> Dict[str, str]:
    return {column: format_number(row.get(column, "")) for column in columns}


def recent_table_rows(entries: Sequence[ScoredEntry], limit: int = 7) -> List[Dict[str, str]]:
    """Return the last ``limit`` entries, newest first, as display strings."""

    recent = list(entries)[-limit:] if limit > 0 else []
    return [_formatted(scored.to_dict(), TABLE_COLUMNS) for scored in reversed(recent)]


def render_table_html(rows: Iterable[Dict[str, Any]], columns: Sequence[str] = TABLE_COLUMNS) -> str:
    """Build a plain HTML table with escaped cell values."""

    head = "".join(f"<th>{html.escape(column)}</th>" for column in columns)
    body = "".join(
        "<tr>"
        + "".join(f"<td>{html.escape(format_number(row.get(column, '')))}</td>" for column in columns)
        + "</tr>"
        for row in rows
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def pillar_summary_lines(scored: ScoredEntry) -> List[str]:
    return [
        f"{label} {format_number(getattr(scored.scores, attr))}/{PILLAR_MAX}"
        for attr, label in PILLAR_LABELS.items()
    ]


def warning_summary_lines(totals: WarningTotals) -> List[str]:
    return [f"{label}: {getattr(totals, attr)}" for attr, label in WARNING_LABELS.items()]


def warning_chart_data(totals: WarningTotals) -> Dict[str, int]:
    """Flag counts keyed by their display label, ready for a bar chart."""

    return {label: getattr(totals, attr) for attr, label in WARNING_LABELS.items()}


def pillar_chart_data(entries: Sequence[ScoredEntry]) -> Dict[str, List[Any]]:
    """Column-oriented pillar series keyed by label, with a ``Date`` column."""

    data: Dict[str, List[Any]] = {"Date": [scored.date for scored in entries]}
    for attr, label in PILLAR_LABELS.items():
        data[label] = [getattr(scored.scores, attr) for scored in entries]
    return data


def status_message(result: DashboardResult) -> str:
    latest = result.latest
    if latest is None:
        if result.empty_reason == EMPTY_NO_USABLE_ROWS:
            return NO_USABLE_ROWS_MESSAGE
        return NO_DATA_MESSAGE
    return f"Loaded {len(result.entries)} rows. Last entry: {latest.date}"


def fetch_error_message(exc: Exception) -> str:
    """Distinguish timeouts from other failures for the status line."""

    if isinstance(exc, SheetTimeoutError):
        return f"Error: Sheet request timed out after {exc.timeout:.0f}s."
    return f"Error: {exc}"


def average_label(value: Optional[float]) -> str:
    return "–" if value is None else format_number(value)


def entries_to_export_rows(entries: Iterable[ScoredEntry]) -> List[Dict[str, Any]]:
    """Convert scored entries into rows aligned with ``EXPORT_HEADERS``."""

    return [_formatted(scored.to_dict(), EXPORT_HEADERS) for scored in entries]
