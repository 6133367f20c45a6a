"""Turn raw sheet rows into dated, typed log entries."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping

from betterme.core.models import COLUMN_FIELDS, LogEntry
from betterme.ingestion.coercion import as_num, to_iso_date

logger = logging.getLogger(__name__)

# Checked in order; the first non-empty one supplies the entry date.
DATE_SOURCE_COLUMNS = ("Date", "Timestamp", "timestamp")


def entry_date(row: Mapping[str, str]) -> str:
    """Return the canonical date for a raw row, or ``""`` when it has none."""

    for column in DATE_SOURCE_COLUMNS:
        value = row.get(column)
        if value:
            return to_iso_date(value)
    return ""


def build_entry(row: Mapping[str, str], date: str) -> LogEntry:
    """Coerce the known columns of a raw row and keep the rest as extras."""

    values: Dict[str, float] = {
        attr: as_num(row.get(column, "")) for column, attr in COLUMN_FIELDS.items()
    }
    extras = {
        column: value
        for column, value in row.items()
        if column != "Date" and column not in COLUMN_FIELDS
    }
    return LogEntry(date=date, extras=extras, **values)


def normalize_rows(rows: Iterable[Mapping[str, str]]) -> List[LogEntry]:
    """Date every row, drop the undateable ones, and sort by date."""

    entries: List[LogEntry] = []
    dropped = 0
    for row in rows:
        date = entry_date(row)
        if not date:
            dropped += 1
            continue
        entries.append(build_entry(row, date))

    if dropped:
        logger.warning("Dropped %d rows without a usable Date or Timestamp", dropped)

    entries.sort(key=lambda entry: entry.date)
    return entries
