"""Ingestion package: fetch, parse, coerce, and normalize the daily log."""
from betterme.ingestion.coercion import as_num, to_iso_date
from betterme.ingestion.csv_parser import ParsedTable, parse_csv, split_csv_line, strip_outer_quotes
from betterme.ingestion.fetch import (
    SheetFetchError,
    SheetTimeoutError,
    fetch_csv_text,
    read_csv_file,
    sheet_csv_url,
)
from betterme.ingestion.normalize import build_entry, entry_date, normalize_rows

__all__ = [
    "ParsedTable",
    "SheetFetchError",
    "SheetTimeoutError",
    "as_num",
    "build_entry",
    "entry_date",
    "fetch_csv_text",
    "normalize_rows",
    "parse_csv",
    "read_csv_file",
    "sheet_csv_url",
    "split_csv_line",
    "strip_outer_quotes",
    "to_iso_date",
]
