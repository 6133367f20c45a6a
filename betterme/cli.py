"""Command-line summary of the daily log, with optional export of scored rows."""
import argparse
import sys
from dataclasses import replace
from pathlib import Path

from betterme.core.config import DashboardSettings
from betterme.core.logging import configure_logging
from betterme.ingestion.fetch import SheetFetchError, fetch_csv_text, read_csv_file
from betterme.processing.pipeline import build_dashboard, export_result
from betterme.reporting.templates import (
    average_label,
    fetch_error_message,
    format_number,
    pillar_summary_lines,
    status_message,
    warning_summary_lines,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Score the BetterMe daily log")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=Path,
        help="Local CSV export of the daily log (skips the network fetch)",
    )
    source.add_argument(
        "--csv-url",
        help="CSV export URL; defaults to BETTERME_CSV_URL or the configured sheet",
    )
    parser.add_argument("--sheet-id", help="Google Sheets document ID to fetch")
    parser.add_argument("--sheet", help="Worksheet (tab) name inside the document")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the sheet export before giving up",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="CSV file to write scored rows to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "sheets", "excel"],
        default="csv",
        help="Where to forward scored rows after writing the CSV",
    )
    parser.add_argument(
        "--spreadsheet-id",
        help="Google Sheets spreadsheet ID for the sheets sink",
    )
    parser.add_argument(
        "--worksheet",
        help="Worksheet title inside the Google Sheets document for the sheets sink",
    )
    parser.add_argument(
        "--service-account",
        type=Path,
        help="Path to a Google service account JSON key used for Sheets pushes",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Excel file to write when --sink=excel",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> DashboardSettings:
    overrides = {
        "csv_url": args.csv_url,
        "sheet_id": args.sheet_id,
        "sheet_name": args.sheet,
        "fetch_timeout": args.timeout,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    if args.sheet_id and not args.csv_url:
        # An explicit sheet id wins over a configured CSV URL.
        updates["csv_url"] = None
    return replace(DashboardSettings.from_env(), **updates)


def main() -> None:
    """Entrypoint for printing the dashboard summary from the command line."""

    configure_logging()
    args = build_parser().parse_args()
    settings = _settings_from_args(args)

    try:
        if args.input:
            text = read_csv_file(args.input)
        else:
            text = fetch_csv_text(settings.resolved_csv_url(), timeout=settings.fetch_timeout)
    except SheetFetchError as exc:
        print(fetch_error_message(exc), file=sys.stderr)
        sys.exit(1)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    result = build_dashboard(
        text,
        rolling_window=settings.rolling_window,
        warning_window=settings.warning_window,
    )
    print(status_message(result))
    if result.is_empty:
        return

    latest = result.latest
    print(f"Today's score: {format_number(latest.total)}")
    print(f"7-day average: {average_label(result.latest_average)}")
    print(f"Streak: {result.streak}")
    for line in pillar_summary_lines(latest):
        print(line)
    print(f"Warnings (last {result.warnings.window}):")
    for line in warning_summary_lines(result.warnings):
        print(f"  {line}")

    if args.output:
        output_path = export_result(
            result,
            args.output,
            sink=args.sink,
            spreadsheet_id=args.spreadsheet_id,
            worksheet_title=args.worksheet,
            service_account_path=args.service_account,
            excel_path=args.excel_output,
        )
        print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
