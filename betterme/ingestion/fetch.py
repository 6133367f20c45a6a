"""Retrieve the raw CSV export of the daily log."""
from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote, urlparse

import requests

from betterme.core.config import DEFAULT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)

SHEET_CSV_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet}"


class SheetFetchError(RuntimeError):
    """The CSV export could not be retrieved."""


class SheetTimeoutError(SheetFetchError):
    """The CSV export did not arrive before the timeout."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Sheet request timed out after {timeout:g}s.")
        self.timeout = timeout


def sheet_csv_url(sheet_id: str, sheet_name: str) -> str:
    """Build the Google Sheets visualization endpoint that serves a tab as CSV."""

    return SHEET_CSV_URL.format(sheet_id=sheet_id, sheet=quote(sheet_name))


def fetch_csv_text(
    url: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    session: requests.Session | None = None,
) -> str:
    """Download the CSV body, raising ``SheetTimeoutError`` or ``SheetFetchError``.

    A session passed in is left open for the caller; otherwise a fresh one is
    opened and closed around the request.
    """

    if session is None:
        with requests.Session() as client:
            return _fetch_with(client, url, timeout)
    return _fetch_with(session, url, timeout)


def _fetch_with(client: requests.Session, url: str, timeout: float) -> str:
    logger.info("Fetching daily log from %s", urlparse(url).netloc or url)
    try:
        response = client.get(
            url,
            headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
            timeout=timeout,
        )
    except requests.Timeout as exc:
        logger.error("Daily log request timed out after %ss", timeout)
        raise SheetTimeoutError(timeout) from exc
    except requests.RequestException as exc:
        logger.error("Daily log request failed: %s", exc)
        raise SheetFetchError(f"CSV fetch failed: {exc}") from exc

    if not response.ok:
        logger.error("Daily log request returned HTTP %s", response.status_code)
        raise SheetFetchError(f"CSV fetch failed: {response.status_code}")
    return response.text


def read_csv_file(path: Path) -> str:
    """Read a locally saved CSV export as UTF-8 text."""

    return path.read_text(encoding="utf-8-sig")
