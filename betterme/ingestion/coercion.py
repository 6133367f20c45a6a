"""Best-effort coercion of sheet cells into numbers and canonical dates."""
from __future__ import annotations

import math
import re

from betterme.ingestion.csv_parser import strip_outer_quotes

_ISO_PREFIX = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}")
_US_DATE = re.compile(r"^([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})$")
# Plain decimal notation only: no digit separators, no inf/nan words.
_DECIMAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_HEX = re.compile(r"^0[xX][0-9a-fA-F]+$")


def as_num(value: object) -> float:
    """Return the numeric value of a cell, or 0 when it is blank or malformed."""

    text = strip_outer_quotes(value).strip()
    if not text:
        return 0.0
    if _HEX.match(text):
        try:
            return float(int(text, 16))
        except OverflowError:
            return 0.0
    if not _DECIMAL.match(text):
        return 0.0
    number = float(text)
    return number if math.isfinite(number) else 0.0


def to_iso_date(value: object) -> str:
    """Convert ``YYYY-MM-DD...`` or ``M/D/YYYY [time]`` into ``YYYY-MM-DD``.

    Returns an empty string when the value cannot be dated; nothing is guessed.
    """

    raw = strip_outer_quotes(value)
    if not raw:
        return ""

    if _ISO_PREFIX.match(raw):
        return raw[:10]

    match = _US_DATE.match(raw.split(" ")[0])
    if not match:
        return ""

    month, day, year = match.groups()
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
