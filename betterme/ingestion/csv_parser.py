"""Parser for the comma-separated export of the daily log sheet."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParsedTable:
    """Header names and one header-keyed mapping per data line."""

    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)


def strip_outer_quotes(value: object) -> str:
    """Trim a value and drop one pair of wrapping double quotes if present."""

    text = str(value if value is not None else "").strip()
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def split_csv_line(line: str) -> List[str]:
    """Split one line on commas, honouring double-quoted fields.

    Inside quotes a comma is literal and ``""`` stands for a single quote
    character. Unquoted text is kept as-is (no trimming).
    """

    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    index = 0

    while index < len(line):
        char = line[index]
        if char == '"':
            if in_quotes and line[index + 1:index + 2] == '"':
                current.append('"')
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1

    fields.append("".join(current))
    return fields


def _clean(value: str) -> str:
    return strip_outer_quotes(value).strip()


def parse_csv(text: str | None) -> ParsedTable:
    """Turn raw CSV text into headers and header-keyed rows.

    Blank input produces an empty table rather than an error. Short rows are
    padded with empty strings and surplus fields are ignored.
    """

    lines = [line for line in re.split(r"\r?\n", (text or "").strip()) if line]
    if not lines:
        return ParsedTable()

    headers = [_clean(header) for header in split_csv_line(lines[0])]
    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        cells = [_clean(cell) for cell in split_csv_line(line)]
        rows.append(
            {
                header: cells[index] if index < len(cells) else ""
                for index, header in enumerate(headers)
            }
        )

    return ParsedTable(headers=headers, rows=rows)
