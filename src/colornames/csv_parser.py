"""
Best-effort CSV parsing for the upstream color-naming table.

The scanner is deliberately lenient: an unbalanced quote never raises, the row
simply ends in whatever quoting state it reached.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .config import REQUIRED_COLUMN_GROUPS
from .errors import SchemaError
from .logging_config import get_logger
from .records import ColorRecord

logger = get_logger(__name__)

CSVRow = Dict[str, str]


def split_row(line: str) -> List[str]:
    """
    Split one CSV line on commas that sit outside double quotes.

    A doubled ``""`` inside a quoted field is read as one literal quote, matching
    how the CSV emitter escapes names. Every field is whitespace-trimmed, which also
    drops a trailing carriage return.
    """
    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    idx = 0
    while idx < len(line):
        char = line[idx]
        if char == '"':
            if in_quotes and line[idx + 1 : idx + 2] == '"':
                current.append('"')
                idx += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        idx += 1
    values.append("".join(current).strip())
    return values


def parse_csv(text: str) -> Tuple[List[str], List[CSVRow]]:
    """
    Parse CSV text with a header line into header names and header-keyed rows.

    Missing trailing values default to the empty string and surplus values are
    ignored. Blank lines carry no data and are skipped.
    """
    lines = text.strip().split("\n")
    headers = split_row(lines[0]) if lines and lines[0].strip() else []
    rows: List[CSVRow] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = split_row(line)
        rows.append({header: values[idx] if idx < len(values) else "" for idx, header in enumerate(headers)})
    return headers, rows


def missing_column_groups(headers: Sequence[str]) -> List[Tuple[str, ...]]:
    """Return the required column groups with no representative in ``headers``."""
    present = set(headers)
    return [group for group in REQUIRED_COLUMN_GROUPS if not present.intersection(group)]


def parse_color_records(text: str, strict: bool = False) -> List[ColorRecord]:
    """
    Parse the upstream table into ``ColorRecord`` objects, one per data line.

    When required columns are absent the affected fields come through blank; with
    ``strict`` set a ``SchemaError`` is raised instead.
    """
    headers, rows = parse_csv(text)
    missing = missing_column_groups(headers)
    if missing:
        labels = [" | ".join(group) for group in missing]
        if strict:
            raise SchemaError(f"Upstream CSV is missing required columns: {', '.join(labels)}")
        logger.warning("missing_columns", missing=labels, headers=list(headers))
    return list(records_from_rows(rows))


def records_from_rows(rows: Iterable[CSVRow]) -> Iterable[ColorRecord]:
    for row in rows:
        yield ColorRecord.from_row(row)


__all__ = [
    "CSVRow",
    "missing_column_groups",
    "parse_color_records",
    "parse_csv",
    "records_from_rows",
    "split_row",
]
