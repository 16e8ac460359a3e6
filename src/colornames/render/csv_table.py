"""Two-column ``name,hex`` CSV rendering."""

from __future__ import annotations

from typing import Sequence

from ..records import ColorEntry

CSV_HEADER = "name,hex"


def quote_name(name: str) -> str:
    """Quote a name, doubling inner quotes, only when it holds a comma or a quote."""
    if "," in name or '"' in name:
        return '"' + name.replace('"', '""') + '"'
    return name


def render_csv(entries: Sequence[ColorEntry]) -> str:
    lines = [CSV_HEADER]
    lines.extend(f"{quote_name(entry.name)},{entry.hex}" for entry in entries)
    return "\n".join(lines)


__all__ = ["CSV_HEADER", "quote_name", "render_csv"]
