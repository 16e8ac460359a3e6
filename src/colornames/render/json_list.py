"""Pretty-printed JSON array rendering."""

from __future__ import annotations

import json
from typing import Sequence

from ..records import ColorEntry, entries_as_dicts


def render_json(entries: Sequence[ColorEntry]) -> str:
    """Serialize entries as ``[{"name": ..., "hex": ...}, ...]`` with two-space indentation."""
    return json.dumps(entries_as_dicts(list(entries)), indent=2, ensure_ascii=False)


__all__ = ["render_json"]
