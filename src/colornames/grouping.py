"""Partition color records by language and derive per-language file stems."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

from .records import ColorRecord, LanguageGroup

_WHITESPACE = re.compile(r"\s+")


def group_by_language(records: Iterable[ColorRecord]) -> Dict[str, LanguageGroup]:
    """
    Group records by language code.

    Both the groups and the records inside each group keep first-seen input order.
    """
    buckets: Dict[str, List[ColorRecord]] = {}
    for record in records:
        buckets.setdefault(record.language_code, []).append(record)
    return {code: LanguageGroup(code=code, records=tuple(items)) for code, items in buckets.items()}


def language_basename(group: LanguageGroup) -> str:
    """
    Build the ``{code}-{english-name}`` stem shared by a group's output files.

    Only the first record is consulted: ``Persian (Farsi)`` with code ``fa``
    becomes ``fa-persian``.
    """
    full_name = group.records[0].lang if group.records and group.records[0].lang else group.code
    english_name = full_name.split("(")[0].strip().lower()
    return f"{group.code}-{_WHITESPACE.sub('-', english_name)}"


__all__ = ["group_by_language", "language_basename"]
