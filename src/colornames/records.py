"""Record types flowing through the color-name pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .config import (
    COL_AVG_A,
    COL_AVG_B,
    COL_AVG_L,
    COL_COMMON_NAME,
    COL_FRACTION,
    COL_LANG,
    COL_LANG_ABV,
    COL_RGB,
    COL_SIMPLIFIED_NAME,
    RTL_LANGUAGES,
)


def prefer_first(*candidates: str) -> str:
    """Return the first non-empty candidate, or an empty string when all are blank."""
    for value in candidates:
        if value:
            return value
    return ""


@dataclass(frozen=True)
class ColorRecord:
    """One row of the upstream color-naming table.

    The LAB averages are carried as raw strings; nothing downstream interprets them.
    """

    lang: str
    lang_abv: str
    simplified_name: str
    common_name: str
    avg_color_rgb: str
    total_color_fraction: str
    avg_l: str
    avg_a: str
    avg_b: str

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "ColorRecord":
        """Build a record from a header-keyed row; absent columns become empty strings."""
        return cls(
            lang=row.get(COL_LANG, ""),
            lang_abv=row.get(COL_LANG_ABV, ""),
            simplified_name=row.get(COL_SIMPLIFIED_NAME, ""),
            common_name=row.get(COL_COMMON_NAME, ""),
            avg_color_rgb=row.get(COL_RGB, ""),
            total_color_fraction=row.get(COL_FRACTION, ""),
            avg_l=row.get(COL_AVG_L, ""),
            avg_a=row.get(COL_AVG_A, ""),
            avg_b=row.get(COL_AVG_B, ""),
        )

    @property
    def language_code(self) -> str:
        """Short language code, falling back to the full language name."""
        return prefer_first(self.lang_abv, self.lang)

    @property
    def display_name(self) -> str:
        """Common name, falling back to the simplified name.

        Upstream guarantees one of the two is populated; an empty string is
        returned otherwise.
        """
        return prefer_first(self.common_name, self.simplified_name)


@dataclass(frozen=True)
class ColorEntry:
    """A published color term: display name plus lowercase ``#rrggbb`` hex."""

    name: str
    hex: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "hex": self.hex}


@dataclass(frozen=True)
class LanguageGroup:
    """All records sharing one language code, in input order."""

    code: str
    records: Tuple[ColorRecord, ...]

    @property
    def is_rtl(self) -> bool:
        return self.code in RTL_LANGUAGES

    def __len__(self) -> int:
        return len(self.records)


def entries_as_dicts(entries: List[ColorEntry]) -> List[Dict[str, str]]:
    return [entry.to_dict() for entry in entries]


__all__ = ["ColorEntry", "ColorRecord", "LanguageGroup", "entries_as_dicts", "prefer_first"]
