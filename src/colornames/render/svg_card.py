"""
SVG swatch card: one colored text label per color term on a dark background.
"""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from ..config import (
    RTL_LANGUAGES,
    SVG_LTR_X,
    SVG_PADDING,
    SVG_ROW_HEIGHT,
    SVG_RTL_X,
    SVG_TEMPLATE,
    SVG_TOP_OFFSET,
    SVG_WIDTH,
)
from ..records import ColorEntry


def canvas_height(count: int) -> int:
    return count * SVG_ROW_HEIGHT + SVG_PADDING


def _text_element(entry: ColorEntry, index: int, lang_code: str, rtl: bool) -> str:
    y = SVG_TOP_OFFSET + (index + 1) * SVG_ROW_HEIGHT
    label = escape(entry.name)
    if rtl:
        return (
            f'<text x="{SVG_RTL_X}" y="{y}" fill="{entry.hex}" text-anchor="end" '
            f'xml:lang="{escape(lang_code)}" unicode-bidi="embed">{label}</text>'
        )
    return f'<text x="{SVG_LTR_X}" y="{y}" fill="{entry.hex}">{label}</text>'


def render_svg(entries: Sequence[ColorEntry], lang_code: str) -> str:
    """
    Render entries into a self-contained SVG document.

    Right-to-left languages are right-anchored with bidi embedding and a language
    tag; all others are left-anchored.
    """
    rtl = lang_code in RTL_LANGUAGES
    items = "\n  ".join(_text_element(entry, idx, lang_code, rtl) for idx, entry in enumerate(entries))
    return SVG_TEMPLATE.format(width=SVG_WIDTH, height=canvas_height(len(entries)), items=items)


__all__ = ["canvas_height", "render_svg"]
