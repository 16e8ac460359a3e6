"""Renderers that turn a language's color entries into published file payloads."""

from __future__ import annotations

from .csv_table import render_csv
from .json_list import render_json
from .svg_card import render_svg

__all__ = [
    "render_csv",
    "render_json",
    "render_svg",
]
