"""Tests for the CSV, JSON, and SVG renderers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.colornames.csv_parser import parse_csv
from src.colornames.records import ColorEntry
from src.colornames.render import render_csv, render_json, render_svg
from src.colornames.render.csv_table import quote_name
from src.colornames.render.svg_card import canvas_height

ENTRIES = [
    ColorEntry(name="light blue", hex="#5b9bd5"),
    ColorEntry(name="red, dark", hex="#8b0000"),
    ColorEntry(name='so-called "gray"', hex="#808080"),
]


# ---------------------------------------------------------------------------
# CSV


def test_quote_name_only_when_needed() -> None:
    assert quote_name("plain") == "plain"
    assert quote_name("a,b") == '"a,b"'
    assert quote_name('a"b') == '"a""b"'


def test_render_csv_layout() -> None:
    text = render_csv(ENTRIES)
    assert text.split("\n") == [
        "name,hex",
        "light blue,#5b9bd5",
        '"red, dark",#8b0000',
        '"so-called ""gray""",#808080',
    ]
    assert not text.endswith("\n")


def test_render_csv_of_no_entries_is_header_only() -> None:
    assert render_csv([]) == "name,hex"


def test_csv_output_reads_back_through_parser() -> None:
    headers, rows = parse_csv(render_csv(ENTRIES))
    assert headers == ["name", "hex"]
    assert [(row["name"], row["hex"]) for row in rows] == [(e.name, e.hex) for e in ENTRIES]


# ---------------------------------------------------------------------------
# JSON


def test_render_json_pretty_prints_entries() -> None:
    text = render_json(ENTRIES[:1])
    assert text == '[\n  {\n    "name": "light blue",\n    "hex": "#5b9bd5"\n  }\n]'


def test_render_json_keeps_non_ascii() -> None:
    text = render_json([ColorEntry(name="قرمز", hex="#ff0000")])
    assert "قرمز" in text


def test_json_and_csv_agree_on_entries() -> None:
    from_json = [(item["name"], item["hex"]) for item in json.loads(render_json(ENTRIES))]
    _, rows = parse_csv(render_csv(ENTRIES))
    from_csv = [(row["name"], row["hex"]) for row in rows]
    assert from_json == from_csv


# ---------------------------------------------------------------------------
# SVG


def test_canvas_height_scales_with_count() -> None:
    assert canvas_height(0) == 80
    assert canvas_height(3) == 290


def test_render_svg_left_to_right() -> None:
    svg = render_svg(ENTRIES[:2], "en")
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 600 220">')
    assert '<rect fill="#202124" x="0" y="0" width="600" height="220"/>' in svg
    assert '<text x="40" y="90" fill="#5b9bd5">light blue</text>' in svg
    assert '<text x="40" y="160" fill="#8b0000">red, dark</text>' in svg
    assert "text-anchor" not in svg
    assert "@import url('https://rsms.me/inter/inter.css');" in svg


def test_render_svg_right_to_left() -> None:
    svg = render_svg([ColorEntry(name="آبی", hex="#0000ff")], "fa")
    assert (
        '<text x="560" y="90" fill="#0000ff" text-anchor="end" xml:lang="fa" unicode-bidi="embed">آبی</text>'
        in svg
    )


def test_render_svg_escapes_markup() -> None:
    svg = render_svg([ColorEntry(name="black & <white>", hex="#777777")], "en")
    assert "black &amp; &lt;white&gt;" in svg
    assert "<white>" not in svg
