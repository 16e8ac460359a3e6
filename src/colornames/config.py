"""Static configuration for fetching upstream color names and laying out the published dataset."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Tuple, TypedDict


class SourceConfig(TypedDict):
    url: str
    timeout: float
    retries: int
    backoff: float


class OutputLayout(TypedDict):
    csv_dir: str
    json_dir: str
    svg_dir: str


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_OUTPUT_ROOT = Path(".")

# ---------------------------------------------------------------------------
# Upstream source and output layout.

# The upstream repository publishes from its 'master' branch.
FULL_COLORS_INFO: SourceConfig = {
    "url": (
        "https://raw.githubusercontent.com/uwdata/color-naming-in-different-languages/"
        "master/model/full_colors_info.csv"
    ),
    "timeout": 60.0,
    "retries": 2,
    "backoff": 1.0,
}

LAYOUT: OutputLayout = {
    "csv_dir": "data",
    "json_dir": "json",
    "svg_dir": "svg",
}

# ---------------------------------------------------------------------------
# Upstream column names.

COL_LANG = "lang"
COL_LANG_ABV = "lang_abv"
COL_SIMPLIFIED_NAME = "simplifiedName"
COL_COMMON_NAME = "commonName"
COL_RGB = "avgColorRGBCode"
COL_FRACTION = "totalColorFraction"
COL_AVG_L = "avgL"
COL_AVG_A = "avgA"
COL_AVG_B = "avgB"

# Each group lists interchangeable columns; at least one per group must be present.
REQUIRED_COLUMN_GROUPS: Tuple[Tuple[str, ...], ...] = (
    (COL_LANG_ABV, COL_LANG),
    (COL_COMMON_NAME, COL_SIMPLIFIED_NAME),
    (COL_RGB,),
)

# ---------------------------------------------------------------------------
# Rendering.

RTL_LANGUAGES: FrozenSet[str] = frozenset({"fa", "ar", "he", "ur"})

SENTINEL_HEX = "#000000"

SVG_WIDTH = 600
SVG_ROW_HEIGHT = 70
SVG_TOP_OFFSET = 20
SVG_PADDING = 80
SVG_LTR_X = 40
SVG_RTL_X = 560

SVG_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}">
  <defs>
    <style type="text/css">
      @import url('https://rsms.me/inter/inter.css');
      text {{
        font-family: Inter, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif, "Apple Color Emoji", "Segoe UI Emoji", "Segoe UI Symbol";
        font-size: 40px;
        font-weight: 900;
      }}
    </style>
  </defs>
  <rect fill="#202124" x="0" y="0" width="{width}" height="{height}"/>
  {items}
</svg>"""


__all__ = [
    "COL_AVG_A",
    "COL_AVG_B",
    "COL_AVG_L",
    "COL_COMMON_NAME",
    "COL_FRACTION",
    "COL_LANG",
    "COL_LANG_ABV",
    "COL_RGB",
    "COL_SIMPLIFIED_NAME",
    "DEFAULT_OUTPUT_ROOT",
    "FULL_COLORS_INFO",
    "LAYOUT",
    "OutputLayout",
    "REQUIRED_COLUMN_GROUPS",
    "RTL_LANGUAGES",
    "SENTINEL_HEX",
    "SVG_TEMPLATE",
    "SourceConfig",
]
