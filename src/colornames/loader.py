from __future__ import annotations

import json
from pathlib import Path
from typing import List, Literal

from .color import hex_to_rgb
from .config import DEFAULT_OUTPUT_ROOT
from .csv_parser import parse_csv
from .errors import DatasetError
from .pipeline import OutputPaths
from .records import ColorEntry

PaletteFormat = Literal["json", "csv"]


def list_palettes(root: Path = DEFAULT_OUTPUT_ROOT) -> List[str]:
    """Return the sorted basenames of every published JSON palette under ``root``."""
    json_dir = OutputPaths(root).json_dir
    if not json_dir.exists():
        return []
    return sorted(path.stem for path in json_dir.glob("*.json"))


def load_palette(
    basename: str,
    root: Path = DEFAULT_OUTPUT_ROOT,
    fmt: PaletteFormat = "json",
) -> List[ColorEntry]:
    """Read one published palette back into ``ColorEntry`` objects."""
    if not basename or basename in {".", ".."} or "/" in basename or "\\" in basename:
        raise DatasetError(f"Invalid palette name {basename!r}; expected a bare basename such as 'es-spanish'.")
    outputs = OutputPaths(root)
    csv_path, json_path, _ = outputs.for_basename(basename)
    if fmt == "json":
        return _load_json_palette(json_path)
    if fmt == "csv":
        return _load_csv_palette(csv_path)
    raise ValueError(f"Unknown palette format '{fmt}'")


def _read(path: Path) -> str:
    if not path.exists():
        raise DatasetError(f"Missing palette {path}. Run `python main.py pull-names` to generate it first.")
    return path.read_text(encoding="utf-8")


def _load_json_palette(path: Path) -> List[ColorEntry]:
    try:
        payload = json.loads(_read(path))
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Malformed JSON palette {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise DatasetError(f"Expected list payload in {path}, got {type(payload).__name__}")
    entries: List[ColorEntry] = []
    for item in payload:
        if not isinstance(item, dict) or "name" not in item or "hex" not in item:
            raise DatasetError(f"Expected {{name, hex}} objects in {path}, got {item!r}")
        entries.append(_entry(str(item["name"]), str(item["hex"]), path))
    return entries


def _load_csv_palette(path: Path) -> List[ColorEntry]:
    headers, rows = parse_csv(_read(path))
    if headers != ["name", "hex"]:
        raise DatasetError(f"Expected a name,hex header in {path}, got {','.join(headers)}")
    return [_entry(row["name"], row["hex"], path) for row in rows]


def _entry(name: str, hex_code: str, path: Path) -> ColorEntry:
    try:
        hex_to_rgb(hex_code)
    except ValueError as exc:
        raise DatasetError(f"Invalid color in {path}: {exc}") from exc
    return ColorEntry(name=name, hex=hex_code)


__all__ = ["PaletteFormat", "list_palettes", "load_palette"]
