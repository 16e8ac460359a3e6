"""High-level orchestration for regenerating the published color-name dataset."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .color import rgb_to_hex
from .config import DEFAULT_OUTPUT_ROOT, FULL_COLORS_INFO, LAYOUT
from .csv_parser import parse_color_records
from .grouping import group_by_language, language_basename
from .io import fetch_text, read_source, write_text_atomic
from .logging_config import get_logger
from .records import ColorEntry, ColorRecord, LanguageGroup
from .render import render_csv, render_json, render_svg

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutputPaths:
    """Resolved destinations for the three published formats under one root."""

    root: Path

    @property
    def csv_dir(self) -> Path:
        return self.root / LAYOUT["csv_dir"]

    @property
    def json_dir(self) -> Path:
        return self.root / LAYOUT["json_dir"]

    @property
    def svg_dir(self) -> Path:
        return self.root / LAYOUT["svg_dir"]

    def ensure_dirs(self) -> None:
        for directory in (self.csv_dir, self.json_dir, self.svg_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def for_basename(self, basename: str) -> Tuple[Path, Path, Path]:
        return (
            self.csv_dir / f"{basename}.csv",
            self.json_dir / f"{basename}.json",
            self.svg_dir / f"{basename}.svg",
        )


@dataclass(frozen=True)
class PullRequest:
    """Describe where to read the upstream table from and where to publish."""

    source_url: str = FULL_COLORS_INFO["url"]
    source_path: Optional[Path] = None
    output_root: Path = DEFAULT_OUTPUT_ROOT
    timeout: float = FULL_COLORS_INFO["timeout"]
    retries: int = FULL_COLORS_INFO["retries"]
    backoff: float = FULL_COLORS_INFO["backoff"]
    strict: bool = False

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}.")
        if self.retries < 0:
            raise ValueError(f"Retries cannot be negative, got {self.retries}.")

    @property
    def outputs(self) -> OutputPaths:
        return OutputPaths(self.output_root)


@dataclass(frozen=True)
class LanguageSummary:
    """What was written for one language group."""

    code: str
    basename: str
    count: int
    rtl: bool

    def describe(self) -> str:
        suffix = " [RTL]" if self.rtl else ""
        return f"  ✅ {self.basename} ({self.count} colors) - CSV, JSON, SVG{suffix}"


def to_entries(records: Iterable[ColorRecord]) -> List[ColorEntry]:
    """Convert records into published entries, converting each color exactly once."""
    entries: List[ColorEntry] = []
    for record in records:
        name = record.display_name
        if not name:
            logger.warning("color_name_missing", lang=record.language_code, rgb=record.avg_color_rgb)
        entries.append(ColorEntry(name=name, hex=rgb_to_hex(record.avg_color_rgb)))
    return entries


def write_language(group: LanguageGroup, outputs: OutputPaths) -> LanguageSummary:
    """Render and write the CSV, JSON, and SVG files for a single language group."""
    basename = language_basename(group)
    entries = to_entries(group.records)
    csv_path, json_path, svg_path = outputs.for_basename(basename)
    write_text_atomic(csv_path, render_csv(entries))
    write_text_atomic(json_path, render_json(entries))
    write_text_atomic(svg_path, render_svg(entries, group.code))
    logger.debug("language_written", code=group.code, basename=basename, count=len(entries))
    return LanguageSummary(code=group.code, basename=basename, count=len(entries), rtl=group.is_rtl)


def load_source_text(request: PullRequest) -> str:
    if request.source_path is not None:
        print(f"📂 Reading {request.source_path}")
        return read_source(request.source_path)
    print(f"📥 Fetching {request.source_url}")
    return fetch_text(
        request.source_url,
        timeout=request.timeout,
        retries=request.retries,
        backoff=request.backoff,
    )


def pull_names(request: PullRequest) -> List[LanguageSummary]:
    """
    Run the full pipeline: fetch the upstream table, group it by language,
    and publish CSV, JSON, and SVG files per language.
    """
    print("🎨 Pulling color names from uwdata/color-naming-in-different-languages...\n")
    csv_text = load_source_text(request)
    print(f"✅ Fetched {len(csv_text.encode('utf-8'))} bytes\n")

    records = parse_color_records(csv_text, strict=request.strict)
    print(f"📊 Parsed {len(records)} color entries\n")

    groups = group_by_language(records)
    print(f"🌍 Found {len(groups)} languages:\n")

    outputs = request.outputs
    outputs.ensure_dirs()

    summaries: List[LanguageSummary] = []
    for group in groups.values():
        summary = write_language(group, outputs)
        summaries.append(summary)
        print(summary.describe())

    print("\n🎉 Done!")
    print(f"  📁 CSV files: {outputs.csv_dir}")
    print(f"  📁 JSON files: {outputs.json_dir}")
    print(f"  📁 SVG files: {outputs.svg_dir}")
    return summaries


__all__ = [
    "LanguageSummary",
    "OutputPaths",
    "PullRequest",
    "load_source_text",
    "pull_names",
    "to_entries",
    "write_language",
]
