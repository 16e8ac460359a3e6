"""RGB string to hex conversion for upstream color averages."""

from __future__ import annotations

import re
from typing import Tuple

from .config import SENTINEL_HEX
from .logging_config import get_logger

logger = get_logger(__name__)

_RGB_PATTERN = re.compile(r"rgb\s*\(\s*(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*\)")
_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6})")


def clamp_channel(value: int) -> int:
    """Clamp a channel value into ``[0, 255]``."""
    return max(0, min(255, value))


def rgb_to_hex(rgb: str) -> str:
    """
    Convert ``rgb(r, g, b)`` into a lowercase ``#rrggbb`` string.

    Out-of-range channels are clamped rather than rejected, so ``rgb(-10, 300, 128)``
    becomes ``#00ff80``. A value that does not match the pattern logs a warning and
    yields ``#000000`` so a single bad record cannot abort the run.
    """
    match = _RGB_PATTERN.search(rgb)
    if match is None:
        logger.warning("rgb_parse_failed", value=rgb, fallback=SENTINEL_HEX)
        return SENTINEL_HEX
    channels = (clamp_channel(int(group, 10)) for group in match.groups())
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Parse ``#rrggbb`` back into integer channels."""
    match = _HEX_PATTERN.fullmatch(hex_code.strip())
    if match is None:
        raise ValueError(f"Expected a #rrggbb hex color, got {hex_code!r}")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


__all__ = ["clamp_channel", "hex_to_rgb", "rgb_to_hex"]
