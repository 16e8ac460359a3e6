"""Exception hierarchy for the color-name pipeline."""

from __future__ import annotations


class ColorNamesError(Exception):
    """Base exception for all pipeline failures."""


class FetchError(ColorNamesError):
    """Raised when the upstream CSV cannot be retrieved."""


class SchemaError(ColorNamesError):
    """Raised when the upstream CSV lacks required columns."""


class DatasetError(ColorNamesError):
    """Raised when a published palette is missing or malformed."""


__all__ = ["ColorNamesError", "DatasetError", "FetchError", "SchemaError"]
