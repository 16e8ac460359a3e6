"""Helpers for fetching the upstream table and writing published files."""

from __future__ import annotations

import os
import tempfile
import time
from pathlib import Path

import requests

from .config import FULL_COLORS_INFO
from .errors import FetchError
from .logging_config import get_logger

logger = get_logger(__name__)

PUBLISHED_FILE_MODE = 0o644


def fetch_text(
    url: str,
    timeout: float = FULL_COLORS_INFO["timeout"],
    retries: int = FULL_COLORS_INFO["retries"],
    backoff: float = FULL_COLORS_INFO["backoff"],
) -> str:
    """
    Download a UTF-8 text resource, retrying failed attempts.

    Every attempt is bounded by ``timeout``. A non-success status and any
    ``requests`` exception both count as a failed attempt. Once ``retries + 1``
    attempts have failed a ``FetchError`` is raised.
    """
    attempts = max(0, retries) + 1
    last_error = "no attempt made"
    for attempt in range(1, attempts + 1):
        try:
            response = requests.get(url, timeout=timeout)
        except requests.RequestException as exc:
            last_error = f"{type(exc).__name__}: {exc}"
        else:
            if response.ok:
                response.encoding = "utf-8"
                return response.text
            last_error = f"{response.status_code} {response.reason}"
        logger.warning("fetch_attempt_failed", url=url, attempt=attempt, attempts=attempts, error=last_error)
        if attempt < attempts and backoff > 0:
            time.sleep(backoff * attempt)
    raise FetchError(f"Failed to fetch data from {url}: {last_error}")


def read_source(path: Path) -> str:
    """Read a local copy of the upstream table."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FetchError(f"Failed to read source CSV {path}: {exc}") from exc


def write_text_atomic(dest: Path, content: str) -> None:
    """Write UTF-8 text to ``dest`` via a temporary file in the same directory."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", newline="", delete=False, dir=dest.parent, suffix=".tmp"
    ) as tmp:
        try:
            tmp.write(content)
        except BaseException:
            tmp.close()
            os.unlink(tmp.name)
            raise
    try:
        # NamedTemporaryFile creates files as 0600.
        os.chmod(tmp.name, PUBLISHED_FILE_MODE)
        os.replace(tmp.name, dest)
    except BaseException:
        os.unlink(tmp.name)
        raise


__all__ = ["PUBLISHED_FILE_MODE", "fetch_text", "read_source", "write_text_atomic"]
