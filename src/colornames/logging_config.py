"""Structured logging configuration.

Diagnostics go through structlog with snake_case event names and keyword
fields. Progress lines meant for the person running the CLI are printed
directly and do not pass through here.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Install the process-wide structlog configuration.

    Args:
        verbose: Emit debug events when True, otherwise info and above.
        json_logs: Render events as JSON lines instead of console output.
    """
    renderer: Any = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.INFO),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger bound to ``name``.
    """
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger"]
