"""Logging helpers built on structlog.

The library never configures structlog itself. Events from shlexer modules
are dropped until the application configures structlog, either through
:func:`configure_logging` or its own ``structlog.configure`` call.

Example:
    >>> from shlexer.utils.logger import configure_logging, get_logger
    >>> configure_logging("debug")
    >>> log = get_logger(__name__)
    >>> log.debug("buffer_grown", capacity=512)
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(
    level: str = "warning",
    json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the whole process.

    Only entry points should call this.

    Args:
        level: Minimum level name (debug, info, warning, error)
        json: Render JSON lines instead of the console format
        stream: Output stream (default: stderr)
    """
    try:
        numeric_level = LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level}") from None

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    def logger_factory(*args: Any) -> structlog.PrintLogger:
        # Resolve stderr per logger so redirected streams are honored
        return structlog.PrintLogger(file=stream if stream is not None else sys.stderr)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def _discard(*args: Any, **kwargs: Any) -> None:
    return None


class LibraryLogger:
    """Logger that stays silent while structlog is unconfigured."""

    __slots__ = ("_logger",)

    def __init__(self, logger: Any) -> None:
        self._logger = logger

    def __getattr__(self, method: str) -> Any:
        if not structlog.is_configured():
            return _discard
        return getattr(self._logger, method)


def get_logger(name: str) -> LibraryLogger:
    """Get a logger for a shlexer module, named under the ``shlexer`` namespace."""
    if not (name == "shlexer" or name.startswith("shlexer.")):
        name = f"shlexer.{name}"
    return LibraryLogger(structlog.get_logger(logger_name=name))
