"""Shared utilities."""

from shlexer.utils.logger import LibraryLogger, configure_logging, get_logger

__all__ = ["LibraryLogger", "configure_logging", "get_logger"]
