"""Configuration loading and schema definitions."""

from shlexer.config.loader import load_config, load_config_from_string
from shlexer.config.schema import (
    BufferConfig,
    Config,
    LoggingConfig,
    ReplConfig,
    TextConfig,
)

__all__ = [
    "BufferConfig",
    "Config",
    "LoggingConfig",
    "ReplConfig",
    "TextConfig",
    "load_config",
    "load_config_from_string",
]
