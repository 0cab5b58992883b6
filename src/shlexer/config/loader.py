"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from shlexer.config.schema import Config
from shlexer.utils.logger import get_logger

log = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "shlexer" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "shlexer" / "conf.d"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge nested config sections; any other override value replaces the base value."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f)
    log.debug("config_file_loaded", path=str(path))
    return data if data else {}


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all YAML files from drop-in directory."""
    if not dropin_dir.exists():
        return {}

    result: dict[str, Any] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        result = deep_merge(result, load_yaml_file(yaml_file))

    return result


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from file and drop-in directory.

    Args:
        config_path: Path to main config file (default: ~/.config/shlexer/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/shlexer/conf.d/)

    Returns:
        Merged configuration object
    """
    config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)
    dropin_dir = DEFAULT_DROPIN_DIR if dropin_dir is None else Path(dropin_dir)

    merged_data = deep_merge(load_yaml_file(config_path), load_dropin_directory(dropin_dir))
    config = Config(**merged_data)
    log.info("config_loaded", path=str(config_path), dropin_dir=str(dropin_dir))
    return config


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    data = yaml.safe_load(yaml_string)
    return Config(**(data if data else {}))
