"""Pytest configuration and fixtures."""

import pytest

from shlexer.config.loader import load_config_from_string
from shlexer.config.schema import Config
from shlexer.core.shlex import Shlex
from shlexer.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Restore the default warning-level logging after each test."""
    yield
    configure_logging()


@pytest.fixture
def shlex() -> Shlex:
    """A fresh splitter/joiner instance."""
    return Shlex()


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
buffer:
  initial_capacity: 16

text:
  encoding: utf-8
  errors: surrogateescape

logging:
  level: INFO
  json: true

repl:
  prompt: "split> "
  styles:
    double: "ansiblue"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()


@pytest.fixture
def config_args(tmp_path) -> list[str]:
    """CLI arguments pointing at an isolated configuration location."""
    return [
        "--config",
        str(tmp_path / "config.yaml"),
        "--config-dir",
        str(tmp_path / "conf.d"),
    ]
