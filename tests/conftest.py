"""
Shared pytest fixtures for tmpnotation tests.

This module provides:
- Configuration fixtures (default, custom sizes)
- A factory for single-pass configurations
- Config file fixtures written to a temporary directory
"""
from __future__ import annotations

import pytest

from tmpnotation.config import PASS_TOGGLES, FormatConfig


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    return FormatConfig()


@pytest.fixture
def small_config():
    """Return configuration with non-default tag sizes."""
    return FormatConfig(superscript_size=50, subscript_size=55, fraction_size=80)


@pytest.fixture
def only_pass():
    """Return a factory building a config with just the named passes enabled."""

    def _make(*names: str) -> FormatConfig:
        toggles = {attr: name in names for attr, name in PASS_TOGGLES}
        return FormatConfig(**toggles)

    return _make


# ==============================================================================
# Config file fixtures
# ==============================================================================

@pytest.fixture
def nested_config_file(tmp_path):
    """Write a config.yaml using the nested sizes/passes layout."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "sizes:\n"
        "  superscript: 50\n"
        "  subscript: 40\n"
        "passes:\n"
        "  chemical: false\n",
        encoding="utf-8",
    )
    return path
