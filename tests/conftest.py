"""Shared fixtures for Lyricstator tests."""

import os

import pytest

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Point per-user config and cache locations at a temp directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / "cache"))
    return home


@pytest.fixture
def ini_path(tmp_path):
    return str(tmp_path / "settings" / "Lyricstator.ini")
