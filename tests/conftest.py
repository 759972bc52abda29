"""Pytest configuration for preflight tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an existing fake home directory and point ``$HOME`` at it."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    for key in ("PREFLIGHT_CONFIG", "PREFLIGHT_RESOURCES_DIR", "PREFLIGHT_LOG_DIR", "PREFLIGHT_TEMP_DIR"):
        monkeypatch.delenv(key, raising=False)
    return path
