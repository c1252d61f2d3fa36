"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from holo_fn.config import clear_settings_cache


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate a test from HOLO_FN_* variables and cached settings."""
    for key in [k for k in os.environ if k.startswith("HOLO_FN_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
