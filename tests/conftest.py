"""Shared pytest fixtures for receiptsplit tests."""

from __future__ import annotations

import pytest

from receiptsplit.runtime.settings import load_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep a developer's receiptsplit.toml or env vars out of the tests."""
    monkeypatch.delenv("RECEIPTSPLIT_CONFIG", raising=False)
    monkeypatch.delenv("RECEIPTSPLIT_OCR_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
