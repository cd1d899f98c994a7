"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from safeguard.config import runtime
from safeguard.settings import LOG_SUPPRESSED_ENV, reset_guard_settings


@pytest.fixture(autouse=True)
def isolated_guard_settings(monkeypatch, tmp_path):
    """Keep host .env files and cached settings out of every test."""
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (tmp_path / ".env",))
    monkeypatch.delenv(LOG_SUPPRESSED_ENV, raising=False)
    reset_guard_settings()
    yield
    reset_guard_settings()
