"""Tests for guard settings and suppressed-failure diagnostics."""

from __future__ import annotations

import logging

import pytest

from safeguard import GuardSettings, get_guard_settings, reset_guard_settings, safe, safe_then
from safeguard.config import runtime
from safeguard.settings import LOG_SUPPRESSED_ENV

SUPPRESSION_LOGGER = "safeguard.suppression_log"


def _fail():
    raise KeyError("missing")


def test_defaults_when_unset():
    assert get_guard_settings() == GuardSettings(log_suppressed=False)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "yes")
    assert get_guard_settings().log_suppressed is True


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text(f"{LOG_SUPPRESSED_ENV}=true\n")
    reset_guard_settings()
    assert get_guard_settings().log_suppressed is True


def test_settings_are_cached(monkeypatch):
    first = get_guard_settings()
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "1")
    assert get_guard_settings() is first

    reset_guard_settings()
    assert get_guard_settings().log_suppressed is True


def test_invalid_value_warns_and_falls_back(monkeypatch, caplog):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "sometimes")
    with caplog.at_level(logging.WARNING, logger="safeguard.settings"):
        settings = get_guard_settings()

    assert settings == GuardSettings()
    assert any("Ignoring invalid guard configuration" in r.message for r in caplog.records)


def test_invalid_value_does_not_break_guard(monkeypatch):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "sometimes")
    assert safe(_fail, "fallback") == "fallback"


def test_no_record_by_default(caplog):
    with caplog.at_level(logging.DEBUG, logger=SUPPRESSION_LOGGER):
        assert safe(_fail, 1) == 1

    assert not [r for r in caplog.records if r.name == SUPPRESSION_LOGGER]


def test_records_suppressed_sync_failure(monkeypatch, caplog):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "1")
    with caplog.at_level(logging.DEBUG, logger=SUPPRESSION_LOGGER):
        assert safe(_fail, 1) == 1

    records = [r for r in caplog.records if r.name == SUPPRESSION_LOGGER]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "safe suppressed KeyError" in records[0].getMessage()


def test_none_result_is_not_recorded(monkeypatch, caplog):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "1")
    with caplog.at_level(logging.DEBUG, logger=SUPPRESSION_LOGGER):
        assert safe(lambda: None, 1) == 1

    assert not [r for r in caplog.records if r.name == SUPPRESSION_LOGGER]


@pytest.mark.asyncio
async def test_records_suppressed_async_failure(monkeypatch, caplog):
    monkeypatch.setenv(LOG_SUPPRESSED_ENV, "on")

    async def fail():
        raise ConnectionError("refused")

    with caplog.at_level(logging.DEBUG, logger=SUPPRESSION_LOGGER):
        assert await safe_then(fail, "offline") == "offline"

    messages = [r.getMessage() for r in caplog.records if r.name == SUPPRESSION_LOGGER]
    assert messages == ["safe_then suppressed ConnectionError: refused; returning default"]


def test_reset_clears_dotenv_cache(tmp_path):
    runtime._load_default_values()
    assert runtime._DEFAULT_VALUES == {}
    (tmp_path / ".env").write_text(f"{LOG_SUPPRESSED_ENV}=1\n")

    reset_guard_settings()
    assert runtime._DEFAULT_VALUES is None
    assert get_guard_settings().log_suppressed is True


def _write_undecodable_dotenv(tmp_path):
    (tmp_path / ".env").write_bytes(b"\xff\xfeGARBAGE=\xff\n")


def _make_dotenv_directory(tmp_path):
    (tmp_path / ".env").mkdir()


@pytest.mark.parametrize("break_dotenv", [_write_undecodable_dotenv, _make_dotenv_directory])
def test_broken_dotenv_does_not_break_safe(tmp_path, caplog, break_dotenv):
    break_dotenv(tmp_path)

    with caplog.at_level(logging.WARNING, logger="safeguard.settings"):
        assert safe(_fail, "fallback") == "fallback"

    assert any("Ignoring invalid guard configuration" in r.message for r in caplog.records)
    # Fallback is cached; later failures do not re-read the broken file
    assert get_guard_settings() == GuardSettings()
    assert safe(_fail, "again") == "again"


@pytest.mark.asyncio
@pytest.mark.parametrize("break_dotenv", [_write_undecodable_dotenv, _make_dotenv_directory])
async def test_broken_dotenv_does_not_break_safe_then(tmp_path, break_dotenv):
    break_dotenv(tmp_path)

    async def fail():
        raise ConnectionError("refused")

    assert await safe_then(fail, "fallback") == "fallback"
    assert await safe_then(lambda: None, "absent") == "absent"
