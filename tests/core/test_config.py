"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from rpncalc.core.config import Settings, get_settings


def test_defaults():
    """Test the values used when nothing is configured"""
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT == "text"
    assert settings.LOG_FILE is None
    assert settings.SELFTEST_SENTINEL == "run_tests"
    assert settings.SELFTEST_TOLERANCE == 1e-6
    assert settings.SELFTEST_CASES is None


def test_environment_overrides(monkeypatch):
    """Test RPNCALC_ prefixed variables"""
    monkeypatch.setenv("RPNCALC_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RPNCALC_SELFTEST_TOLERANCE", "0.01")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SELFTEST_TOLERANCE == 0.01


def test_invalid_log_format(monkeypatch):
    """Test that only json and text formats are accepted"""
    monkeypatch.setenv("RPNCALC_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(monkeypatch):
    """Test that get_settings returns one instance until the cache is cleared"""
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("RPNCALC_SELFTEST_SENTINEL", "selftest")
    assert get_settings().SELFTEST_SENTINEL == "run_tests"
    get_settings.cache_clear()
    assert get_settings().SELFTEST_SENTINEL == "selftest"
