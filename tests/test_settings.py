"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from finance_tracker.config import LedgerSettings, get_settings


class TestLedgerSettings:
    """Tests for LedgerSettings."""

    def test_defaults(self, monkeypatch):
        """Test the default configuration."""
        for name in ("DATA_FILE", "LOG_LEVEL", "JSON_LOGS", "JSON_INDENT"):
            monkeypatch.delenv(f"FINANCE_TRACKER_{name}", raising=False)
        settings = LedgerSettings(_env_file=None)
        assert settings.data_file == Path("transactions.json")
        assert settings.log_level == "WARNING"
        assert settings.json_logs is True
        assert settings.json_indent is None

    def test_reads_environment(self, monkeypatch):
        """Test FINANCE_TRACKER_* variables."""
        monkeypatch.setenv("FINANCE_TRACKER_DATA_FILE", "/tmp/ledger.json")
        monkeypatch.setenv("FINANCE_TRACKER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FINANCE_TRACKER_JSON_LOGS", "false")
        settings = LedgerSettings(_env_file=None)
        assert settings.data_file == Path("/tmp/ledger.json")
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG
        assert settings.json_logs is False

    def test_rejects_unknown_log_level(self):
        """Test log level validation."""
        with pytest.raises(ValidationError):
            LedgerSettings(_env_file=None, log_level="LOUD")

    def test_get_settings_is_cached(self):
        """Test that settings are loaded once until the cache is cleared."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
