"""
Configuration Management for Finance Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
There is only one external resource (the ledger file), so the settings
are small, but they are still validated once at startup.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from FINANCE_TRACKER_* environment variables
    and an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Persistence
    data_file: Path = Field(
        default=Path("transactions.json"),
        description="Path of the JSON file holding all transactions"
    )
    json_indent: Optional[int] = Field(
        default=None,
        ge=0,
        le=8,
        description="Indentation for the saved JSON (None = compact)"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for structured log output"
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON (False = human readable console)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the log level as a logging module constant."""
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
