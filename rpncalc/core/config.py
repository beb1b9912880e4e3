"""
Application configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="RPNCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "rpncalc"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_FILE: Optional[str] = None

    # Self-test harness
    SELFTEST_SENTINEL: str = "run_tests"
    SELFTEST_TOLERANCE: float = 1e-6
    SELFTEST_CASES: Optional[str] = None  # YAML file replacing the bundled table


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
