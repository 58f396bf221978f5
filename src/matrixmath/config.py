"""
Configuration & Constants
=========================
This module serves as the central registry for settings and global constants.

Values that differ between deployments (database location, log level) come
from environment variables prefixed with MATRIXMATH_ (or a .env file) via
pydantic-settings, so nothing machine specific is hardcoded in the code.

Exports:
    Settings: Environment-driven settings.
    get_settings(): Cached Settings instance.
    DEFAULT_DATABASE_URL (str): URL used when MATRIXMATH_DATABASE_URL is unset.
    LOG_FORMAT, LOG_DATE_FORMAT (str): Formatter settings for `setup_logging`.
"""
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX: str = "MATRIXMATH_"
DATABASE_URL_ENV: str = f"{ENV_PREFIX}DATABASE_URL"
DEFAULT_DATABASE_URL: str = "sqlite:///matrixmath.db"

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=".env", case_sensitive=False, extra="ignore")

    # Database
    database_url: str = DEFAULT_DATABASE_URL

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Accept level names case-insensitively; reject unknown ones."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_database_url() -> str:
    """Return the SQLAlchemy URL of the matrix database."""
    return get_settings().database_url
