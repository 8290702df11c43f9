"""Configuration for OpenIBAN.

Pydantic-based settings, overridable through environment variables or a
``.env`` file.

Environment Variables:
- OPENIBAN_LOG_LEVEL: Logging level (default: WARNING)
- OPENIBAN_JSON_LOGS: Emit JSON log lines (default: false)
- OPENIBAN_OUTPUT_FORMAT: CLI output, "rich" or "json" (default: rich)
- OPENIBAN_MASK_IBANS_IN_LOGS: Mask account numbers in logs (default: true)
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """OpenIBAN settings.

    Example:
        >>> settings = Settings()
        >>> settings.log_level
        'WARNING'
        >>>
        >>> # Override via environment
        >>> os.environ["OPENIBAN_OUTPUT_FORMAT"] = "json"
        >>> Settings().output_format
        'json'
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output",
    )

    output_format: Literal["rich", "json"] = Field(
        default="rich",
        description="Default CLI output format",
    )

    mask_ibans_in_logs: bool = Field(
        default=True,
        description="Mask IBAN values in log entries",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["Settings", "get_settings", "reload_settings"]
