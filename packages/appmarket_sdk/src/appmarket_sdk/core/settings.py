"""
SDK settings.

Read from APPMARKET_* environment variables (or a local .env file).
"""

import functools
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def normalize_log_level(value: Any) -> Any:
    """Upper-case a log level name; validation is left to the caller."""
    if isinstance(value, str):
        return value.strip().upper()
    return value


class SDKSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="APPMARKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO")
    log_format: Literal["simple", "detailed", "json"] = Field(default="simple")
    # Reject marketplace URLs that are not https (CLI validation)
    require_https: bool = Field(default=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return normalize_log_level(value)


@functools.lru_cache()
def get_settings() -> SDKSettings:
    """
    Get SDK settings (cached).

    Call get_settings.cache_clear() after changing the environment.
    """
    return SDKSettings()
