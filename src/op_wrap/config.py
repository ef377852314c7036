"""Runtime configuration for op-wrap.

Settings are read from environment variables prefixed ``OP_WRAP_``
(and an optional ``.env`` file in the working directory) through
pydantic-settings, so the CLI and the infrastructure layer share one
typed contract.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OpSettings(BaseSettings):
    """Configuration consumed by the ``op`` runner and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="OP_WRAP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    op_path: str = Field(
        default="op",
        min_length=1,
        description="Name or path of the 1Password CLI binary.",
    )
    account: str | None = Field(
        default=None,
        description="Account shorthand, sign-in address or ID passed as --account.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the op_wrap loggers.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("account")
    @classmethod
    def _blank_account_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> OpSettings:
    """Return the process-wide settings instance."""
    return OpSettings()
