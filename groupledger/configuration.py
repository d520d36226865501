"""Mini README: Centralised configuration models and helpers for groupledger.

Structure:
    * GroupLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``GROUPLEDGER_``) controlling the log level, the interactive prompt and
    how amounts are printed. The configuration is cached so validation runs
    once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class GroupLedgerSettings(BaseSettings):
    """Runtime configuration for the groupledger console."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles.",
    )
    log_level: str = Field(
        "WARNING",
        description="Name of the logging level applied to the root logger.",
    )
    prompt: str = Field(
        "> ",
        description="Prompt displayed before each command in interactive mode.",
    )
    amount_format: str = Field(
        "%f",
        description="printf-style format used for balances and transaction amounts.",
    )
    default_recent_count: int = Field(
        5,
        description="Number of transactions shown by recent_xct when no count is given.",
        ge=0,
    )

    class Config:
        env_prefix = "GROUPLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept any casing but only known logging level names."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @validator("amount_format")
    def _check_amount_format(cls, value: str) -> str:
        """Reject formats that cannot render a single float."""

        try:
            value % 0.0
        except (TypeError, ValueError) as error:
            raise ValueError(f"Invalid amount format: {value}") from error
        return value


@lru_cache()
def get_settings() -> GroupLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GroupLedgerSettings()
