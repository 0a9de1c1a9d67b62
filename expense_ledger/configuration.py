"""Mini README: Centralised configuration for the expense ledger.

Structure:
    * LedgerSettings - pydantic-settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to find the ledger file, the currency symbol used
    in reports, and the logging level. Every field can be overridden with an
    ``EXPENSE_LEDGER_`` prefixed environment variable or a ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    ledger_file: Path = Field(
        Path("expenses.json"),
        description="JSON file holding every recorded expense between invocations.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in console reports.",
    )
    log_level: str = Field(
        "ERROR",
        description="Root logging level for diagnostic output on stderr.",
    )
    backup_corrupt_files: bool = Field(
        True,
        description=(
            "Copy an unreadable ledger file aside before continuing with an"
            " empty ledger, so the next save cannot overwrite the only copy."
        ),
    )

    @field_validator("ledger_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand ``~`` so users can point at files in their home directory."""

        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        """Accept only the standard logging level names."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
