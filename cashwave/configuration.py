"""Mini README: Centralised configuration models and helpers for Cash Wave.

Structure:
    * CashWaveSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``CASHWAVE_`` environment variables (or a
    local ``.env`` file) for the bind address, log level, and the currency the
    entry forms preselect. Validation runs once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .finance.ledger import Currency


class CashWaveSettings(BaseSettings):
    """Runtime configuration for the Cash Wave tracker."""

    model_config = SettingsConfigDict(
        env_prefix="CASHWAVE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label; \"production\" disables auto-reload when launching.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the interactive service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the interactive service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )
    default_currency: Currency = Field(
        Currency.USD,
        description="Currency preselected on the add-income and add-expense sheets.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        """Accept any casing but only names the logging module knows."""

        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> CashWaveSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return CashWaveSettings()
