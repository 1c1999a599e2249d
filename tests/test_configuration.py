"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cashwave.configuration import CashWaveSettings
from cashwave.finance import Currency


def test_environment_overrides(monkeypatch) -> None:
    """CASHWAVE_ variables override defaults and normalise the log level."""

    monkeypatch.setenv("CASHWAVE_INTERFACE_PORT", "9100")
    monkeypatch.setenv("CASHWAVE_LOG_LEVEL", "debug")
    monkeypatch.setenv("CASHWAVE_DEFAULT_CURRENCY", "EUR")

    settings = CashWaveSettings()

    assert settings.interface_port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.default_currency is Currency.EUR


def test_invalid_values_are_rejected(monkeypatch) -> None:
    """Unknown log levels and out-of-range ports fail validation."""

    monkeypatch.setenv("CASHWAVE_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        CashWaveSettings()

    monkeypatch.delenv("CASHWAVE_LOG_LEVEL")
    monkeypatch.setenv("CASHWAVE_INTERFACE_PORT", "70000")
    with pytest.raises(ValidationError):
        CashWaveSettings()


def test_production_environment_flag(monkeypatch) -> None:
    """Only the production label switches the launcher into production mode."""

    monkeypatch.delenv("CASHWAVE_ENVIRONMENT", raising=False)
    assert not CashWaveSettings().is_production

    monkeypatch.setenv("CASHWAVE_ENVIRONMENT", " Production ")
    assert CashWaveSettings().is_production
