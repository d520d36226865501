"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from groupledger.configuration import GroupLedgerSettings


def test_defaults() -> None:
    settings = GroupLedgerSettings()

    assert settings.log_level == "WARNING"
    assert settings.amount_format == "%f"
    assert settings.default_recent_count == 5


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROUPLEDGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("GROUPLEDGER_DEFAULT_RECENT_COUNT", "3")

    settings = GroupLedgerSettings()

    assert settings.log_level == "DEBUG"
    assert settings.default_recent_count == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "chatty"},
        {"amount_format": "%d %d"},
        {"default_recent_count": -1},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        GroupLedgerSettings(**overrides)
