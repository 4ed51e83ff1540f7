"""Tests for environment-driven settings."""
from decimal import Decimal

from splitledger.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.API_V1_STR == "/api/v1"
    assert settings.AMOUNT_TOLERANCE_CENTS == 1
    assert settings.PERCENTAGE_TOLERANCE == Decimal("0.01")
    assert settings.CHECK_INVARIANTS is True


def test_declared_settings():
    assert set(Settings.model_fields) == {
        "DEBUG",
        "PROJECT_NAME",
        "API_V1_STR",
        "PROJECT_VERSION",
        "DESCRIPTION",
        "LOG_LEVEL",
        "AMOUNT_TOLERANCE_CENTS",
        "PERCENTAGE_TOLERANCE",
        "CHECK_INVARIANTS",
    }


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AMOUNT_TOLERANCE_CENTS", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.AMOUNT_TOLERANCE_CENTS == 5
    assert settings.LOG_LEVEL == "DEBUG"
