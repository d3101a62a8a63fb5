"""Unit tests for environment-driven application settings."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from proofing.core.config import AppSettings
from proofing.core.config import get_app_settings
from proofing.core.errors import ErrorResponseOptions


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults_to_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROOFING_ENV", raising=False)
    monkeypatch.delenv("PROOFING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PROOFING_LOG_OPERATIONAL_ERRORS", raising=False)

    settings = get_app_settings()

    assert settings.environment == "production"
    assert settings.log_level == "INFO"
    assert settings.error_response_options() == ErrorResponseOptions()


def test_development_enables_details(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROOFING_ENV", "Development")
    monkeypatch.delenv("PROOFING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PROOFING_LOG_OPERATIONAL_ERRORS", raising=False)

    settings = get_app_settings()

    assert settings.is_development is True
    assert settings.log_level == "DEBUG"
    assert settings.error_response_options() == ErrorResponseOptions(
        include_details=True,
        log_operational_errors=True,
    )


def test_operational_logging_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROOFING_ENV", "production")
    monkeypatch.setenv("PROOFING_LOG_OPERATIONAL_ERRORS", "yes")

    options = get_app_settings().error_response_options()

    assert options.include_details is False
    assert options.log_operational_errors is True


def test_invalid_boolean_flag_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROOFING_LOG_OPERATIONAL_ERRORS", "sometimes")

    with pytest.raises(ValueError):
        get_app_settings()


def test_safe_for_logging_lists_settings() -> None:
    settings = AppSettings(environment="test", log_level="WARNING")

    assert settings.safe_for_logging() == {
        "environment": "test",
        "log_level": "WARNING",
        "log_operational_errors": None,
    }
