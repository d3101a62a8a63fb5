"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

from proofing.core.errors.handlers import ErrorResponseOptions

ENV_DEVELOPMENT = "development"
ENV_TEST = "test"
ENV_PRODUCTION = "production"

DEFAULT_ENVIRONMENT = ENV_PRODUCTION
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_DEVELOPMENT_LOG_LEVEL = "DEBUG"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings derived from the deployment environment."""

    environment: str
    log_level: str
    log_operational_errors: bool | None = None

    @property
    def is_development(self) -> bool:
        return self.environment == ENV_DEVELOPMENT

    def error_response_options(self) -> ErrorResponseOptions:
        """Error boundary switches: detailed and chatty in development only."""
        log_operational = self.log_operational_errors
        if log_operational is None:
            log_operational = self.is_development
        return ErrorResponseOptions(
            include_details=self.is_development,
            log_operational_errors=log_operational,
        )

    def safe_for_logging(self) -> dict[str, str | bool | None]:
        return {
            "environment": self.environment,
            "log_level": self.log_level,
            "log_operational_errors": self.log_operational_errors,
        }


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Load application settings from the environment."""
    environment = os.getenv("PROOFING_ENV", DEFAULT_ENVIRONMENT).strip().lower() or DEFAULT_ENVIRONMENT
    default_level = DEFAULT_DEVELOPMENT_LOG_LEVEL if environment == ENV_DEVELOPMENT else DEFAULT_LOG_LEVEL
    return AppSettings(
        environment=environment,
        log_level=os.getenv("PROOFING_LOG_LEVEL", default_level).upper(),
        log_operational_errors=_get_bool_env("PROOFING_LOG_OPERATIONAL_ERRORS"),
    )
