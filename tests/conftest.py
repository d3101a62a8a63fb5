"""Shared pytest fixtures for proofing test suites."""

from collections.abc import Generator
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _client_for(environment: str) -> TestClient:
    from proofing.core.config import AppSettings
    from proofing.main import create_app

    app = create_app(AppSettings(environment=environment, log_level="INFO"))
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """API client configured like production: no error details."""
    with _client_for("test") as test_client:
        yield test_client


@pytest.fixture
def dev_client() -> Generator[TestClient, None, None]:
    """API client configured for development: error context exposed."""
    with _client_for("development") as test_client:
        yield test_client
