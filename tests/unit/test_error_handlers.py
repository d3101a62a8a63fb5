"""Unit tests for the request-boundary error adapters."""

from __future__ import annotations

import inspect
import json
import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi.testclient import TestClient
import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from proofing.core.errors import GENERIC_CLIENT_MESSAGE
from proofing.core.errors import BaseError
from proofing.core.errors import ConflictError
from proofing.core.errors import ErrorResponseOptions
from proofing.core.errors import NotFoundError
from proofing.core.errors import TokenError
from proofing.core.errors import build_error_response
from proofing.core.errors import handle_route_error
from proofing.core.errors import register_error_handlers
from proofing.core.errors import with_error_handling
from proofing.core.logging import REQUEST_ID_HEADER
from proofing.core.validation import validate_query
from proofing.main import log_requests
from proofing.schemas.common import PaginationParams

HANDLERS_LOGGER = "proofing.core.errors.handlers"


def _build_client(options: ErrorResponseOptions | None = None) -> TestClient:
    options = options or ErrorResponseOptions()
    app = FastAPI()
    register_error_handlers(app, options)

    @app.get("/query")
    def query(limit: int) -> dict[str, int]:
        return {"limit": limit}

    @app.get("/not-found")
    def not_found() -> None:
        raise NotFoundError("Pipeline", "p-1")

    @app.get("/http")
    def http_error() -> None:
        raise StarletteHTTPException(status_code=404, detail="Client not found")

    @app.get("/crash")
    def crash() -> None:
        raise RuntimeError("postgres://admin:secret@db")

    @app.get("/wrapped-sync")
    @with_error_handling(options=options)
    def wrapped_sync(request: Request) -> dict[str, str]:
        raise ConflictError("Album is already closed")

    @app.get("/wrapped-async")
    @with_error_handling(options=options)
    async def wrapped_async(limit: int = 20) -> dict[str, int]:
        pagination = validate_query(PaginationParams, {"limit": limit})
        return {"limit": pagination.limit}

    return TestClient(app, raise_server_exceptions=False)


def _json(response) -> dict:
    return json.loads(response.body)


def test_request_validation_errors_are_normalized() -> None:
    client = _build_client()

    response = client.get("/query")

    assert response.status_code == 422
    payload = response.json()
    assert payload["name"] == "ValidationError"
    assert payload["message"] == "Validation failed"
    assert payload["statusCode"] == 422
    assert payload["errors"]["limit"]


def test_taxonomy_errors_use_client_body() -> None:
    client = _build_client()

    response = client.get("/not-found")

    assert response.status_code == 404
    assert response.json() == {
        "name": "NotFoundError",
        "message": "Pipeline with identifier 'p-1' not found",
        "statusCode": 404,
    }


def test_details_expose_context_for_operational_errors() -> None:
    client = _build_client(ErrorResponseOptions(include_details=True))

    response = client.get("/not-found")

    assert response.json() == {
        "name": "NotFoundError",
        "message": "Pipeline with identifier 'p-1' not found (resource: Pipeline, identifier: p-1)",
        "statusCode": 404,
        "context": {"resource": "Pipeline", "identifier": "p-1"},
    }


def test_http_errors_are_wrapped() -> None:
    client = _build_client()

    response = client.get("/http")

    assert response.status_code == 404
    assert response.json() == {"name": "BaseError", "message": "Client not found", "statusCode": 404}


@pytest.mark.parametrize("include_details", [True, False])
def test_unexpected_errors_never_leak_their_message(
    include_details: bool, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger=HANDLERS_LOGGER)
    client = _build_client(ErrorResponseOptions(include_details=include_details))

    response = client.get("/crash")

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == GENERIC_CLIENT_MESSAGE
    assert "secret" not in response.text
    error_records = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert error_records
    assert error_records[-1].request_context == {"method": "GET", "path": "/crash"}


def test_wrapped_sync_handler_returns_error_response(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=HANDLERS_LOGGER)
    client = _build_client()

    response = client.get("/wrapped-sync")

    assert response.status_code == 409
    assert response.json() == {"name": "ConflictError", "message": "Album is already closed", "statusCode": 409}
    assert not [record for record in caplog.records if record.name == HANDLERS_LOGGER]


def test_wrapped_handler_logs_operational_errors_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=HANDLERS_LOGGER)
    client = _build_client(ErrorResponseOptions(log_operational_errors=True))

    client.get("/wrapped-sync")

    records = [record for record in caplog.records if record.name == HANDLERS_LOGGER]
    assert records[-1].levelno == logging.INFO
    assert records[-1].request_context == {"method": "GET", "path": "/wrapped-sync"}


def test_wrapped_async_handler_keeps_parameter_injection() -> None:
    client = _build_client()

    ok = client.get("/wrapped-async", params={"limit": 5})
    rejected = client.get("/wrapped-async", params={"limit": 500})

    assert ok.status_code == 200
    assert ok.json() == {"limit": 5}
    assert rejected.status_code == 422
    assert rejected.json()["errors"]["limit"]


def test_with_error_handling_can_be_used_bare() -> None:
    @with_error_handling
    def handler(token: str) -> str:
        raise TokenError(context={"token": token})

    response = handler("abc")

    assert response.status_code == 401
    assert _json(response) == {"name": "TokenError", "message": "Invalid or expired token", "statusCode": 401}
    assert list(inspect.signature(handler).parameters) == ["token"]


def test_with_error_handling_passes_results_through() -> None:
    @with_error_handling(options=ErrorResponseOptions(include_details=True))
    def handler() -> dict[str, bool]:
        return {"ok": True}

    assert handler() == {"ok": True}


def test_handle_route_error_without_request() -> None:
    response = handle_route_error(ValueError("bad state"))

    assert response.status_code == 500
    assert _json(response) == {"name": "BaseError", "message": GENERIC_CLIENT_MESSAGE, "statusCode": 500}


def test_build_error_response_renders_unserializable_context() -> None:
    marker = object()
    error = BaseError("Upload failed", 400, True, {"handle": marker})

    response = build_error_response(error, include_details=True)

    assert response.status_code == 400
    assert _json(response)["context"] == {"handle": str(marker)}


def test_unexpected_error_record_and_response_share_request_id(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=HANDLERS_LOGGER)
    app = FastAPI()
    register_error_handlers(app, ErrorResponseOptions())
    app.middleware("http")(log_requests)

    @app.get("/crash")
    def crash() -> None:
        raise RuntimeError("disk full")

    response = TestClient(app, raise_server_exceptions=False).get("/crash")

    assert response.status_code == 500
    request_id = response.headers[REQUEST_ID_HEADER]
    error_records = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert error_records[-1].request_context == {"method": "GET", "path": "/crash", "request_id": request_id}


def test_wrapped_handler_error_response_carries_request_id() -> None:
    app = FastAPI()
    app.middleware("http")(log_requests)

    @app.get("/closed")
    @with_error_handling
    def closed(request: Request) -> dict[str, str]:
        raise ConflictError("Album is already closed")

    response = TestClient(app).get("/closed")

    assert response.status_code == 409
    assert response.headers[REQUEST_ID_HEADER]
