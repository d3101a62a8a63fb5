"""FastAPI application entrypoint for the proofing API."""

from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
import logging
import time

from fastapi import FastAPI
from fastapi import Request
from starlette.responses import Response

from proofing.api.example import create_example_router
from proofing.core.config import AppSettings
from proofing.core.config import get_app_settings
from proofing.core.errors import register_error_handlers
from proofing.core.logging import REQUEST_ID_HEADER
from proofing.core.logging import bind_request_id
from proofing.core.logging import configure_logging
from proofing.core.logging import new_request_id
from proofing.core.logging import reset_request_id

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tag the request with an ID and log method, path, status and duration."""
    request_id = new_request_id()
    request.state.request_id = request_id
    token = bind_request_id(request_id)
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.info(
            "%s %s -> unhandled error (%.1f ms)",
            request.method,
            request.url.path,
            (time.perf_counter() - started) * 1000,
        )
        raise
    else:
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
    finally:
        reset_request_id(token)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the API app; settings default to the environment."""
    settings = settings or get_app_settings()
    configure_logging(settings.log_level)
    options = settings.error_response_options()

    app = FastAPI(title="Photo Proofing")
    register_error_handlers(app, options)
    app.middleware("http")(log_requests)
    app.include_router(create_example_router(options))

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint for service readiness."""
        return {"status": "ok"}

    logger.info("Application configured with settings=%s", settings.safe_for_logging())
    return app


app = create_app()
