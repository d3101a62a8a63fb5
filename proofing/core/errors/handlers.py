"""Request-boundary adapters that turn raised errors into JSON responses."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
import functools
import inspect
import logging
from typing import Any
from typing import TypeVar

from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic_core import to_jsonable_python
from starlette.exceptions import HTTPException as StarletteHTTPException

from proofing.core.errors.base import BaseError
from proofing.core.errors.logging import log_error
from proofing.core.errors.logging import log_error_at_level
from proofing.core.errors.utils import should_log_error
from proofing.core.errors.utils import to_base_error
from proofing.core.logging import REQUEST_ID_HEADER
from proofing.schemas.error import ClientError

HandlerT = TypeVar("HandlerT", bound=Callable[..., Any])


@dataclass(frozen=True)
class ErrorResponseOptions:
    """Environment-dependent switches for the error boundary."""

    include_details: bool = False
    log_operational_errors: bool = False


DEFAULT_ERROR_RESPONSE_OPTIONS = ErrorResponseOptions()


def _request_context(request: Request | None) -> dict[str, Any]:
    if request is None:
        return {}
    context: dict[str, Any] = {"method": request.method, "path": request.url.path}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        context["request_id"] = request_id
    return context


def _find_request(args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Request | None:
    for value in (*args, *kwargs.values()):
        if isinstance(value, Request):
            return value
    return None


def build_error_response(error: object, *, include_details: bool = False) -> JSONResponse:
    """Serialize ``error`` into a client-safe JSON response with its status code."""
    base_error = to_base_error(error)
    body = ClientError.model_validate(base_error.serialize_for_client(include_details))
    content = to_jsonable_python(body, by_alias=True, exclude_none=True, fallback=str)
    return JSONResponse(status_code=base_error.status_code, content=content)


def handle_route_error(
    error: object,
    request: Request | None = None,
    *,
    options: ErrorResponseOptions = DEFAULT_ERROR_RESPONSE_OPTIONS,
    logger: logging.Logger | None = None,
) -> JSONResponse:
    """Classify, optionally log, and serialize an error caught in a route.

    Intended for manual use inside an ``except`` block; ``with_error_handling``
    and ``register_error_handlers`` delegate here as well.
    """
    base_error = to_base_error(error)
    target = logger or logging.getLogger(__name__)
    context = _request_context(request)

    if should_log_error(base_error):
        log_error(target, base_error, **context)
    elif options.log_operational_errors:
        log_error_at_level(target, logging.INFO, base_error, **context)

    response = build_error_response(base_error, include_details=options.include_details)
    if "request_id" in context:
        response.headers[REQUEST_ID_HEADER] = context["request_id"]
    return response


def _resolved_signature(func: Callable[..., Any]) -> inspect.Signature | None:
    try:
        return inspect.signature(func, eval_str=True)
    except (NameError, TypeError, ValueError):
        return None


def with_error_handling(
    handler: HandlerT | None = None,
    *,
    options: ErrorResponseOptions = DEFAULT_ERROR_RESPONSE_OPTIONS,
    logger: logging.Logger | None = None,
) -> Any:
    """Wrap a route handler so any exception becomes an error response.

    Usable bare (``@with_error_handling``) or with arguments
    (``@with_error_handling(options=...)``). Sync and async handlers are both
    supported and keep their signature, so FastAPI still injects parameters.
    """

    def decorate(func: HandlerT) -> HandlerT:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as exc:
                    return handle_route_error(
                        exc,
                        _find_request(args, kwargs),
                        options=options,
                        logger=logger,
                    )

            wrapper: Callable[..., Any] = async_wrapper
        else:

            @functools.wraps(func)
            def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return func(*args, **kwargs)
                except Exception as exc:
                    return handle_route_error(
                        exc,
                        _find_request(args, kwargs),
                        options=options,
                        logger=logger,
                    )

            wrapper = sync_wrapper

        # String annotations must resolve against the handler's module, not this one.
        signature = _resolved_signature(func)
        if signature is not None:
            wrapper.__signature__ = signature  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    if handler is not None:
        return decorate(handler)
    return decorate


def register_error_handlers(
    app: FastAPI,
    options: ErrorResponseOptions = DEFAULT_ERROR_RESPONSE_OPTIONS,
) -> None:
    """Attach the shared error boundary to a FastAPI app instance."""

    async def _exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return handle_route_error(exc, request, options=options)

    app.add_exception_handler(BaseError, _exception_handler)
    app.add_exception_handler(RequestValidationError, _exception_handler)
    app.add_exception_handler(StarletteHTTPException, _exception_handler)
    app.add_exception_handler(Exception, _exception_handler)
