"""Example routes showing the validation helpers and error boundary in use."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse

from proofing.core.errors import BaseError
from proofing.core.errors import ErrorResponseOptions
from proofing.core.errors import NotFoundError
from proofing.core.errors import handle_route_error
from proofing.core.errors import with_error_handling
from proofing.core.validation import validate_body
from proofing.core.validation import validate_params
from proofing.core.validation import validate_query
from proofing.schemas.album import AlbumId
from proofing.schemas.album import CreateAlbum
from proofing.schemas.common import PaginationParams
from proofing.schemas.error import ClientError

MISSING_ALBUM_ID = "cmissingalbum000000000000"

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ClientError},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ClientError},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ClientError},
}


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BaseError("Malformed JSON body", status.HTTP_400_BAD_REQUEST) from exc


def create_example_router(options: ErrorResponseOptions) -> APIRouter:
    """Build the example router with the given error boundary options."""
    router = APIRouter(prefix="/api/example", tags=["example"], responses=ERROR_RESPONSES)

    @router.get("")
    @with_error_handling(options=options)
    async def list_examples(request: Request) -> dict[str, Any]:
        """Echo the validated pagination parameters."""
        pagination = validate_query(PaginationParams, dict(request.query_params))
        return {
            "message": "Hello from the proofing API",
            "method": request.method,
            "path": request.url.path,
            "page": pagination.page,
            "limit": pagination.limit,
        }

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_example(request: Request) -> JSONResponse:
        """Validate an album payload, handling errors by hand."""
        try:
            album = validate_body(CreateAlbum, await _read_json_body(request))
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content={"received": album.model_dump(mode="json"), "processed": True},
            )
        except Exception as exc:
            return handle_route_error(exc, request, options=options)

    @router.get("/{id}")
    @with_error_handling(options=options)
    async def get_example(request: Request, id: str) -> dict[str, Any]:
        """Look up an album by id."""
        params = validate_params(AlbumId, {"id": id})
        if params.id == MISSING_ALBUM_ID:
            raise NotFoundError("Album", params.id)
        return {"id": params.id, "message": f"Resource with ID: {params.id}"}

    return router
