"""Exception handlers rendering every failure as an ErrorResponse."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import FeedMeshError
from ..core.logging import get_logger
from ..core.schemas.common import ErrorResponse

logger = get_logger("errors")

# request fields reported with their wire names
_FIELD_NAMES = {"post_id": "postId"}


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def feedmesh_error_handler(request: Request, exc: FeedMeshError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.error} on {request.method} {request.url.path}: {exc.message}")
    return _error_response(
        exc.status_code,
        ErrorResponse(error=exc.error, message=exc.message, details=exc.details),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = _FIELD_NAMES.get(loc[0], loc[0]) if loc else "request"
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            error="ValidationError",
            message=first.get("msg", "Invalid request"),
            details={"field": field},
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error="InternalServerError", message="Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the app."""
    app.add_exception_handler(FeedMeshError, feedmesh_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
