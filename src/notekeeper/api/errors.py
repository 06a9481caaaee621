"""Mapping of typed errors to HTTP responses."""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import InvalidInput, InvalidToken, NotekeeperError
from ..core.logging import get_logger
from ..core.schemas.common import ErrorResponse

logger = get_logger("errors")


def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    path: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details, path=path)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
        headers=headers,
    )


async def notekeeper_error_handler(request: Request, exc: NotekeeperError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, InvalidToken) else None
    return _error_response(exc.status_code, exc.error, exc.message, exc.details, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        InvalidInput.__name__,
        "Request is missing or has malformed fields",
        details={"fields": fields},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(
            exc.status_code, "NotFound", "Not Found: Invalid API endpoint", path=request.url.path
        )
    return _error_response(
        exc.status_code, "HTTPException", str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "InternalServerError", "Internal Server Error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotekeeperError, notekeeper_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
