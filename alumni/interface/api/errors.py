"""Exception handlers mapping errors onto the JSON envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alumni.config import Settings
from alumni.domain.error import (
    DepthExceededError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from alumni.interface.api.envelope import ErrorEnvelope


def error_response(
    status_code: int,
    error: str,
    message: str | None = None,
    field: str | None = None,
) -> JSONResponse:
    """Build an error envelope response."""
    body = ErrorEnvelope(error=error, message=message or error, field=field)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error."""
    if isinstance(exc, (ValidationError, DepthExceededError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the envelope exception handlers on ``app``.

    Args:
        app: FastAPI application
        settings: Decides whether unexpected error details are exposed
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        logfire.warn(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=status_code,
        )
        return error_response(status_code, str(exc), field=getattr(exc, "field", None))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = [str(part) for part in first.get("loc", ()) if part != "body"]
        logfire.warn("Malformed request", path=request.url.path, errors=len(errors))
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request",
            message=first.get("msg", "Invalid request"),
            field=".".join(location) or None,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception("Unhandled error", path=request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            message=str(exc) if settings.expose_error_details else None,
        )
