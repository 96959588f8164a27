"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from agora.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    StoreError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors raised by use cases to status codes."""

    for error_type, status_code in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, _handler(status_code))


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            logfire.error(
                "Request failed", path=request.url.path, error=str(exc)
            )
            detail = "Storage temporarily unavailable"
        else:
            logfire.warn(
                "Request rejected",
                path=request.url.path,
                status_code=status_code,
                error=str(exc),
            )
            detail = str(exc)
        return JSONResponse(status_code=status_code, content={"detail": detail})

    return handle
