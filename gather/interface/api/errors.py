"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gather.domain.error import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


def _error(status_code: int, detail) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        path=request.url.path,
        resource=exc.resource,
        identifier=exc.identifier,
    )
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    logfire.warn("Forbidden", path=request.url.path, error=str(exc))
    return _error(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_bad_request(request: Request, exc: Exception) -> JSONResponse:
    logfire.warn("Request rejected", path=request.url.path, error=str(exc))
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn(
        "Request validation failed", path=request.url.path, error_count=len(exc.errors())
    )
    return _error(
        status.HTTP_400_BAD_REQUEST,
        [
            {"loc": list(error["loc"]), "msg": error["msg"]}
            for error in exc.errors()
        ],
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error mapping on the application.

    ValidationError and request validation -> 400, ForbiddenError -> 403,
    NotFoundError -> 404. Other domain errors are treated as bad requests.
    A bare ValueError is a server bug and is left to surface as a 500.
    """
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(ValidationError, handle_bad_request)
    app.add_exception_handler(DomainError, handle_bad_request)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
