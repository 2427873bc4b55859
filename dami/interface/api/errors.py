"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dami.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from dami.interface.error import BadRequestError
from dami.util.jwt import JWTError


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and auth errors to status codes.

    NotFoundError -> 404, ValidationError, BadRequestError and ValueError -> 400,
    NotAuthorizedError and JWTError -> 401, anything else -> 500.
    """

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logfire.warn("Resource not found", path=request.url.path, error=str(exc))
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(request: Request, exc: BadRequestError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logfire.warn("Rejected request", path=request.url.path, error=str(exc))
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NotAuthorizedError)
    async def not_authorized_handler(request: Request, exc: NotAuthorizedError):
        return _error(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(JWTError)
    async def jwt_error_handler(request: Request, exc: JWTError):
        return _error(status.HTTP_401_UNAUTHORIZED, "Authentication required")

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logfire.error(
            "Unexpected error handling request",
            path=request.url.path,
            error=str(exc),
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
