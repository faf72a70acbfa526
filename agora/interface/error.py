"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from agora.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """The request does not identify a user."""

    pass


_STATUS_BY_KIND: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
]


def status_for(error: DomainError) -> int:
    for kind, code in _STATUS_BY_KIND:
        if isinstance(error, kind):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as ``{"code", "message"}``."""
    assert isinstance(exc, DomainError)
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        code=exc.code,
        status_code=status_code,
        path=request.url.path,
    )
    content: dict[str, object] = {"code": exc.code, "message": exc.message}
    # Restriction errors name every offending key
    keys = getattr(exc, "keys", None)
    if keys:
        content["keys"] = keys
    return JSONResponse(status_code=status_code, content=content)


async def authentication_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"code": "unauthenticated", "message": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
