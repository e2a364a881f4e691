"""Interface layer error mapping.

Domain errors carry an ``ErrorKind``; this module turns them into HTTP
status codes and the ``{status, message, kind}`` error body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_CONTAIN_NEEDED_PROPERTY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.THREAD_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.COMMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.REPLY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.THREAD_TITLE_TAKEN: status.HTTP_400_BAD_REQUEST,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def fail(status_code: int, message: str, kind: str | None = None) -> JSONResponse:
    """Build a failure response."""
    content = {"status": "fail", "message": message}
    if kind is not None:
        content["kind"] = kind
    return JSONResponse(status_code=status_code, content=content)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc.kind)
    logfire.info(
        "Request failed",
        path=request.url.path,
        kind=exc.kind.value,
        status_code=status_code,
    )
    return fail(status_code, str(exc), exc.kind.value)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return fail(exc.status_code, str(exc.detail))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies (not a JSON object) never reach the use cases
    return fail(
        status.HTTP_400_BAD_REQUEST,
        "request body must be a JSON object",
        ErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION.value,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
