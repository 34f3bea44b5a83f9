"""Interface layer errors.

Domain errors propagate out of use cases untouched; the handlers here
turn them into JSON responses so no exception reaches a client as an
unhandled 500.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from qna.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
    UnauthenticatedError,
    ValidationError,
)

# Most specific first: PartialMutationError is a StoreFailureError
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (StoreFailureError, status.HTTP_503_SERVICE_UNAVAILABLE),
]

STORE_UNAVAILABLE_DETAIL = "The service is temporarily unavailable, please retry"


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Convert a DomainError into a JSON error response."""
    code = status_for(exc)

    if isinstance(exc, PartialMutationError):
        logfire.error(
            "Partial mutation",
            operation=exc.operation,
            completed=exc.completed,
            failed=exc.failed,
            path=request.url.path,
        )
        detail = STORE_UNAVAILABLE_DETAIL
    elif isinstance(exc, StoreFailureError):
        logfire.error(
            "Store failure", operation=exc.operation, path=request.url.path
        )
        detail = STORE_UNAVAILABLE_DETAIL
    else:
        logfire.warn(
            "Request rejected",
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=code,
            path=request.url.path,
        )
        detail = str(exc)

    return JSONResponse(status_code=code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
