"""
Domain error translation - Exception handlers for the FastAPI app.

Routes let domain exceptions propagate; this module maps each kind to
an HTTP status once, at the edge. Client-caused failures carry a
readable message. Server-side failures collapse into a generic
"internal server error" body while the full detail goes to the log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    AccountAlreadyExists,
    AlreadyExists,
    DeliveryError,
    InvalidCode,
    InvalidOrExpiredCode,
    InvalidToken,
    NotFound,
    ReferenceNotFound,
    RowsAffectedZero,
    VerificationUnavailable,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "internal server error"

# Most specific first; the first isinstance match wins.
CLIENT_ERRORS: list[tuple[type[DeliveryError], int, str]] = [
    (InvalidOrExpiredCode, status.HTTP_400_BAD_REQUEST, "Code is invalid or expired"),
    (InvalidCode, status.HTTP_400_BAD_REQUEST, "Code is incorrect"),
    (AccountAlreadyExists, status.HTTP_409_CONFLICT, "Account already exists"),
    (AlreadyExists, status.HTTP_409_CONFLICT, "Already exists"),
    (ReferenceNotFound, status.HTTP_400_BAD_REQUEST, "Referenced entity does not exist"),
    (NotFound, status.HTTP_404_NOT_FOUND, "Not found"),
    (RowsAffectedZero, status.HTTP_404_NOT_FOUND, "Not found or no changes made"),
    (InvalidToken, status.HTTP_401_UNAUTHORIZED, "Invalid or expired token"),
    (
        VerificationUnavailable,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Verification service unavailable",
    ),
]


def error_response(exc: DeliveryError) -> JSONResponse:
    """Build the HTTP response for a domain error."""
    for error_type, status_code, detail in CLIENT_ERRORS:
        if isinstance(exc, error_type):
            headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
            return JSONResponse({"detail": detail}, status_code=status_code, headers=headers)

    logger.error("Unhandled domain error %s: %s", type(exc).__name__, exc)
    return JSONResponse(
        {"detail": INTERNAL_ERROR_DETAIL},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def domain_error_handler(request: Request, exc: DeliveryError) -> JSONResponse:
    if isinstance(exc, VerificationUnavailable):
        logger.error("Verification cache unavailable on %s %s", request.method, request.url.path)
    return error_response(exc)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        {"detail": INTERNAL_ERROR_DETAIL},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all error handlers on an application."""
    app.add_exception_handler(DeliveryError, domain_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
