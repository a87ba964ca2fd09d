"""HTTP exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import CustomerValidationError
from app.infrastructure.logging.logger import log_http_request, logger


async def customer_validation_error_handler(
    request: Request, exc: CustomerValidationError
) -> JSONResponse:
    """Map domain validation errors to 422."""
    log_http_request(
        request.method,
        request.url.path,
        level=logging.WARNING,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unexpected failures (e.g., storage errors) as a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(CustomerValidationError, customer_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
