"""JSON responses carrying the fixed cross-origin header set."""

import logging

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from app.core.exceptions import ConfigurationError, DeliveryError, ValidationError
from app.schemas.submission import SubmissionResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}

MISCONFIGURED_MESSAGE = "Servidor mal configurado"
SERVER_ERROR_MESSAGE = "Error del servidor"


def preflight_response() -> Response:
    """Return the 204 reply for a CORS preflight request."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)


def submission_response(status_code: int, success: bool, message: str) -> JSONResponse:
    """Return a `{success, message}` JSON reply."""
    return JSONResponse(
        content=SubmissionResponse(success=success, message=message).model_dump(),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def success_response(message: str) -> JSONResponse:
    return submission_response(status.HTTP_200_OK, True, message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return submission_response(status_code, False, message)


def failure_response(exc: Exception, delivery_failed_message: str) -> JSONResponse:
    """Map an exception raised while handling a submission to its reply.

    Only validation messages reach the caller; everything else is logged
    and answered with a generic message.
    """
    if isinstance(exc, ValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message)
    if isinstance(exc, ConfigurationError):
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, MISCONFIGURED_MESSAGE
        )
    if isinstance(exc, DeliveryError):
        logger.error(f"Notification delivery failed: {exc}")
        return error_response(status.HTTP_502_BAD_GATEWAY, delivery_failed_message)

    logger.error(f"Error handling submission: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Answer configuration failures raised while resolving dependencies."""
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MISCONFIGURED_MESSAGE)


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer any uncaught failure with the generic JSON error."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
