"""DRF exception handler.

Renders domain errors and DRF errors in one envelope:

    {"success": false, "error": {"code", "message", "details"?, "request_id"}}

Unexpected exceptions are logged and rendered without internal detail.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import (
    AuthorizationError,
    BusinessRuleViolation,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_FAMILY = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolation, status.HTTP_400_BAD_REQUEST),
]


def _envelope(code: str, message: str, request_id, details=None) -> dict:
    error = {"code": code, "message": message, "request_id": request_id}
    if details:
        error["details"] = details
    return {"success": False, "error": error}


def domain_error_status(exc: DomainError) -> int:
    for family, status_code in STATUS_BY_FAMILY:
        if isinstance(exc, family):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_error_details(exc: DomainError) -> dict:
    details = {}
    if isinstance(exc, ValidationError):
        details = {"field": exc.field, "rule": exc.rule}
    available = getattr(exc, "available_seats", None)
    if available is not None:
        details["available_seats"] = available
    return details


def domain_exception_handler(exc, context) -> Response:
    request = context.get("request")
    request_id = getattr(request, "request_id", None) if request else None

    if isinstance(exc, DomainError):
        return Response(
            _envelope(exc.code.value, exc.message, request_id, domain_error_details(exc)),
            status=domain_error_status(exc),
        )

    response = exception_handler(exc, context)
    if response is not None:
        code = getattr(exc, "default_code", "error").upper()
        if isinstance(response.data, dict) and set(response.data) == {"detail"}:
            response.data = _envelope(code, str(response.data["detail"]), request_id)
        else:
            response.data = _envelope(
                "VALIDATION_ERROR", "Validation error", request_id, response.data
            )
        return response

    logger.exception(
        "Unhandled exception",
        extra={"request_id": request_id, "exception_type": type(exc).__name__},
    )
    return Response(
        _envelope(
            "INTERNAL_ERROR",
            "An unexpected error occurred. Please try again later.",
            request_id,
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
