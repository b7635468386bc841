"""
Domain exceptions for the Animal Shelter backend.

All error responses follow the standard envelope:
{
    "success": false,
    "code": "ERROR_CODE",
    "message": "Human-readable description",
    "errors": {}
}
"""

from django.db import DatabaseError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, code, message, details=None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """Validation error - missing or malformed input."""

    def __init__(self, message, details=None):
        super().__init__("VALIDATION_ERROR", message, details)


class InvalidTransitionError(DomainError):
    """Status change not permitted from the current status."""

    def __init__(self, message, details=None):
        super().__init__("INVALID_TRANSITION", message, details)


class NotFoundError(DomainError):
    """Requested resource does not exist."""

    def __init__(self, message, details=None):
        super().__init__("NOT_FOUND", message, details)


class PermissionDeniedError(DomainError):
    """Authenticated user may not act on this resource."""

    def __init__(self, message, details=None):
        super().__init__("FORBIDDEN", message, details)


class PersistenceError(DomainError):
    """Database failure while reading or writing."""

    def __init__(self, message, details=None):
        super().__init__("PERSISTENCE_ERROR", message, details)


STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_TRANSITION": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "PERSISTENCE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(code, message, details=None, status_code=None):
    """Build the standard error envelope."""
    return Response(
        {
            "success": False,
            "code": code,
            "message": message,
            "errors": details or {},
        },
        status=status_code or STATUS_CODE_MAP.get(code, status.HTTP_400_BAD_REQUEST),
    )


def domain_exception_handler(exc, context):
    """
    Custom exception handler for domain exceptions.

    DomainError subclasses map through STATUS_CODE_MAP. Database errors
    are surfaced as PersistenceError. DRF's own errors keep their status
    code but are re-wrapped in the standard envelope.
    """
    if isinstance(exc, DatabaseError):
        logger.exception("Database failure", exc_info=exc)
        exc = PersistenceError("A database error occurred")

    if isinstance(exc, DomainError):
        return error_response(exc.code, exc.message, exc.details)

    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(response.data, dict) and "detail" in response.data:
            code = getattr(response.data["detail"], "code", None) or "ERROR"
            response.data = {
                "success": False,
                "code": str(code).upper(),
                "message": str(response.data["detail"]),
                "errors": {},
            }
        else:
            response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
            response.data = {
                "success": False,
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "errors": response.data,
            }
        return response

    logger.exception("Unhandled exception", exc_info=exc)
    return error_response(
        "INTERNAL_ERROR",
        "An internal error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
