"""Mapping from domain error codes to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from common.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TICKET_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OUT_OF_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INCOMPLETE_SELECTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHORIZATION_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.AUTHORIZATION_TIMEOUT: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
}


def error_body(code: ErrorCode, message: str, **extra) -> dict:
    return {"code": code.value, "message": message, **extra}


def error_response(error: DomainError) -> Response:
    """Render a domain error without leaking internal details."""
    return Response(
        error_body(error.code, error.message),
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )
