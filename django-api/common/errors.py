"""Domain error codes shared by the catalog and bookings modules."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INCOMPLETE_SELECTION = "INCOMPLETE_SELECTION"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    AUTHORIZATION_TIMEOUT = "AUTHORIZATION_TIMEOUT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_TRANSITION = "INVALID_TRANSITION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
