"""Domain errors for the bookings module."""

from common.errors import DomainError, ErrorCode


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidTicketTypeError(DomainError):
    """Raised when a ticket type does not belong to the session's event."""

    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Ticket type is not offered for this event",
        )
        self.ticket_type_id = ticket_type_id


class QuantityOutOfRangeError(DomainError):
    def __init__(self, quantity: object, minimum: int, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_RANGE,
            message=f"Quantity must be between {minimum} and {maximum}",
        )
        self.quantity = quantity


class IncompleteSelectionError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INCOMPLETE_SELECTION,
            message="Please select a ticket type",
        )


class PaymentValidationError(DomainError):
    """Raised when payment details fail field validation.

    ``field_errors`` maps each offending field to a user-facing message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Please correct the errors in the form",
        )
        self.field_errors = dict(field_errors)


class AuthorizationFailedError(DomainError):
    def __init__(self, reason: str = "") -> None:
        super().__init__(
            code=ErrorCode.AUTHORIZATION_FAILED,
            message="Payment failed. Please try again or use a different payment method.",
        )
        self.reason = reason


class AuthorizationTimeoutError(DomainError):
    def __init__(self, timeout: float) -> None:
        super().__init__(
            code=ErrorCode.AUTHORIZATION_TIMEOUT,
            message="Payment provider did not respond in time. Please try again.",
        )
        self.timeout = timeout


class CapacityExceededError(DomainError):
    """Raised when a booking would oversell an event."""

    def __init__(self, event_id: str, requested: int, remaining: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Only {remaining} tickets remain for this event",
        )
        self.event_id = event_id
        self.requested = requested
        self.remaining = remaining


class InvalidTransitionError(DomainError):
    """Raised on an illegal booking status change."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot change booking status from {current} to {requested}",
        )
        self.current = current
        self.requested = requested
