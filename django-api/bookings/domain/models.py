"""Domain models for bookings.

Django ORM models are in bookings/models.py (persistence layer).
"""

import secrets
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Self

from catalog.domain import EventId, Money, TicketTypeId

from bookings.domain.errors import InvalidTransitionError


class BookingStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    CANCELLED = "Cancelled"

    def can_transition_to(self, new_status: "BookingStatus") -> bool:
        return new_status in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.PAID, BookingStatus.CANCELLED}),
    BookingStatus.PAID: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class BookingId:
    """Globally unique booking reference, e.g. ``BK3F9A0C21D7``."""

    value: str

    @classmethod
    def generate(cls) -> Self:
        return cls(value="BK" + secrets.token_hex(5).upper())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Customer:
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class BookingRequest:
    """Immutable snapshot of a completed selection, used as checkout input."""

    event_id: EventId
    ticket_type_id: TicketTypeId
    ticket_type_name: str
    unit_price: Money
    quantity: int
    total_price: Money

    def __post_init__(self) -> None:
        if self.total_price != self.unit_price * self.quantity:
            raise ValueError(
                f"total_price {self.total_price} does not match "
                f"{self.unit_price} x {self.quantity}"
            )


@dataclass(frozen=True)
class Booking:
    """Domain representation of a persisted Booking.

    ``total_price`` is fixed at creation from the unit price snapshot and is
    never recomputed from live catalog prices.
    """

    id: BookingId
    event_id: EventId
    ticket_type_id: TicketTypeId
    ticket_type_name: str
    unit_price: Money
    quantity: int
    total_price: Money
    status: BookingStatus
    payment_method: dict[str, Any]
    created_at: datetime
    paid_at: datetime | None = None
    customer: Customer = field(default_factory=Customer)

    @classmethod
    def from_request(
        cls,
        request: BookingRequest,
        *,
        status: BookingStatus,
        payment_method: dict[str, Any],
        created_at: datetime,
        paid_at: datetime | None = None,
        customer: Customer | None = None,
    ) -> Self:
        return cls(
            id=BookingId.generate(),
            event_id=request.event_id,
            ticket_type_id=request.ticket_type_id,
            ticket_type_name=request.ticket_type_name,
            unit_price=request.unit_price,
            quantity=request.quantity,
            total_price=request.unit_price * request.quantity,
            status=status,
            payment_method=dict(payment_method),
            created_at=created_at,
            paid_at=paid_at,
            customer=customer or Customer(),
        )

    @property
    def is_active(self) -> bool:
        return self.status is not BookingStatus.CANCELLED

    def with_status(self, new_status: BookingStatus, now: datetime) -> "Booking":
        """Return a copy moved to ``new_status``.

        Raises:
            InvalidTransitionError: If the transition is not allowed.
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidTransitionError(self.status.value, new_status.value)
        paid_at = self.paid_at
        if new_status is BookingStatus.PAID and paid_at is None:
            paid_at = now
        return replace(self, status=new_status, paid_at=paid_at)
