"""In-progress ticket selection for a single user and a single event."""

from dataclasses import dataclass

from catalog.domain import Event, Money, TicketType

from bookings.domain.errors import (
    IncompleteSelectionError,
    InvalidTicketTypeError,
    QuantityOutOfRangeError,
)
from bookings.domain.models import BookingRequest

MIN_QUANTITY = 1
MAX_QUANTITY = 10


@dataclass
class BookingSession:
    """Accumulates a ticket type and quantity before checkout.

    Every mutator either succeeds completely or raises and leaves the session
    exactly as it was.
    """

    event: Event
    ticket_type: TicketType | None = None
    quantity: int = MIN_QUANTITY

    @classmethod
    def start(cls, event: Event) -> "BookingSession":
        return cls(event=event)

    @property
    def subtotal(self) -> Money | None:
        if self.ticket_type is None:
            return None
        return self.ticket_type.price * self.quantity

    def select_ticket_type(self, ticket_type_id: str) -> TicketType:
        ticket_type = self.event.find_ticket_type(ticket_type_id)
        if ticket_type is None:
            raise InvalidTicketTypeError(ticket_type_id)
        self.ticket_type = ticket_type
        return ticket_type

    def set_quantity(self, quantity: int) -> None:
        # bool is an int subclass; reject it along with anything non-integral
        if (
            isinstance(quantity, bool)
            or not isinstance(quantity, int)
            or not MIN_QUANTITY <= quantity <= MAX_QUANTITY
        ):
            raise QuantityOutOfRangeError(quantity, MIN_QUANTITY, MAX_QUANTITY)
        self.quantity = quantity

    def to_booking_request(self) -> BookingRequest:
        if self.ticket_type is None:
            raise IncompleteSelectionError()
        return BookingRequest(
            event_id=self.event.id,
            ticket_type_id=self.ticket_type.id,
            ticket_type_name=self.ticket_type.name,
            unit_price=self.ticket_type.price,
            quantity=self.quantity,
            total_price=self.ticket_type.price * self.quantity,
        )
