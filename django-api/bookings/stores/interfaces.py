"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from catalog.domain import EventId

from bookings.domain import Booking, BookingId, BookingStatus


class BookingStore(ABC):
    """Interface for booking persistence operations.

    Implementations serialize ``create`` per event and ``set_status`` per
    booking so concurrent callers cannot lose updates or oversell.
    """

    @abstractmethod
    def create(self, booking: Booking) -> BookingId:
        """Persist a new booking.

        Raises:
            CapacityExceededError: If the event's active bookings plus this
                one would exceed its total tickets.
        """
        ...

    @abstractmethod
    def get(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_by_event(self, event_id: EventId) -> list[Booking]:
        """Return all bookings for an event ordered by created_at ascending."""
        ...

    @abstractmethod
    def set_status(
        self, booking_id: BookingId, new_status: BookingStatus, now: datetime
    ) -> Booking | None:
        """Apply a status transition and return the updated booking.

        Returns None if the booking does not exist.

        Raises:
            InvalidTransitionError: If the transition is not allowed.
        """
        ...

    @abstractmethod
    def sold_quantity(self, event_id: EventId) -> int:
        """Return the ticket count held by non-cancelled bookings."""
        ...
