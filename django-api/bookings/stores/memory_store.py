"""In-memory BookingStore used by unit tests and local wiring."""

import threading
from datetime import datetime

from catalog.domain import EventId
from catalog.stores.interfaces import EventStore

from bookings.domain import Booking, BookingId, BookingStatus
from bookings.domain.errors import CapacityExceededError
from bookings.stores.interfaces import BookingStore


class InMemoryBookingStore(BookingStore):
    """Dict-backed store; a single lock serializes every mutation."""

    def __init__(self, event_store: EventStore) -> None:
        self._event_store = event_store
        self._bookings: dict[BookingId, Booking] = {}
        self._lock = threading.RLock()

    def create(self, booking: Booking) -> BookingId:
        with self._lock:
            event = self._event_store.get_event(booking.event_id)
            if event is None:
                raise LookupError(f"Unknown event {booking.event_id}")
            remaining = max(
                event.total_tickets.value - self.sold_quantity(booking.event_id), 0
            )
            if booking.quantity > remaining:
                raise CapacityExceededError(
                    str(booking.event_id), booking.quantity, remaining
                )
            self._bookings[booking.id] = booking
        return booking.id

    def get(self, booking_id: BookingId) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_by_event(self, event_id: EventId) -> list[Booking]:
        with self._lock:
            bookings = [b for b in self._bookings.values() if b.event_id == event_id]
        return sorted(bookings, key=lambda b: (b.created_at, b.id.value))

    def set_status(
        self, booking_id: BookingId, new_status: BookingStatus, now: datetime
    ) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            updated = booking.with_status(new_status, now)
            self._bookings[booking_id] = updated
        return updated

    def sold_quantity(self, event_id: EventId) -> int:
        with self._lock:
            return sum(
                b.quantity
                for b in self._bookings.values()
                if b.event_id == event_id and b.is_active
            )
