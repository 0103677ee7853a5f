"""Booking queries, status transitions and organizer reporting.

Aggregates are pure reductions over the bookings of an event, recomputed on
every read. Cancelled bookings never count toward revenue or attendance.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from django.utils import timezone

from catalog.domain import Event, EventId, Money
from catalog.domain.errors import EventNotFoundError
from catalog.services import parse_event_id
from catalog.stores.interfaces import EventStore

from bookings.domain import Booking, BookingId, BookingStatus
from bookings.domain.errors import BookingNotFoundError
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventReport:
    event_id: EventId
    total_bookings: int
    total_attendees: int
    total_revenue: Money
    tickets_remaining: int
    bookings_by_status: dict[str, int]
    revenue_by_ticket_type: dict[str, Money]
    revenue_by_day: dict[date, Money]


class BookingService:
    """Service for booking lookups and the organizer-facing reports."""

    def __init__(
        self,
        booking_store: BookingStore,
        event_store: EventStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = booking_store
        self._event_store = event_store
        self._clock = clock

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            BookingNotFoundError: If the booking does not exist.
        """
        booking = self._store.get(BookingId(booking_id))
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings(
        self,
        event_id: str | EventId,
        status: str | None = None,
        search: str | None = None,
    ) -> list[Booking]:
        """Return an event's bookings, optionally filtered.

        ``status`` is an exact match unless empty or "All". ``search`` is a
        case-insensitive substring match on booking id, customer name and
        customer email.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._get_event(event_id)
        bookings = self._store.list_by_event(event.id)
        if status and status != "All":
            bookings = [b for b in bookings if b.status.value == status]
        needle = (search or "").strip().lower()
        if needle:
            bookings = [
                b
                for b in bookings
                if needle in b.id.value.lower()
                or needle in b.customer.name.lower()
                or needle in b.customer.email.lower()
            ]
        return bookings

    def set_status(self, booking_id: str, new_status: BookingStatus) -> Booking:
        """Move a booking to ``new_status``.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            InvalidTransitionError: If the transition is not allowed.
        """
        updated = self._store.set_status(BookingId(booking_id), new_status, self._clock())
        if updated is None:
            raise BookingNotFoundError(booking_id)
        logger.info("Booking %s marked as %s", booking_id, new_status.value)
        return updated

    def total_revenue(self, event_id: str | EventId) -> Money:
        event = self._get_event(event_id)
        return _revenue(self._active(event))

    def total_attendees(self, event_id: str | EventId) -> int:
        event = self._get_event(event_id)
        return sum(b.quantity for b in self._active(event))

    def revenue_by_ticket_type(self, event_id: str | EventId) -> dict[str, Money]:
        event = self._get_event(event_id)
        return _revenue_by_ticket_type(self._active(event))

    def revenue_by_day(self, event_id: str | EventId) -> dict[date, Money]:
        """Revenue collected per calendar day of payment, oldest day first.

        Bookings that were never paid have no ``paid_at`` and are left out.
        """
        event = self._get_event(event_id)
        return _revenue_by_day(self._active(event))

    def event_report(self, event_id: str | EventId) -> EventReport:
        event = self._get_event(event_id)
        bookings = self._store.list_by_event(event.id)
        active = [b for b in bookings if b.is_active]
        attendees = sum(b.quantity for b in active)

        by_status = {status.value: 0 for status in BookingStatus}
        for booking in bookings:
            by_status[booking.status.value] += 1

        return EventReport(
            event_id=event.id,
            total_bookings=len(bookings),
            total_attendees=attendees,
            total_revenue=_revenue(active),
            tickets_remaining=max(event.total_tickets.value - attendees, 0),
            bookings_by_status=by_status,
            revenue_by_ticket_type=_revenue_by_ticket_type(active),
            revenue_by_day=_revenue_by_day(active),
        )

    def _get_event(self, event_id: str | EventId) -> Event:
        parsed = parse_event_id(event_id)
        event = self._event_store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    def _active(self, event: Event) -> list[Booking]:
        return [b for b in self._store.list_by_event(event.id) if b.is_active]


def _revenue(bookings: list[Booking]) -> Money:
    total = Money.zero()
    for booking in bookings:
        total = total + booking.total_price
    return total


def _revenue_by_ticket_type(bookings: list[Booking]) -> dict[str, Money]:
    totals: dict[str, Money] = {}
    for booking in bookings:
        name = booking.ticket_type_name
        totals[name] = totals.get(name, Money.zero()) + booking.total_price
    return totals


def _revenue_by_day(bookings: list[Booking]) -> dict[date, Money]:
    totals: dict[date, Money] = {}
    for booking in bookings:
        if booking.paid_at is None:
            continue
        day = timezone.localtime(booking.paid_at).date()
        totals[day] = totals.get(day, Money.zero()) + booking.total_price
    return dict(sorted(totals.items()))
