"""Django ORM implementation of the BookingStore."""

from datetime import datetime

from django.db import transaction
from django.db.models import Sum

from catalog.domain import EventId, Money, TicketTypeId
from catalog.models import Event as EventRow

from bookings import models
from bookings.domain import Booking, BookingId, BookingStatus, Customer
from bookings.domain.errors import CapacityExceededError
from bookings.stores.interfaces import BookingStore


def to_domain(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(value=row.event_id),
        ticket_type_id=TicketTypeId(row.ticket_type_code),
        ticket_type_name=row.ticket_type_name,
        unit_price=Money(row.unit_price),
        quantity=row.quantity,
        total_price=Money(row.total_price),
        status=BookingStatus(row.status),
        payment_method=dict(row.payment_method),
        created_at=row.created_at,
        paid_at=row.paid_at,
        customer=Customer(name=row.customer_name, email=row.customer_email),
    )


def _active_bookings(event_id):
    return models.Booking.objects.filter(event_id=event_id).exclude(
        status=BookingStatus.CANCELLED.value
    )


class DjangoBookingStore(BookingStore):
    """Database-backed booking store using Django ORM.

    Row locks (``select_for_update``) are taken on the event for ``create``
    and on the booking for ``set_status``.
    """

    def create(self, booking: Booking) -> BookingId:
        with transaction.atomic():
            event = EventRow.objects.select_for_update().get(pk=booking.event_id.value)
            sold = self._sold(event.pk)
            remaining = max(event.total_tickets - sold, 0)
            if booking.quantity > remaining:
                raise CapacityExceededError(
                    str(booking.event_id), booking.quantity, remaining
                )
            models.Booking.objects.create(
                id=booking.id.value,
                event=event,
                ticket_type_code=booking.ticket_type_id.value,
                ticket_type_name=booking.ticket_type_name,
                unit_price=booking.unit_price.amount,
                quantity=booking.quantity,
                total_price=booking.total_price.amount,
                status=booking.status.value,
                payment_method=booking.payment_method,
                customer_name=booking.customer.name,
                customer_email=booking.customer.email,
                created_at=booking.created_at,
                paid_at=booking.paid_at,
            )
        return booking.id

    def get(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        if row is None:
            return None
        return to_domain(row)

    def list_by_event(self, event_id: EventId) -> list[Booking]:
        rows = models.Booking.objects.filter(event_id=event_id.value).order_by(
            "created_at", "id"
        )
        return [to_domain(row) for row in rows]

    def set_status(
        self, booking_id: BookingId, new_status: BookingStatus, now: datetime
    ) -> Booking | None:
        with transaction.atomic():
            row = (
                models.Booking.objects.select_for_update()
                .filter(pk=booking_id.value)
                .first()
            )
            if row is None:
                return None
            updated = to_domain(row).with_status(new_status, now)
            row.status = updated.status.value
            row.paid_at = updated.paid_at
            row.save(update_fields=["status", "paid_at"])
        return updated

    def sold_quantity(self, event_id: EventId) -> int:
        return self._sold(event_id.value)

    def _sold(self, event_pk) -> int:
        total = _active_bookings(event_pk).aggregate(total=Sum("quantity"))["total"]
        return total or 0
