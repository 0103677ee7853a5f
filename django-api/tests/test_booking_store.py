"""Tests for the Django booking store and BookingService reporting.

Run with: pytest tests/test_booking_store.py -v
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from bookings.domain import (
    Booking,
    BookingId,
    BookingRequest,
    BookingStatus,
    Customer,
)
from bookings.domain.errors import (
    BookingNotFoundError,
    CapacityExceededError,
    InvalidTransitionError,
)
from bookings.services import BookingService
from bookings.stores import DjangoBookingStore
from catalog.domain import EventId, Money, TicketTypeId
from catalog.domain.errors import EventNotFoundError, InvalidEventIdError
from catalog.stores import DjangoEventStore

T0 = datetime(2023, 6, 1, 9, 0, tzinfo=timezone.utc)


def make_booking(
    event_row,
    code="standard",
    name="Standard Pass",
    price="299.99",
    quantity=2,
    status=BookingStatus.PAID,
    created_at=T0,
    customer=None,
) -> Booking:
    unit_price = Money(Decimal(price))
    request = BookingRequest(
        event_id=EventId(value=event_row.pk),
        ticket_type_id=TicketTypeId(code),
        ticket_type_name=name,
        unit_price=unit_price,
        quantity=quantity,
        total_price=unit_price * quantity,
    )
    return Booking.from_request(
        request,
        status=status,
        payment_method={"type": "credit_card", "last4": "1111"},
        created_at=created_at,
        paid_at=created_at if status is BookingStatus.PAID else None,
        customer=customer,
    )


@pytest.fixture
def store() -> DjangoBookingStore:
    return DjangoBookingStore()


@pytest.fixture
def service(store) -> BookingService:
    return BookingService(store, DjangoEventStore(), clock=lambda: T0 + timedelta(days=1))


@pytest.mark.django_db
class TestDjangoBookingStore:
    def test_create_then_get_round_trips(self, store, db_event):
        booking = make_booking(db_event)
        booking_id = store.create(booking)

        fetched = store.get(booking_id)

        assert fetched == booking
        assert fetched.total_price.amount == Decimal("599.98")
        assert fetched.total_price == fetched.unit_price * fetched.quantity

    def test_get_missing_returns_none(self, store, db):
        assert store.get(BookingId("BK0000000000")) is None

    def test_price_snapshot_survives_catalog_change(self, store, db_event):
        booking_id = store.create(make_booking(db_event))
        db_event.ticket_types.filter(code="standard").update(price=Decimal("10.00"))

        assert store.get(booking_id).unit_price.amount == Decimal("299.99")

    def test_list_by_event_is_ordered_by_creation(self, store, db_event):
        later = make_booking(db_event, created_at=T0 + timedelta(hours=1))
        earlier = make_booking(db_event, created_at=T0)
        store.create(later)
        store.create(earlier)

        assert [b.id for b in store.list_by_event(EventId(db_event.pk))] == [
            earlier.id,
            later.id,
        ]

    def test_create_enforces_capacity(self, store, db_event):
        db_event.total_tickets = 5
        db_event.save()
        store.create(make_booking(db_event, quantity=4))

        with pytest.raises(CapacityExceededError) as exc_info:
            store.create(make_booking(db_event, quantity=2))
        assert exc_info.value.remaining == 1

    def test_cancelled_bookings_release_capacity(self, store, db_event):
        db_event.total_tickets = 4
        db_event.save()
        first = make_booking(db_event, quantity=4)
        store.create(first)
        store.set_status(first.id, BookingStatus.CANCELLED, T0)

        store.create(make_booking(db_event, quantity=4))
        assert store.sold_quantity(EventId(db_event.pk)) == 4

    def test_set_status_persists(self, store, db_event):
        booking = make_booking(db_event, status=BookingStatus.PENDING)
        store.create(booking)

        updated = store.set_status(booking.id, BookingStatus.PAID, T0)

        assert updated.status is BookingStatus.PAID
        assert updated.paid_at == T0
        assert store.get(booking.id).status is BookingStatus.PAID

    def test_set_status_rejects_invalid_transition(self, store, db_event):
        booking = make_booking(db_event, status=BookingStatus.CANCELLED)
        store.create(booking)

        with pytest.raises(InvalidTransitionError):
            store.set_status(booking.id, BookingStatus.PAID, T0)
        assert store.get(booking.id).status is BookingStatus.CANCELLED

    def test_set_status_missing_returns_none(self, store, db):
        assert store.set_status(BookingId("BK0000000000"), BookingStatus.PAID, T0) is None


@pytest.mark.django_db
class TestBookingService:
    def test_get_booking_not_found(self, service):
        with pytest.raises(BookingNotFoundError):
            service.get_booking("BK0000000000")

    def test_list_bookings_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.list_bookings("9f0e8d7c-6b5a-4938-8271-605f4e3d2c1b")

    def test_list_bookings_invalid_event_id(self, service):
        with pytest.raises(InvalidEventIdError):
            service.list_bookings("1")

    def test_list_bookings_filters(self, store, service, db_event):
        john = make_booking(db_event, customer=Customer("John Smith", "john@example.com"))
        sarah = make_booking(
            db_event,
            status=BookingStatus.PENDING,
            customer=Customer("Sarah Brown", "sarah.b@example.com"),
            created_at=T0 + timedelta(minutes=5),
        )
        store.create(john)
        store.create(sarah)

        assert len(service.list_bookings(str(db_event.pk))) == 2
        assert service.list_bookings(str(db_event.pk), status="All") == [john, sarah]
        assert service.list_bookings(str(db_event.pk), status="Pending") == [sarah]
        assert service.list_bookings(str(db_event.pk), search="SARAH.B@") == [sarah]
        assert service.list_bookings(str(db_event.pk), search=john.id.value.lower()) == [
            john
        ]

    def test_set_status_stamps_clock(self, store, service, db_event):
        booking = make_booking(db_event, status=BookingStatus.PENDING)
        store.create(booking)

        updated = service.set_status(booking.id.value, BookingStatus.PAID)
        assert updated.paid_at == T0 + timedelta(days=1)

    def test_set_status_missing_booking(self, service):
        with pytest.raises(BookingNotFoundError):
            service.set_status("BK0000000000", BookingStatus.CANCELLED)

    def test_aggregates_exclude_cancelled(self, store, service, db_event):
        store.create(make_booking(db_event, quantity=2))
        store.create(
            make_booking(db_event, code="premium", name="Premium Pass", price="499.99", quantity=1)
        )
        store.create(make_booking(db_event, quantity=3, status=BookingStatus.CANCELLED))

        assert service.total_revenue(str(db_event.pk)).amount == Decimal("1099.97")
        assert service.total_attendees(str(db_event.pk)) == 3
        assert service.revenue_by_ticket_type(str(db_event.pk)) == {
            "Standard Pass": Money(Decimal("599.98")),
            "Premium Pass": Money(Decimal("499.99")),
        }

    def test_aggregates_are_recomputed_on_read(self, store, service, db_event):
        booking = make_booking(db_event, quantity=2)
        store.create(booking)
        assert service.total_attendees(str(db_event.pk)) == 2

        service.set_status(booking.id.value, BookingStatus.CANCELLED)
        assert service.total_attendees(str(db_event.pk)) == 0
        assert service.total_revenue(str(db_event.pk)) == Money.zero()

    def test_event_report(self, store, service, db_event):
        store.create(make_booking(db_event, quantity=2))
        store.create(make_booking(db_event, quantity=1, status=BookingStatus.PENDING))
        store.create(make_booking(db_event, quantity=5, status=BookingStatus.CANCELLED))

        report = service.event_report(str(db_event.pk))

        assert report.total_bookings == 3
        assert report.total_attendees == 3
        assert report.total_revenue.amount == Decimal("899.97")
        assert report.tickets_remaining == 997
        assert report.bookings_by_status == {"Pending": 1, "Paid": 1, "Cancelled": 1}

    def test_revenue_by_day_buckets_on_payment_date(self, store, service, db_event):
        store.create(make_booking(db_event, quantity=2, created_at=T0))
        store.create(make_booking(db_event, quantity=1, created_at=T0 + timedelta(hours=3)))
        store.create(make_booking(db_event, quantity=1, created_at=T0 + timedelta(days=1)))
        store.create(make_booking(db_event, quantity=4, status=BookingStatus.PENDING))
        store.create(
            make_booking(
                db_event, quantity=3, status=BookingStatus.CANCELLED, created_at=T0
            )
        )

        by_day = service.revenue_by_day(str(db_event.pk))

        assert by_day == {
            date(2023, 6, 1): Money(Decimal("899.97")),
            date(2023, 6, 2): Money(Decimal("299.99")),
        }
        assert service.event_report(str(db_event.pk)).revenue_by_day == by_day
