"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from bookings.domain import Booking, BookingId, BookingRequest, BookingStatus
from bookings.domain.errors import InvalidTransitionError
from catalog.domain import Capacity, EventId, Money, TicketTypeId

NOW = datetime(2023, 8, 1, 12, 0, tzinfo=timezone.utc)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("299.99")).amount == Decimal("299.99")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == Decimal("0.00")

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("75"))) == "75.00"

    def test_multiplication_has_no_float_drift(self):
        assert (Money(Decimal("299.99")) * 2).amount == Decimal("599.98")
        assert (Money(Decimal("0.10")) * 3).amount == Decimal("0.30")

    def test_addition(self):
        assert Money(Decimal("0.10")) + Money(Decimal("0.20")) == Money(Decimal("0.30"))


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(1000).value == 1000

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        value = "5b1f7a52-2f0e-4a86-9d59-0d6a4c1e2b10"
        assert str(EventId.from_string(value)) == value

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestTicketTypeId:
    def test_accepts_slug(self):
        assert TicketTypeId("chefs-table").value == "chefs-table"

    @pytest.mark.parametrize("value", ["", "Standard", "vip pass"])
    def test_rejects_non_slug(self, value):
        with pytest.raises(ValueError):
            TicketTypeId(value)


def _booking(status: BookingStatus, paid_at=None) -> Booking:
    request = BookingRequest(
        event_id=EventId.from_string("5b1f7a52-2f0e-4a86-9d59-0d6a4c1e2b10"),
        ticket_type_id=TicketTypeId("standard"),
        ticket_type_name="Standard Pass",
        unit_price=Money(Decimal("299.99")),
        quantity=2,
        total_price=Money(Decimal("599.98")),
    )
    return Booking.from_request(
        request, status=status, payment_method={}, created_at=NOW, paid_at=paid_at
    )


class TestBookingRequest:
    def test_rejects_total_that_does_not_match_quantity(self):
        with pytest.raises(ValueError):
            BookingRequest(
                event_id=EventId.from_string("5b1f7a52-2f0e-4a86-9d59-0d6a4c1e2b10"),
                ticket_type_id=TicketTypeId("standard"),
                ticket_type_name="Standard Pass",
                unit_price=Money(Decimal("299.99")),
                quantity=2,
                total_price=Money(Decimal("1.00")),
            )


class TestBooking:
    def test_total_is_snapshot_times_quantity(self):
        booking = _booking(BookingStatus.PAID)
        assert booking.total_price == booking.unit_price * booking.quantity
        assert booking.total_price.amount == Decimal("599.98")

    def test_generated_ids_are_prefixed_and_unique(self):
        ids = {BookingId.generate().value for _ in range(200)}
        assert len(ids) == 200
        assert all(value.startswith("BK") and len(value) == 12 for value in ids)

    def test_pending_to_paid_stamps_paid_at(self):
        updated = _booking(BookingStatus.PENDING).with_status(BookingStatus.PAID, NOW)
        assert updated.status is BookingStatus.PAID
        assert updated.paid_at == NOW


class TestBookingStatusTransitions:
    @pytest.mark.parametrize(
        "current, new",
        [
            (BookingStatus.PENDING, BookingStatus.PAID),
            (BookingStatus.PENDING, BookingStatus.CANCELLED),
            (BookingStatus.PAID, BookingStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, current, new):
        assert _booking(current).with_status(new, NOW).status is new

    @pytest.mark.parametrize(
        "current, new",
        [
            (BookingStatus.PAID, BookingStatus.PENDING),
            (BookingStatus.PAID, BookingStatus.PAID),
            (BookingStatus.PENDING, BookingStatus.PENDING),
            (BookingStatus.CANCELLED, BookingStatus.PENDING),
            (BookingStatus.CANCELLED, BookingStatus.PAID),
            (BookingStatus.CANCELLED, BookingStatus.CANCELLED),
        ],
    )
    def test_rejected_transitions(self, current, new):
        with pytest.raises(InvalidTransitionError):
            _booking(current).with_status(new, NOW)
