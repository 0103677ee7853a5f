"""Serializers for booking requests and responses.

Request serializers check shape only. Field contents (card number format,
quantity range, ...) are validated by the domain so that the same rules apply
to every caller.
"""

from dataclasses import fields

from rest_framework import serializers

from bookings.domain import PAYMENT_METHOD_TYPES, BookingStatus, PaymentMethod


class PaymentMethodSerializer(serializers.Serializer):
    """One payment variant, selected by ``type``; other variants' fields are ignored."""

    type = serializers.ChoiceField(choices=sorted(PAYMENT_METHOD_TYPES))
    number = serializers.CharField(required=False, allow_blank=True, default="")
    holder_name = serializers.CharField(required=False, allow_blank=True, default="")
    expiry = serializers.CharField(required=False, allow_blank=True, default="")
    cvv = serializers.CharField(required=False, allow_blank=True, default="")
    upi_id = serializers.CharField(required=False, allow_blank=True, default="")
    bank_id = serializers.CharField(required=False, allow_blank=True, default="")
    provider = serializers.CharField(required=False, allow_blank=True, default="")
    mobile_number = serializers.CharField(required=False, allow_blank=True, default="")


def to_payment_method(data: dict) -> PaymentMethod:
    variant = PAYMENT_METHOD_TYPES[data["type"]]
    return variant(**{f.name: data.get(f.name, "") for f in fields(variant)})


class BookingCreateSerializer(serializers.Serializer):
    event_id = serializers.CharField()
    ticket_type_id = serializers.CharField()
    quantity = serializers.IntegerField()
    payment_method = PaymentMethodSerializer()
    customer_name = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    customer_email = serializers.EmailField(required=False, allow_blank=True, default="")


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[s.value for s in BookingStatus])

    def to_status(self) -> BookingStatus:
        return BookingStatus(self.validated_data["status"])


class BookingFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=["All"] + [s.value for s in BookingStatus], required=False, default="All"
    )
    search = serializers.CharField(required=False, allow_blank=True, default="")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    ticket_type_id = serializers.CharField(source="ticket_type_id.value")
    ticket_type_name = serializers.CharField()
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="unit_price.amount"
    )
    quantity = serializers.IntegerField()
    total_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="total_price.amount"
    )
    status = serializers.CharField(source="status.value")
    payment_method = serializers.DictField()
    customer_name = serializers.CharField(source="customer.name")
    customer_email = serializers.CharField(source="customer.email")
    created_at = serializers.DateTimeField()
    paid_at = serializers.DateTimeField(allow_null=True)


class EventReportSerializer(serializers.Serializer):
    event_id = serializers.UUIDField(source="event_id.value")
    total_bookings = serializers.IntegerField()
    total_attendees = serializers.IntegerField()
    total_revenue = serializers.DecimalField(
        max_digits=14, decimal_places=2, source="total_revenue.amount"
    )
    tickets_remaining = serializers.IntegerField()
    bookings_by_status = serializers.DictField(child=serializers.IntegerField())
    revenue_by_ticket_type = serializers.SerializerMethodField()
    revenue_by_day = serializers.SerializerMethodField()

    def get_revenue_by_ticket_type(self, report) -> dict[str, str]:
        return {name: str(money) for name, money in report.revenue_by_ticket_type.items()}

    def get_revenue_by_day(self, report) -> dict[str, str]:
        return {day.isoformat(): str(money) for day, money in report.revenue_by_day.items()}
