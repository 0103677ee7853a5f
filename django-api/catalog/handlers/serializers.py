"""Serializers for transforming catalog domain models to API responses."""

from rest_framework import serializers


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="price.amount"
    )
    description = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    date = serializers.DateField()
    start_time = serializers.TimeField(format="%H:%M")
    end_time = serializers.TimeField(format="%H:%M")
    location = serializers.CharField()
    organizer = serializers.CharField()
    total_tickets = serializers.IntegerField(source="total_tickets.value")
    image_url = serializers.CharField(allow_null=True)
    price_from = serializers.SerializerMethodField()
    ticket_types = TicketTypeSerializer(many=True)

    def get_price_from(self, event) -> str | None:
        if not event.ticket_types:
            return None
        return str(min(tt.price.amount for tt in event.ticket_types))


class EventFilterSerializer(serializers.Serializer):
    """Query parameters accepted by the event list."""

    category = serializers.CharField(required=False, allow_blank=True, default="")
    search = serializers.CharField(
        required=False, allow_blank=True, default="", trim_whitespace=True
    )
