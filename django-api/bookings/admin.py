from django.contrib import admin, messages

from catalog.stores import DjangoEventStore

from bookings.domain import BookingStatus
from bookings.domain.errors import InvalidTransitionError
from bookings.models import Booking
from bookings.services import BookingService
from bookings.stores import DjangoBookingStore


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Bookings are created by checkout; status moves only through the actions."""

    list_display = [
        "id",
        "event",
        "ticket_type_name",
        "quantity",
        "total_price",
        "status",
        "created_at",
    ]
    list_filter = ["status", "event"]
    search_fields = ["id", "customer_name", "customer_email"]
    readonly_fields = [
        "id",
        "event",
        "ticket_type_code",
        "ticket_type_name",
        "unit_price",
        "quantity",
        "total_price",
        "status",
        "payment_method",
        "customer_name",
        "customer_email",
        "created_at",
        "paid_at",
    ]
    actions = ["mark_paid", "mark_cancelled"]

    def has_add_permission(self, request):
        return False

    @admin.action(description="Mark selected bookings as paid")
    def mark_paid(self, request, queryset):
        self._set_status(request, queryset, BookingStatus.PAID)

    @admin.action(description="Mark selected bookings as cancelled")
    def mark_cancelled(self, request, queryset):
        self._set_status(request, queryset, BookingStatus.CANCELLED)

    def _set_status(self, request, queryset, new_status: BookingStatus) -> None:
        service = BookingService(DjangoBookingStore(), DjangoEventStore())
        updated = 0
        for booking_id in queryset.values_list("id", flat=True):
            try:
                service.set_status(booking_id, new_status)
            except InvalidTransitionError as exc:
                self.message_user(request, f"{booking_id}: {exc.message}", messages.ERROR)
                continue
            updated += 1
        if updated:
            self.message_user(request, f"{updated} bookings marked as {new_status.value}")
