from django.urls import path

from bookings.handlers import (
    BookingConfirmationView,
    BookingCreateView,
    BookingDetailView,
    BookingStatusView,
    EventBookingListView,
    EventReportView,
)

urlpatterns = [
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
    path(
        "bookings/confirmation",
        BookingConfirmationView.as_view(),
        name="booking-confirmation",
    ),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/<str:booking_id>/status",
        BookingStatusView.as_view(),
        name="booking-status",
    ),
    path(
        "events/<str:event_id>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("events/<str:event_id>/report", EventReportView.as_view(), name="event-report"),
]
