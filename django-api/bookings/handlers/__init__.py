from bookings.handlers.views import (
    BookingConfirmationView,
    BookingCreateView,
    BookingDetailView,
    BookingStatusView,
    EventBookingListView,
    EventReportView,
)

__all__ = [
    "BookingConfirmationView",
    "BookingCreateView",
    "BookingDetailView",
    "BookingStatusView",
    "EventBookingListView",
    "EventReportView",
]
