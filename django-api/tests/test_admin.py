"""Tests for the booking admin.

Run with: pytest tests/test_admin.py -v
"""

import pytest

from bookings.models import Booking

CARD = {
    "type": "credit_card",
    "number": "4111111111111111",
    "holder_name": "Jane Doe",
    "expiry": "12/29",
    "cvv": "123",
}


def create_booking(api_client, event) -> str:
    response = api_client.post(
        "/api/bookings",
        {
            "event_id": str(event.pk),
            "ticket_type_id": "standard",
            "quantity": 1,
            "payment_method": CARD,
            "customer_name": "Jane Doe",
        },
        format="json",
    )
    return response.json()["booking"]["id"]


@pytest.fixture
def cancelled_booking(api_client, db_event) -> str:
    booking_id = create_booking(api_client, db_event)
    api_client.patch(
        f"/api/bookings/{booking_id}/status", {"status": "Cancelled"}, format="json"
    )
    return booking_id


@pytest.mark.django_db
class TestBookingAdmin:
    def test_change_form_cannot_edit_status(self, admin_client, cancelled_booking):
        admin_client.post(
            f"/admin/bookings/booking/{cancelled_booking}/change/",
            {"status": "Paid", "customer_name": "Someone Else"},
        )

        booking = Booking.objects.get(pk=cancelled_booking)
        assert booking.status == "Cancelled"
        assert booking.customer_name == "Jane Doe"

    def test_mark_paid_action_rejects_cancelled_booking(
        self, admin_client, cancelled_booking
    ):
        response = admin_client.post(
            "/admin/bookings/booking/",
            {"action": "mark_paid", "_selected_action": [cancelled_booking]},
            follow=True,
        )

        assert Booking.objects.get(pk=cancelled_booking).status == "Cancelled"
        assert "Cannot change booking status from Cancelled to Paid" in (
            response.content.decode()
        )

    def test_mark_cancelled_action(self, admin_client, api_client, db_event):
        booking_id = create_booking(api_client, db_event)

        admin_client.post(
            "/admin/bookings/booking/",
            {"action": "mark_cancelled", "_selected_action": [booking_id]},
        )

        assert Booking.objects.get(pk=booking_id).status == "Cancelled"

    def test_bookings_cannot_be_added(self, admin_client, db):
        response = admin_client.get("/admin/bookings/booking/add/")
        assert response.status_code == 403
