"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.stores import DjangoEventStore
from common.errors import DomainError, ErrorCode
from common.http import STATUS_BY_CODE, error_body, error_response

from bookings.domain import Customer
from bookings.domain.errors import BookingNotFoundError
from bookings.handlers.serializers import (
    BookingCreateSerializer,
    BookingFilterSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    EventReportSerializer,
    to_payment_method,
)
from bookings.services import BookingService, CheckoutService, SimulatedPaymentAuthorizer
from bookings.stores import DjangoBookingStore

LAST_BOOKING_SESSION_KEY = "last_booking_id"


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


def get_checkout_service() -> CheckoutService:
    return CheckoutService(
        DjangoEventStore(),
        DjangoBookingStore(),
        SimulatedPaymentAuthorizer.from_settings(),
        timeout=settings.CHECKOUT_AUTHORIZATION_TIMEOUT,
    )


def _invalid_input(errors) -> Response:
    return Response(
        error_body(ErrorCode.VALIDATION_FAILED, "Invalid request", field_errors=errors),
        status=status.HTTP_400_BAD_REQUEST,
    )


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_input(serializer.errors)
        data = serializer.validated_data

        result = get_checkout_service().checkout(
            event_id=data["event_id"],
            ticket_type_id=data["ticket_type_id"],
            quantity=data["quantity"],
            payment_method=to_payment_method(data["payment_method"]),
            customer=Customer(name=data["customer_name"], email=data["customer_email"]),
        )

        if result.succeeded:
            request.session[LAST_BOOKING_SESSION_KEY] = result.booking.id.value
            body = BookingSerializer(result.booking).data
            return Response(
                {"state": result.state.value, "booking": body},
                status=status.HTTP_201_CREATED,
            )

        return Response(
            error_body(
                result.error_code,
                result.message,
                field_errors=result.field_errors,
                retryable=result.retryable,
                state=result.next_state.value,
            ),
            status=STATUS_BY_CODE.get(result.error_code, status.HTTP_400_BAD_REQUEST),
        )


class BookingConfirmationView(APIView):
    """Handler for GET /api/bookings/confirmation

    Hands the last successful booking of this browser session to the
    confirmation page exactly once.
    """

    def get(self, request: Request) -> Response:
        booking_id = request.session.pop(LAST_BOOKING_SESSION_KEY, None)
        if booking_id is None:
            return error_response(BookingNotFoundError(""))
        try:
            booking = get_booking_service().get_booking(booking_id)
        except BookingNotFoundError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            booking = get_booking_service().get_booking(booking_id)
        except BookingNotFoundError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)


class BookingStatusView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/status"""

    def patch(self, request: Request, booking_id: str) -> Response:
        serializer = BookingStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_input(serializer.errors)
        try:
            booking = get_booking_service().set_status(booking_id, serializer.to_status())
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        filters = BookingFilterSerializer(data=request.query_params)
        if not filters.is_valid():
            return _invalid_input(filters.errors)
        try:
            bookings = get_booking_service().list_bookings(
                event_id,
                status=filters.validated_data["status"],
                search=filters.validated_data["search"],
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {"count": len(bookings), "results": BookingSerializer(bookings, many=True).data}
        )


class EventReportView(APIView):
    """Handler for GET /api/events/{event_id}/report"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            report = get_booking_service().event_report(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventReportSerializer(report).data)
