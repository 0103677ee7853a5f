from bookings.services.authorization import (
    AuthorizationDecision,
    PaymentAuthorizer,
    SimulatedPaymentAuthorizer,
)
from bookings.services.booking_service import BookingService, EventReport
from bookings.services.checkout_service import (
    CheckoutResult,
    CheckoutService,
    CheckoutState,
)

__all__ = [
    "AuthorizationDecision",
    "BookingService",
    "CheckoutResult",
    "CheckoutService",
    "CheckoutState",
    "EventReport",
    "PaymentAuthorizer",
    "SimulatedPaymentAuthorizer",
]
