from bookings.domain.models import (
    Booking,
    BookingId,
    BookingRequest,
    BookingStatus,
    Customer,
)
from bookings.domain.payment_methods import (
    PAYMENT_METHOD_TYPES,
    CreditCard,
    NetBanking,
    PaymentMethod,
    Upi,
    Wallet,
)
from bookings.domain.session import MAX_QUANTITY, MIN_QUANTITY, BookingSession

__all__ = [
    "Booking",
    "BookingId",
    "BookingRequest",
    "BookingSession",
    "BookingStatus",
    "Customer",
    "CreditCard",
    "NetBanking",
    "PaymentMethod",
    "PAYMENT_METHOD_TYPES",
    "Upi",
    "Wallet",
    "MIN_QUANTITY",
    "MAX_QUANTITY",
]
