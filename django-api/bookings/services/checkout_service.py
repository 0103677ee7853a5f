"""Checkout orchestration.

A checkout attempt moves through

    AWAITING_METHOD_DETAILS -> VALIDATING -> AUTHORIZING -> SUCCEEDED | FAILED

and always ends in a ``CheckoutResult``. Domain errors raised along the way
are converted into unsuccessful results; nothing raises past ``submit``.
Rejected selections and payment details return the attempt to
AWAITING_METHOD_DETAILS; FAILED is reserved for attempts that reached the
authorizer. Neither persists anything, and the caller is free to edit the
payment details and try again. Attempts are not deduplicated.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from django.utils import timezone

from catalog.domain import Event, Money
from catalog.domain.errors import EventNotFoundError
from catalog.services import parse_event_id
from catalog.stores.interfaces import EventStore
from common.errors import DomainError, ErrorCode

from bookings.domain import (
    Booking,
    BookingRequest,
    BookingSession,
    BookingStatus,
    Customer,
    PaymentMethod,
)
from bookings.domain.errors import (
    AuthorizationFailedError,
    AuthorizationTimeoutError,
    CapacityExceededError,
    InvalidTicketTypeError,
    PaymentValidationError,
    QuantityOutOfRangeError,
)
from bookings.services.authorization import AuthorizationDecision, PaymentAuthorizer
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)

RETRYABLE_CODES = frozenset(
    {
        ErrorCode.VALIDATION_FAILED,
        ErrorCode.AUTHORIZATION_FAILED,
        ErrorCode.AUTHORIZATION_TIMEOUT,
    }
)


class CheckoutState(str, Enum):
    AWAITING_METHOD_DETAILS = "AwaitingMethodDetails"
    VALIDATING = "Validating"
    AUTHORIZING = "Authorizing"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of one checkout attempt."""

    state: CheckoutState
    booking: Booking | None = None
    error_code: ErrorCode | None = None
    message: str = ""
    field_errors: dict[str, str] = field(default_factory=dict)
    retryable: bool = False
    history: tuple[CheckoutState, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.state is CheckoutState.SUCCEEDED

    @property
    def next_state(self) -> CheckoutState:
        """State the caller is left in once this result has been rendered."""
        if self.succeeded:
            return CheckoutState.SUCCEEDED
        return CheckoutState.AWAITING_METHOD_DETAILS


class _Attempt:
    def __init__(self) -> None:
        self.history = [CheckoutState.AWAITING_METHOD_DETAILS]

    @property
    def state(self) -> CheckoutState:
        return self.history[-1]

    def advance(self, state: CheckoutState) -> None:
        self.history.append(state)

    def succeed(self, booking: Booking) -> CheckoutResult:
        self.advance(CheckoutState.SUCCEEDED)
        return CheckoutResult(
            state=CheckoutState.SUCCEEDED, booking=booking, history=tuple(self.history)
        )

    def fail(
        self, error: DomainError, field_name: str | None = None
    ) -> CheckoutResult:
        """Close the attempt on ``error``.

        Only an attempt that reached ``AUTHORIZING`` ends in ``FAILED``.
        Anything rejected earlier goes back to ``AWAITING_METHOD_DETAILS``.
        """
        if self.state is CheckoutState.AUTHORIZING:
            self.advance(CheckoutState.FAILED)
        elif self.state is not CheckoutState.AWAITING_METHOD_DETAILS:
            self.advance(CheckoutState.AWAITING_METHOD_DETAILS)
        if field_name is not None:
            field_errors = {field_name: error.message}
        else:
            field_errors = dict(getattr(error, "field_errors", {}))
        return CheckoutResult(
            state=self.state,
            error_code=error.code,
            message=error.message,
            field_errors=field_errors,
            retryable=error.code in RETRYABLE_CODES,
            history=tuple(self.history),
        )


class CheckoutService:
    """Validates payment details, authorizes the charge and records the booking."""

    def __init__(
        self,
        event_store: EventStore,
        booking_store: BookingStore,
        authorizer: PaymentAuthorizer,
        *,
        timeout: float | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._event_store = event_store
        self._booking_store = booking_store
        self._authorizer = authorizer
        self._timeout = timeout
        self._clock = clock

    def checkout(
        self,
        event_id: str,
        ticket_type_id: str,
        quantity: int,
        payment_method: PaymentMethod,
        customer: Customer | None = None,
    ) -> CheckoutResult:
        """Build a booking session from raw selections and submit it."""
        try:
            event = self._load_event(event_id)
            session = BookingSession.start(event)
            session.select_ticket_type(ticket_type_id)
            session.set_quantity(quantity)
            request = session.to_booking_request()
        except InvalidTicketTypeError as exc:
            return _Attempt().fail(exc, field_name="ticket_type_id")
        except QuantityOutOfRangeError as exc:
            return _Attempt().fail(exc, field_name="quantity")
        except DomainError as exc:
            return _Attempt().fail(exc)
        return self.submit(request, payment_method, customer)

    def submit(
        self,
        request: BookingRequest,
        payment_method: PaymentMethod,
        customer: Customer | None = None,
    ) -> CheckoutResult:
        attempt = _Attempt()
        try:
            attempt.advance(CheckoutState.VALIDATING)
            field_errors = payment_method.validate()
            if field_errors:
                raise PaymentValidationError(field_errors)
            self._check_capacity(request)

            attempt.advance(CheckoutState.AUTHORIZING)
            decision = self._authorize(payment_method, request.total_price)
            if decision is not AuthorizationDecision.APPROVED:
                raise AuthorizationFailedError(reason=decision.value)

            booking = self._record(request, payment_method, customer)
        except PaymentValidationError as exc:
            logger.info(
                "Checkout validation failed for event %s: %s",
                request.event_id,
                sorted(exc.field_errors),
            )
            return attempt.fail(exc)
        except (AuthorizationFailedError, AuthorizationTimeoutError) as exc:
            logger.warning(
                "Payment not authorized for event %s (%s): %s",
                request.event_id,
                payment_method.kind,
                exc.code.value,
            )
            return attempt.fail(exc)
        except DomainError as exc:
            logger.warning("Checkout failed for event %s: %s", request.event_id, exc)
            return attempt.fail(exc)

        logger.info(
            "Booking %s paid: %s x%d = %s",
            booking.id,
            booking.ticket_type_name,
            booking.quantity,
            booking.total_price,
        )
        return attempt.succeed(booking)

    def _load_event(self, event_id: str) -> Event:
        event = self._event_store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    def _check_capacity(self, request: BookingRequest) -> None:
        event = self._event_store.get_event(request.event_id)
        if event is None:
            raise EventNotFoundError(str(request.event_id))
        remaining = max(
            event.total_tickets.value - self._booking_store.sold_quantity(event.id), 0
        )
        if request.quantity > remaining:
            raise CapacityExceededError(str(event.id), request.quantity, remaining)

    def _authorize(
        self, payment_method: PaymentMethod, amount: Money
    ) -> AuthorizationDecision:
        try:
            if self._timeout is None:
                return self._authorizer.authorize(payment_method, amount)
            return self._authorize_with_timeout(payment_method, amount)
        except AuthorizationTimeoutError:
            raise
        except Exception:
            logger.exception("Payment authorizer raised; treating as declined")
            raise AuthorizationFailedError(reason="authorizer error") from None

    def _authorize_with_timeout(
        self, payment_method: PaymentMethod, amount: Money
    ) -> AuthorizationDecision:
        # The worker is abandoned on timeout; the authorizer is not cancelled.
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="authorizer")
        try:
            future = executor.submit(self._authorizer.authorize, payment_method, amount)
            try:
                return future.result(timeout=self._timeout)
            except FuturesTimeoutError:
                raise AuthorizationTimeoutError(self._timeout) from None
        finally:
            executor.shutdown(wait=False)

    def _record(
        self,
        request: BookingRequest,
        payment_method: PaymentMethod,
        customer: Customer | None,
    ) -> Booking:
        now = self._clock()
        booking = Booking.from_request(
            request,
            status=BookingStatus.PAID,
            payment_method=payment_method.redacted(),
            created_at=now,
            paid_at=now,
            customer=customer,
        )
        try:
            self._booking_store.create(booking)
        except CapacityExceededError:
            logger.error(
                "Capacity exhausted for event %s after payment was approved; "
                "authorization must be voided",
                request.event_id,
            )
            raise
        return booking
