"""Payment authorization collaborators.

The checkout service only depends on ``PaymentAuthorizer``; a real gateway
integration implements the same single-method interface.
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from enum import Enum

from django.conf import settings

from catalog.domain import Money

from bookings.domain import PaymentMethod

logger = logging.getLogger(__name__)


class AuthorizationDecision(str, Enum):
    APPROVED = "Approved"
    DECLINED = "Declined"


class PaymentAuthorizer(ABC):
    """Interface for the external payment authorization step."""

    @abstractmethod
    def authorize(
        self, payment_method: PaymentMethod, amount: Money
    ) -> AuthorizationDecision:
        """Approve or decline a charge of ``amount`` against ``payment_method``."""
        ...


class SimulatedPaymentAuthorizer(PaymentAuthorizer):
    """Stand-in gateway that approves a fixed share of attempts after a delay.

    Defaults mirror the demo storefront: 90% approvals, two seconds of latency.
    """

    def __init__(
        self,
        success_rate: float = 0.9,
        delay: float = 2.0,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")
        if delay < 0:
            raise ValueError("delay cannot be negative")
        self.success_rate = success_rate
        self.delay = delay
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls) -> "SimulatedPaymentAuthorizer":
        return cls(
            success_rate=settings.SIMULATED_PAYMENT_SUCCESS_RATE,
            delay=settings.SIMULATED_PAYMENT_DELAY,
        )

    def authorize(
        self, payment_method: PaymentMethod, amount: Money
    ) -> AuthorizationDecision:
        if self.delay:
            time.sleep(self.delay)
        approved = self._rng.random() < self.success_rate
        decision = (
            AuthorizationDecision.APPROVED if approved else AuthorizationDecision.DECLINED
        )
        logger.debug(
            "Simulated %s authorization for %s: %s",
            payment_method.kind,
            amount,
            decision.value,
        )
        return decision
