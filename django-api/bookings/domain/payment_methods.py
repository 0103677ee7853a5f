"""Payment method variants accepted at checkout.

``PaymentMethod`` is a closed union: exactly one variant is active for a
checkout attempt, so a UPI id and a card number can never coexist.

Each variant knows how to validate its own fields and how to produce a
redacted snapshot that is safe to persist alongside a booking.
"""

import re
from dataclasses import dataclass
from typing import Any, ClassVar

_CARD_NUMBER_RE = re.compile(r"^\d{16}$")
_EXPIRY_RE = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")
_CVV_RE = re.compile(r"^\d{3,4}$")
_UPI_RE = re.compile(r"^[A-Za-z0-9._-]+@[A-Za-z0-9]+$")
_MOBILE_RE = re.compile(r"^\d{10}$")


def _last4(digits: str) -> str:
    return digits[-4:]


@dataclass(frozen=True)
class CreditCard:
    kind: ClassVar[str] = "credit_card"

    number: str
    holder_name: str
    expiry: str
    cvv: str

    @property
    def digits(self) -> str:
        return re.sub(r"\s", "", self.number)

    def validate(self) -> dict[str, str]:
        errors = {}
        if not self.number.strip():
            errors["number"] = "Card number is required"
        elif not _CARD_NUMBER_RE.match(self.digits):
            errors["number"] = "Invalid card number"

        if not self.holder_name.strip():
            errors["holder_name"] = "Cardholder name is required"

        if not self.expiry.strip():
            errors["expiry"] = "Expiry date is required"
        elif not _EXPIRY_RE.match(self.expiry.strip()):
            errors["expiry"] = "Use format MM/YY"

        if not self.cvv.strip():
            errors["cvv"] = "CVV is required"
        elif not _CVV_RE.match(self.cvv.strip()):
            errors["cvv"] = "Invalid CVV"
        return errors

    def redacted(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "last4": _last4(self.digits),
            "holder_name": self.holder_name.strip(),
            "expiry": self.expiry.strip(),
        }


@dataclass(frozen=True)
class Upi:
    kind: ClassVar[str] = "upi"

    upi_id: str

    def validate(self) -> dict[str, str]:
        if not self.upi_id.strip():
            return {"upi_id": "UPI ID is required"}
        if not _UPI_RE.match(self.upi_id.strip()):
            return {"upi_id": "Enter a UPI ID like name@bank"}
        return {}

    def redacted(self) -> dict[str, Any]:
        return {"type": self.kind, "upi_id": self.upi_id.strip()}


@dataclass(frozen=True)
class NetBanking:
    kind: ClassVar[str] = "net_banking"

    bank_id: str

    def validate(self) -> dict[str, str]:
        if not self.bank_id.strip():
            return {"bank_id": "Please select a bank"}
        return {}

    def redacted(self) -> dict[str, Any]:
        return {"type": self.kind, "bank_id": self.bank_id.strip()}


@dataclass(frozen=True)
class Wallet:
    kind: ClassVar[str] = "wallet"

    provider: str
    mobile_number: str

    def validate(self) -> dict[str, str]:
        errors = {}
        if not self.provider.strip():
            errors["provider"] = "Please select a wallet"
        if not _MOBILE_RE.match(self.mobile_number.strip()):
            errors["mobile_number"] = "Enter a 10-digit mobile number"
        return errors

    def redacted(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "provider": self.provider.strip(),
            "mobile_last4": _last4(self.mobile_number.strip()),
        }


PaymentMethod = CreditCard | Upi | NetBanking | Wallet

PAYMENT_METHOD_TYPES: dict[str, type] = {
    cls.kind: cls for cls in (CreditCard, Upi, NetBanking, Wallet)
}
