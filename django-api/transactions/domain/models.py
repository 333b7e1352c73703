"""Domain models for purchase records and their lifecycle.

Django ORM models are in transactions/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Self

from events.domain import EventId, Money, Quantity, TicketTypeId
from transactions.domain.value_objects import TransactionId

# Largest amount transactions.total_price (DECIMAL(14, 2)) can store.
MAX_TOTAL_PRICE = Decimal("999999999999.99")


class TransactionStatus(Enum):
    """Lifecycle states: pending -> paid -> used, or pending -> failed."""

    PENDING = "pending"
    PAID = "paid"
    USED = "used"
    FAILED = "failed"

    def can_transition_to(self, target: "TransactionStatus") -> bool:
        return target in TRANSITIONS[self]


TRANSITIONS: dict[TransactionStatus, frozenset[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset({TransactionStatus.PAID, TransactionStatus.FAILED}),
    TransactionStatus.PAID: frozenset({TransactionStatus.USED}),
    TransactionStatus.USED: frozenset(),
    TransactionStatus.FAILED: frozenset(),
}


class NotificationOutcome(Enum):
    """What a payment notification did to its transaction."""

    PAID = "paid"
    FAILED = "failed"
    DUPLICATE = "duplicate"
    IGNORED = "ignored"


@dataclass(frozen=True)
class PaymentDetails:
    """Payment handle returned by the gateway for a pending transaction."""

    payment_url: str
    va_number: str
    expiry_time: datetime

    def to_dict(self) -> dict[str, str]:
        return {
            "payment_url": self.payment_url,
            "va_number": self.va_number,
            "expiry_time": self.expiry_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            payment_url=data["payment_url"],
            va_number=data["va_number"],
            expiry_time=datetime.fromisoformat(data["expiry_time"]),
        )


@dataclass(frozen=True)
class Transaction:
    """Domain representation of a Transaction.

    ``ticket_name`` and ``event_id`` are copied from the ticket type at
    checkout and are not kept in sync afterwards.
    """

    id: TransactionId
    user_id: str
    ticket_id: TicketTypeId
    ticket_name: str
    event_id: EventId
    quantity: Quantity
    total_price: Money
    payment_method: str
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime
    payment_details: PaymentDetails | None = None
    scanned_at: datetime | None = None
    scanned_by: str | None = None


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a successful gate scan."""

    transaction_id: TransactionId
    ticket_name: str
    holder_id: str
    event_id: EventId
    quantity: int
    scanned_at: datetime
    scanned_by: str
