"""Store interfaces (repository pattern).

Status changes are compare-and-swap operations: a write only happens when
the stored status still equals the expected one.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from events.domain import EventId, Money, Quantity, TicketTypeId
from transactions.domain import PaymentDetails, Transaction, TransactionId, TransactionStatus


class TransactionStore(ABC):
    """Interface for transaction persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Group writes to this and the ticket store so they apply or roll back together."""
        ...

    @abstractmethod
    def create_transaction(
        self,
        *,
        user_id: str,
        ticket_id: TicketTypeId,
        ticket_name: str,
        event_id: EventId,
        quantity: Quantity,
        total_price: Money,
        payment_method: str,
    ) -> Transaction:
        """Persist a new transaction in ``pending`` status."""
        ...

    @abstractmethod
    def get_transaction(self, transaction_id: TransactionId) -> Transaction | None:
        """Return a transaction by ID, or None if not found."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Transaction]:
        """Return a user's transactions ordered by created_at descending."""
        ...

    @abstractmethod
    def compare_and_set_status(
        self,
        transaction_id: TransactionId,
        expected: TransactionStatus,
        target: TransactionStatus,
        *,
        scanned_at: datetime | None = None,
        scanned_by: str | None = None,
    ) -> bool:
        """Move to ``target`` only if the stored status is ``expected``.

        Returns True when the write happened.
        """
        ...

    @abstractmethod
    def set_payment_details(self, transaction_id: TransactionId, details: PaymentDetails) -> bool:
        """Store the payment handle. Repeating the call with the same details is harmless."""
        ...
