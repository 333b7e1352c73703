"""Transaction ledger: creates, reads and transitions purchase records.

Every transition goes through :meth:`TransactionLedger.transition`, which
rejects moves the lifecycle does not allow and applies allowed ones as a
compare-and-swap on the stored status.
"""

import logging
from contextlib import AbstractContextManager
from datetime import datetime

from events.domain import Money, Quantity, TicketType
from events.stores.interfaces import TicketStore
from transactions.domain import PaymentDetails, Transaction, TransactionId, TransactionStatus
from transactions.domain.errors import IllegalTransitionError, TransactionNotFoundError
from transactions.stores.interfaces import TransactionStore

logger = logging.getLogger(__name__)


def parse_transaction_id(transaction_id: str) -> TransactionId:
    """Parse a transaction ID or scanned code, treating malformed input as unknown."""
    try:
        return TransactionId.from_string(transaction_id)
    except (TypeError, ValueError, AttributeError):
        raise TransactionNotFoundError() from None


class TransactionLedger:
    """Owns the transaction state machine and the stock it holds."""

    def __init__(self, transactions: TransactionStore, tickets: TicketStore) -> None:
        self._transactions = transactions
        self._tickets = tickets

    def atomic(self) -> AbstractContextManager:
        return self._transactions.atomic()

    def open(
        self,
        *,
        user_id: str,
        ticket: TicketType,
        quantity: Quantity,
        total_price: Money,
        payment_method: str,
    ) -> Transaction:
        """Record a pending purchase. Stock must already be reserved by the caller."""
        return self._transactions.create_transaction(
            user_id=user_id,
            ticket_id=ticket.id,
            ticket_name=ticket.name,
            event_id=ticket.event_id,
            quantity=quantity,
            total_price=total_price,
            payment_method=payment_method,
        )

    def get(self, transaction_id: str) -> Transaction:
        """Return a transaction by ID.

        Raises:
            TransactionNotFoundError: If the ID is malformed or unknown.
        """
        transaction = self._transactions.get_transaction(parse_transaction_id(transaction_id))
        if transaction is None:
            raise TransactionNotFoundError()
        return transaction

    def history(self, user_id: str) -> list[Transaction]:
        """Return a user's transactions, newest first."""
        return self._transactions.list_for_user(user_id)

    def attach_payment_details(self, transaction_id: TransactionId, details: PaymentDetails) -> None:
        if not self._transactions.set_payment_details(transaction_id, details):
            raise TransactionNotFoundError()

    def transition(
        self,
        transaction_id: TransactionId,
        source: TransactionStatus,
        target: TransactionStatus,
        *,
        scanned_at: datetime | None = None,
        scanned_by: str | None = None,
    ) -> bool:
        """Move a transaction from ``source`` to ``target``.

        Returns False if the stored status is no longer ``source``.

        Raises:
            IllegalTransitionError: If ``source -> target`` is not a lifecycle edge.
        """
        if not source.can_transition_to(target):
            raise IllegalTransitionError(source.value, target.value)
        return self._transactions.compare_and_set_status(
            transaction_id,
            source,
            target,
            scanned_at=scanned_at,
            scanned_by=scanned_by,
        )

    def fail(self, transaction: Transaction) -> bool:
        """Fail a pending transaction and give its stock back.

        Both writes share one atomic block, and the stock is only restored
        when this call performed the ``pending -> failed`` move, so repeated
        calls restore at most once.
        """
        with self.atomic():
            if not self.transition(transaction.id, TransactionStatus.PENDING, TransactionStatus.FAILED):
                return False
            if not self._tickets.restore_stock(transaction.ticket_id, transaction.quantity.value):
                self._log_unrestored(transaction)
        return True

    def _log_unrestored(self, transaction: Transaction) -> None:
        ticket = self._tickets.get_ticket_type(transaction.ticket_id)
        if ticket is None:
            logger.warning(
                "Could not restore %d unit(s) to ticket %s for transaction %s; ticket type is gone",
                transaction.quantity.value,
                transaction.ticket_id,
                transaction.id,
            )
            return
        logger.error(
            "Could not restore %d unit(s) to ticket %s for transaction %s; stock %d would exceed quota %d",
            transaction.quantity.value,
            transaction.ticket_id,
            transaction.id,
            ticket.stock.value,
            ticket.quota.value,
        )
