"""Payment notification handling.

The gateway may deliver a notification more than once and in any order.
Transitions are compare-and-swap on ``pending``, so only the first
settlement or failure for a transaction has any effect.
"""

import logging

from transactions.domain import NotificationOutcome, Transaction, TransactionStatus
from transactions.services.ledger import TransactionLedger

logger = logging.getLogger(__name__)

SETTLED_STATUSES = frozenset({"settlement", "success"})
FAILED_STATUSES = frozenset({"expire", "cancel", "deny"})


class PaymentNotificationService:
    """Applies gateway notifications to the transaction lifecycle."""

    def __init__(self, ledger: TransactionLedger) -> None:
        self._ledger = ledger

    def handle_notification(self, transaction_id: str, gateway_status: str) -> NotificationOutcome:
        """Settle or fail a transaction according to the gateway status.

        Unrecognized statuses are ignored.

        Raises:
            TransactionNotFoundError: If the transaction does not exist.
        """
        transaction = self._ledger.get(transaction_id)
        status = (gateway_status or "").strip().lower()

        if status in SETTLED_STATUSES:
            return self._settle(transaction)
        if status in FAILED_STATUSES:
            return self._fail(transaction, status)

        logger.info("Ignoring gateway status %r for transaction %s", gateway_status, transaction.id)
        return NotificationOutcome.IGNORED

    def _settle(self, transaction: Transaction) -> NotificationOutcome:
        if self._ledger.transition(transaction.id, TransactionStatus.PENDING, TransactionStatus.PAID):
            logger.info("Transaction %s paid", transaction.id)
            return NotificationOutcome.PAID
        logger.warning(
            "Duplicate or late settlement for transaction %s (status was %s)",
            transaction.id,
            transaction.status.value,
        )
        return NotificationOutcome.DUPLICATE

    def _fail(self, transaction: Transaction, status: str) -> NotificationOutcome:
        if self._ledger.fail(transaction):
            logger.info(
                "Transaction %s failed (%s); returned %d unit(s) to ticket %s",
                transaction.id,
                status,
                transaction.quantity.value,
                transaction.ticket_id,
            )
            return NotificationOutcome.FAILED
        logger.warning(
            "Duplicate or late %s notification for transaction %s (status was %s)",
            status,
            transaction.id,
            transaction.status.value,
        )
        return NotificationOutcome.DUPLICATE
