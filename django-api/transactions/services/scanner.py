"""Gate scanning: redeems a paid transaction exactly once."""

import logging
from collections.abc import Callable
from datetime import datetime

from common.clock import utcnow
from transactions.domain import ScanResult, Transaction, TransactionStatus
from transactions.domain.errors import TicketAlreadyUsedError, TicketNotPayableError
from transactions.services.ledger import TransactionLedger

logger = logging.getLogger(__name__)


def ensure_redeemable(transaction: Transaction) -> None:
    if transaction.status is TransactionStatus.USED:
        raise TicketAlreadyUsedError()
    if transaction.status is not TransactionStatus.PAID:
        raise TicketNotPayableError()


class GateScanner:
    """Validates codes presented at the venue entrance."""

    def __init__(self, ledger: TransactionLedger, clock: Callable[[], datetime] = utcnow) -> None:
        self._ledger = ledger
        self._clock = clock

    def scan(self, code: str, scanning_user_id: str) -> ScanResult:
        """Mark the transaction behind ``code`` as used.

        Staff are not checked against the event the ticket belongs to.

        Raises:
            TransactionNotFoundError: If no transaction matches the code.
            TicketAlreadyUsedError: If the ticket was already redeemed.
            TicketNotPayableError: If the ticket is pending or failed.
        """
        transaction = self._ledger.get(code)
        ensure_redeemable(transaction)

        scanned_at = self._clock()
        applied = self._ledger.transition(
            transaction.id,
            TransactionStatus.PAID,
            TransactionStatus.USED,
            scanned_at=scanned_at,
            scanned_by=scanning_user_id,
        )
        if not applied:
            # Another scan got there between the read and the write.
            logger.warning("Concurrent scan lost for transaction %s", transaction.id)
            ensure_redeemable(self._ledger.get(code))
            raise TicketAlreadyUsedError()

        logger.info("Transaction %s redeemed by %s", transaction.id, scanning_user_id)
        return ScanResult(
            transaction_id=transaction.id,
            ticket_name=transaction.ticket_name,
            holder_id=transaction.user_id,
            event_id=transaction.event_id,
            quantity=transaction.quantity.value,
            scanned_at=scanned_at,
            scanned_by=scanning_user_id,
        )
