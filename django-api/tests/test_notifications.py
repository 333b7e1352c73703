"""Unit tests for PaymentNotificationService.

Run with: pytest tests/test_notifications.py -v
"""

import uuid

import pytest

from transactions.domain import NotificationOutcome, TransactionStatus
from transactions.domain.errors import TransactionNotFoundError
from transactions.services import PaymentNotificationService


@pytest.fixture
def notifications(ledger) -> PaymentNotificationService:
    return PaymentNotificationService(ledger)


@pytest.fixture
def reserved(memory_db, transaction_store):
    """A ticket with quota 10 and a pending purchase of 3 that already took its stock."""
    ticket = memory_db.add_ticket(quota=10, stock=7)
    return ticket, transaction_store.seed(ticket, quantity=3)


def status_of(memory_db, transaction) -> TransactionStatus:
    return memory_db.transactions[transaction.id.value].status


class TestPaymentNotifications:
    @pytest.mark.parametrize("gateway_status", ["settlement", "success", "SETTLEMENT"])
    def test_settlement_marks_paid_without_touching_stock(self, notifications, memory_db, reserved, gateway_status):
        ticket, transaction = reserved

        outcome = notifications.handle_notification(str(transaction.id), gateway_status)

        assert outcome is NotificationOutcome.PAID
        assert status_of(memory_db, transaction) is TransactionStatus.PAID
        assert memory_db.stock_of(ticket) == 7

    @pytest.mark.parametrize("gateway_status", ["expire", "cancel", "deny"])
    def test_failure_marks_failed_and_returns_stock(self, notifications, memory_db, reserved, gateway_status):
        ticket, transaction = reserved

        outcome = notifications.handle_notification(str(transaction.id), gateway_status)

        assert outcome is NotificationOutcome.FAILED
        assert status_of(memory_db, transaction) is TransactionStatus.FAILED
        assert memory_db.stock_of(ticket) == 10

    @pytest.mark.parametrize("gateway_status", ["pending", "capture", "", "refund"])
    def test_unknown_status_is_ignored(self, notifications, memory_db, reserved, gateway_status):
        ticket, transaction = reserved

        outcome = notifications.handle_notification(str(transaction.id), gateway_status)

        assert outcome is NotificationOutcome.IGNORED
        assert status_of(memory_db, transaction) is TransactionStatus.PENDING
        assert memory_db.stock_of(ticket) == 7

    def test_unknown_transaction(self, notifications):
        with pytest.raises(TransactionNotFoundError):
            notifications.handle_notification(str(uuid.uuid4()), "settlement")

    @pytest.mark.parametrize("repeats", [1, 2, 5])
    def test_repeated_failure_restores_stock_once(self, notifications, memory_db, reserved, repeats):
        ticket, transaction = reserved

        outcomes = [notifications.handle_notification(str(transaction.id), "expire") for _ in range(repeats)]

        assert outcomes[0] is NotificationOutcome.FAILED
        assert all(o is NotificationOutcome.DUPLICATE for o in outcomes[1:])
        assert status_of(memory_db, transaction) is TransactionStatus.FAILED
        assert memory_db.stock_of(ticket) == 10

    def test_repeated_settlement_is_a_duplicate(self, notifications, memory_db, reserved):
        _, transaction = reserved
        notifications.handle_notification(str(transaction.id), "settlement")
        assert notifications.handle_notification(str(transaction.id), "settlement") is NotificationOutcome.DUPLICATE
        assert status_of(memory_db, transaction) is TransactionStatus.PAID

    def test_failure_after_payment_does_not_overwrite(self, notifications, memory_db, reserved):
        ticket, transaction = reserved
        notifications.handle_notification(str(transaction.id), "settlement")

        outcome = notifications.handle_notification(str(transaction.id), "expire")

        assert outcome is NotificationOutcome.DUPLICATE
        assert status_of(memory_db, transaction) is TransactionStatus.PAID
        assert memory_db.stock_of(ticket) == 7

    def test_settlement_after_failure_does_not_revive(self, notifications, memory_db, reserved):
        ticket, transaction = reserved
        notifications.handle_notification(str(transaction.id), "deny")

        outcome = notifications.handle_notification(str(transaction.id), "settlement")

        assert outcome is NotificationOutcome.DUPLICATE
        assert status_of(memory_db, transaction) is TransactionStatus.FAILED
        assert memory_db.stock_of(ticket) == 10

    def test_used_ticket_is_not_failed(self, notifications, memory_db, transaction_store):
        ticket = memory_db.add_ticket(quota=10, stock=9)
        transaction = transaction_store.seed(ticket, quantity=1, status=TransactionStatus.USED)

        assert notifications.handle_notification(str(transaction.id), "cancel") is NotificationOutcome.DUPLICATE
        assert status_of(memory_db, transaction) is TransactionStatus.USED
        assert memory_db.stock_of(ticket) == 9
