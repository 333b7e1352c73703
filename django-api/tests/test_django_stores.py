"""Tests for the Django ORM stores.

These check the conditional UPDATE statements behind stock and status changes.
Run with: pytest tests/test_django_stores.py -v
"""

import uuid
from datetime import UTC, datetime

import pytest
from django.db import IntegrityError, transaction

from events.domain import EventId, Money, Quantity, TicketTypeId
from events.models import TicketType as TicketTypeRow
from events.stores import DjangoEventStore, DjangoTicketStore
from transactions.domain import PaymentDetails, TransactionId, TransactionStatus
from transactions.stores import DjangoTransactionStore


@pytest.fixture
def tickets() -> DjangoTicketStore:
    return DjangoTicketStore()


@pytest.fixture
def transactions() -> DjangoTransactionStore:
    return DjangoTransactionStore()


def open_transaction(transactions, ticket, user_id="user-1", quantity=3):
    return transactions.create_transaction(
        user_id=user_id,
        ticket_id=ticket.id,
        ticket_name=ticket.name,
        event_id=ticket.event_id,
        quantity=Quantity(quantity),
        total_price=ticket.price.times(quantity),
        payment_method="bank_transfer",
    )


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_event_exists(self, event):
        store = DjangoEventStore()
        assert store.event_exists(EventId(event.id))
        assert not store.event_exists(EventId(uuid.uuid4()))


@pytest.mark.django_db
class TestDjangoTicketStore:
    def test_new_ticket_type_starts_full(self, make_ticket_type, tickets):
        row = make_ticket_type(quota=10)
        ticket = tickets.get_ticket_type(TicketTypeId(row.id))
        assert ticket.stock.value == 10
        assert ticket.quota.value == 10

    def test_reserve_decrements_when_enough_stock(self, make_ticket_type, tickets):
        row = make_ticket_type(quota=10)
        assert tickets.reserve_stock(TicketTypeId(row.id), 3)
        row.refresh_from_db()
        assert row.stock == 7

    def test_reserve_refuses_to_go_negative(self, make_ticket_type, tickets):
        row = make_ticket_type(quota=10, stock=2)
        assert not tickets.reserve_stock(TicketTypeId(row.id), 5)
        row.refresh_from_db()
        assert row.stock == 2

    def test_restore_refuses_to_exceed_quota(self, make_ticket_type, tickets):
        row = make_ticket_type(quota=10, stock=9)
        assert not tickets.restore_stock(TicketTypeId(row.id), 2)
        assert tickets.restore_stock(TicketTypeId(row.id), 1)
        row.refresh_from_db()
        assert row.stock == 10

    def test_restore_on_missing_ticket(self, tickets):
        assert not tickets.restore_stock(TicketTypeId(uuid.uuid4()), 1)

    def test_update_ignores_stock_and_quota(self, make_ticket_type, tickets):
        row = make_ticket_type(quota=10, stock=4)
        updated = tickets.update_ticket_type(
            TicketTypeId(row.id), {"name": "Late Bird", "price": Money.of("1.00"), "stock": 99, "quota": 99}
        )
        assert updated.name == "Late Bird"
        assert updated.stock.value == 4
        assert updated.quota.value == 10

    def test_database_rejects_stock_above_quota(self, make_ticket_type):
        row = make_ticket_type(quota=5)
        with pytest.raises(IntegrityError), transaction.atomic():
            TicketTypeRow.objects.filter(pk=row.pk).update(stock=6)

    def test_list_for_event_in_creation_order(self, make_ticket_type, tickets, event):
        first = make_ticket_type(name="Early Bird")
        second = make_ticket_type(name="Regular")
        listed = tickets.list_for_event(EventId(event.id))
        assert [t.id.value for t in listed] == [first.id, second.id]


@pytest.mark.django_db
class TestDjangoTransactionStore:
    def test_create_starts_pending_with_snapshots(self, make_ticket_type, tickets, transactions):
        ticket = tickets.get_ticket_type(TicketTypeId(make_ticket_type().id))
        created = open_transaction(transactions, ticket)
        assert created.status is TransactionStatus.PENDING
        assert created.ticket_name == "Regular"
        assert created.event_id == ticket.event_id
        assert created.payment_details is None

    def test_compare_and_set_only_from_expected_status(self, make_ticket_type, tickets, transactions):
        ticket = tickets.get_ticket_type(TicketTypeId(make_ticket_type().id))
        created = open_transaction(transactions, ticket)

        assert transactions.compare_and_set_status(created.id, TransactionStatus.PENDING, TransactionStatus.PAID)
        assert not transactions.compare_and_set_status(created.id, TransactionStatus.PENDING, TransactionStatus.FAILED)
        assert transactions.get_transaction(created.id).status is TransactionStatus.PAID

    def test_scan_stamps_are_written(self, make_ticket_type, tickets, transactions):
        ticket = tickets.get_ticket_type(TicketTypeId(make_ticket_type().id))
        created = open_transaction(transactions, ticket)
        transactions.compare_and_set_status(created.id, TransactionStatus.PENDING, TransactionStatus.PAID)
        scanned_at = datetime(2026, 6, 1, 19, 0, tzinfo=UTC)

        transactions.compare_and_set_status(
            created.id, TransactionStatus.PAID, TransactionStatus.USED, scanned_at=scanned_at, scanned_by="checker-1"
        )

        stored = transactions.get_transaction(created.id)
        assert stored.scanned_at == scanned_at
        assert stored.scanned_by == "checker-1"

    def test_payment_details_round_trip_through_json(self, make_ticket_type, tickets, transactions):
        ticket = tickets.get_ticket_type(TicketTypeId(make_ticket_type().id))
        created = open_transaction(transactions, ticket)
        details = PaymentDetails(
            payment_url="https://pay.example/x",
            va_number="0123456789",
            expiry_time=datetime(2026, 6, 1, 20, 0, tzinfo=UTC),
        )

        assert transactions.set_payment_details(created.id, details)
        assert transactions.set_payment_details(created.id, details)
        assert transactions.get_transaction(created.id).payment_details == details

    def test_list_for_user_newest_first(self, make_ticket_type, tickets, transactions):
        ticket = tickets.get_ticket_type(TicketTypeId(make_ticket_type().id))
        first = open_transaction(transactions, ticket, quantity=1)
        second = open_transaction(transactions, ticket, quantity=1)
        open_transaction(transactions, ticket, user_id="user-2", quantity=1)

        assert [t.id for t in transactions.list_for_user("user-1")] == [second.id, first.id]

    def test_atomic_rolls_back_reservation(self, make_ticket_type, tickets, transactions):
        row = make_ticket_type(quota=10)

        with pytest.raises(RuntimeError), transactions.atomic():
            tickets.reserve_stock(TicketTypeId(row.id), 4)
            raise RuntimeError("insert failed")

        row.refresh_from_db()
        assert row.stock == 10

    def test_get_unknown(self, transactions):
        assert transactions.get_transaction(TransactionId(uuid.uuid4())) is None
