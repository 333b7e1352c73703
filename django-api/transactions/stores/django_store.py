"""Django ORM implementation of the TransactionStore."""

from contextlib import AbstractContextManager
from datetime import datetime

from django.db import transaction as db_transaction
from django.utils import timezone

from events.domain import EventId, Money, Quantity, TicketTypeId
from transactions import models
from transactions.domain import PaymentDetails, Transaction, TransactionId, TransactionStatus
from transactions.stores.interfaces import TransactionStore


def to_transaction(row: models.Transaction) -> Transaction:
    return Transaction(
        id=TransactionId(row.id),
        user_id=row.user_id,
        ticket_id=TicketTypeId(row.ticket_id),
        ticket_name=row.ticket_name,
        event_id=EventId(row.event_id),
        quantity=Quantity(row.quantity),
        total_price=Money(row.total_price),
        payment_method=row.payment_method,
        status=TransactionStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        payment_details=PaymentDetails.from_dict(row.payment_details) if row.payment_details else None,
        scanned_at=row.scanned_at,
        scanned_by=row.scanned_by,
    )


class DjangoTransactionStore(TransactionStore):
    """Database-backed transaction store using Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return db_transaction.atomic()

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
        row = models.Transaction.objects.create(
            user_id=user_id,
            ticket_id=ticket_id.value,
            ticket_name=ticket_name,
            event_id=event_id.value,
            quantity=quantity.value,
            total_price=total_price.amount,
            payment_method=payment_method,
            status=TransactionStatus.PENDING.value,
        )
        return to_transaction(row)

    def get_transaction(self, transaction_id: TransactionId) -> Transaction | None:
        row = models.Transaction.objects.filter(pk=transaction_id.value).first()
        return to_transaction(row) if row else None

    def list_for_user(self, user_id: str) -> list[Transaction]:
        rows = models.Transaction.objects.filter(user_id=user_id).order_by("-created_at")
        return [to_transaction(row) for row in rows]

    def compare_and_set_status(
        self,
        transaction_id: TransactionId,
        expected: TransactionStatus,
        target: TransactionStatus,
        *,
        scanned_at: datetime | None = None,
        scanned_by: str | None = None,
    ) -> bool:
        values = {"status": target.value, "updated_at": timezone.now()}
        if scanned_at is not None:
            values["scanned_at"] = scanned_at
        if scanned_by is not None:
            values["scanned_by"] = scanned_by
        updated = models.Transaction.objects.filter(
            pk=transaction_id.value, status=expected.value
        ).update(**values)
        return updated == 1

    def set_payment_details(self, transaction_id: TransactionId, details: PaymentDetails) -> bool:
        updated = models.Transaction.objects.filter(pk=transaction_id.value).update(
            payment_details=details.to_dict(), updated_at=timezone.now()
        )
        return updated == 1
