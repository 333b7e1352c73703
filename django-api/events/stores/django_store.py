"""Django ORM implementation of the event and ticket stores.

Stock changes are expressed as single conditional UPDATE statements with
``F()`` expressions so concurrent requests cannot lose each other's writes.
"""

from datetime import datetime
from typing import Any

from django.db.models import F
from django.utils import timezone

from events import models
from events.domain import Capacity, EventId, Money, TicketStatus, TicketType, TicketTypeId
from events.stores.interfaces import EventStore, TicketStore

UPDATABLE_FIELDS = frozenset({"name", "description", "price", "status", "sales_start", "sales_end"})


def to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        description=row.description,
        price=Money(row.price),
        quota=Capacity(row.quota),
        stock=Capacity(row.stock),
        status=TicketStatus(row.status),
        sales_start=row.sales_start,
        sales_end=row.sales_end,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    def get_ticket_type(self, ticket_id: TicketTypeId) -> TicketType | None:
        row = models.TicketType.objects.filter(pk=ticket_id.value).first()
        return to_ticket_type(row) if row else None

    def list_for_event(self, event_id: EventId) -> list[TicketType]:
        rows = models.TicketType.objects.filter(event_id=event_id.value).order_by("created_at")
        return [to_ticket_type(row) for row in rows]

    def create_ticket_type(
        self,
        *,
        event_id: EventId,
        name: str,
        description: str,
        price: Money,
        quota: Capacity,
        status: TicketStatus,
        sales_start: datetime | None,
        sales_end: datetime | None,
    ) -> TicketType:
        row = models.TicketType.objects.create(
            event_id=event_id.value,
            name=name,
            description=description,
            price=price.amount,
            quota=quota.value,
            stock=quota.value,
            status=status.value,
            sales_start=sales_start,
            sales_end=sales_end,
        )
        return to_ticket_type(row)

    def update_ticket_type(self, ticket_id: TicketTypeId, changes: dict[str, Any]) -> TicketType | None:
        values = {}
        for field, value in changes.items():
            if field not in UPDATABLE_FIELDS:
                continue
            if isinstance(value, Money):
                value = value.amount
            elif isinstance(value, TicketStatus):
                value = value.value
            values[field] = value

        # update() skips auto_now, so updated_at is stamped explicitly.
        updated = models.TicketType.objects.filter(pk=ticket_id.value).update(
            **values, updated_at=timezone.now()
        )
        if not updated:
            return None
        return self.get_ticket_type(ticket_id)

    def delete_ticket_type(self, ticket_id: TicketTypeId) -> bool:
        deleted, _ = models.TicketType.objects.filter(pk=ticket_id.value).delete()
        return deleted > 0

    def reserve_stock(self, ticket_id: TicketTypeId, quantity: int) -> bool:
        updated = models.TicketType.objects.filter(
            pk=ticket_id.value, stock__gte=quantity
        ).update(stock=F("stock") - quantity, updated_at=timezone.now())
        return updated == 1

    def restore_stock(self, ticket_id: TicketTypeId, quantity: int) -> bool:
        updated = models.TicketType.objects.filter(
            pk=ticket_id.value, stock__lte=F("quota") - quantity
        ).update(stock=F("stock") + quantity, updated_at=timezone.now())
        return updated == 1
