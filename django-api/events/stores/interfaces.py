"""Persistence interfaces for the catalogue.

Services only see these ABCs. The Django implementations live in
``django_store``; tests use in-memory fakes.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from events.domain import Capacity, EventId, Money, TicketStatus, TicketType, TicketTypeId


class EventStore(ABC):
    """Lookup of the events ticket types hang off. Event CRUD lives outside this service."""

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """True when ticket types may be attached to this event id."""
        ...


class TicketStore(ABC):
    """Interface for ticket type persistence and stock mutations."""

    @abstractmethod
    def get_ticket_type(self, ticket_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type by ID, or None if not found."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[TicketType]:
        """Return the ticket types of an event, ordered by created_at ascending."""
        ...

    @abstractmethod
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
        """Persist a new ticket type with stock equal to its quota."""
        ...

    @abstractmethod
    def update_ticket_type(self, ticket_id: TicketTypeId, changes: dict[str, Any]) -> TicketType | None:
        """Apply descriptive changes, or return None if the ticket type is gone.

        Never called with ``stock``, ``quota`` or ``event_id``.
        """
        ...

    @abstractmethod
    def delete_ticket_type(self, ticket_id: TicketTypeId) -> bool:
        """Delete a ticket type. Returns False if it did not exist."""
        ...

    @abstractmethod
    def reserve_stock(self, ticket_id: TicketTypeId, quantity: int) -> bool:
        """Atomically decrement stock if at least ``quantity`` remains.

        Returns False, leaving stock untouched, when the precondition fails.
        """
        ...

    @abstractmethod
    def restore_stock(self, ticket_id: TicketTypeId, quantity: int) -> bool:
        """Atomically increment stock if the result stays within quota.

        Returns False when the ticket type is gone or the quota would be exceeded.
        """
        ...
