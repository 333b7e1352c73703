"""Ticket catalogue service.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Stock is never written here: reservations and restorations belong to the
transactions app, which calls ``TicketStore.reserve_stock``/``restore_stock``.
"""

import logging
from datetime import datetime
from typing import Any

from django.utils.translation import gettext_lazy as _

from common.errors import InvalidInputError
from events.domain import Capacity, EventId, Money, TicketStatus, TicketType, TicketTypeId
from events.domain.errors import EventNotFoundError, TicketNotFoundError
from events.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)


def parse_ticket_id(ticket_id: str) -> TicketTypeId:
    """Parse a ticket type ID, treating malformed input as unknown."""
    try:
        return TicketTypeId.from_string(ticket_id)
    except (TypeError, ValueError, AttributeError):
        raise TicketNotFoundError() from None


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidInputError(_("Invalid event ID format.")) from None


def check_sales_window(sales_start: datetime | None, sales_end: datetime | None) -> None:
    if sales_start is not None and sales_end is not None and sales_end < sales_start:
        raise InvalidInputError(_("Sales end must not precede sales start."))


class TicketService:
    """Service for ticket catalogue operations."""

    def __init__(self, events: EventStore, tickets: TicketStore) -> None:
        self._events = events
        self._tickets = tickets

    def create_ticket_type(
        self,
        event_id: str,
        name: str,
        price,
        quota: int,
        description: str = "",
        sales_start: datetime | None = None,
        sales_end: datetime | None = None,
        status: str = TicketStatus.AVAILABLE.value,
    ) -> TicketType:
        """Create a ticket type whose stock starts at its quota.

        Raises:
            InvalidInputError: If the price, quota, status or sales window is invalid.
            EventNotFoundError: If the event does not exist.
        """
        parsed_event_id = parse_event_id(event_id)
        if not name:
            raise InvalidInputError(_("Ticket name is required."))
        try:
            money = Money.of(price)
            capacity = Capacity(int(quota))
            ticket_status = TicketStatus(status)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(str(exc)) from None
        if capacity.value < 1:
            raise InvalidInputError(_("Quota must be at least 1."))
        check_sales_window(sales_start, sales_end)

        if not self._events.event_exists(parsed_event_id):
            raise EventNotFoundError()

        ticket = self._tickets.create_ticket_type(
            event_id=parsed_event_id,
            name=name,
            description=description,
            price=money,
            quota=capacity,
            status=ticket_status,
            sales_start=sales_start,
            sales_end=sales_end,
        )
        logger.info("Created ticket type %s for event %s with quota %d", ticket.id, ticket.event_id, capacity.value)
        return ticket

    def list_ticket_types(self, event_id: str) -> list[TicketType]:
        """Return the ticket types offered for an event."""
        return self._tickets.list_for_event(parse_event_id(event_id))

    def get_ticket_type(self, ticket_id: str) -> TicketType:
        """Return a ticket type by ID.

        Raises:
            TicketNotFoundError: If the ID is malformed or unknown.
        """
        ticket = self._tickets.get_ticket_type(parse_ticket_id(ticket_id))
        if ticket is None:
            raise TicketNotFoundError()
        return ticket

    def update_ticket_type(self, ticket_id: str, changes: dict[str, Any]) -> TicketType:
        """Update the descriptive fields of a ticket type.

        ``stock``, ``quota``, ``event_id`` and timestamps are not writable
        here and are dropped from ``changes``.
        """
        current = self.get_ticket_type(ticket_id)

        values: dict[str, Any] = {}
        try:
            for field in ("name", "description", "sales_start", "sales_end"):
                if field in changes:
                    values[field] = changes[field]
            if "price" in changes:
                values["price"] = Money.of(changes["price"])
            if "status" in changes:
                values["status"] = TicketStatus(changes["status"])
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(str(exc)) from None

        if "name" in values and not values["name"]:
            raise InvalidInputError(_("Ticket name is required."))
        check_sales_window(
            values.get("sales_start", current.sales_start),
            values.get("sales_end", current.sales_end),
        )

        ignored = set(changes) - set(values)
        if ignored:
            logger.warning("Ignoring non-writable ticket fields %s on %s", sorted(ignored), current.id)

        updated = self._tickets.update_ticket_type(current.id, values)
        if updated is None:
            raise TicketNotFoundError()
        return updated

    def delete_ticket_type(self, ticket_id: str) -> None:
        if not self._tickets.delete_ticket_type(parse_ticket_id(ticket_id)):
            raise TicketNotFoundError()
        logger.info("Deleted ticket type %s", ticket_id)
