"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from events.domain.value_objects import Capacity, EventId, Money, TicketTypeId


class TicketStatus(Enum):
    """Whether organizers currently offer a ticket type for sale."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType and its remaining stock.

    ``stock`` is a snapshot taken at read time; reservations go through the
    store's conditional update, never through a write of this value.
    """

    id: TicketTypeId
    event_id: EventId
    name: str
    description: str
    price: Money
    quota: Capacity
    stock: Capacity
    status: TicketStatus
    sales_start: datetime | None
    sales_end: datetime | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.stock.value > self.quota.value:
            raise ValueError("Stock cannot exceed quota")

    def is_on_sale(self, now: datetime) -> bool:
        if self.status is not TicketStatus.AVAILABLE:
            return False
        if self.sales_start is not None and now < self.sales_start:
            return False
        if self.sales_end is not None and now > self.sales_end:
            return False
        return True

    def can_cover(self, quantity: int) -> bool:
        return self.stock.value >= quantity
