from events.domain.models import TicketStatus, TicketType
from events.domain.value_objects import Capacity, EventId, Money, Quantity, TicketTypeId

__all__ = [
    "TicketType",
    "TicketStatus",
    "EventId",
    "TicketTypeId",
    "Money",
    "Capacity",
    "Quantity",
]
