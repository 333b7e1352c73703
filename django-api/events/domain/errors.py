"""Domain errors for the events module."""

from django.utils.translation import gettext_lazy as _

from common.errors import DomainError, ErrorCode


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=_("Event not found."),
        )


class TicketNotFoundError(DomainError):
    """Raised when a ticket type is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message=_("Ticket not found."),
        )


class TicketNotOnSaleError(DomainError):
    """Raised when a ticket type is disabled or outside its sales window."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_ON_SALE,
            message=_("Ticket is not on sale."),
        )


class InsufficientStockError(DomainError):
    """Raised when a ticket type cannot cover the requested quantity."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_STOCK,
            message=_("Insufficient ticket stock."),
        )
