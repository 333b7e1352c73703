"""Domain errors for the transactions module."""

from django.utils.translation import gettext_lazy as _

from common.errors import DomainError, ErrorCode


class TransactionNotFoundError(DomainError):
    """Raised when no transaction matches an ID or scanned code."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            message=_("Ticket is invalid or was not found."),
        )


class TicketAlreadyUsedError(DomainError):
    """Raised when a redeemed ticket is scanned again."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ALREADY_USED,
            message=_("Ticket has already been used."),
        )


class TicketNotPayableError(DomainError):
    """Raised when a scanned ticket is unpaid or its payment failed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_PAYABLE,
            message=_("Ticket is not paid or has expired."),
        )


class IllegalTransitionError(DomainError):
    """Raised when asked for a status change the lifecycle does not allow."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.ILLEGAL_TRANSITION,
            message=_("Transaction cannot move from %(source)s to %(target)s.")
            % {"source": source, "target": target},
        )
