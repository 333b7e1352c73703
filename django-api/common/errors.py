"""Error codes shared by every domain module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    TICKET_NOT_ON_SALE = "TICKET_NOT_ON_SALE"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    TICKET_ALREADY_USED = "TICKET_ALREADY_USED"
    TICKET_NOT_PAYABLE = "TICKET_NOT_PAYABLE"
    ILLEGAL_TRANSITION = "ILLEGAL_TRANSITION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message.

    Messages are lazy translation strings, rendered in the language of the
    request that receives them.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)
