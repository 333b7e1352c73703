"""Value objects for the ticket catalogue.

Each one rejects invalid values when constructed, so anything holding one
can rely on it.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Identifier of the event a ticket type belongs to."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketTypeId:
    """Identifier of a ticket type; checkout and transactions refer to it."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """A non-negative price, kept as a Decimal with two-place rendering."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Price must not be negative: {self.amount}")

    @classmethod
    def of(cls, value) -> Self:
        try:
            return cls(amount=Decimal(str(value)))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc

    def times(self, factor: int) -> "Money":
        return Money(amount=self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Ticket count used for both quota and remaining stock."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Ticket count must not be negative: {self.value}")


@dataclass(frozen=True)
class Quantity:
    """Positive number of units requested in a single purchase."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Quantity must be an integer")
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")
