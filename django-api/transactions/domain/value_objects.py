"""Domain primitives for purchase records."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class TransactionId:
    """Unique identifier for a Transaction; also the code printed in the QR."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value).strip()))

    def __str__(self) -> str:
        return str(self.value)
