"""Payment gateway adapters.

Only a mock gateway exists: it hands out a redirect URL and a virtual
account number without contacting any provider. Handles are derived from
the transaction, so asking twice for the same transaction gives the same
answer.
"""

from abc import ABC, abstractmethod
from datetime import timedelta

from transactions.domain import PaymentDetails, Transaction

VA_NUMBER_DIGITS = 10


class PaymentGateway(ABC):
    """Interface for creating payment intents."""

    @abstractmethod
    def create_payment(self, transaction: Transaction) -> PaymentDetails:
        """Return the payment handle for a pending transaction."""
        ...


class MockPaymentGateway(PaymentGateway):
    """Gateway stand-in used until a real provider is integrated."""

    def __init__(self, base_url: str, expiry: timedelta = timedelta(hours=1)) -> None:
        self._base_url = base_url.rstrip("/")
        self._expiry = expiry

    def create_payment(self, transaction: Transaction) -> PaymentDetails:
        va_number = transaction.id.value.int % 10**VA_NUMBER_DIGITS
        return PaymentDetails(
            payment_url=f"{self._base_url}/{transaction.id}",
            va_number=f"{va_number:0{VA_NUMBER_DIGITS}d}",
            expiry_time=transaction.created_at + self._expiry,
        )
