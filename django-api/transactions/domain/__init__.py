from transactions.domain.models import (
    MAX_TOTAL_PRICE,
    NotificationOutcome,
    PaymentDetails,
    ScanResult,
    Transaction,
    TransactionStatus,
)
from transactions.domain.value_objects import TransactionId

__all__ = [
    "MAX_TOTAL_PRICE",
    "NotificationOutcome",
    "PaymentDetails",
    "ScanResult",
    "Transaction",
    "TransactionId",
    "TransactionStatus",
]
