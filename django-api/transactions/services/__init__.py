from transactions.services.checkout import CheckoutService
from transactions.services.ledger import TransactionLedger
from transactions.services.notifications import PaymentNotificationService
from transactions.services.payment_gateway import MockPaymentGateway, PaymentGateway
from transactions.services.scanner import GateScanner

__all__ = [
    "CheckoutService",
    "GateScanner",
    "MockPaymentGateway",
    "PaymentGateway",
    "PaymentNotificationService",
    "TransactionLedger",
]
