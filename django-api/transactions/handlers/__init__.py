from transactions.handlers.views import PaymentNotificationView, ScanView, TransactionListView

__all__ = ["TransactionListView", "PaymentNotificationView", "ScanView"]
