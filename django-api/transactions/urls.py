from django.urls import path

from transactions.handlers import PaymentNotificationView, ScanView, TransactionListView

urlpatterns = [
    path("transactions", TransactionListView.as_view(), name="transaction-list"),
    path(
        "transactions/notification",
        PaymentNotificationView.as_view(),
        name="transaction-notification",
    ),
    path("transactions/scan", ScanView.as_view(), name="transaction-scan"),
]
