"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to common.exceptions
- Never contain business logic
"""

import hmac
import logging
from datetime import timedelta

from django.conf import settings
from django.utils.translation import gettext as _
from rest_framework import status
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import SCANNER_ROLES, role_required
from events.stores import DjangoTicketStore
from transactions.handlers.serializers import (
    CheckoutSerializer,
    NotificationSerializer,
    ScanResultSerializer,
    ScanSerializer,
    TransactionSerializer,
)
from transactions.services import (
    CheckoutService,
    GateScanner,
    MockPaymentGateway,
    PaymentNotificationService,
    TransactionLedger,
)
from transactions.stores import DjangoTransactionStore

logger = logging.getLogger(__name__)

NOTIFICATION_TOKEN_HEADER = "X-Notification-Token"


def get_ledger() -> TransactionLedger:
    return TransactionLedger(DjangoTransactionStore(), DjangoTicketStore())


def get_checkout_service() -> CheckoutService:
    gateway = MockPaymentGateway(
        settings.PAYMENT_GATEWAY_BASE_URL,
        expiry=timedelta(minutes=settings.PAYMENT_EXPIRY_MINUTES),
    )
    return CheckoutService(
        DjangoTicketStore(),
        get_ledger(),
        gateway,
        default_payment_method=settings.DEFAULT_PAYMENT_METHOD,
    )


class TransactionListView(APIView):
    """Handler for GET/POST /api/transactions"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        transactions = get_ledger().history(request.user.uid)
        return Response(TransactionSerializer(transactions, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        transaction = get_checkout_service().checkout(
            user_id=request.user.uid,
            ticket_id=serializer.validated_data["ticket_id"],
            quantity=serializer.validated_data["quantity"],
            payment_method=serializer.validated_data.get("payment_method"),
        )
        data = TransactionSerializer(transaction).data
        return Response(
            {
                "message": _("Transaction created."),
                "transaction": data,
                "payment_details": data["payment_details"],
            },
            status=status.HTTP_201_CREATED,
        )


class PaymentNotificationView(APIView):
    """Handler for POST /api/transactions/notification

    Called by the payment gateway, not by users. When a shared secret is
    configured the gateway must send it in the X-Notification-Token header.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        secret = settings.PAYMENT_NOTIFICATION_SECRET
        if secret:
            token = request.headers.get(NOTIFICATION_TOKEN_HEADER, "")
            if not hmac.compare_digest(token.encode(), secret.encode()):
                logger.warning("Rejected payment notification with a bad token")
                raise PermissionDenied(_("Invalid notification token."))

        serializer = NotificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        outcome = PaymentNotificationService(get_ledger()).handle_notification(
            serializer.validated_data["transaction_id"],
            serializer.validated_data["status"],
        )
        return Response({"message": _("Webhook processed."), "outcome": outcome.value})


class ScanView(APIView):
    """Handler for POST /api/transactions/scan"""

    permission_classes = [role_required(*SCANNER_ROLES)]

    def post(self, request: Request) -> Response:
        serializer = ScanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = GateScanner(get_ledger()).scan(serializer.validated_data["qr_code"], request.user.uid)
        return Response(
            {
                "message": _("Ticket validated. Entry granted."),
                "data": ScanResultSerializer(result).data,
            }
        )
