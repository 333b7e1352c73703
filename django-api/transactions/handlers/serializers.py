"""Serializers for request validation and for rendering domain models."""

from rest_framework import serializers


class PaymentDetailsSerializer(serializers.Serializer):
    payment_url = serializers.CharField()
    va_number = serializers.CharField()
    expiry_time = serializers.DateTimeField()


class TransactionSerializer(serializers.Serializer):
    """Serializer for the Transaction domain model."""

    id = serializers.CharField(source="id.value")
    user_id = serializers.CharField()
    ticket_id = serializers.CharField(source="ticket_id.value")
    ticket_name = serializers.CharField()
    event_id = serializers.CharField(source="event_id.value")
    quantity = serializers.IntegerField(source="quantity.value")
    total_price = serializers.DecimalField(source="total_price.amount", max_digits=14, decimal_places=2)
    payment_method = serializers.CharField()
    payment_details = PaymentDetailsSerializer(allow_null=True)
    status = serializers.CharField(source="status.value")
    scanned_at = serializers.DateTimeField(allow_null=True)
    scanned_by = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ScanResultSerializer(serializers.Serializer):
    transaction_id = serializers.CharField(source="transaction_id.value")
    ticket_name = serializers.CharField()
    holder_id = serializers.CharField()
    event_id = serializers.CharField(source="event_id.value")
    quantity = serializers.IntegerField()
    scanned_at = serializers.DateTimeField()
    scanned_by = serializers.CharField()


class CheckoutSerializer(serializers.Serializer):
    """Input for POST /api/transactions"""

    ticket_id = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)
    payment_method = serializers.CharField(max_length=32, required=False, allow_blank=True)


class NotificationSerializer(serializers.Serializer):
    """Input for POST /api/transactions/notification"""

    transaction_id = serializers.CharField()
    status = serializers.CharField()


class ScanSerializer(serializers.Serializer):
    """Input for POST /api/transactions/scan"""

    qr_code = serializers.CharField()
