"""Serializers for request validation and for rendering domain models."""

from rest_framework import serializers

from events.domain import TicketStatus

STATUS_CHOICES = [status.value for status in TicketStatus]


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for the TicketType domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=12, decimal_places=2)
    quota = serializers.IntegerField(source="quota.value")
    stock = serializers.IntegerField(source="stock.value")
    status = serializers.CharField(source="status.value")
    sales_start = serializers.DateTimeField(allow_null=True)
    sales_end = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class TicketTypeCreateSerializer(serializers.Serializer):
    """Input for POST /api/tickets"""

    event_id = serializers.CharField()
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    quota = serializers.IntegerField(min_value=1)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, default=TicketStatus.AVAILABLE.value)
    sales_start = serializers.DateTimeField(required=False, allow_null=True, default=None)
    sales_end = serializers.DateTimeField(required=False, allow_null=True, default=None)


class TicketTypeUpdateSerializer(serializers.Serializer):
    """Input for PUT/PATCH /api/tickets/{ticket_id}. Stock and quota are not accepted."""

    name = serializers.CharField(max_length=100, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)
    sales_start = serializers.DateTimeField(required=False, allow_null=True)
    sales_end = serializers.DateTimeField(required=False, allow_null=True)
