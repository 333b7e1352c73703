"""Django ORM models (persistence layer).

``ticket_id`` and ``event_id`` are snapshot identifiers rather than foreign
keys: a purchase record outlives the ticket type it was bought from.
"""

import uuid

from django.db import models


class Transaction(models.Model):
    """Persistence model for ticket purchases."""

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("paid", "Paid"),
        ("used", "Used"),
        ("failed", "Failed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=128)
    ticket_id = models.UUIDField()
    ticket_name = models.CharField(max_length=100)
    event_id = models.UUIDField()
    quantity = models.PositiveIntegerField()
    total_price = models.DecimalField(max_digits=14, decimal_places=2)
    payment_method = models.CharField(max_length=32)
    payment_details = models.JSONField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="pending")
    scanned_at = models.DateTimeField(null=True, blank=True)
    scanned_by = models.CharField(max_length=128, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user_id", "-created_at"], name="transaction_user_created_idx"),
            models.Index(fields=["ticket_id"], name="transaction_ticket_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=["pending", "paid", "used", "failed"]),
                name="transaction_status_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="transaction_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_name} x{self.quantity} ({self.status})"
