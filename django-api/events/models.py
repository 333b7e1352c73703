"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events.

    Organizer name and email are snapshots taken when the event is created.
    """

    CATEGORY_CHOICES = [
        ("music", "Music"),
        ("sport", "Sport"),
        ("workshop", "Workshop"),
        ("conference", "Conference"),
        ("festival", "Festival"),
        ("exhibition", "Exhibition"),
        ("seminar", "Seminar"),
        ("competition", "Competition"),
        ("gathering", "Gathering"),
        ("webinar", "Webinar"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organizer_id = models.CharField(max_length=128)
    organizer_name = models.CharField(max_length=255)
    organizer_email = models.EmailField(blank=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255)
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES)
    status = models.CharField(max_length=32, default="active")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types and their stock."""

    STATUS_CHOICES = [
        ("available", "Available"),
        ("unavailable", "Unavailable"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ticket_types")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quota = models.PositiveIntegerField()
    stock = models.PositiveIntegerField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="available")
    sales_start = models.DateTimeField(null=True, blank=True)
    sales_end = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event"], name="ticket_type_event_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stock__lte=models.F("quota")),
                name="ticket_type_stock_within_quota",
            ),
            models.CheckConstraint(
                condition=models.Q(quota__gte=1),
                name="ticket_type_quota_positive",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        if self._state.adding and self.stock is None:
            self.stock = self.quota
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
