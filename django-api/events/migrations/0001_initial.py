import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("organizer_id", models.CharField(max_length=128)),
                ("organizer_name", models.CharField(max_length=255)),
                ("organizer_email", models.EmailField(blank=True, max_length=254)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("location", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
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
                        ],
                        max_length=32,
                    ),
                ),
                ("status", models.CharField(default="active", max_length=32)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="event_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="TicketType",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("quota", models.PositiveIntegerField()),
                ("stock", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("unavailable", "Unavailable")],
                        default="available",
                        max_length=16,
                    ),
                ),
                ("sales_start", models.DateTimeField(blank=True, null=True)),
                ("sales_end", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ticket_types",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [models.Index(fields=["event"], name="ticket_type_event_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("stock__lte", models.F("quota"))),
                        name="ticket_type_stock_within_quota",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("quota__gte", 1)),
                        name="ticket_type_quota_positive",
                    ),
                ],
            },
        ),
    ]
