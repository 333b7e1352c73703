import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=128)),
                ("ticket_id", models.UUIDField()),
                ("ticket_name", models.CharField(max_length=100)),
                ("event_id", models.UUIDField()),
                ("quantity", models.PositiveIntegerField()),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=14)),
                ("payment_method", models.CharField(max_length=32)),
                ("payment_details", models.JSONField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("paid", "Paid"),
                            ("used", "Used"),
                            ("failed", "Failed"),
                        ],
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("scanned_at", models.DateTimeField(blank=True, null=True)),
                ("scanned_by", models.CharField(blank=True, max_length=128, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user_id", "-created_at"], name="transaction_user_created_idx"),
                    models.Index(fields=["ticket_id"], name="transaction_ticket_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["pending", "paid", "used", "failed"])),
                        name="transaction_status_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("quantity__gte", 1)),
                        name="transaction_quantity_positive",
                    ),
                ],
            },
        ),
    ]
