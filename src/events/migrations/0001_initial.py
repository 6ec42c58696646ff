import uuid

import django.core.validators
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
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(db_index=True, max_length=255)),
                ("subtitle", models.CharField(blank=True, default="", max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("start_date", models.DateTimeField(db_index=True)),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                (
                    "start_time",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Display start time, e.g. '7:00PM'. Overrides start_date time.",
                        max_length=32,
                    ),
                ),
                ("venue", models.CharField(blank=True, default="", max_length=255)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("cover_image", models.URLField(blank=True, max_length=500, null=True)),
                (
                    "cover_color",
                    models.CharField(default="#E87D2B", help_text="Ticket background colour", max_length=16),
                ),
                ("is_top_level", models.BooleanField(default=False, help_text="Festival rather than a sub-event")),
                ("is_private", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=[("draft", "Draft"), ("published", "Published"), ("cancelled", "Cancelled")],
                        db_index=True,
                        default="published",
                        max_length=20,
                    ),
                ),
                ("attendees_count", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["start_date"],
            },
        ),
        migrations.CreateModel(
            name="TicketType",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)]
                    ),
                ),
                ("currency", models.CharField(default="USD", help_text="ISO 4217 code", max_length=3)),
                (
                    "category",
                    models.CharField(
                        choices=[("general", "General"), ("group", "Group")],
                        db_index=True,
                        default="general",
                        max_length=10,
                    ),
                ),
                (
                    "ticket_type",
                    models.CharField(
                        choices=[("standard", "Standard"), ("fan", "Fan"), ("vip", "VIP")],
                        default="standard",
                        max_length=10,
                    ),
                ),
                ("max_per_user", models.PositiveIntegerField(blank=True, default=5, null=True)),
                ("min_for_group", models.PositiveIntegerField(blank=True, null=True)),
                ("max_for_group", models.PositiveIntegerField(blank=True, null=True)),
                ("sold_out", models.BooleanField(default=False)),
                ("sort_order", models.IntegerField(default=0)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="ticket_types", to="events.event"
                    ),
                ),
            ],
            options={
                "ordering": ["event", "sort_order", "ticket_type"],
                "indexes": [models.Index(fields=["event", "sort_order"], name="events_tick_event_i_3f0b1c_idx")],
            },
        ),
    ]
