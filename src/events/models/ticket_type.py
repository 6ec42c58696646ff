from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import MinValueValidator
from django.db import models

from common.models import TimeStampedModel

DOT_COLORS = {
    "standard": "#9E9E9E",
    "fan": "#2196F3",
    "vip": "#F44336",
}


class TicketType(TimeStampedModel):
    """A purchasable kind of ticket for one event."""

    class Category(models.TextChoices):
        GENERAL = "general", "General"
        GROUP = "group", "Group"

    class Kind(models.TextChoices):
        STANDARD = "standard", "Standard"
        FAN = "fan", "Fan"
        VIP = "vip", "VIP"

    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="ticket_types")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    currency = models.CharField(max_length=3, default=settings.ORDERS_DEFAULT_CURRENCY, help_text="ISO 4217 code")
    category = models.CharField(max_length=10, choices=Category.choices, default=Category.GENERAL, db_index=True)
    ticket_type = models.CharField(max_length=10, choices=Kind.choices, default=Kind.STANDARD)
    max_per_user = models.PositiveIntegerField(null=True, blank=True, default=5)
    min_for_group = models.PositiveIntegerField(null=True, blank=True)
    max_for_group = models.PositiveIntegerField(null=True, blank=True)
    sold_out = models.BooleanField(default=False)
    sort_order = models.IntegerField(default=0)

    class Meta:
        ordering = ["event", "sort_order", "ticket_type"]
        indexes = [models.Index(fields=["event", "sort_order"], name="events_tick_event_i_3f0b1c_idx")]

    def __str__(self) -> str:
        return f"{self.name} - {self.price} {self.currency}"

    def clean(self) -> None:
        """Validate group size bounds."""
        super().clean()
        if self.min_for_group and self.max_for_group and self.max_for_group < self.min_for_group:
            raise DjangoValidationError({"max_for_group": "Maximum group size must not be below the minimum."})

    def accepts_quantity(self, quantity: int) -> bool:
        """Whether a single line of this type may carry the given quantity."""
        if self.category == self.Category.GROUP:
            if self.min_for_group is not None and quantity < self.min_for_group:
                return False
            if self.max_for_group is not None and quantity > self.max_for_group:
                return False
            return True
        return self.max_per_user is None or quantity <= self.max_per_user

    @property
    def display_name(self) -> str:
        """Upper-cased kind, as printed on tickets."""
        return str(self.ticket_type or "").upper()

    @property
    def dot_color(self) -> str:
        return DOT_COLORS.get(self.ticket_type, DOT_COLORS["vip"])
