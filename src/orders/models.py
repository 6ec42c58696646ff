import typing as t

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from common.models import TimeStampedModel
from events.models import TicketType

from .exceptions import InvalidOrderTransitionError

if t.TYPE_CHECKING:
    from accounts.models import FastivalleUser


class OrderQuerySet(models.QuerySet["Order"]):
    def for_user(self, user: "FastivalleUser") -> t.Self:
        """Orders purchased by the given user."""
        return self.filter(user=user)

    def completed(self) -> t.Self:
        return self.filter(status=Order.OrderStatus.COMPLETED)

    def full(self) -> t.Self:
        """Select everything the order detail screen renders."""
        return self.select_related("event").prefetch_related("items__ticket_type", "items__tickets")


class OrderManager(models.Manager["Order"]):
    def get_queryset(self) -> OrderQuerySet:
        return OrderQuerySet(self.model, using=self._db)

    def for_user(self, user: "FastivalleUser") -> OrderQuerySet:
        return self.get_queryset().for_user(user)

    def full(self) -> OrderQuerySet:
        return self.get_queryset().full()


class Order(TimeStampedModel):
    """One purchase transaction of a user for one event."""

    class OrderStatus(models.TextChoices):
        PENDING = "pending", "Pending"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"
        REFUNDED = "refunded", "Refunded"

    class PaymentMethod(models.TextChoices):
        APPLE_PAY = "apple_pay", "Apple Pay"
        CARD = "card", "Card"
        OTHER = "other", "Other"

    ALLOWED_TRANSITIONS: t.ClassVar[dict[str, set[str]]] = {
        OrderStatus.PENDING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
        OrderStatus.COMPLETED: {OrderStatus.REFUNDED, OrderStatus.CANCELLED},
        OrderStatus.CANCELLED: set(),
        OrderStatus.REFUNDED: set(),
    }

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="orders")
    event = models.ForeignKey("events.Event", on_delete=models.PROTECT, related_name="orders")
    order_number = models.CharField(max_length=16, unique=True)
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    currency = models.CharField(max_length=3, default=settings.ORDERS_DEFAULT_CURRENCY)
    subtotal = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    platform_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    processing_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    donation_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING, db_index=True)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices, null=True, blank=True)
    payment_details = models.JSONField(default=dict, blank=True)
    purchased_at = models.DateTimeField(null=True, blank=True)
    refunded_at = models.DateTimeField(null=True, blank=True)

    objects = OrderManager()

    class Meta:
        ordering = ["-purchased_at", "-created_at"]
        indexes = [
            models.Index(fields=["user", "status"], name="orders_orde_user_id_6c1e2a_idx"),
            models.Index(fields=["event"], name="orders_orde_event_i_9d4b7f_idx"),
        ]

    def __str__(self) -> str:
        return f"Order {self.order_number}"

    def first_item(self) -> "OrderItem | None":
        items = list(self.items.all())
        return items[0] if items else None

    def issued_tickets(self) -> list["Ticket"]:
        """Tickets across all lines, in issue order."""
        tickets = [ticket for item in self.items.all() for ticket in item.tickets.all()]
        return sorted(tickets, key=lambda ticket: ticket.sequence)

    @property
    def display_category(self) -> str:
        """Category label of the first line; mixed orders show only that one."""
        first = self.first_item()
        return "Group" if first and first.category == TicketType.Category.GROUP else "General"

    @property
    def display_ticket_type(self) -> str:
        first = self.first_item()
        if first is None:
            return "STANDARD"
        return (first.ticket_type_name or first.ticket_type.ticket_type or "STANDARD").upper()

    def can_transition_to(self, status: str) -> bool:
        return status in self.ALLOWED_TRANSITIONS.get(self.status, set())

    def transition_to(self, status: "Order.OrderStatus") -> None:
        """Move the order to a new status.

        Raises:
            InvalidOrderTransitionError: If the lifecycle forbids the move.
        """
        if not self.can_transition_to(status):
            raise InvalidOrderTransitionError(
                {"status": [_("Cannot move an order from {old} to {new}.").format(old=self.status, new=status)]}
            )
        self.status = status
        update_fields = ["status", "updated_at"]
        if status == self.OrderStatus.REFUNDED:
            self.refunded_at = timezone.now()
            update_fields.append("refunded_at")
        self.save(update_fields=update_fields)
        if status in (self.OrderStatus.CANCELLED, self.OrderStatus.REFUNDED):
            Ticket.objects.filter(order_item__order=self).update(status=Ticket.TicketStatus.CANCELLED)


class OrderItem(TimeStampedModel):
    """A line of an order: one ticket type and a quantity, priced at purchase time."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    ticket_type = models.ForeignKey(TicketType, on_delete=models.PROTECT, related_name="order_items")
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.CharField(max_length=10, choices=TicketType.Category.choices, default=TicketType.Category.GENERAL)
    ticket_type_name = models.CharField(max_length=255, blank=True, default="")
    position = models.PositiveIntegerField(default=1, help_text="Position of the line within its order.")

    class Meta:
        ordering = ["order", "position"]

    def __str__(self) -> str:
        return f"{self.quantity} x {self.ticket_type_name or self.ticket_type_id} ({self.order_id})"


class Ticket(TimeStampedModel):
    """One admission unit issued for an order item."""

    class TicketStatus(models.TextChoices):
        VALID = "valid", "Valid"
        USED = "used", "Used"
        CANCELLED = "cancelled", "Cancelled"

    order_item = models.ForeignKey(OrderItem, on_delete=models.CASCADE, related_name="tickets")
    sequence = models.PositiveIntegerField(help_text="Position of the ticket within its order, starting at 1.")
    ticket_number = models.CharField(max_length=64, unique=True)
    qr_code = models.CharField(max_length=64, unique=True)
    status = models.CharField(max_length=20, choices=TicketStatus.choices, default=TicketStatus.VALID, db_index=True)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_tickets",
        help_text="Holder of the ticket. Unassigned tickets can be claimed later.",
    )
    used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["sequence"]

    def __str__(self) -> str:
        return self.ticket_number
