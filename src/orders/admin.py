"""Admin for orders and issued tickets."""

import typing as t

from django.contrib import admin, messages
from django.db.models.query import QuerySet
from django.http import HttpRequest
from django.urls import reverse
from django.utils.html import format_html
from unfold.admin import ModelAdmin, TabularInline

from orders import models
from orders.exceptions import InvalidOrderTransitionError


class UserLinkMixin:
    """Mixin to add a link to the purchaser."""

    def user_link(self, obj: t.Any) -> str:
        url = reverse("admin:accounts_fastivalleuser_change", args=[obj.user.id])
        return format_html('<a href="{}">{}</a>', url, obj.user.username)

    user_link.short_description = "User"  # type: ignore[attr-defined]


class EventLinkMixin:
    """Mixin to add a link to the event."""

    def event_link(self, obj: t.Any) -> str:
        url = reverse("admin:events_event_change", args=[obj.event.id])
        return format_html('<a href="{}">{}</a>', url, obj.event.title)

    event_link.short_description = "Event"  # type: ignore[attr-defined]


class OrderItemInline(TabularInline):  # type: ignore[misc]
    model = models.OrderItem
    extra = 0
    show_change_link = True
    fields = ["position", "ticket_type", "ticket_type_name", "category", "quantity", "unit_price"]
    readonly_fields = fields
    can_delete = False


class TicketInline(TabularInline):  # type: ignore[misc]
    model = models.Ticket
    extra = 0
    fields = ["sequence", "ticket_number", "qr_code", "status", "assigned_to", "used_at"]
    readonly_fields = ["sequence", "ticket_number", "qr_code"]
    autocomplete_fields = ["assigned_to"]
    can_delete = False


def _transition(modeladmin: ModelAdmin, request: HttpRequest, queryset: QuerySet[models.Order], status: str) -> None:
    moved = 0
    for order in queryset:
        try:
            order.transition_to(status)  # type: ignore[arg-type]
            moved += 1
        except InvalidOrderTransitionError as exc:
            modeladmin.message_user(request, f"{order.order_number}: {' '.join(exc.messages)}", messages.WARNING)
    modeladmin.message_user(request, f"{moved} order(s) marked as {status}.", messages.SUCCESS)


@admin.register(models.Order)
class OrderAdmin(ModelAdmin, UserLinkMixin, EventLinkMixin):  # type: ignore[misc]
    list_display = [
        "order_number",
        "user_link",
        "event_link",
        "total_amount",
        "currency",
        "status",
        "payment_method",
        "purchased_at",
    ]
    list_filter = ["status", "payment_method", "currency", "purchased_at"]
    search_fields = ["order_number", "user__username", "user__email", "event__title"]
    autocomplete_fields = ["user", "event"]
    readonly_fields = ["id", "order_number", "purchased_at", "refunded_at", "created_at", "updated_at"]
    date_hierarchy = "purchased_at"
    inlines = [OrderItemInline]
    actions = ["mark_refunded", "mark_cancelled"]

    @admin.action(description="Refund selected orders")
    def mark_refunded(self, request: HttpRequest, queryset: QuerySet[models.Order]) -> None:
        _transition(self, request, queryset, models.Order.OrderStatus.REFUNDED)

    @admin.action(description="Cancel selected orders")
    def mark_cancelled(self, request: HttpRequest, queryset: QuerySet[models.Order]) -> None:
        _transition(self, request, queryset, models.Order.OrderStatus.CANCELLED)


@admin.register(models.OrderItem)
class OrderItemAdmin(ModelAdmin):  # type: ignore[misc]
    list_display = ["__str__", "order", "ticket_type", "category", "quantity", "unit_price"]
    list_filter = ["category"]
    search_fields = ["order__order_number", "ticket_type_name"]
    autocomplete_fields = ["order", "ticket_type"]
    inlines = [TicketInline]


@admin.register(models.Ticket)
class TicketAdmin(ModelAdmin):  # type: ignore[misc]
    list_display = ["ticket_number", "order_number", "status", "assigned_to", "used_at"]
    list_filter = ["status"]
    search_fields = ["ticket_number", "qr_code", "order_item__order__order_number", "assigned_to__username"]
    autocomplete_fields = ["assigned_to"]
    readonly_fields = ["id", "order_item", "sequence", "ticket_number", "qr_code", "created_at", "updated_at"]

    @admin.display(description="Order", ordering="order_item__order__order_number")
    def order_number(self, obj: models.Ticket) -> str:
        return obj.order_item.order.order_number
