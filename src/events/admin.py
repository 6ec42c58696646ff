"""Admin for the event catalog."""

from django.contrib import admin
from django.db.models import Count
from django.db.models.query import QuerySet
from django.http import HttpRequest
from unfold.admin import ModelAdmin, TabularInline

from events import models


class TicketTypeInline(TabularInline):  # type: ignore[misc]
    model = models.TicketType
    extra = 1
    fields = ["name", "category", "ticket_type", "price", "currency", "sold_out", "sort_order"]
    ordering = ["sort_order", "ticket_type"]


@admin.register(models.Event)
class EventAdmin(ModelAdmin):  # type: ignore[misc]
    list_display = ["title", "start_date", "end_date", "venue", "status", "is_top_level", "order_count"]
    list_filter = ["status", "is_top_level", "is_private", "start_date"]
    search_fields = ["title", "subtitle", "venue", "address"]
    date_hierarchy = "start_date"
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [TicketTypeInline]
    fieldsets = (
        (None, {"fields": ("id", "title", "subtitle", "description", "status")}),
        ("Schedule", {"fields": (("start_date", "end_date"), "start_time")}),
        ("Place", {"fields": ("venue", "address")}),
        ("Display", {"fields": ("cover_image", "cover_color", "is_top_level", "is_private", "attendees_count")}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )

    def get_queryset(self, request: HttpRequest) -> QuerySet[models.Event]:
        return super().get_queryset(request).annotate(num_orders=Count("orders"))

    @admin.display(description="Orders", ordering="num_orders")
    def order_count(self, obj: models.Event) -> int:
        return getattr(obj, "num_orders", 0)


@admin.register(models.TicketType)
class TicketTypeAdmin(ModelAdmin):  # type: ignore[misc]
    list_display = ["name", "event", "category", "ticket_type", "price", "currency", "sold_out", "sort_order"]
    list_filter = ["category", "ticket_type", "sold_out"]
    list_editable = ["sold_out", "sort_order"]
    search_fields = ["name", "event__title"]
    autocomplete_fields = ["event"]
    readonly_fields = ["id", "created_at", "updated_at"]
