"""Admin interface for accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.db.models import Count
from django.db.models.query import QuerySet
from django.http import HttpRequest
from unfold.admin import ModelAdmin

from accounts.models import FastivalleUser


@admin.register(FastivalleUser)
class FastivalleUserAdmin(UserAdmin, ModelAdmin):  # type: ignore[type-arg,misc]
    list_display = [
        "username",
        "email",
        "display_name",
        "is_staff",
        "is_active",
        "date_joined",
        "order_count",
    ]
    list_filter = ["is_staff", "is_superuser", "is_active", "date_joined", "last_login"]
    search_fields = ["username", "first_name", "last_name", "email", "preferred_name", "phone_number"]
    ordering = ["-date_joined"]
    date_hierarchy = "date_joined"
    readonly_fields = ["id", "date_joined", "last_login"]

    fieldsets = (
        (
            "Personal Information",
            {
                "fields": (
                    "id",
                    ("username", "email"),
                    ("first_name", "last_name"),
                    "preferred_name",
                    "phone_number",
                    "language",
                )
            },
        ),
        ("Authentication", {"fields": ("password", ("date_joined", "last_login"))}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
    )

    def get_queryset(self, request: HttpRequest) -> QuerySet[FastivalleUser]:
        """Annotate the number of orders placed."""
        return super().get_queryset(request).annotate(num_orders=Count("orders"))

    @admin.display(description="Orders", ordering="num_orders")
    def order_count(self, obj: FastivalleUser) -> int:
        return getattr(obj, "num_orders", 0)
