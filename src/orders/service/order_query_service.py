"""Read access to a user's own orders."""

from uuid import UUID

from django.contrib.auth.models import AnonymousUser
from ninja_extra.exceptions import NotAuthenticated

from accounts.models import FastivalleUser
from orders.exceptions import OrderNotFoundError
from orders.models import Order
from orders.models import OrderQuerySet


class OrderQueryService:
    """Orders as seen by their purchaser.

    Orders of other users are indistinguishable from missing ones.
    """

    def __init__(self, user: FastivalleUser | AnonymousUser | None) -> None:
        if user is None or not user.is_authenticated:
            raise NotAuthenticated()
        self.user = user

    def get_queryset(self) -> OrderQuerySet:
        return Order.objects.full().for_user(self.user)

    def get_order(self, order_id: str | UUID) -> Order:
        """Return one of the user's orders with event, items and tickets loaded.

        Raises:
            OrderNotFoundError: If the order does not exist, the id is malformed,
                or the order belongs to another user.
        """
        try:
            pk = order_id if isinstance(order_id, UUID) else UUID(str(order_id))
        except ValueError:
            raise OrderNotFoundError(order_id)
        order = self.get_queryset().filter(pk=pk).first()
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def list_ticket_groups(self) -> OrderQuerySet:
        """Completed orders of the user, most recent purchase first."""
        return self.get_queryset().completed().order_by("-purchased_at", "-created_at")
