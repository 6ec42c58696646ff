"""Opening order headers."""

import structlog
from django.conf import settings
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.models import FastivalleUser
from common.utils import to_cents
from events.models import Event
from events.service import catalog_service
from orders.exceptions import InvalidOrderRequestError
from orders.models import Order
from orders.schema import OrderCreateSchema
from orders.service import order_numbers

logger = structlog.get_logger(__name__)


class OrderLedger:
    """Validates an order request and persists its header."""

    def __init__(self, user: FastivalleUser) -> None:
        self.user = user

    def validate(self, payload: OrderCreateSchema) -> Event:
        """Check the request before anything is written.

        Raises:
            InvalidOrderRequestError: If the event id or the items are missing.
            EventNotFoundError: If the event does not exist.
        """
        if not payload.event_id or not payload.items:
            raise InvalidOrderRequestError(str(_("eventId and items required")))
        return catalog_service.get_event(payload.event_id)

    def open(self, event: Event, payload: OrderCreateSchema) -> Order:
        """Persist a completed order under a freshly allocated order number."""
        purchased_at = timezone.now()

        def _create(order_number: str) -> Order:
            return Order.objects.create(
                user=self.user,
                event=event,
                order_number=order_number,
                total_amount=to_cents(payload.total_amount or 0),
                currency=payload.currency or settings.ORDERS_DEFAULT_CURRENCY,
                status=Order.OrderStatus.COMPLETED,
                payment_method=payload.payment_method or settings.ORDERS_DEFAULT_PAYMENT_METHOD,
                purchased_at=purchased_at,
            )

        order = order_numbers.create_with_unique_order_number(_create)
        logger.info("order_opened", order_number=order.order_number, event_id=str(event.id), user_id=str(self.user.id))
        return order
