"""Order creation: ledger, line expansion and ticket issuance in one transaction."""

from decimal import Decimal

import structlog
from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from django.db import transaction
from ninja_extra.exceptions import NotAuthenticated

from accounts.models import FastivalleUser
from orders.models import Order, OrderItem
from orders.schema import OrderCreateSchema
from orders.service.line_expander import OrderLineExpander
from orders.service.order_ledger import OrderLedger
from orders.service.ticket_issuer import TicketIssuer

logger = structlog.get_logger(__name__)


def _recompute_total(order: Order, items: list[OrderItem]) -> None:
    total = sum((item.unit_price * item.quantity for item in items), Decimal("0"))
    order.subtotal = total
    order.total_amount = total
    order.save(update_fields=["subtotal", "total_amount", "updated_at"])


@transaction.atomic
def create_order(user: FastivalleUser | AnonymousUser | None, payload: OrderCreateSchema) -> Order:
    """Create a completed order with its items and tickets.

    Unusable lines are skipped, so the order may hold fewer tickets than
    requested, or none at all. Any unexpected failure rolls back the whole
    order.

    Raises:
        NotAuthenticated: If there is no authenticated purchaser.
        InvalidOrderRequestError: If the event id or the items are missing.
        EventNotFoundError: If the event does not exist.
        OrderNumberExhaustedError: If no free order number could be allocated.
    """
    if user is None or not user.is_authenticated:
        raise NotAuthenticated()

    ledger = OrderLedger(user)
    event = ledger.validate(payload)
    order = ledger.open(event, payload)

    trust_client_pricing = settings.ORDERS_TRUST_CLIENT_PRICING
    issuer = TicketIssuer(order, purchaser=user)
    expander = OrderLineExpander(order, trust_client_pricing=trust_client_pricing)
    items = expander.expand(payload.items or [], issuer)

    if not trust_client_pricing:
        _recompute_total(order, items)

    logger.info(
        "order_created",
        order_number=order.order_number,
        event_id=str(event.id),
        user_id=str(user.id),
        requested_lines=len(payload.items or []),
        created_lines=len(items),
        ticket_count=issuer.issued,
    )
    return Order.objects.full().get(pk=order.pk)
