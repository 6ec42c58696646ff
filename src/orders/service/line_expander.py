"""Turning requested lines into order items."""

from decimal import Decimal

import structlog
from django.conf import settings

from common.utils import to_cents
from events.models import TicketType
from events.service import catalog_service
from orders.models import Order, OrderItem
from orders.schema import OrderItemCreateSchema
from orders.service.ticket_issuer import TicketIssuer

logger = structlog.get_logger(__name__)


class OrderLineExpander:
    """Validates each requested line against the catalog and materializes the valid ones.

    Lines that cannot be honoured are skipped rather than failing the order:
    a missing ticket type id, a quantity below one, an unknown ticket type, a
    ticket type of another event, a sold out ticket type, or a quantity the
    ticket type does not allow on a single line, or more tickets than any
    single line may issue.
    """

    def __init__(
        self, order: Order, *, trust_client_pricing: bool = True, max_tickets_per_line: int | None = None
    ) -> None:
        self.order = order
        self.trust_client_pricing = trust_client_pricing
        self.max_tickets_per_line = max_tickets_per_line or settings.ORDER_MAX_TICKETS_PER_LINE

    def _skip(self, index: int, reason: str, **extra: object) -> None:
        logger.info("order_line_skipped", order_number=self.order.order_number, line=index, reason=reason, **extra)

    def resolve_ticket_type(self, index: int, line: OrderItemCreateSchema) -> TicketType | None:
        """Return the ticket type a line may be filled from, or None to skip it."""
        if not line.ticket_type_id:
            self._skip(index, "missing_ticket_type")
            return None
        if line.quantity is None or line.quantity < 1:
            self._skip(index, "invalid_quantity", quantity=line.quantity)
            return None

        ticket_type = catalog_service.find_ticket_type(line.ticket_type_id)
        if ticket_type is None:
            self._skip(index, "ticket_type_not_found", ticket_type_id=line.ticket_type_id)
            return None
        if ticket_type.event_id != self.order.event_id:
            self._skip(index, "event_mismatch", ticket_type_id=line.ticket_type_id)
            return None
        if ticket_type.sold_out:
            self._skip(index, "sold_out", ticket_type_id=line.ticket_type_id)
            return None
        if line.quantity > self.max_tickets_per_line or not ticket_type.accepts_quantity(line.quantity):
            self._skip(index, "quantity_out_of_bounds", ticket_type_id=line.ticket_type_id, quantity=line.quantity)
            return None
        return ticket_type

    def unit_price_for(self, line: OrderItemCreateSchema, ticket_type: TicketType) -> Decimal:
        if self.trust_client_pricing and line.unit_price:
            return to_cents(line.unit_price)
        return to_cents(ticket_type.price)

    def expand(self, lines: list[OrderItemCreateSchema], issuer: TicketIssuer) -> list[OrderItem]:
        """Create an order item per acceptable line and have its tickets issued.

        Returns:
            The created order items, in request order.
        """
        created: list[OrderItem] = []
        for index, line in enumerate(lines):
            ticket_type = self.resolve_ticket_type(index, line)
            if ticket_type is None:
                continue
            assert line.quantity is not None  # checked by resolve_ticket_type

            order_item = OrderItem.objects.create(
                order=self.order,
                ticket_type=ticket_type,
                quantity=line.quantity,
                unit_price=self.unit_price_for(line, ticket_type),
                category=line.category or TicketType.Category.GENERAL,
                ticket_type_name=line.ticket_type_name or ticket_type.display_name,
                position=len(created) + 1,
            )
            issuer.issue(order_item)
            created.append(order_item)
        return created
