"""Order and ticket schemas exchanged with the mobile client."""

import typing as t
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from common.schema import CamelSchema
from events.models import TicketType
from events.schema import EventSummarySchema, TicketGroupEventSchema
from orders.models import Order, Ticket


class OrderItemCreateSchema(CamelSchema):
    """A requested line. Incomplete lines are tolerated and skipped at checkout."""

    ticket_type_id: str | None = None
    quantity: int | None = None
    unit_price: Decimal | None = Field(None, ge=0)
    category: TicketType.Category | None = None
    ticket_type_name: str | None = Field(None, max_length=255)


class OrderCreateSchema(CamelSchema):
    event_id: str | None = None
    items: list[OrderItemCreateSchema] | None = None
    total_amount: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    payment_method: Order.PaymentMethod | None = None


class TicketSchema(CamelSchema):
    id: UUID
    ticket_number: str
    status: Ticket.TicketStatus
    qr_code: str


class OrderSchema(CamelSchema):
    id: UUID
    order_number: str
    total_amount: float
    currency: str
    status: Order.OrderStatus
    event: EventSummarySchema | None = None
    category: str
    ticket_type: str
    quantity: int

    @staticmethod
    def resolve_category(obj: Order) -> str:
        return obj.display_category

    @staticmethod
    def resolve_ticket_type(obj: Order) -> str:
        return obj.display_ticket_type

    @staticmethod
    def resolve_quantity(obj: Order) -> int:
        return len(obj.issued_tickets())


class OrderDetailSchema(OrderSchema):
    tickets: list[TicketSchema]

    @staticmethod
    def resolve_tickets(obj: Order) -> list[Ticket]:
        return obj.issued_tickets()


class TicketGroupSchema(CamelSchema):
    """All tickets of one order, as listed on the "my tickets" screen."""

    order_id: UUID
    order_number: str
    event: TicketGroupEventSchema
    ticket_count: int
    valid_count: int
    tickets: list[TicketSchema]

    @staticmethod
    def resolve_order_id(obj: Order) -> UUID:
        return obj.id

    @staticmethod
    def resolve_ticket_count(obj: Order) -> int:
        return len(obj.issued_tickets())

    @staticmethod
    def resolve_valid_count(obj: Order) -> int:
        return sum(1 for ticket in obj.issued_tickets() if ticket.status == Ticket.TicketStatus.VALID)

    @staticmethod
    def resolve_tickets(obj: Order) -> list[Ticket]:
        return obj.issued_tickets()


class TicketGroupListSchema(CamelSchema):
    ticket_groups: list[TicketGroupSchema]


class OrderResponse(CamelSchema):
    success: t.Literal[True] = True
    data: OrderSchema


class OrderDetailResponse(CamelSchema):
    success: t.Literal[True] = True
    data: OrderDetailSchema


class TicketGroupListResponse(CamelSchema):
    success: t.Literal[True] = True
    data: TicketGroupListSchema
