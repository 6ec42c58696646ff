"""Catalog schemas."""

import typing as t
from uuid import UUID

from common.schema import CamelSchema
from events.models import Event, TicketType
from events.utils import format_date_range, format_event_date

DEFAULT_TICKET_DESCRIPTION = "Ticket includes full event entry."


class EventSummarySchema(CamelSchema):
    """Event block embedded in orders and ticket screens."""

    id: UUID
    title: str
    date: str
    subtitle: str
    stage: str
    cover_image: str | None = None
    cover_color: str

    @staticmethod
    def resolve_date(obj: Event) -> str:
        return format_event_date(obj.start_date, obj.start_time)

    @staticmethod
    def resolve_stage(obj: Event) -> str:
        return obj.venue or ""


class TicketGroupEventSchema(EventSummarySchema):
    date_range: str
    attendees: int

    @staticmethod
    def resolve_date_range(obj: Event) -> str:
        return format_date_range(obj.start_date, obj.end_date, obj.start_time)

    @staticmethod
    def resolve_attendees(obj: Event) -> int:
        return obj.attendees_count or 0


class TicketTypeSchema(CamelSchema):
    id: UUID
    name: str
    price: float
    currency: str
    description: str
    ticket_type: TicketType.Kind
    sold_out: bool
    max_per_user: int | None = None
    min_for_group: int | None = None
    max_for_group: int | None = None
    dot_color: str

    @staticmethod
    def resolve_description(obj: TicketType) -> str:
        return obj.description or DEFAULT_TICKET_DESCRIPTION


class GeneralTicketTypeSchema(TicketTypeSchema):
    qty_key: str

    @staticmethod
    def resolve_qty_key(obj: TicketType) -> str:
        return str(obj.ticket_type)


class EventTicketTypesSchema(CamelSchema):
    general_tickets: list[GeneralTicketTypeSchema]
    group_tickets: list[TicketTypeSchema]


class EventTicketTypesResponse(CamelSchema):
    success: t.Literal[True] = True
    data: EventTicketTypesSchema
