"""Read access to the event catalog (events and their ticket types)."""

from uuid import UUID

from events.exceptions import EventNotFoundError
from events.models import Event, TicketType


def _parse_uuid(value: str | UUID | None) -> UUID | None:
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def get_event(event_id: str | UUID | None) -> Event:
    """Return the event or raise EventNotFoundError.

    Malformed ids are reported as not found.
    """
    pk = _parse_uuid(event_id)
    if pk is None:
        raise EventNotFoundError(event_id)
    try:
        return Event.objects.get(pk=pk)
    except Event.DoesNotExist:
        raise EventNotFoundError(event_id)


def find_ticket_type(ticket_type_id: str | UUID | None) -> TicketType | None:
    """Return the ticket type, or None when it is missing or the id is malformed."""
    pk = _parse_uuid(ticket_type_id)
    if pk is None:
        return None
    return TicketType.objects.filter(pk=pk).first()


def list_ticket_types(event: Event) -> tuple[list[TicketType], list[TicketType]]:
    """Ticket types of an event split into (general, group), in display order."""
    ticket_types = list(TicketType.objects.filter(event=event).order_by("sort_order", "ticket_type"))
    general = [tt for tt in ticket_types if tt.category == TicketType.Category.GENERAL]
    group = [tt for tt in ticket_types if tt.category == TicketType.Category.GROUP]
    return general, group
