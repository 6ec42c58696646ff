from .event import Event
from .ticket_type import TicketType

__all__ = [
    "Event",
    "TicketType",
]
