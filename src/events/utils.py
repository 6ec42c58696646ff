"""Display formatting shared by every endpoint that renders an event."""

from datetime import datetime

from django.utils import timezone

MONTHS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]


def _local(value: datetime) -> datetime:
    return timezone.localtime(value) if timezone.is_aware(value) else value


def format_event_date(start_date: datetime | None, start_time: str | None = None) -> str:
    """Render an event start as shown on tickets.

    Examples:
        ``"JUL 5, 8:00PM"`` from the timestamp, or ``"JUL 5, Doors 19h"`` when
        a free-text ``start_time`` is set.
    """
    if start_date is None:
        return ""
    local = _local(start_date)
    day = f"{MONTHS[local.month - 1]} {local.day}"
    if start_time:
        return f"{day}, {start_time}"
    hour = local.hour % 12 or 12
    suffix = "PM" if local.hour >= 12 else "AM"
    return f"{day}, {hour}:{local.minute:02d}{suffix}"


def format_date_range(start_date: datetime | None, end_date: datetime | None, start_time: str | None = None) -> str:
    """Render ``"JUL 5-7"`` for multi-day events, otherwise just the day part."""
    if start_date is None:
        return ""
    start = _local(start_date)
    if end_date is None or _local(end_date).date() == start.date():
        return format_event_date(start_date, start_time).split(",")[0]
    return f"{MONTHS[start.month - 1]} {start.day}-{_local(end_date).day}"
