class EventNotFoundError(Exception):
    """Raised when an event does not exist."""
