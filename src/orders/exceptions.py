from django.core.exceptions import ValidationError as DjangoValidationError


class InvalidOrderRequestError(Exception):
    """Raised when an order request lacks its event or line items."""


class OrderNotFoundError(Exception):
    """Raised when an order does not exist or belongs to someone else."""


class OrderNumberExhaustedError(Exception):
    """Raised when no unused order number was found within the allowed attempts."""


class InvalidOrderTransitionError(DjangoValidationError):
    """Raised when an order status change is not allowed by its lifecycle."""
