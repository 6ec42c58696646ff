"""Human readable order numbers such as ``XQ7K-r4821``.

Candidates are not checked for existence up front. The caller inserts the
order and a violation of the unique constraint on ``order_number`` triggers a
fresh candidate, which keeps concurrent checkouts from racing each other.
"""

import secrets
import typing as t

import structlog
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from orders.exceptions import OrderNumberExhaustedError

logger = structlog.get_logger(__name__)

# No 0/O or 1/I, so numbers survive being read out loud at the gate.
ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
PREFIX_LENGTH = 4

T = t.TypeVar("T")


def generate_order_number() -> str:
    """Draw a new candidate: 4 alphabet characters, ``-r`` and 4 digits."""
    prefix = "".join(secrets.choice(ALPHABET) for _ in range(PREFIX_LENGTH))
    return f"{prefix}-r{1000 + secrets.randbelow(9000)}"


def is_order_number_collision(exc: Exception) -> bool:
    """Whether the error was caused by a duplicate order number."""
    if isinstance(exc, DjangoValidationError):
        return "order_number" in getattr(exc, "error_dict", {})
    return "order_number" in str(exc)


def create_with_unique_order_number(create: t.Callable[[str], T], max_attempts: int | None = None) -> T:
    """Run ``create`` with fresh order numbers until one is accepted by the store.

    Each attempt runs in its own savepoint so a rejected insert does not
    poison an enclosing transaction.

    Raises:
        OrderNumberExhaustedError: If every attempt collided.
    """
    attempts = max_attempts or settings.ORDER_NUMBER_MAX_ATTEMPTS
    for attempt in range(1, attempts + 1):
        candidate = generate_order_number()
        try:
            with transaction.atomic():
                return create(candidate)
        except (IntegrityError, DjangoValidationError) as exc:
            if not is_order_number_collision(exc):
                raise
            logger.warning("order_number_collision", order_number=candidate, attempt=attempt)

    logger.error("order_number_exhausted", attempts=attempts)
    raise OrderNumberExhaustedError(attempts)
