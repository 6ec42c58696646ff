from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_cents(value: Decimal | int | float | str) -> Decimal:
    """Round a money amount to two decimals, halves away from zero."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
