"""Currency rounding helpers. All amounts are USD with cent precision."""

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    """Round half-up to the cent."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def floor2(value: Decimal) -> Decimal:
    """Truncate down to the cent."""
    return value.quantize(CENT, rounding=ROUND_FLOOR)
