from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_decimal(value) -> Decimal:
    # str() keeps the value a float prints as (0.1 stays 0.1, not 0.1000000000000000055...).
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero (5.5 -> 6, 5.4 -> 5)."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
