"""Money helpers - all engine amounts are integer cents"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """Round to a whole number of minor units, halves away from zero (2.5 -> 3, -2.5 -> -3)"""
    if isinstance(value, float):
        value = Decimal(str(value))
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def dollars_to_cents(dollars: Number) -> int:
    """Convert a dollar figure at the engine boundary ($1000 -> 100000)"""
    if isinstance(dollars, float):
        dollars = Decimal(str(dollars))
    return round_half_up(Decimal(dollars) * 100)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert cents to an exact dollar Decimal for display"""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))
