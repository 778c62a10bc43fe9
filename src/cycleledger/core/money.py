"""Fixed-point money helpers.

Amounts travel as two-place ``Decimal`` values and are accumulated as integer
cents so that long histories never drift.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize(amount: Union[Decimal, int, str]) -> Decimal:
    """Round an amount to whole cents."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: Union[Decimal, int, str]) -> int:
    """Convert an amount to integer minor units."""
    return int(quantize(amount) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer minor units back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


def sum_cents(amounts: Iterable[Union[Decimal, int, str]]) -> int:
    """Sum amounts exactly, returning cents."""
    return sum((to_cents(a) for a in amounts), 0)
