"""Installment view model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Installment:
    """One part of a split credit-instrument purchase."""

    sequence: int
    count: int
    period_key: str
    billing_date: date
    amount: Decimal

    @property
    def label(self) -> str:
        return f"{self.sequence}/{self.count}"
