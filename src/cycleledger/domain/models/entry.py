"""Ledger entry domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

# Description reserved for entries that carry an already rolled-up balance.
OPENING_BALANCE_MARKER = "Opening balance"


@dataclass
class LedgerEntry:
    """
    Single signed movement on an account (source of truth).

    Income is positive and expense negative. Charges on a credit instrument
    carry a ``billing_date`` (first day of the statement month) which decides
    the period they are reported in.
    """

    entry_id: str
    account_id: str
    category_id: Optional[str]
    date: date
    amount: Decimal
    description: str = ""
    credit_instrument_id: Optional[str] = None
    billing_date: Optional[date] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))

    @property
    def is_opening_balance(self) -> bool:
        """Return True for the sentinel entry holding a pre-rolled balance."""
        return self.description == OPENING_BALANCE_MARKER

    @property
    def is_instrument_charge(self) -> bool:
        return self.credit_instrument_id is not None
