"""Domain models package."""

from cycleledger.domain.models.enums import FlowType
from cycleledger.domain.models.account import (
    Account,
    CreditInstrument,
    validate_closing_day,
    MIN_CLOSING_DAY,
    MAX_CLOSING_DAY,
)
from cycleledger.domain.models.category import Category
from cycleledger.domain.models.entry import LedgerEntry, OPENING_BALANCE_MARKER
from cycleledger.domain.models.forecast import ForecastEntry

__all__ = [
    "FlowType",
    "Account",
    "CreditInstrument",
    "validate_closing_day",
    "MIN_CLOSING_DAY",
    "MAX_CLOSING_DAY",
    "Category",
    "LedgerEntry",
    "OPENING_BALANCE_MARKER",
    "ForecastEntry",
]
