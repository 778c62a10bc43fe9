"""Domain layer - pure ledger models with no external dependencies."""

from cycleledger.domain.models import (
    FlowType,
    Account,
    CreditInstrument,
    Category,
    LedgerEntry,
    ForecastEntry,
    OPENING_BALANCE_MARKER,
)
from cycleledger.domain.views import Period, Installment

__all__ = [
    "FlowType",
    "Account",
    "CreditInstrument",
    "Category",
    "LedgerEntry",
    "ForecastEntry",
    "OPENING_BALANCE_MARKER",
    "Period",
    "Installment",
]
