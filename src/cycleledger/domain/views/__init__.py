"""View models for service outputs."""

from cycleledger.domain.views.period import Period
from cycleledger.domain.views.installment import Installment
from cycleledger.domain.views.reconciliation import (
    CategoryReconciliation,
    ReconciliationTotals,
    ReconciliationResult,
    InstrumentStatement,
    BalancePoint,
    PeriodReport,
    UNCATEGORIZED_INCOME_ID,
    UNCATEGORIZED_EXPENSE_ID,
    UNCATEGORIZED_NAME,
)

__all__ = [
    "Period",
    "Installment",
    "CategoryReconciliation",
    "ReconciliationTotals",
    "ReconciliationResult",
    "InstrumentStatement",
    "BalancePoint",
    "PeriodReport",
    "UNCATEGORIZED_INCOME_ID",
    "UNCATEGORIZED_EXPENSE_ID",
    "UNCATEGORIZED_NAME",
]
