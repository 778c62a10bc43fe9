"""View models for reconciliation and period reporting."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from cycleledger.domain.models.enums import FlowType
from cycleledger.domain.views.period import Period

UNCATEGORIZED_INCOME_ID = "uncategorized-income"
UNCATEGORIZED_EXPENSE_ID = "uncategorized-expense"
UNCATEGORIZED_NAME = "Uncategorized"


@dataclass
class CategoryReconciliation:
    """Actual vs forecast figures for one category in one period."""

    category_id: str
    name: str
    flow_type: FlowType
    actual: Decimal
    forecasted: Decimal
    diff: Decimal
    completion_pct: Decimal
    parent_id: Optional[str] = None


@dataclass
class ReconciliationTotals:
    """Period totals over the reported categories."""

    income_actual: Decimal = field(default_factory=lambda: Decimal("0.00"))
    income_forecasted: Decimal = field(default_factory=lambda: Decimal("0.00"))
    expense_actual: Decimal = field(default_factory=lambda: Decimal("0.00"))
    expense_forecasted: Decimal = field(default_factory=lambda: Decimal("0.00"))

    @property
    def net_actual(self) -> Decimal:
        return self.income_actual - self.expense_actual

    @property
    def net_forecasted(self) -> Decimal:
        return self.income_forecasted - self.expense_forecasted


@dataclass
class ReconciliationResult:
    """Per-category reconciliation for a period plus its totals."""

    period: Period
    per_category: dict[str, CategoryReconciliation] = field(default_factory=dict)
    totals: ReconciliationTotals = field(default_factory=ReconciliationTotals)

    def by_flow(self, flow_type: FlowType) -> list[CategoryReconciliation]:
        """Categories of one flow direction, ordered by name."""
        rows = [r for r in self.per_category.values() if r.flow_type == flow_type]
        return sorted(rows, key=lambda r: (r.name.lower(), r.category_id))

    @property
    def income(self) -> list[CategoryReconciliation]:
        return self.by_flow(FlowType.INCOME)

    @property
    def expense(self) -> list[CategoryReconciliation]:
        return self.by_flow(FlowType.EXPENSE)


@dataclass
class InstrumentStatement:
    """Amount charged to one credit instrument within a period."""

    instrument_id: str
    name: str
    total: Decimal
    entry_count: int


@dataclass
class BalancePoint:
    """Opening, flow and closing balance of one period."""

    period: Period
    opening_balance: Decimal
    net_flow: Decimal

    @property
    def closing_balance(self) -> Decimal:
        return self.opening_balance + self.net_flow


@dataclass
class PeriodReport:
    """Everything the report screens need for one account period."""

    account_id: str
    currency: str
    period: Period
    opening_balance: Decimal
    reconciliation: ReconciliationResult
    net_flow: Decimal
    instrument_statements: list[InstrumentStatement] = field(default_factory=list)
    as_of: Optional[datetime] = None

    @property
    def closing_balance(self) -> Decimal:
        return self.opening_balance + self.net_flow
