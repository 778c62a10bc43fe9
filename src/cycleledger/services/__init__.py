"""Service layer - ledger engine and orchestration."""

from cycleledger.services.period_calculator import (
    compute_period,
    period_key,
    next_period,
    previous_period,
    shift_period,
    period_for_key,
    list_periods,
)
from cycleledger.services.classifier import (
    classification_date,
    classify,
    period_key_of,
    entries_in_period,
)
from cycleledger.services.balance_resolver import (
    opening_balance,
    net_flow,
    balance_series,
    RunningBalanceIndex,
)
from cycleledger.services.reconciliation import reconcile, instrument_statements, completion_pct
from cycleledger.services.installments import split_installments, first_billing_date
from cycleledger.services.ledger_service import LedgerService, EntryCreate, CardPurchaseCreate
from cycleledger.services.forecast_service import ForecastService
from cycleledger.services.report_service import ReportService, LedgerSnapshot

__all__ = [
    "compute_period",
    "period_key",
    "next_period",
    "previous_period",
    "shift_period",
    "period_for_key",
    "list_periods",
    "classification_date",
    "classify",
    "period_key_of",
    "entries_in_period",
    "opening_balance",
    "net_flow",
    "balance_series",
    "RunningBalanceIndex",
    "reconcile",
    "instrument_statements",
    "completion_pct",
    "split_installments",
    "first_billing_date",
    "LedgerService",
    "EntryCreate",
    "CardPurchaseCreate",
    "ForecastService",
    "ReportService",
    "LedgerSnapshot",
]
