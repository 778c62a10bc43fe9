"""Category reconciliation of actual flow against forecasts."""

import logging
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

from cycleledger.core.money import ZERO, from_cents, to_cents
from cycleledger.domain.models import Category, CreditInstrument, FlowType, ForecastEntry, LedgerEntry
from cycleledger.domain.views import (
    CategoryReconciliation,
    InstrumentStatement,
    Period,
    ReconciliationResult,
    ReconciliationTotals,
    UNCATEGORIZED_EXPENSE_ID,
    UNCATEGORIZED_INCOME_ID,
    UNCATEGORIZED_NAME,
)
from cycleledger.services.classifier import entries_in_period

logger = logging.getLogger(__name__)

PERCENT_PLACES = Decimal("0.01")
UNCATEGORIZED_IDS = (UNCATEGORIZED_INCOME_ID, UNCATEGORIZED_EXPENSE_ID)


def completion_pct(actual_cents: int, forecasted_cents: int) -> Decimal:
    """
    Share of the forecast already realized, in percent.

    Defined as 0 when nothing was forecast; values above 100 are kept.
    """
    if forecasted_cents <= 0:
        return ZERO
    ratio = Decimal(actual_cents) * 100 / Decimal(forecasted_cents)
    return ratio.quantize(PERCENT_PLACES, rounding=ROUND_HALF_UP)


def _is_orphan(category_id: Optional[str], categories: Optional[Mapping[str, Category]]) -> bool:
    if category_id is None:
        return True
    return categories is not None and category_id not in categories


def _entry_bucket(entry: LedgerEntry, categories: Optional[Mapping[str, Category]]) -> str:
    if not _is_orphan(entry.category_id, categories):
        return entry.category_id
    # Orphans are split by sign so income and expense never net out.
    return UNCATEGORIZED_INCOME_ID if entry.amount > 0 else UNCATEGORIZED_EXPENSE_ID


def _forecast_bucket(forecast: ForecastEntry, categories: Optional[Mapping[str, Category]]) -> str:
    if not _is_orphan(forecast.category_id, categories):
        return forecast.category_id
    # Forecasts are unsigned; orphaned ones are treated as spending budgets.
    return UNCATEGORIZED_EXPENSE_ID


def _flow_of(
    bucket: str,
    signed_cents: int,
    categories: Optional[Mapping[str, Category]],
) -> FlowType:
    if bucket == UNCATEGORIZED_INCOME_ID:
        return FlowType.INCOME
    if bucket == UNCATEGORIZED_EXPENSE_ID:
        return FlowType.EXPENSE
    category = categories.get(bucket) if categories is not None else None
    if category is not None:
        return category.flow_type
    # Unknown categories follow the sign of what was booked.
    return FlowType.INCOME if signed_cents > 0 else FlowType.EXPENSE


def reconcile(
    period: Period,
    entries: Iterable[LedgerEntry],
    forecasts: Iterable[ForecastEntry],
    categories: Optional[Mapping[str, Category]] = None,
) -> ReconciliationResult:
    """
    Compare actual flow with forecasts, per category, for one period.

    Entries are taken when their classification date falls in ``period``
    (opening-balance sentinels excluded). Forecasts are taken when their
    ``period_end`` equals ``period.end``; there is no roll-up from
    subcategories to parents. Expense actuals are reported as magnitudes.

    When ``categories`` is given, entries and forecasts pointing at a
    category missing from it are collected under "Uncategorized" rows, one
    per flow direction, instead of failing the whole report.
    """
    signed: dict[str, int] = defaultdict(int)
    for entry in entries_in_period(entries, period):
        signed[_entry_bucket(entry, categories)] += to_cents(entry.amount)

    planned: dict[str, int] = defaultdict(int)
    for forecast in forecasts:
        if forecast.period_end != period.end:
            continue
        planned[_forecast_bucket(forecast, categories)] += to_cents(forecast.forecasted_amount)

    if any(bucket in signed or bucket in planned for bucket in UNCATEGORIZED_IDS):
        logger.debug(f"Period {period}: records without a known category routed to '{UNCATEGORIZED_NAME}'")

    result = ReconciliationResult(period=period)
    totals: dict[FlowType, list[int]] = {FlowType.INCOME: [0, 0], FlowType.EXPENSE: [0, 0]}

    for bucket in sorted(set(signed) | set(planned)):
        flow_type = _flow_of(bucket, signed.get(bucket, 0), categories)
        actual_cents = signed.get(bucket, 0)
        if flow_type == FlowType.EXPENSE:
            actual_cents = -actual_cents
        forecasted_cents = planned.get(bucket, 0)

        if actual_cents == 0 and forecasted_cents == 0:
            continue

        category = categories.get(bucket) if categories is not None else None
        if bucket in UNCATEGORIZED_IDS:
            name = UNCATEGORIZED_NAME
        else:
            name = category.name if category is not None else bucket

        result.per_category[bucket] = CategoryReconciliation(
            category_id=bucket,
            name=name,
            flow_type=flow_type,
            actual=from_cents(actual_cents),
            forecasted=from_cents(forecasted_cents),
            diff=from_cents(forecasted_cents - actual_cents),
            completion_pct=completion_pct(actual_cents, forecasted_cents),
            parent_id=category.parent_id if category is not None else None,
        )
        totals[flow_type][0] += actual_cents
        totals[flow_type][1] += forecasted_cents

    result.totals = ReconciliationTotals(
        income_actual=from_cents(totals[FlowType.INCOME][0]),
        income_forecasted=from_cents(totals[FlowType.INCOME][1]),
        expense_actual=from_cents(totals[FlowType.EXPENSE][0]),
        expense_forecasted=from_cents(totals[FlowType.EXPENSE][1]),
    )
    return result


def instrument_statements(
    period: Period,
    entries: Iterable[LedgerEntry],
    instruments: Optional[Mapping[str, CreditInstrument]] = None,
) -> list[InstrumentStatement]:
    """
    Amount charged to each credit instrument within ``period``.

    Charges are negative ledger amounts; totals are reported as magnitudes.
    Instruments with nothing charged are left out.
    """
    charged: dict[str, int] = defaultdict(int)
    counts: dict[str, int] = defaultdict(int)
    for entry in entries_in_period(entries, period):
        if not entry.credit_instrument_id:
            continue
        charged[entry.credit_instrument_id] -= to_cents(entry.amount)
        counts[entry.credit_instrument_id] += 1

    statements = []
    for instrument_id in sorted(charged):
        if charged[instrument_id] == 0:
            continue
        instrument = instruments.get(instrument_id) if instruments else None
        statements.append(
            InstrumentStatement(
                instrument_id=instrument_id,
                name=instrument.name if instrument else instrument_id,
                total=from_cents(charged[instrument_id]),
                entry_count=counts[instrument_id],
            )
        )
    return statements
