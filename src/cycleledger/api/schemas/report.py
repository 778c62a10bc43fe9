"""Pydantic schemas for period and report endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from cycleledger.domain.models.enums import FlowType


class PeriodResponse(BaseModel):
    """Response schema for a statement period."""

    start: date
    end: date
    key: str


class InstallmentResponse(BaseModel):
    """Response schema for one installment of a split purchase."""

    sequence: int
    count: int
    period_key: str
    billing_date: date
    amount: Decimal


class CategoryReconciliationResponse(BaseModel):
    """Response schema for one reconciled category."""

    category_id: str
    name: str
    flow_type: FlowType
    parent_id: Optional[str] = None
    actual: Decimal
    forecasted: Decimal
    diff: Decimal
    completion_pct: Decimal


class TotalsResponse(BaseModel):
    """Response schema for period totals."""

    income_actual: Decimal
    income_forecasted: Decimal
    expense_actual: Decimal
    expense_forecasted: Decimal
    net_actual: Decimal
    net_forecasted: Decimal


class InstrumentStatementResponse(BaseModel):
    """Response schema for the amount charged to a credit instrument."""

    instrument_id: str
    name: str
    total: Decimal
    entry_count: int


class PeriodReportResponse(BaseModel):
    """Response schema for a full period report."""

    account_id: str
    currency: str
    period: PeriodResponse
    opening_balance: Decimal
    net_flow: Decimal
    closing_balance: Decimal
    income: list[CategoryReconciliationResponse]
    expense: list[CategoryReconciliationResponse]
    totals: TotalsResponse
    instrument_statements: list[InstrumentStatementResponse]
    as_of: Optional[datetime] = None


class BalancePointResponse(BaseModel):
    """Response schema for one point of the balance history."""

    period: PeriodResponse
    opening_balance: Decimal
    net_flow: Decimal
    closing_balance: Decimal
