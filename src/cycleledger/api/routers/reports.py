"""Account period report endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cycleledger.api.deps import get_report_service
from cycleledger.api.routers.periods import to_period_response
from cycleledger.api.schemas import (
    BalancePointResponse,
    CategoryReconciliationResponse,
    InstrumentStatementResponse,
    PeriodReportResponse,
    PeriodResponse,
    TotalsResponse,
)
from cycleledger.config.settings import get_settings
from cycleledger.domain.views import CategoryReconciliation
from cycleledger.services import ReportService

router = APIRouter(prefix="/accounts/{account_id}", tags=["reports"])


def _row(row: CategoryReconciliation) -> CategoryReconciliationResponse:
    return CategoryReconciliationResponse(
        category_id=row.category_id,
        name=row.name,
        flow_type=row.flow_type,
        parent_id=row.parent_id,
        actual=row.actual,
        forecasted=row.forecasted,
        diff=row.diff,
        completion_pct=row.completion_pct,
    )


@router.get("/report", response_model=PeriodReportResponse)
def get_report(
    account_id: str,
    reference_date: Optional[date] = Query(None, alias="date", description="Defaults to today"),
    offset: int = Query(0, description="Periods to move from the reference period"),
    reports: ReportService = Depends(get_report_service),
) -> PeriodReportResponse:
    """Opening balance, per-category reconciliation and totals for one period."""
    report = reports.build_report(account_id, reference_date, offset)
    result = report.reconciliation
    totals = result.totals

    return PeriodReportResponse(
        account_id=report.account_id,
        currency=report.currency,
        period=to_period_response(report.period),
        opening_balance=report.opening_balance,
        net_flow=report.net_flow,
        closing_balance=report.closing_balance,
        income=[_row(r) for r in result.income],
        expense=[_row(r) for r in result.expense],
        totals=TotalsResponse(
            income_actual=totals.income_actual,
            income_forecasted=totals.income_forecasted,
            expense_actual=totals.expense_actual,
            expense_forecasted=totals.expense_forecasted,
            net_actual=totals.net_actual,
            net_forecasted=totals.net_forecasted,
        ),
        instrument_statements=[
            InstrumentStatementResponse(
                instrument_id=s.instrument_id,
                name=s.name,
                total=s.total,
                entry_count=s.entry_count,
            )
            for s in report.instrument_statements
        ],
        as_of=report.as_of,
    )


@router.get("/periods", response_model=list[PeriodResponse])
def get_account_periods(
    account_id: str,
    reference_date: Optional[date] = Query(None, alias="date"),
    reports: ReportService = Depends(get_report_service),
) -> list[PeriodResponse]:
    """Selectable periods of an account around a date."""
    settings = get_settings()
    periods = reports.navigator(
        account_id,
        reference_date,
        before=settings.navigator_periods_before,
        count=settings.navigator_period_count,
    )
    return [to_period_response(p) for p in periods]


@router.get("/balances", response_model=list[BalancePointResponse])
def get_balance_history(
    account_id: str,
    reference_date: Optional[date] = Query(None, alias="date"),
    count: int = Query(12, ge=1, le=120),
    reports: ReportService = Depends(get_report_service),
) -> list[BalancePointResponse]:
    """Carried-forward balance of the last ``count`` periods."""
    return [
        BalancePointResponse(
            period=to_period_response(p.period),
            opening_balance=p.opening_balance,
            net_flow=p.net_flow,
            closing_balance=p.closing_balance,
        )
        for p in reports.balance_history(account_id, reference_date, count)
    ]
