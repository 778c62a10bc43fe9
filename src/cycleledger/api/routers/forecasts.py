"""Forecast endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cycleledger.api.deps import get_forecast_service, get_report_service
from cycleledger.api.schemas import ForecastSetRequest, ForecastCopyRequest, ForecastResponse
from cycleledger.services import ForecastService, ReportService

router = APIRouter(prefix="/forecasts", tags=["forecasts"])


@router.put("", response_model=ForecastResponse)
def set_forecast(
    data: ForecastSetRequest,
    forecasts: ForecastService = Depends(get_forecast_service),
) -> ForecastResponse:
    """Create or replace the forecast of a category for one period."""
    forecast = forecasts.set_forecast(
        account_id=data.account_id,
        category_id=data.category_id,
        reference_date=data.reference_date,
        amount=data.amount,
        notes=data.notes,
    )
    return ForecastResponse.model_validate(forecast)


@router.post("/copy", response_model=list[ForecastResponse], status_code=201)
def copy_forecasts(
    data: ForecastCopyRequest,
    forecasts: ForecastService = Depends(get_forecast_service),
) -> list[ForecastResponse]:
    """Copy the forecasts of one period into another."""
    copied = forecasts.copy_forecasts(
        account_id=data.account_id,
        source_period_start=data.source_period_start,
        target_reference_date=data.target_reference_date,
    )
    return [ForecastResponse.model_validate(f) for f in copied]


@router.get("", response_model=list[ForecastResponse])
def list_forecasts(
    account_id: str = Query(..., description="Account ID"),
    reference_date: Optional[date] = Query(None, description="Only the period containing this date"),
    forecasts: ForecastService = Depends(get_forecast_service),
    reports: ReportService = Depends(get_report_service),
) -> list[ForecastResponse]:
    """List forecasts of an account."""
    period = reports.current_period(account_id, reference_date) if reference_date else None
    return [ForecastResponse.model_validate(f) for f in forecasts.list_forecasts(account_id, period)]
