"""Stateless period and installment calculation endpoints."""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Query

from cycleledger.api.schemas import PeriodResponse, InstallmentResponse
from cycleledger.config.settings import get_settings
from cycleledger.core.exceptions import ValidationError
from cycleledger.domain.views import Period
from cycleledger.services import compute_period, list_periods, period_for_key, split_installments

router = APIRouter(prefix="/periods", tags=["periods"])


def to_period_response(period: Period) -> PeriodResponse:
    return PeriodResponse(start=period.start, end=period.end, key=period.key)


@router.get("/window", response_model=PeriodResponse)
def get_window(
    closing_day: int = Query(..., description="Closing day (1-31)"),
    reference_date: date = Query(..., alias="date", description="Any date inside the period"),
) -> PeriodResponse:
    """Statement period containing a date."""
    return to_period_response(compute_period(reference_date, closing_day))


@router.get("/by-key/{key}", response_model=PeriodResponse)
def get_by_key(
    key: str,
    closing_day: int = Query(..., description="Closing day (1-31)"),
) -> PeriodResponse:
    """Statement period closing in month ``YYYY-MM``."""
    return to_period_response(period_for_key(key, closing_day))


@router.get("/navigator", response_model=list[PeriodResponse])
def get_navigator(
    closing_day: int = Query(..., description="Closing day (1-31)"),
    reference_date: date = Query(..., alias="date"),
) -> list[PeriodResponse]:
    """Periods around a date, oldest first."""
    settings = get_settings()
    periods = list_periods(
        reference_date,
        closing_day,
        before=settings.navigator_periods_before,
        count=settings.navigator_period_count,
    )
    return [to_period_response(p) for p in periods]


@router.get("/installments", response_model=list[InstallmentResponse])
def preview_installments(
    total: Decimal = Query(..., gt=0),
    count: int = Query(..., ge=1),
    purchase_date: date = Query(...),
    closing_day: int = Query(..., description="Instrument closing day (1-31)"),
) -> list[InstallmentResponse]:
    """Preview how a purchase would be split, without recording it."""
    max_installments = get_settings().max_installments
    if count > max_installments:
        raise ValidationError(f"Installment count must be between 1 and {max_installments}")
    return [
        InstallmentResponse(
            sequence=i.sequence,
            count=i.count,
            period_key=i.period_key,
            billing_date=i.billing_date,
            amount=i.amount,
        )
        for i in split_installments(total, count, purchase_date, closing_day)
    ]
