"""Pydantic schemas for forecast endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ForecastSetRequest(BaseModel):
    """Request schema for setting a category forecast."""

    account_id: str
    category_id: str
    reference_date: date = Field(..., description="Any date inside the target period")
    amount: Decimal = Field(..., ge=0)
    notes: Optional[str] = Field(default=None, max_length=500)


class ForecastCopyRequest(BaseModel):
    """Request schema for copying forecasts between periods."""

    account_id: str
    source_period_start: date
    target_reference_date: date


class ForecastResponse(BaseModel):
    """Response schema for a forecast."""

    model_config = {"from_attributes": True}

    forecast_id: str
    account_id: str
    category_id: Optional[str] = None
    period_start: date
    period_end: date
    forecasted_amount: Decimal
    notes: Optional[str] = None
