"""Forecast domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class ForecastEntry:
    """
    Planned amount for one category over one statement period.

    Forecasts are matched to a period by their ``period_end`` only.
    """

    forecast_id: str
    account_id: str
    category_id: Optional[str]
    period_start: date
    period_end: date
    forecasted_amount: Decimal
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.forecasted_amount, Decimal):
            self.forecasted_amount = Decimal(str(self.forecasted_amount))
