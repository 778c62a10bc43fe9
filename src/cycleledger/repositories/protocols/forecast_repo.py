"""Forecast repository protocol."""

from datetime import date
from typing import Protocol, Optional

from cycleledger.domain.models import ForecastEntry


class ForecastRepository(Protocol):
    """Interface for forecast data access."""

    def upsert(self, forecast: ForecastEntry) -> ForecastEntry:
        """Insert or replace the forecast for (account, category, period_start)."""
        ...

    def get(
        self,
        account_id: str,
        category_id: str,
        period_start: date,
    ) -> Optional[ForecastEntry]:
        """Retrieve the forecast of one category for one period."""
        ...

    def list_by_account(self, account_id: str) -> list[ForecastEntry]:
        """List all forecasts of an account."""
        ...

    def list_by_period_start(self, account_id: str, period_start: date) -> list[ForecastEntry]:
        """List forecasts of an account for the period starting on ``period_start``."""
        ...
