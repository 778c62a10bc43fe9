"""Forecast service for planning amounts per category and period."""

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from cycleledger.core.exceptions import ValidationError, NotFoundError
from cycleledger.core.money import quantize
from cycleledger.domain.models import Account, ForecastEntry
from cycleledger.domain.views import Period
from cycleledger.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    ForecastRepository,
)
from cycleledger.services.period_calculator import compute_period

logger = logging.getLogger(__name__)


class ForecastService:
    """
    Service for forecast maintenance.

    Forecasts are stored with the exact bounds of the account period they
    were planned for, so reports can match them on ``period_end``.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        category_repo: CategoryRepository,
        forecast_repo: ForecastRepository,
    ):
        self._account_repo = account_repo
        self._category_repo = category_repo
        self._forecast_repo = forecast_repo

    def set_forecast(
        self,
        account_id: str,
        category_id: str,
        reference_date: date,
        amount: Decimal,
        notes: Optional[str] = None,
    ) -> ForecastEntry:
        """Create or replace the forecast of a category for the period containing ``reference_date``."""
        account = self._get_account(account_id)
        category = self._category_repo.get_by_id(category_id)
        if not category or category.account_id != account_id:
            raise NotFoundError("Category", category_id)
        if amount is None or quantize(amount) < 0:
            raise ValidationError("Forecast amount cannot be negative")

        period = compute_period(reference_date, account.closing_day)
        return self._forecast_repo.upsert(
            ForecastEntry(
                forecast_id=str(uuid.uuid4()),
                account_id=account_id,
                category_id=category_id,
                period_start=period.start,
                period_end=period.end,
                forecasted_amount=quantize(amount),
                notes=notes,
            )
        )

    def copy_forecasts(
        self,
        account_id: str,
        source_period_start: date,
        target_reference_date: date,
    ) -> list[ForecastEntry]:
        """
        Copy every forecast of one period into another.

        Existing forecasts in the target period are replaced category by
        category; the rest are left alone.
        """
        account = self._get_account(account_id)
        source = self._forecast_repo.list_by_period_start(account_id, source_period_start)
        if not source:
            raise ValidationError(
                f"No forecasts found for the period starting {source_period_start.isoformat()}"
            )

        target = compute_period(target_reference_date, account.closing_day)
        if target.start == source_period_start:
            raise ValidationError("Source and target periods are the same")

        copied = [
            self._forecast_repo.upsert(
                ForecastEntry(
                    forecast_id=str(uuid.uuid4()),
                    account_id=account_id,
                    category_id=f.category_id,
                    period_start=target.start,
                    period_end=target.end,
                    forecasted_amount=f.forecasted_amount,
                    notes=f.notes,
                )
            )
            for f in source
        ]
        logger.info(
            f"Copied {len(copied)} forecast(s) from period starting "
            f"{source_period_start.isoformat()} to {target}"
        )
        return copied

    def list_forecasts(self, account_id: str, period: Optional[Period] = None) -> list[ForecastEntry]:
        """List forecasts of an account, optionally only those ending with ``period``."""
        self._get_account(account_id)
        forecasts = self._forecast_repo.list_by_account(account_id)
        if period is None:
            return forecasts
        return [f for f in forecasts if f.period_end == period.end]

    def _get_account(self, account_id: str) -> Account:
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account
