"""
Unit tests for ForecastService.

Tests cover:
- Setting forecasts with the period bounds of the account
- Replacing a forecast for the same category and period
- Copying a period's forecasts into another period
- Validation errors
"""

import pytest
from datetime import date
from decimal import Decimal

from cycleledger.services import ForecastService
from cycleledger.services.period_calculator import compute_period
from cycleledger.core.exceptions import NotFoundError, ValidationError


class TestSetForecast:
    """Tests for set_forecast."""

    def test_forecast_uses_account_period(self, forecast_service: ForecastService, household):
        """
        GIVEN an account closing on the 10th
        WHEN I set a forecast with reference date 2024-03-15
        THEN the forecast covers 2024-03-10 .. 2024-04-09
        """
        forecast = forecast_service.set_forecast(
            household["account"].account_id,
            household["groceries"].category_id,
            date(2024, 3, 15),
            Decimal("500"),
        )

        assert forecast.period_start == date(2024, 3, 10)
        assert forecast.period_end == date(2024, 4, 9)
        assert forecast.forecasted_amount == Decimal("500.00")

    def test_set_twice_replaces(self, forecast_service: ForecastService, household):
        account_id = household["account"].account_id
        category_id = household["groceries"].category_id
        first = forecast_service.set_forecast(account_id, category_id, date(2024, 3, 15), Decimal("500"))

        second = forecast_service.set_forecast(
            account_id, category_id, date(2024, 3, 20), Decimal("650"), notes="raised"
        )

        forecasts = forecast_service.list_forecasts(account_id)
        assert len(forecasts) == 1
        assert second.forecast_id == first.forecast_id
        assert forecasts[0].forecasted_amount == Decimal("650.00")
        assert forecasts[0].notes == "raised"

    def test_zero_forecast_allowed(self, forecast_service: ForecastService, household):
        forecast = forecast_service.set_forecast(
            household["account"].account_id,
            household["groceries"].category_id,
            date(2024, 3, 15),
            Decimal("0"),
        )

        assert forecast.forecasted_amount == Decimal("0.00")

    def test_negative_forecast_rejected(self, forecast_service: ForecastService, household):
        with pytest.raises(ValidationError):
            forecast_service.set_forecast(
                household["account"].account_id,
                household["groceries"].category_id,
                date(2024, 3, 15),
                Decimal("-1"),
            )

    def test_unknown_category(self, forecast_service: ForecastService, household):
        with pytest.raises(NotFoundError):
            forecast_service.set_forecast(
                household["account"].account_id, "missing", date(2024, 3, 15), Decimal("10")
            )

    def test_list_by_period(self, forecast_service: ForecastService, household):
        account_id = household["account"].account_id
        category_id = household["groceries"].category_id
        forecast_service.set_forecast(account_id, category_id, date(2024, 3, 15), Decimal("500"))
        forecast_service.set_forecast(account_id, category_id, date(2024, 4, 15), Decimal("300"))

        march = forecast_service.list_forecasts(account_id, compute_period(date(2024, 3, 15), 10))

        assert [f.forecasted_amount for f in march] == [Decimal("500.00")]


class TestCopyForecasts:
    """Tests for copy_forecasts."""

    def test_copy_into_next_period(self, forecast_service: ForecastService, household):
        """
        GIVEN forecasts for salary and groceries in the March period
        WHEN I copy them into the period containing 2024-04-20
        THEN the target period holds the same amounts
        AND the source period is unchanged
        """
        account_id = household["account"].account_id
        forecast_service.set_forecast(account_id, household["salary"].category_id, date(2024, 3, 15), Decimal("5000"))
        forecast_service.set_forecast(account_id, household["groceries"].category_id, date(2024, 3, 15), Decimal("800"))

        copied = forecast_service.copy_forecasts(account_id, date(2024, 3, 10), date(2024, 4, 20))

        assert len(copied) == 2
        assert all(f.period_start == date(2024, 4, 10) for f in copied)
        assert all(f.period_end == date(2024, 5, 9) for f in copied)
        assert sorted(f.forecasted_amount for f in copied) == [Decimal("800.00"), Decimal("5000.00")]
        assert len(forecast_service.list_forecasts(account_id)) == 4

    def test_copy_overwrites_existing_target(self, forecast_service: ForecastService, household):
        account_id = household["account"].account_id
        category_id = household["groceries"].category_id
        forecast_service.set_forecast(account_id, category_id, date(2024, 3, 15), Decimal("800"))
        forecast_service.set_forecast(account_id, category_id, date(2024, 4, 15), Decimal("100"))

        forecast_service.copy_forecasts(account_id, date(2024, 3, 10), date(2024, 4, 15))

        april = forecast_service.list_forecasts(account_id, compute_period(date(2024, 4, 15), 10))
        assert [f.forecasted_amount for f in april] == [Decimal("800.00")]

    def test_empty_source_rejected(self, forecast_service: ForecastService, household):
        with pytest.raises(ValidationError):
            forecast_service.copy_forecasts(
                household["account"].account_id, date(2024, 3, 10), date(2024, 4, 15)
            )

    def test_same_period_rejected(self, forecast_service: ForecastService, household):
        account_id = household["account"].account_id
        forecast_service.set_forecast(account_id, household["groceries"].category_id, date(2024, 3, 15), Decimal("800"))

        with pytest.raises(ValidationError):
            forecast_service.copy_forecasts(account_id, date(2024, 3, 10), date(2024, 3, 25))
