"""SQLAlchemy implementation of ForecastRepository."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from cycleledger.domain.models import ForecastEntry
from cycleledger.repositories.sqlalchemy.orm_models import ForecastORM


class SqlAlchemyForecastRepository:
    """SQLAlchemy-backed forecast repository."""

    def __init__(self, db: Session):
        self._db = db

    def upsert(self, forecast: ForecastEntry) -> ForecastEntry:
        """Insert or replace the forecast for (account, category, period_start)."""
        orm_forecast = self._find(forecast.account_id, forecast.category_id, forecast.period_start)
        if orm_forecast:
            orm_forecast.period_end = forecast.period_end
            orm_forecast.forecasted_amount = forecast.forecasted_amount
            orm_forecast.notes = forecast.notes
        else:
            orm_forecast = ForecastORM(
                forecast_id=forecast.forecast_id,
                account_id=forecast.account_id,
                category_id=forecast.category_id,
                period_start=forecast.period_start,
                period_end=forecast.period_end,
                forecasted_amount=forecast.forecasted_amount,
                notes=forecast.notes,
            )
            self._db.add(orm_forecast)
        self._db.commit()
        self._db.refresh(orm_forecast)
        return self._to_domain(orm_forecast)

    def get(
        self,
        account_id: str,
        category_id: str,
        period_start: date,
    ) -> Optional[ForecastEntry]:
        orm_forecast = self._find(account_id, category_id, period_start)
        return self._to_domain(orm_forecast) if orm_forecast else None

    def list_by_account(self, account_id: str) -> list[ForecastEntry]:
        rows = (
            self._db.query(ForecastORM)
            .filter(ForecastORM.account_id == account_id)
            .order_by(ForecastORM.period_start, ForecastORM.category_id)
            .all()
        )
        return [self._to_domain(r) for r in rows]

    def list_by_period_start(self, account_id: str, period_start: date) -> list[ForecastEntry]:
        rows = (
            self._db.query(ForecastORM)
            .filter(
                ForecastORM.account_id == account_id,
                ForecastORM.period_start == period_start,
            )
            .order_by(ForecastORM.category_id)
            .all()
        )
        return [self._to_domain(r) for r in rows]

    def _find(
        self,
        account_id: str,
        category_id: Optional[str],
        period_start: date,
    ) -> Optional[ForecastORM]:
        return self._db.query(ForecastORM).filter(
            ForecastORM.account_id == account_id,
            ForecastORM.category_id == category_id,
            ForecastORM.period_start == period_start,
        ).first()

    @staticmethod
    def _to_domain(orm: ForecastORM) -> ForecastEntry:
        return ForecastEntry(
            forecast_id=orm.forecast_id,
            account_id=orm.account_id,
            category_id=orm.category_id,
            period_start=orm.period_start,
            period_end=orm.period_end,
            forecasted_amount=Decimal(str(orm.forecasted_amount)),
            notes=orm.notes,
        )
