"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from cycleledger.repositories.sqlalchemy.database import get_db
from cycleledger.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyEntryRepository,
    SqlAlchemyForecastRepository,
)
from cycleledger.services import LedgerService, ForecastService, ReportService
from cycleledger.config.settings import get_settings


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_category_repo(db: Session = Depends(get_db)) -> SqlAlchemyCategoryRepository:
    """Provide CategoryRepository instance."""
    return SqlAlchemyCategoryRepository(db)


def get_entry_repo(db: Session = Depends(get_db)) -> SqlAlchemyEntryRepository:
    """Provide EntryRepository instance."""
    return SqlAlchemyEntryRepository(db)


def get_forecast_repo(db: Session = Depends(get_db)) -> SqlAlchemyForecastRepository:
    """Provide ForecastRepository instance."""
    return SqlAlchemyForecastRepository(db)


def get_ledger_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    entry_repo: SqlAlchemyEntryRepository = Depends(get_entry_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(
        account_repo=account_repo,
        category_repo=category_repo,
        entry_repo=entry_repo,
        max_installments=get_settings().max_installments,
    )


def get_forecast_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    forecast_repo: SqlAlchemyForecastRepository = Depends(get_forecast_repo),
) -> ForecastService:
    """Provide ForecastService instance."""
    return ForecastService(
        account_repo=account_repo,
        category_repo=category_repo,
        forecast_repo=forecast_repo,
    )


def get_report_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    entry_repo: SqlAlchemyEntryRepository = Depends(get_entry_repo),
    forecast_repo: SqlAlchemyForecastRepository = Depends(get_forecast_repo),
) -> ReportService:
    """Provide ReportService instance (all repositories share one session)."""
    return ReportService(
        account_repo=account_repo,
        category_repo=category_repo,
        entry_repo=entry_repo,
        forecast_repo=forecast_repo,
    )
