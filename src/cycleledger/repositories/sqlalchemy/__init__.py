"""SQLAlchemy repository implementations."""

from cycleledger.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from cycleledger.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from cycleledger.repositories.sqlalchemy.category_repo import SqlAlchemyCategoryRepository
from cycleledger.repositories.sqlalchemy.entry_repo import SqlAlchemyEntryRepository
from cycleledger.repositories.sqlalchemy.forecast_repo import SqlAlchemyForecastRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyEntryRepository",
    "SqlAlchemyForecastRepository",
]
