"""Repository protocol definitions (interfaces)."""

from cycleledger.repositories.protocols.account_repo import AccountRepository
from cycleledger.repositories.protocols.category_repo import CategoryRepository
from cycleledger.repositories.protocols.entry_repo import EntryRepository
from cycleledger.repositories.protocols.forecast_repo import ForecastRepository

__all__ = [
    "AccountRepository",
    "CategoryRepository",
    "EntryRepository",
    "ForecastRepository",
]
