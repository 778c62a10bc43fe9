"""Repository layer - data access abstractions and implementations."""

from cycleledger.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    EntryRepository,
    ForecastRepository,
)

__all__ = [
    "AccountRepository",
    "CategoryRepository",
    "EntryRepository",
    "ForecastRepository",
]
