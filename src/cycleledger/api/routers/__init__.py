"""API routers package."""

from cycleledger.api.routers.accounts import router as accounts_router
from cycleledger.api.routers.entries import router as entries_router
from cycleledger.api.routers.forecasts import router as forecasts_router
from cycleledger.api.routers.periods import router as periods_router
from cycleledger.api.routers.reports import router as reports_router

__all__ = [
    "accounts_router",
    "entries_router",
    "forecasts_router",
    "periods_router",
    "reports_router",
]
