"""Pydantic schemas for API request/response."""

from cycleledger.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    InstrumentCreate,
    InstrumentResponse,
    CategoryCreate,
    CategoryResponse,
)
from cycleledger.api.schemas.entry import (
    EntryCreateRequest,
    CardPurchaseRequest,
    OpeningBalanceRequest,
    EntryResponse,
    EntryListResponse,
)
from cycleledger.api.schemas.forecast import (
    ForecastSetRequest,
    ForecastCopyRequest,
    ForecastResponse,
)
from cycleledger.api.schemas.report import (
    PeriodResponse,
    InstallmentResponse,
    CategoryReconciliationResponse,
    TotalsResponse,
    InstrumentStatementResponse,
    PeriodReportResponse,
    BalancePointResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountListResponse",
    "InstrumentCreate",
    "InstrumentResponse",
    "CategoryCreate",
    "CategoryResponse",
    "EntryCreateRequest",
    "CardPurchaseRequest",
    "OpeningBalanceRequest",
    "EntryResponse",
    "EntryListResponse",
    "ForecastSetRequest",
    "ForecastCopyRequest",
    "ForecastResponse",
    "PeriodResponse",
    "InstallmentResponse",
    "CategoryReconciliationResponse",
    "TotalsResponse",
    "InstrumentStatementResponse",
    "PeriodReportResponse",
    "BalancePointResponse",
]
