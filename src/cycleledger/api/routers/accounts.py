"""Account, credit instrument and category endpoints."""

from fastapi import APIRouter, Depends

from cycleledger.api.deps import get_ledger_service
from cycleledger.api.schemas import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    InstrumentCreate,
    InstrumentResponse,
    CategoryCreate,
    CategoryResponse,
)
from cycleledger.config.settings import get_settings
from cycleledger.services import LedgerService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Create a new account."""
    closing_day = data.closing_day
    if closing_day is None:
        closing_day = get_settings().default_closing_day
    account = ledger.create_account(
        name=data.name,
        closing_day=closing_day,
        currency=data.currency,
    )
    return AccountResponse.model_validate(account)


@router.get("", response_model=AccountListResponse)
def list_accounts(ledger: LedgerService = Depends(get_ledger_service)) -> AccountListResponse:
    """List all accounts."""
    accounts = ledger.list_accounts()
    return AccountListResponse(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        count=len(accounts),
    )


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Get a single account."""
    return AccountResponse.model_validate(ledger.get_account(account_id))


@router.post("/{account_id}/instruments", response_model=InstrumentResponse, status_code=201)
def add_instrument(
    account_id: str,
    data: InstrumentCreate,
    ledger: LedgerService = Depends(get_ledger_service),
) -> InstrumentResponse:
    """Attach a credit instrument to an account."""
    instrument = ledger.add_instrument(account_id, data.name, data.closing_day)
    return InstrumentResponse.model_validate(instrument)


@router.get("/{account_id}/instruments", response_model=list[InstrumentResponse])
def list_instruments(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> list[InstrumentResponse]:
    """List the credit instruments of an account."""
    ledger.get_account(account_id)
    return [InstrumentResponse.model_validate(i) for i in ledger.list_instruments(account_id)]


@router.post("/{account_id}/categories", response_model=CategoryResponse, status_code=201)
def add_category(
    account_id: str,
    data: CategoryCreate,
    ledger: LedgerService = Depends(get_ledger_service),
) -> CategoryResponse:
    """Create a category on an account."""
    category = ledger.add_category(account_id, data.name, data.flow_type, data.parent_id)
    return CategoryResponse.model_validate(category)


@router.get("/{account_id}/categories", response_model=list[CategoryResponse])
def list_categories(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> list[CategoryResponse]:
    """List the categories of an account."""
    ledger.get_account(account_id)
    return [CategoryResponse.model_validate(c) for c in ledger.list_categories(account_id)]
