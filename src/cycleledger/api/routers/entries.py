"""Ledger entry endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from cycleledger.api.deps import get_ledger_service
from cycleledger.api.schemas import (
    EntryCreateRequest,
    CardPurchaseRequest,
    OpeningBalanceRequest,
    EntryResponse,
    EntryListResponse,
)
from cycleledger.services import LedgerService, EntryCreate, CardPurchaseCreate

router = APIRouter(prefix="/entries", tags=["entries"])


@router.post("", response_model=EntryResponse, status_code=201)
def create_entry(
    data: EntryCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> EntryResponse:
    """Record a single entry."""
    entry = ledger.add_entry(
        EntryCreate(
            account_id=data.account_id,
            category_id=data.category_id,
            entry_date=data.entry_date,
            amount=data.amount,
            description=data.description,
            credit_instrument_id=data.credit_instrument_id,
            billing_date=data.billing_date,
        )
    )
    return EntryResponse.model_validate(entry)


@router.post("/card-purchase", response_model=EntryListResponse, status_code=201)
def create_card_purchase(
    data: CardPurchaseRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> EntryListResponse:
    """Record a credit instrument purchase, split into installments."""
    entries = ledger.add_card_purchase(
        CardPurchaseCreate(
            account_id=data.account_id,
            category_id=data.category_id,
            credit_instrument_id=data.credit_instrument_id,
            purchase_date=data.purchase_date,
            total_amount=data.total_amount,
            installment_count=data.installment_count,
            description=data.description,
        )
    )
    return EntryListResponse(
        entries=[EntryResponse.model_validate(e) for e in entries],
        count=len(entries),
    )


@router.post("/opening-balance", response_model=EntryResponse, status_code=201)
def create_opening_balance(
    data: OpeningBalanceRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> EntryResponse:
    """Record the opening balance sentinel of an account."""
    entry = ledger.record_opening_balance(
        account_id=data.account_id,
        amount=data.amount,
        as_of=data.as_of,
        category_id=data.category_id,
    )
    return EntryResponse.model_validate(entry)


@router.get("", response_model=EntryListResponse)
def list_entries(
    account_id: str = Query(..., description="Account ID"),
    start_date: Optional[date] = Query(None, description="Entry date from (inclusive)"),
    end_date: Optional[date] = Query(None, description="Entry date to (inclusive)"),
    category_ids: Optional[str] = Query(None, description="Comma-separated category IDs"),
    credit_instrument_id: Optional[str] = Query(None),
    ledger: LedgerService = Depends(get_ledger_service),
) -> EntryListResponse:
    """List entries of an account."""
    entries = ledger.list_entries(
        account_id=account_id,
        start_date=start_date,
        end_date=end_date,
        category_ids=category_ids.split(",") if category_ids else None,
        credit_instrument_id=credit_instrument_id,
    )
    return EntryListResponse(
        entries=[EntryResponse.model_validate(e) for e in entries],
        count=len(entries),
    )


@router.delete("/{entry_id}", status_code=204)
def delete_entry(
    entry_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete an entry."""
    ledger.delete_entry(entry_id)
    return Response(status_code=204)
