"""Pydantic schemas for ledger entry endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class EntryCreateRequest(BaseModel):
    """Request schema for recording a single entry."""

    account_id: str = Field(..., description="Account ID")
    category_id: str = Field(..., description="Category ID; decides the sign")
    entry_date: date
    amount: Decimal = Field(..., gt=0, description="Positive amount")
    description: str = Field(..., min_length=1, max_length=500)
    credit_instrument_id: Optional[str] = None
    billing_date: Optional[date] = Field(
        default=None,
        description="Billing month (first day); derived from the instrument when omitted",
    )


class CardPurchaseRequest(BaseModel):
    """Request schema for a purchase paid in installments."""

    account_id: str
    category_id: str
    credit_instrument_id: str
    purchase_date: date
    total_amount: Decimal = Field(..., gt=0)
    installment_count: int = Field(default=1, ge=1)
    description: str = Field(..., min_length=1, max_length=500)


class OpeningBalanceRequest(BaseModel):
    """Request schema for recording an opening balance."""

    account_id: str
    amount: Decimal = Field(..., description="Signed balance")
    as_of: date
    category_id: Optional[str] = None


class EntryResponse(BaseModel):
    """Response schema for a single entry."""

    model_config = {"from_attributes": True}

    entry_id: str
    account_id: str
    category_id: Optional[str] = None
    date: date
    amount: Decimal
    description: str
    credit_instrument_id: Optional[str] = None
    billing_date: Optional[date] = None
    is_opening_balance: bool = False


class EntryListResponse(BaseModel):
    """Response schema for listing entries."""

    entries: list[EntryResponse]
    count: int
