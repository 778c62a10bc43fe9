"""Pydantic schemas for account, instrument and category endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from cycleledger.domain.models.enums import FlowType


class AccountCreate(BaseModel):
    """Request schema for creating an account."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique account name")
    closing_day: Optional[int] = Field(
        default=None,
        description="Day of month the statement period starts on; defaults to the configured day",
    )
    currency: str = Field(default="BRL", min_length=3, max_length=3, description="ISO currency code")


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_id: str
    name: str
    closing_day: int
    currency: str
    created_at: Optional[datetime] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int


class InstrumentCreate(BaseModel):
    """Request schema for attaching a credit instrument."""

    name: str = Field(..., min_length=1, max_length=255)
    closing_day: int = Field(..., description="Day of month the instrument's bill closes")


class InstrumentResponse(BaseModel):
    """Response schema for a credit instrument."""

    model_config = {"from_attributes": True}

    instrument_id: str
    account_id: str
    name: str
    closing_day: int


class CategoryCreate(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=255)
    flow_type: FlowType
    parent_id: Optional[str] = None


class CategoryResponse(BaseModel):
    """Response schema for a category."""

    model_config = {"from_attributes": True}

    category_id: str
    account_id: str
    name: str
    flow_type: FlowType
    parent_id: Optional[str] = None
