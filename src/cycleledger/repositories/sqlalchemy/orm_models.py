"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SqlEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from cycleledger.repositories.sqlalchemy.database import Base
from cycleledger.domain.models.enums import FlowType


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    account_id = Column(String(36), primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    closing_day = Column(Integer, nullable=False, default=1)
    currency = Column(String(3), nullable=False, default="BRL")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    instruments = relationship("CreditInstrumentORM", back_populates="account")
    entries = relationship("LedgerEntryORM", back_populates="account")


class CreditInstrumentORM(Base):
    """SQLAlchemy model for CreditInstrument."""

    __tablename__ = "credit_instruments"

    instrument_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    name = Column(String(255), nullable=False)
    closing_day = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    account = relationship("AccountORM", back_populates="instruments")


class CategoryORM(Base):
    """SQLAlchemy model for Category."""

    __tablename__ = "categories"

    category_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    name = Column(String(255), nullable=False)
    flow_type = Column(SqlEnum(FlowType), nullable=False)
    parent_id = Column(String(36), ForeignKey("categories.category_id"), nullable=True)


class LedgerEntryORM(Base):
    """SQLAlchemy model for LedgerEntry."""

    __tablename__ = "ledger_entries"

    entry_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    category_id = Column(String(36), nullable=True)
    date = Column(Date, nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    description = Column(Text, nullable=False, default="")
    credit_instrument_id = Column(
        String(36), ForeignKey("credit_instruments.instrument_id"), nullable=True
    )
    billing_date = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    account = relationship("AccountORM", back_populates="entries")

    __table_args__ = (
        Index("ix_ledger_entries_account_date", "account_id", "date"),
        Index("ix_ledger_entries_account_billing", "account_id", "billing_date"),
    )


class ForecastORM(Base):
    """SQLAlchemy model for ForecastEntry."""

    __tablename__ = "forecasts"

    forecast_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    category_id = Column(String(36), nullable=True)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    forecasted_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "account_id",
            "category_id",
            "period_start",
            name="uq_forecast_account_category_period",
        ),
    )
