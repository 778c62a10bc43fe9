"""
Pytest configuration and fixtures for cycle ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- Factory helpers for accounts, categories, instruments and entries
- Plain domain builders for the pure calculation tests
- FastAPI test client with the database dependency overridden
"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from cycleledger.main import app
from cycleledger.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from cycleledger.repositories.sqlalchemy import orm_models  # noqa: F401
from cycleledger.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyEntryRepository,
    SqlAlchemyForecastRepository,
)
from cycleledger.services import LedgerService, ForecastService, ReportService
from cycleledger.services.ledger_service import EntryCreate
from cycleledger.domain.models import (
    Account,
    Category,
    CreditInstrument,
    FlowType,
    ForecastEntry,
    LedgerEntry,
    OPENING_BALANCE_MARKER,
)
from cycleledger.domain.views import Period
from cycleledger.config.settings import Settings, reset_settings, set_settings


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def category_repo(test_session) -> SqlAlchemyCategoryRepository:
    """Provide test CategoryRepository."""
    return SqlAlchemyCategoryRepository(test_session)


@pytest.fixture
def entry_repo(test_session) -> SqlAlchemyEntryRepository:
    """Provide test EntryRepository."""
    return SqlAlchemyEntryRepository(test_session)


@pytest.fixture
def forecast_repo(test_session) -> SqlAlchemyForecastRepository:
    """Provide test ForecastRepository."""
    return SqlAlchemyForecastRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(account_repo, category_repo, entry_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(
        account_repo=account_repo,
        category_repo=category_repo,
        entry_repo=entry_repo,
    )


@pytest.fixture
def forecast_service(account_repo, category_repo, forecast_repo) -> ForecastService:
    """Provide test ForecastService."""
    return ForecastService(
        account_repo=account_repo,
        category_repo=category_repo,
        forecast_repo=forecast_repo,
    )


@pytest.fixture
def report_service(account_repo, category_repo, entry_repo, forecast_repo) -> ReportService:
    """Provide test ReportService."""
    return ReportService(
        account_repo=account_repo,
        category_repo=category_repo,
        entry_repo=entry_repo,
        forecast_repo=forecast_repo,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(ledger_service) -> Callable[..., Account]:
    """Factory for creating test accounts."""

    def _create_account(
        name: Optional[str] = None,
        closing_day: int = 1,
        currency: str = "BRL",
    ) -> Account:
        if name is None:
            name = f"Test Account {uuid.uuid4().hex[:8]}"
        return ledger_service.create_account(
            name=name,
            closing_day=closing_day,
            currency=currency,
        )

    return _create_account


@pytest.fixture
def category_factory(ledger_service) -> Callable[..., Category]:
    """Factory for creating test categories."""

    def _create_category(
        account_id: str,
        name: str,
        flow_type: FlowType = FlowType.EXPENSE,
        parent_id: Optional[str] = None,
    ) -> Category:
        return ledger_service.add_category(account_id, name, flow_type, parent_id)

    return _create_category


@pytest.fixture
def entry_factory(ledger_service) -> Callable[..., LedgerEntry]:
    """Factory for recording test entries through the ledger service."""

    def _create_entry(
        account_id: str,
        category_id: str,
        entry_date: date,
        amount: Decimal,
        description: str = "Test entry",
        credit_instrument_id: Optional[str] = None,
        billing_date: Optional[date] = None,
    ) -> LedgerEntry:
        return ledger_service.add_entry(
            EntryCreate(
                account_id=account_id,
                category_id=category_id,
                entry_date=entry_date,
                amount=amount,
                description=description,
                credit_instrument_id=credit_instrument_id,
                billing_date=billing_date,
            )
        )

    return _create_entry


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def household(account_factory, category_factory, ledger_service) -> dict:
    """
    Account closing on the 10th with a salary, a groceries category and a
    credit card closing on the 5th.
    """
    account = account_factory(name="Household", closing_day=10)
    salary = category_factory(account.account_id, "Salary", FlowType.INCOME)
    groceries = category_factory(account.account_id, "Groceries", FlowType.EXPENSE)
    card = ledger_service.add_instrument(account.account_id, "Visa", closing_day=5)
    return {
        "account": account,
        "salary": salary,
        "groceries": groceries,
        "card": card,
    }


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    # Keep application startup away from the user's data directory
    set_settings(Settings(database_url="sqlite:///:memory:"))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0"),
) -> None:
    """Assert two Decimals are equal within tolerance (exact by default)."""
    diff = abs(Decimal(actual) - Decimal(expected))
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def make_entry(
    entry_date: date,
    amount: str,
    category_id: Optional[str] = "groceries",
    description: str = "entry",
    credit_instrument_id: Optional[str] = None,
    billing_date: Optional[date] = None,
    account_id: str = "acct",
) -> LedgerEntry:
    """Build an in-memory entry for the pure calculation tests."""
    return LedgerEntry(
        entry_id=str(uuid.uuid4()),
        account_id=account_id,
        category_id=category_id,
        date=entry_date,
        amount=Decimal(amount),
        description=description,
        credit_instrument_id=credit_instrument_id,
        billing_date=billing_date,
    )


def make_opening_balance(entry_date: date, amount: str, account_id: str = "acct") -> LedgerEntry:
    """Build an in-memory opening-balance sentinel entry."""
    return make_entry(
        entry_date,
        amount,
        category_id=None,
        description=OPENING_BALANCE_MARKER,
        account_id=account_id,
    )


def make_forecast(
    period: Period,
    amount: str,
    category_id: str = "groceries",
    account_id: str = "acct",
) -> ForecastEntry:
    """Build an in-memory forecast for ``period``."""
    return ForecastEntry(
        forecast_id=str(uuid.uuid4()),
        account_id=account_id,
        category_id=category_id,
        period_start=period.start,
        period_end=period.end,
        forecasted_amount=Decimal(amount),
    )


def make_category(
    category_id: str,
    name: str,
    flow_type: FlowType = FlowType.EXPENSE,
    parent_id: Optional[str] = None,
    account_id: str = "acct",
) -> Category:
    """Build an in-memory category."""
    return Category(
        category_id=category_id,
        account_id=account_id,
        name=name,
        flow_type=flow_type,
        parent_id=parent_id,
    )


def make_instrument(instrument_id: str, name: str, closing_day: int, account_id: str = "acct") -> CreditInstrument:
    """Build an in-memory credit instrument."""
    return CreditInstrument(
        instrument_id=instrument_id,
        account_id=account_id,
        name=name,
        closing_day=closing_day,
    )
