"""SQLAlchemy implementation of AccountRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from cycleledger.domain.models import Account, CreditInstrument
from cycleledger.repositories.sqlalchemy.orm_models import AccountORM, CreditInstrumentORM


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            name=account.name,
            closing_day=account.closing_day,
            currency=account.currency,
            created_at=account.created_at or datetime.utcnow(),
        )
        self._db.add(orm_account)
        self._db.commit()
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def get_by_name(self, name: str) -> Optional[Account]:
        """Retrieve account by name."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.name == name
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_all(self) -> list[Account]:
        """List all accounts."""
        orm_accounts = self._db.query(AccountORM).order_by(AccountORM.name).all()
        return [self._to_domain(a) for a in orm_accounts]

    def update(self, account: Account) -> Account:
        """Update an existing account."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account.account_id
        ).first()
        if orm_account:
            orm_account.name = account.name
            orm_account.closing_day = account.closing_day
            orm_account.currency = account.currency
            self._db.commit()
            self._db.refresh(orm_account)
            return self._to_domain(orm_account)
        raise ValueError(f"Account not found: {account.account_id}")

    def create_instrument(self, instrument: CreditInstrument) -> CreditInstrument:
        """Persist a new credit instrument."""
        orm_instrument = CreditInstrumentORM(
            instrument_id=instrument.instrument_id,
            account_id=instrument.account_id,
            name=instrument.name,
            closing_day=instrument.closing_day,
            created_at=instrument.created_at or datetime.utcnow(),
        )
        self._db.add(orm_instrument)
        self._db.commit()
        self._db.refresh(orm_instrument)
        return self._instrument_to_domain(orm_instrument)

    def get_instrument(self, instrument_id: str) -> Optional[CreditInstrument]:
        """Retrieve credit instrument by ID."""
        orm_instrument = self._db.query(CreditInstrumentORM).filter(
            CreditInstrumentORM.instrument_id == instrument_id
        ).first()
        return self._instrument_to_domain(orm_instrument) if orm_instrument else None

    def list_instruments(self, account_id: str) -> list[CreditInstrument]:
        """List the credit instruments of an account."""
        rows = (
            self._db.query(CreditInstrumentORM)
            .filter(CreditInstrumentORM.account_id == account_id)
            .order_by(CreditInstrumentORM.name)
            .all()
        )
        return [self._instrument_to_domain(r) for r in rows]

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model (validates the closing day)."""
        return Account(
            account_id=orm.account_id,
            name=orm.name,
            closing_day=orm.closing_day,
            currency=orm.currency,
            created_at=orm.created_at,
        )

    @staticmethod
    def _instrument_to_domain(orm: CreditInstrumentORM) -> CreditInstrument:
        return CreditInstrument(
            instrument_id=orm.instrument_id,
            account_id=orm.account_id,
            name=orm.name,
            closing_day=orm.closing_day,
            created_at=orm.created_at,
        )
