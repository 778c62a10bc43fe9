"""SQLAlchemy implementation of EntryRepository."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from cycleledger.domain.models import LedgerEntry
from cycleledger.repositories.sqlalchemy.orm_models import LedgerEntryORM


class SqlAlchemyEntryRepository:
    """SQLAlchemy-backed ledger entry repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a new entry."""
        orm_entry = self._to_orm(entry)
        self._db.add(orm_entry)
        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def create_many(self, entries: list[LedgerEntry]) -> list[LedgerEntry]:
        """Persist several entries in a single commit."""
        orm_entries = [self._to_orm(e) for e in entries]
        self._db.add_all(orm_entries)
        self._db.commit()
        for orm_entry in orm_entries:
            self._db.refresh(orm_entry)
        return [self._to_domain(e) for e in orm_entries]

    def get_by_id(self, entry_id: str) -> Optional[LedgerEntry]:
        """Retrieve entry by ID."""
        orm_entry = self._db.query(LedgerEntryORM).filter(
            LedgerEntryORM.entry_id == entry_id
        ).first()
        return self._to_domain(orm_entry) if orm_entry else None

    def delete(self, entry_id: str) -> None:
        """Delete an entry."""
        self._db.query(LedgerEntryORM).filter(
            LedgerEntryORM.entry_id == entry_id
        ).delete()
        self._db.commit()

    def list_by_account(self, account_id: str) -> list[LedgerEntry]:
        """List all entries of an account, ordered by date."""
        rows = (
            self._db.query(LedgerEntryORM)
            .filter(LedgerEntryORM.account_id == account_id)
            .order_by(LedgerEntryORM.date, LedgerEntryORM.created_at)
            .all()
        )
        return [self._to_domain(r) for r in rows]

    def query(
        self,
        account_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_ids: Optional[list[str]] = None,
        credit_instrument_id: Optional[str] = None,
    ) -> list[LedgerEntry]:
        """Query entries of an account by entry date and filters."""
        query = self._db.query(LedgerEntryORM).filter(
            LedgerEntryORM.account_id == account_id
        )
        if start_date:
            query = query.filter(LedgerEntryORM.date >= start_date)
        if end_date:
            query = query.filter(LedgerEntryORM.date <= end_date)
        if category_ids:
            query = query.filter(LedgerEntryORM.category_id.in_(category_ids))
        if credit_instrument_id:
            query = query.filter(LedgerEntryORM.credit_instrument_id == credit_instrument_id)
        query = query.order_by(LedgerEntryORM.date, LedgerEntryORM.created_at)
        return [self._to_domain(r) for r in query.all()]

    @staticmethod
    def _to_orm(entry: LedgerEntry) -> LedgerEntryORM:
        return LedgerEntryORM(
            entry_id=entry.entry_id,
            account_id=entry.account_id,
            category_id=entry.category_id,
            date=entry.date,
            amount=entry.amount,
            description=entry.description,
            credit_instrument_id=entry.credit_instrument_id,
            billing_date=entry.billing_date,
            created_at=entry.created_at or datetime.utcnow(),
        )

    @staticmethod
    def _to_domain(orm: LedgerEntryORM) -> LedgerEntry:
        """Convert ORM model to domain model."""
        return LedgerEntry(
            entry_id=orm.entry_id,
            account_id=orm.account_id,
            category_id=orm.category_id,
            date=orm.date,
            amount=Decimal(str(orm.amount)),
            description=orm.description or "",
            credit_instrument_id=orm.credit_instrument_id,
            billing_date=orm.billing_date,
            created_at=orm.created_at,
        )
