"""Ledger entry repository protocol."""

from datetime import date
from typing import Protocol, Optional

from cycleledger.domain.models import LedgerEntry


class EntryRepository(Protocol):
    """Interface for ledger entry data access."""

    def create(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a new entry."""
        ...

    def create_many(self, entries: list[LedgerEntry]) -> list[LedgerEntry]:
        """Persist several entries in one unit of work."""
        ...

    def get_by_id(self, entry_id: str) -> Optional[LedgerEntry]:
        """Retrieve entry by ID."""
        ...

    def delete(self, entry_id: str) -> None:
        """Delete an entry (hard delete)."""
        ...

    def list_by_account(self, account_id: str) -> list[LedgerEntry]:
        """List all entries of an account, ordered by date."""
        ...

    def query(
        self,
        account_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_ids: Optional[list[str]] = None,
        credit_instrument_id: Optional[str] = None,
    ) -> list[LedgerEntry]:
        """Query entries of an account by entry date and filters."""
        ...
