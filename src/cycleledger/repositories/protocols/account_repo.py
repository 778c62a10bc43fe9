"""Account repository protocol."""

from typing import Protocol, Optional

from cycleledger.domain.models import Account, CreditInstrument


class AccountRepository(Protocol):
    """Interface for account and credit instrument data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def get_by_name(self, name: str) -> Optional[Account]:
        """Retrieve account by name."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts."""
        ...

    def update(self, account: Account) -> Account:
        """Update an existing account."""
        ...

    # Credit instrument operations
    def create_instrument(self, instrument: CreditInstrument) -> CreditInstrument:
        """Persist a new credit instrument."""
        ...

    def get_instrument(self, instrument_id: str) -> Optional[CreditInstrument]:
        """Retrieve credit instrument by ID."""
        ...

    def list_instruments(self, account_id: str) -> list[CreditInstrument]:
        """List the credit instruments of an account."""
        ...
