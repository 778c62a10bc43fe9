"""Account and credit instrument domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from cycleledger.core.exceptions import ConfigurationError

MIN_CLOSING_DAY = 1
MAX_CLOSING_DAY = 31


def validate_closing_day(closing_day: int, owner: str) -> int:
    """
    Check that a closing day is usable for period computation.

    Raised at load time so a bad setting fails once instead of producing
    wrong periods for every entry.
    """
    if isinstance(closing_day, bool) or not isinstance(closing_day, int):
        raise ConfigurationError(f"{owner}: closing day must be an integer, got {closing_day!r}")
    if not MIN_CLOSING_DAY <= closing_day <= MAX_CLOSING_DAY:
        raise ConfigurationError(
            f"{owner}: closing day must be between {MIN_CLOSING_DAY} and "
            f"{MAX_CLOSING_DAY}, got {closing_day}"
        )
    return closing_day


@dataclass
class Account:
    """
    Ledger account.

    The closing day anchors the account's statement periods; entries and
    forecasts are grouped into those periods for reporting.
    """

    account_id: str
    name: str
    closing_day: int = 1
    currency: str = "BRL"
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        validate_closing_day(self.closing_day, f"Account {self.account_id}")


@dataclass
class CreditInstrument:
    """
    Credit card (or similar) attached to an account.

    Its closing day is independent of the account's and decides which
    billing month a purchase is charged to.
    """

    instrument_id: str
    account_id: str
    name: str
    closing_day: int
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        validate_closing_day(self.closing_day, f"Credit instrument {self.instrument_id}")
