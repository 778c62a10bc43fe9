"""Billing date classification.

Charges on a credit instrument are reported in the period of their billing
date; every other entry is reported in the period of its own date.
"""

from datetime import date
from typing import Iterable, Iterator

from cycleledger.domain.models import LedgerEntry
from cycleledger.domain.views import Period
from cycleledger.services.period_calculator import compute_period


def classification_date(entry: LedgerEntry) -> date:
    """Date that decides which period ``entry`` belongs to."""
    if entry.credit_instrument_id and entry.billing_date is not None:
        return entry.billing_date
    return entry.date


def classify(entry: LedgerEntry, closing_day: int) -> Period:
    """Period ``entry`` is reported in for an account with ``closing_day``."""
    return compute_period(classification_date(entry), closing_day)


def period_key_of(entry: LedgerEntry, closing_day: int) -> str:
    return classify(entry, closing_day).key


def is_flow_entry(entry: LedgerEntry) -> bool:
    """Opening-balance sentinels exist in the ledger but never count as flow."""
    return not entry.is_opening_balance


def flow_entries(entries: Iterable[LedgerEntry]) -> Iterator[LedgerEntry]:
    return (e for e in entries if is_flow_entry(e))


def entries_in_period(entries: Iterable[LedgerEntry], period: Period) -> list[LedgerEntry]:
    """Flow entries whose classification date falls inside ``period``."""
    return [e for e in flow_entries(entries) if period.contains(classification_date(e))]
