"""Carry-forward balance resolution.

The opening balance of a period is the sum of every flow entry classified
before the period starts. Amounts are accumulated in integer cents.
"""

from bisect import bisect_left, bisect_right
from decimal import Decimal
from typing import Iterable, Sequence

from cycleledger.core.money import from_cents, to_cents
from cycleledger.domain.models import LedgerEntry
from cycleledger.domain.views import BalancePoint, Period
from cycleledger.services.classifier import classification_date, entries_in_period, flow_entries


def opening_balance_cents(period: Period, entries: Iterable[LedgerEntry]) -> int:
    return sum(
        (to_cents(e.amount) for e in flow_entries(entries) if classification_date(e) < period.start),
        0,
    )


def opening_balance(period: Period, entries: Iterable[LedgerEntry]) -> Decimal:
    """Balance carried into ``period`` from all earlier entries."""
    return from_cents(opening_balance_cents(period, entries))


def net_flow_cents(period: Period, entries: Iterable[LedgerEntry]) -> int:
    return sum((to_cents(e.amount) for e in entries_in_period(entries, period)), 0)


def net_flow(period: Period, entries: Iterable[LedgerEntry]) -> Decimal:
    """Signed sum of flow entries classified into ``period``."""
    return from_cents(net_flow_cents(period, entries))


class RunningBalanceIndex:
    """
    Prefix-sum index over one snapshot of an account's entries.

    Built once per snapshot and discarded with it; answers opening balances
    with a binary search instead of rescanning the ledger. Results are
    identical to :func:`opening_balance`.
    """

    def __init__(self, entries: Iterable[LedgerEntry]):
        dated = sorted(
            ((classification_date(e), to_cents(e.amount)) for e in flow_entries(entries)),
            key=lambda item: item[0],
        )
        self._dates = [d for d, _ in dated]
        self._prefix = [0]
        for _, cents in dated:
            self._prefix.append(self._prefix[-1] + cents)

    def __len__(self) -> int:
        return len(self._dates)

    def balance_before_cents(self, period: Period) -> int:
        return self._prefix[bisect_left(self._dates, period.start)]

    def opening_balance(self, period: Period) -> Decimal:
        return from_cents(self.balance_before_cents(period))

    def net_flow(self, period: Period) -> Decimal:
        before = bisect_left(self._dates, period.start)
        through = bisect_right(self._dates, period.end)
        return from_cents(self._prefix[through] - self._prefix[before])


def balance_series(periods: Sequence[Period], entries: Iterable[LedgerEntry]) -> list[BalancePoint]:
    """Opening balance and net flow for each of ``periods``."""
    index = RunningBalanceIndex(entries)
    return [
        BalancePoint(
            period=period,
            opening_balance=index.opening_balance(period),
            net_flow=index.net_flow(period),
        )
        for period in periods
    ]
