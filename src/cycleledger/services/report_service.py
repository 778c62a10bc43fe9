"""Period report service combining balances and reconciliation."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from cycleledger.core.dates import local_now, local_today
from cycleledger.core.exceptions import NotFoundError
from cycleledger.domain.models import Account, Category, CreditInstrument, ForecastEntry, LedgerEntry
from cycleledger.domain.views import BalancePoint, Period, PeriodReport
from cycleledger.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    EntryRepository,
    ForecastRepository,
)
from cycleledger.services.balance_resolver import RunningBalanceIndex, balance_series
from cycleledger.services.period_calculator import compute_period, list_periods, shift_period
from cycleledger.services.reconciliation import instrument_statements, reconcile

logger = logging.getLogger(__name__)


@dataclass
class LedgerSnapshot:
    """Account data read once and used for a whole computation."""

    account: Account
    categories: dict[str, Category]
    instruments: dict[str, CreditInstrument]
    entries: list[LedgerEntry]
    forecasts: list[ForecastEntry]
    as_of: datetime


class ReportService:
    """
    Service for period reports.

    Every call reads a fresh snapshot of the account and recomputes from
    it; nothing is kept between calls, so edits to the ledger show up in the
    next report for the edited period and every later one.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        category_repo: CategoryRepository,
        entry_repo: EntryRepository,
        forecast_repo: ForecastRepository,
    ):
        self._account_repo = account_repo
        self._category_repo = category_repo
        self._entry_repo = entry_repo
        self._forecast_repo = forecast_repo

    def snapshot(self, account_id: str) -> LedgerSnapshot:
        """Read everything a report needs for one account."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return LedgerSnapshot(
            account=account,
            categories={c.category_id: c for c in self._category_repo.list_by_account(account_id)},
            instruments={i.instrument_id: i for i in self._account_repo.list_instruments(account_id)},
            entries=self._entry_repo.list_by_account(account_id),
            forecasts=self._forecast_repo.list_by_account(account_id),
            as_of=local_now(),
        )

    def current_period(self, account_id: str, reference_date: Optional[date] = None) -> Period:
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return compute_period(reference_date or local_today(), account.closing_day)

    def build_report(
        self,
        account_id: str,
        reference_date: Optional[date] = None,
        offset: int = 0,
    ) -> PeriodReport:
        """
        Build the report for the period containing ``reference_date``.

        ``offset`` moves that many periods forward or back, the way the
        previous/next buttons of the period screen do.
        """
        snap = self.snapshot(account_id)
        closing_day = snap.account.closing_day
        period = compute_period(reference_date or local_today(), closing_day)
        if offset:
            period = shift_period(period, offset, closing_day)

        index = RunningBalanceIndex(snap.entries)
        result = reconcile(period, snap.entries, snap.forecasts, snap.categories)
        report = PeriodReport(
            account_id=account_id,
            currency=snap.account.currency,
            period=period,
            opening_balance=index.opening_balance(period),
            reconciliation=result,
            net_flow=index.net_flow(period),
            instrument_statements=instrument_statements(period, snap.entries, snap.instruments),
            as_of=snap.as_of,
        )
        logger.debug(
            f"Report for account {account_id} period {period}: "
            f"{len(result.per_category)} categories from {len(snap.entries)} entries"
        )
        return report

    def navigator(
        self,
        account_id: str,
        reference_date: Optional[date] = None,
        before: int = 6,
        count: int = 12,
    ) -> list[Period]:
        """Selectable periods around ``reference_date`` (used for forecast copies)."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return list_periods(reference_date or local_today(), account.closing_day, before, count)

    def balance_history(
        self,
        account_id: str,
        reference_date: Optional[date] = None,
        count: int = 12,
    ) -> list[BalancePoint]:
        """Opening, flow and closing balance of the ``count`` periods ending at the current one."""
        snap = self.snapshot(account_id)
        periods = list_periods(
            reference_date or local_today(),
            snap.account.closing_day,
            before=count - 1,
            count=count,
        )
        return balance_series(periods, snap.entries)
