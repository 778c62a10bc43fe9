"""
Unit tests for ReportService.

Tests cover:
- Full period report (opening balance, reconciliation, statements)
- Previous/next navigation via offset
- Balance history chaining
- Reports reflecting ledger edits on the next call
"""

import pytest
from datetime import date
from decimal import Decimal

from cycleledger.services import LedgerService, ReportService
from cycleledger.services.ledger_service import CardPurchaseCreate
from cycleledger.core.exceptions import NotFoundError


@pytest.fixture
def busy_household(household, ledger_service: LedgerService, entry_factory, forecast_service):
    """Household with an opening balance, salary, groceries and a card purchase."""
    account_id = household["account"].account_id
    salary_id = household["salary"].category_id
    groceries_id = household["groceries"].category_id

    ledger_service.record_opening_balance(account_id, Decimal("1000"), date(2024, 1, 1))
    entry_factory(account_id, salary_id, date(2024, 2, 10), Decimal("5000"))
    entry_factory(account_id, groceries_id, date(2024, 2, 20), Decimal("300"))
    entry_factory(account_id, salary_id, date(2024, 3, 10), Decimal("5000"))
    entry_factory(account_id, groceries_id, date(2024, 3, 18), Decimal("400"))
    ledger_service.add_card_purchase(
        CardPurchaseCreate(
            account_id=account_id,
            category_id=groceries_id,
            credit_instrument_id=household["card"].instrument_id,
            purchase_date=date(2024, 2, 12),
            total_amount=Decimal("200.00"),
            installment_count=2,
            description="Groceries haul",
        )
    )
    forecast_service.set_forecast(account_id, groceries_id, date(2024, 3, 15), Decimal("500"))
    forecast_service.set_forecast(account_id, salary_id, date(2024, 3, 15), Decimal("5000"))
    return household


class TestBuildReport:
    """Tests for build_report."""

    def test_march_report(self, report_service: ReportService, busy_household):
        """
        GIVEN an account closing on the 10th with February and March activity
        WHEN I build the report for 2024-03-15
        THEN the opening balance carries February's flow (sentinel excluded)
        AND groceries include the card installment billed on 2024-04-01
        """
        report = report_service.build_report(busy_household["account"].account_id, date(2024, 3, 15))

        assert report.period.start == date(2024, 3, 10)
        assert report.period.end == date(2024, 4, 9)
        # February period: salary 5000, groceries 300, first installment billed 2024-03-01
        assert report.opening_balance == Decimal("4600.00")
        groceries = report.reconciliation.per_category[busy_household["groceries"].category_id]
        # 400 spent plus the second installment billed 2024-04-01
        assert groceries.actual == Decimal("500.00")
        assert groceries.forecasted == Decimal("500.00")
        assert groceries.completion_pct == Decimal("100.00")
        assert report.net_flow == Decimal("4500.00")
        assert report.closing_balance == Decimal("9100.00")
        assert report.currency == "BRL"
        assert report.as_of is not None

    def test_instrument_statement_in_report(self, report_service: ReportService, busy_household):
        report = report_service.build_report(busy_household["account"].account_id, date(2024, 3, 15))

        assert len(report.instrument_statements) == 1
        statement = report.instrument_statements[0]
        assert statement.name == "Visa"
        assert statement.total == Decimal("100.00")
        assert statement.entry_count == 1

    def test_offset_moves_to_previous_period(self, report_service: ReportService, busy_household):
        account_id = busy_household["account"].account_id

        previous = report_service.build_report(account_id, date(2024, 3, 15), offset=-1)

        assert previous.period.start == date(2024, 2, 10)
        assert previous.opening_balance == Decimal("0.00")
        assert previous.net_flow == Decimal("4600.00")

    def test_report_reflects_deleted_entry(
        self,
        report_service: ReportService,
        ledger_service: LedgerService,
        busy_household,
    ):
        """
        GIVEN a report for March
        WHEN a February entry is deleted
        THEN the next report for March has a different opening balance
        """
        account_id = busy_household["account"].account_id
        before = report_service.build_report(account_id, date(2024, 3, 15))
        february_groceries = ledger_service.list_entries(
            account_id,
            start_date=date(2024, 2, 20),
            end_date=date(2024, 2, 20),
        )[0]

        ledger_service.delete_entry(february_groceries.entry_id)
        after = report_service.build_report(account_id, date(2024, 3, 15))

        assert after.opening_balance == before.opening_balance + Decimal("300.00")

    def test_same_inputs_same_report(self, report_service: ReportService, busy_household):
        account_id = busy_household["account"].account_id

        first = report_service.build_report(account_id, date(2024, 3, 15))
        second = report_service.build_report(account_id, date(2024, 3, 15))

        assert first.reconciliation == second.reconciliation
        assert first.opening_balance == second.opening_balance

    def test_missing_account(self, report_service: ReportService):
        with pytest.raises(NotFoundError):
            report_service.build_report("missing", date(2024, 3, 15))


class TestNavigationAndHistory:
    """Tests for navigator and balance_history."""

    def test_navigator(self, report_service: ReportService, busy_household):
        periods = report_service.navigator(busy_household["account"].account_id, date(2024, 3, 15))

        assert len(periods) == 12
        assert periods[6].start == date(2024, 3, 10)

    def test_balance_history_chains(self, report_service: ReportService, busy_household):
        history = report_service.balance_history(
            busy_household["account"].account_id, date(2024, 3, 15), count=4
        )

        assert len(history) == 4
        assert history[-1].period.start == date(2024, 3, 10)
        for current, following in zip(history, history[1:]):
            assert following.opening_balance == current.closing_balance
        assert history[-1].closing_balance == Decimal("9100.00")
