"""
Unit tests for installment splitting.

Tests cover:
- Penny-exact splits with the extra cents on the leading installments
- First billing month relative to the instrument closing day
- Consecutive billing months across a year boundary
- Validation of totals and counts
"""

import pytest
from datetime import date
from decimal import Decimal

from cycleledger.core.exceptions import ConfigurationError, ValidationError
from cycleledger.services.installments import first_billing_date, split_cents, split_installments


# =============================================================================
# SPLIT TESTS
# =============================================================================


class TestSplitCents:
    """Tests for the integer split."""

    def test_remainder_on_leading_parts(self):
        assert split_cents(10000, 3) == [3334, 3333, 3333]
        assert split_cents(1000, 6) == [167, 167, 167, 167, 166, 166]

    def test_even_split(self):
        assert split_cents(1200, 12) == [100] * 12

    def test_single_part(self):
        assert split_cents(12345, 1) == [12345]

    def test_parts_differ_by_at_most_one_cent(self):
        parts = split_cents(99999, 7)

        assert max(parts) - min(parts) <= 1
        assert sum(parts) == 99999


class TestSplitInstallments:
    """Tests for split_installments."""

    def test_hundred_in_three(self):
        """
        GIVEN a purchase of 100.00 in 3 installments
        WHEN I split it
        THEN the parts are 33.34, 33.33 and 33.33
        """
        installments = split_installments(Decimal("100.00"), 3, date(2024, 3, 1), 10)

        assert [i.amount for i in installments] == [
            Decimal("33.34"),
            Decimal("33.33"),
            Decimal("33.33"),
        ]
        assert [i.label for i in installments] == ["1/3", "2/3", "3/3"]

    @pytest.mark.parametrize("count", list(range(2, 13)))
    @pytest.mark.parametrize("total", ["100.00", "0.99", "1234.57", "10.01", "999999.99"])
    def test_sum_is_exact(self, total, count):
        installments = split_installments(Decimal(total), count, date(2024, 3, 1), 10)

        assert len(installments) == count
        assert sum((i.amount for i in installments), Decimal("0")) == Decimal(total)
        assert all(i.amount > 0 for i in installments)

    def test_fractional_cents_are_rounded_first(self):
        installments = split_installments(Decimal("10.005"), 2, date(2024, 3, 1), 10)

        assert sum((i.amount for i in installments), Decimal("0")) == Decimal("10.01")


# =============================================================================
# BILLING MONTH TESTS
# =============================================================================


class TestBillingMonths:
    """Tests for the billing months of each installment."""

    def test_purchase_after_closing_day_goes_to_next_bill(self):
        """
        GIVEN a card closing on the 10th
        WHEN a purchase of 100.00 in 3 installments is made on 2024-03-15
        THEN the first installment is billed in April
        AND the installments are billed in April, May and June
        AND they add up to exactly 100.00
        """
        installments = split_installments(Decimal("100.00"), 3, date(2024, 3, 15), 10)

        assert [i.billing_date for i in installments] == [
            date(2024, 4, 1),
            date(2024, 5, 1),
            date(2024, 6, 1),
        ]
        assert [i.period_key for i in installments] == ["2024-04", "2024-05", "2024-06"]
        assert sum((i.amount for i in installments), Decimal("0")) == Decimal("100.00")

    def test_purchase_before_closing_day_stays_on_current_bill(self):
        assert first_billing_date(date(2024, 3, 5), 10) == date(2024, 3, 1)

    def test_purchase_on_closing_day_goes_to_next_bill(self):
        assert first_billing_date(date(2024, 3, 10), 10) == date(2024, 4, 1)

    def test_closing_day_one_bills_following_month(self):
        assert first_billing_date(date(2024, 3, 20), 1) == date(2024, 4, 1)
        assert first_billing_date(date(2024, 3, 1), 1) == date(2024, 4, 1)
        assert first_billing_date(date(2024, 3, 31), 1) == date(2024, 4, 1)

    def test_closing_day_one_installments(self):
        """
        GIVEN a card closing on the 1st
        WHEN 100.00 is bought in 3 installments on 2024-03-20
        THEN the bills are April, May and June
        """
        installments = split_installments(Decimal("100.00"), 3, date(2024, 3, 20), 1)

        assert [i.period_key for i in installments] == ["2024-04", "2024-05", "2024-06"]
        assert [i.amount for i in installments] == [
            Decimal("33.34"),
            Decimal("33.33"),
            Decimal("33.33"),
        ]

    def test_billing_months_cross_year(self):
        installments = split_installments(Decimal("600.00"), 4, date(2024, 11, 20), 10)

        assert [i.period_key for i in installments] == ["2024-12", "2025-01", "2025-02", "2025-03"]

    def test_late_closing_day_in_february(self):
        # Anchor clamps to Feb 28, so a purchase that day opens the March bill
        assert first_billing_date(date(2023, 2, 28), 31) == date(2023, 3, 1)
        assert first_billing_date(date(2023, 2, 27), 31) == date(2023, 2, 1)


# =============================================================================
# VALIDATION TESTS
# =============================================================================


class TestSplitValidation:
    """Invalid splits are rejected."""

    @pytest.mark.parametrize("total", ["0", "-10.00", "0.001"])
    def test_non_positive_total(self, total):
        with pytest.raises(ValidationError):
            split_installments(Decimal(total), 3, date(2024, 3, 15), 10)

    def test_zero_count(self):
        with pytest.raises(ValidationError):
            split_installments(Decimal("100.00"), 0, date(2024, 3, 15), 10)

    def test_fewer_cents_than_installments(self):
        with pytest.raises(ValidationError):
            split_installments(Decimal("0.02"), 3, date(2024, 3, 15), 10)

    def test_invalid_closing_day(self):
        with pytest.raises(ConfigurationError):
            split_installments(Decimal("100.00"), 3, date(2024, 3, 15), 32)
