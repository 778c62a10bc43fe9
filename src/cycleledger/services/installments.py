"""Credit instrument installment splitting."""

import logging
from datetime import date
from decimal import Decimal
from typing import Union

from cycleledger.core.dates import first_of_month, month_key
from cycleledger.core.exceptions import ValidationError
from cycleledger.core.money import from_cents, to_cents
from cycleledger.domain.views import Installment
from cycleledger.services.period_calculator import compute_period

logger = logging.getLogger(__name__)


def first_billing_date(purchase_date: date, closing_day: int) -> date:
    """
    First day of the billing month a purchase is charged to.

    The purchase is placed in the instrument's statement period; the bill is
    the month after the one that period opens in. A purchase on or after the
    closing day opens a new statement and goes to the following month's bill.
    With closing day 1 every statement opens on the 1st, so all purchases of
    a month are billed the month after.
    """
    period = compute_period(purchase_date, closing_day)
    return first_of_month(period.start, 1)


def split_cents(total_cents: int, count: int) -> list[int]:
    """
    Split ``total_cents`` into ``count`` parts that differ by at most a cent.

    The leading parts carry the extra cents.
    """
    if count < 1:
        raise ValidationError("Installment count must be at least 1")
    base = total_cents // count
    remainder = total_cents - base * count
    parts = [base + 1] * remainder + [base] * (count - remainder)

    leftover = total_cents - sum(parts)
    if leftover:
        logger.warning(
            f"Installment split of {total_cents} cents in {count} left {leftover} cents; "
            f"folding into the final installment"
        )
        parts[-1] += leftover
    return parts


def split_installments(
    total_amount: Union[Decimal, int, str],
    installment_count: int,
    purchase_date: date,
    closing_day: int,
) -> list[Installment]:
    """
    Split a purchase into penny-exact installments over consecutive bills.

    Installment ``i`` (0-based) is billed ``i`` months after the first
    billing month. The installments always add up to ``total_amount``.
    """
    total_cents = to_cents(total_amount)
    if total_cents <= 0:
        raise ValidationError("Installment total must be greater than zero")
    if installment_count < 1:
        raise ValidationError("Installment count must be at least 1")
    if total_cents < installment_count:
        raise ValidationError(
            f"Cannot split {from_cents(total_cents)} into {installment_count} installments "
            f"of at least one cent"
        )

    first_bill = first_billing_date(purchase_date, closing_day)
    installments = []
    for index, cents in enumerate(split_cents(total_cents, installment_count)):
        billing_date = first_of_month(first_bill, index)
        installments.append(
            Installment(
                sequence=index + 1,
                count=installment_count,
                period_key=month_key(billing_date),
                billing_date=billing_date,
                amount=from_cents(cents),
            )
        )
    return installments
