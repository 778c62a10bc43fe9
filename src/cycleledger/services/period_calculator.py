"""Statement period calculation and navigation.

A closing day ``k`` splits the calendar into windows that start on day ``k``
of one month and end the day before day ``k`` of the next. Months shorter
than ``k`` clamp the anchor to their last day, so a closing day of 31 opens
February's window on the 28th (or 29th) and March's on the 31st. Windows
stay contiguous across every month boundary.
"""

from datetime import date, timedelta

from cycleledger.core.dates import add_months, days_in_month, parse_month_key
from cycleledger.core.exceptions import ValidationError
from cycleledger.domain.models.account import validate_closing_day
from cycleledger.domain.views import Period

ONE_DAY = timedelta(days=1)


def anchor_date(year: int, month: int, closing_day: int) -> date:
    """Day the period anchored in (year, month) starts, clamped to the month length."""
    return date(year, month, min(closing_day, days_in_month(year, month)))


def compute_period(reference_date: date, closing_day: int) -> Period:
    """
    Return the statement period containing ``reference_date``.

    Dates on or after this month's anchor belong to the window starting at
    that anchor; earlier dates belong to the window that started at the
    previous month's anchor.
    """
    validate_closing_day(closing_day, "Period")
    year, month = reference_date.year, reference_date.month
    this_anchor = anchor_date(year, month, closing_day)

    if reference_date >= this_anchor:
        next_year, next_month = add_months(year, month, 1)
        start = this_anchor
        end = anchor_date(next_year, next_month, closing_day) - ONE_DAY
    else:
        prev_year, prev_month = add_months(year, month, -1)
        start = anchor_date(prev_year, prev_month, closing_day)
        end = this_anchor - ONE_DAY

    return Period(start=start, end=end)


def period_key(reference_date: date, closing_day: int) -> str:
    """``YYYY-MM`` key of the period containing ``reference_date``."""
    return compute_period(reference_date, closing_day).key


def next_period(period: Period, closing_day: int) -> Period:
    return compute_period(period.end + ONE_DAY, closing_day)


def previous_period(period: Period, closing_day: int) -> Period:
    return compute_period(period.start - ONE_DAY, closing_day)


def shift_period(period: Period, steps: int, closing_day: int) -> Period:
    """Move ``steps`` periods forward (positive) or backward (negative)."""
    result = period
    step = next_period if steps >= 0 else previous_period
    for _ in range(abs(steps)):
        result = step(result, closing_day)
    return result


def period_for_key(key: str, closing_day: int) -> Period:
    """
    Return the period that closes in month ``YYYY-MM``.

    With a closing day of 1 the window is the calendar month itself;
    otherwise it is the window ending the day before that month's anchor.
    """
    try:
        month_start = parse_month_key(key)
    except ValueError:
        raise ValidationError(f"Invalid period key '{key}', expected YYYY-MM")
    validate_closing_day(closing_day, "Period")
    closing_anchor = anchor_date(month_start.year, month_start.month, closing_day)
    if closing_anchor.day == 1:
        return compute_period(closing_anchor, closing_day)
    return compute_period(closing_anchor - ONE_DAY, closing_day)


def list_periods(
    reference_date: date,
    closing_day: int,
    before: int = 6,
    count: int = 12,
) -> list[Period]:
    """
    Consecutive periods around ``reference_date``, oldest first.

    The list starts ``before`` periods back and holds ``count`` periods.
    """
    if count < 1:
        return []
    first = shift_period(compute_period(reference_date, closing_day), -before, closing_day)
    periods = [first]
    while len(periods) < count:
        periods.append(next_period(periods[-1], closing_day))
    return periods

