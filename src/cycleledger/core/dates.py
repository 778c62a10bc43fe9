"""Calendar and timezone utilities."""

import calendar
from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

from cycleledger.config.settings import get_settings


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured ledger timezone."""
    return pytz.timezone(get_settings().timezone)


def local_now() -> datetime:
    """Return current time in the ledger timezone."""
    return datetime.now(local_tz())


def local_today() -> date:
    """Return today's date in the ledger timezone."""
    return local_now().date()


def parse_date(value: str) -> date:
    """Parse a date string (ISO or common day-first formats)."""
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return date_parser.parse(text, dayfirst=True).date()


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a number of months."""
    total = year * 12 + (month - 1) + months
    return total // 12, total % 12 + 1


def first_of_month(value: date, months: int = 0) -> date:
    """First day of the month that is ``months`` after ``value``'s month."""
    year, month = add_months(value.year, value.month, months)
    return date(year, month, 1)


def month_key(value: date) -> str:
    """Format a date as a ``YYYY-MM`` key."""
    return f"{value.year:04d}-{value.month:02d}"


def parse_month_key(key: str) -> date:
    """Parse a ``YYYY-MM`` key into the first day of that month."""
    year_text, month_text = key.split("-")
    return date(int(year_text), int(month_text), 1)
