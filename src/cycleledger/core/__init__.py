"""Core utilities and shared functionality."""

from cycleledger.core.dates import (
    local_now,
    local_today,
    parse_date,
    days_in_month,
    add_months,
    first_of_month,
    month_key,
)
from cycleledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConfigurationError,
    InvariantViolationError,
)
from cycleledger.core.money import CENT, ZERO, quantize, to_cents, from_cents, sum_cents

__all__ = [
    "local_now",
    "local_today",
    "parse_date",
    "days_in_month",
    "add_months",
    "first_of_month",
    "month_key",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "InvariantViolationError",
    "CENT",
    "ZERO",
    "quantize",
    "to_cents",
    "from_cents",
    "sum_cents",
]
