"""Enumerations for domain models."""

from enum import Enum


class FlowType(str, Enum):
    """Direction of money for a category."""

    INCOME = "income"
    EXPENSE = "expense"
