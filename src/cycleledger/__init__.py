"""Statement-cycle accounting and reconciliation for personal finance ledgers."""

__version__ = "0.1.0"
