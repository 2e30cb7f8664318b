"""Salary engine services."""

from salary_engine.services.ledger import LedgerEntry, MissingEmployeeNameError, PayrollLedger
from salary_engine.services.preferences import InMemoryThemeStore, Theme, ThemePreference

__all__ = [
    "LedgerEntry",
    "MissingEmployeeNameError",
    "PayrollLedger",
    "InMemoryThemeStore",
    "Theme",
    "ThemePreference",
]
