"""Payroll calculation engine."""

from salary_engine.calculators.engine import PayrollEngine
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.tax_tables import (
    GHANA_PAYE_2024,
    SSNIT_2024_RATES,
    BracketTableError,
    validate_brackets,
)
from salary_engine.calculators.types import (
    Allowances,
    ContributionRateError,
    ContributionRates,
    PayrollBreakdown,
    PayrollInput,
    SsnitTiers,
    TaxBracket,
)

__all__ = [
    "PayrollEngine",
    "TaxCalculator",
    "GHANA_PAYE_2024",
    "SSNIT_2024_RATES",
    "BracketTableError",
    "validate_brackets",
    "Allowances",
    "ContributionRateError",
    "ContributionRates",
    "PayrollBreakdown",
    "PayrollInput",
    "SsnitTiers",
    "TaxBracket",
]
