"""Type definitions for the payroll calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any

from salary_engine.calculators.money import ZERO, ZERO_MONEY

ONE = Decimal("1")


@dataclass(frozen=True)
class TaxBracket:
    """Tax bracket for progressive taxation.

    The bracket covers ``[lower_bound, upper_bound)``; an upper bound of
    None means the bracket has no upper limit.
    """

    lower_bound: Decimal
    upper_bound: Decimal | None  # None = no upper limit
    marginal_rate: Decimal  # As decimal, e.g., 0.175 for 17.5%
    base_tax_at_lower: Decimal = ZERO  # Tax owed at exactly lower_bound

    def contains(self, income: Decimal) -> bool:
        if income < self.lower_bound:
            return False
        return self.upper_bound is None or income < self.upper_bound

    def tax_at(self, income: Decimal) -> Decimal:
        """Unrounded tax for an income using this bracket's line."""
        return self.base_tax_at_lower + (income - self.lower_bound) * self.marginal_rate


class ContributionRateError(ValueError):
    """Raised when an SSNIT contribution rate is out of range."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        if name is not None:
            message = f"{name}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class ContributionRates:
    """SSNIT statutory contribution rates.

    The employer share is split into Tier 1 (paid to SSNIT) and Tier 2
    (occupational pension). The employee share is reported under Tier 2.

    Each rate lies in [0, 1) and the employer share is at most 1.

    Raises:
        ContributionRateError: On construction with an out-of-range rate
    """

    employee: Decimal
    employer_tier1: Decimal
    employer_tier2: Decimal

    def __post_init__(self) -> None:
        for name in ("employee", "employer_tier1", "employer_tier2"):
            rate = getattr(self, name)
            if not ZERO <= rate < ONE:
                raise ContributionRateError(f"Rate {rate} outside [0, 1)", name=name)
        if self.employer > ONE:
            raise ContributionRateError(f"Employer total {self.employer} above 1")

    @property
    def employer(self) -> Decimal:
        return self.employer_tier1 + self.employer_tier2

    @property
    def tier2_total(self) -> Decimal:
        return self.employee + self.employer_tier2


@dataclass(frozen=True)
class Allowances:
    """Allowance components, in the order they appear on a payslip."""

    food: Decimal = ZERO
    transport: Decimal = ZERO
    utilities: Decimal = ZERO
    rent: Decimal = ZERO
    other: Decimal = ZERO

    def components(self) -> tuple[Decimal, ...]:
        return (self.food, self.transport, self.utilities, self.rent, self.other)


@dataclass(frozen=True)
class PayrollInput:
    """Raw numeric inputs for one forward calculation."""

    basic_pay: Decimal = ZERO
    allowances: Allowances = field(default_factory=Allowances)
    loan_deduction: Decimal = ZERO


@dataclass(frozen=True)
class PayrollBreakdown:
    """Computed payroll result. All amounts are rounded to cents."""

    basic_pay: Decimal
    allowances_total: Decimal
    gross_pay: Decimal
    employee_statutory_contribution: Decimal
    chargeable_income: Decimal
    tax: Decimal
    loan_deduction: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    employer_statutory_contribution: Decimal

    @classmethod
    def zero(cls) -> PayrollBreakdown:
        """Breakdown with every amount set to 0.00."""
        return cls(**{f.name: ZERO_MONEY for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SsnitTiers:
    """SSNIT contribution split by tier for one employee."""

    tier1_employer: Decimal
    tier2_employee: Decimal
    tier2_employer: Decimal
    tier2_total: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
