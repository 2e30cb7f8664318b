"""Payroll calculation engine - main orchestrator."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from salary_engine.calculators.money import (
    ZERO,
    ZERO_MONEY,
    clamp_non_negative,
    round_to_cents,
)
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.tax_tables import ONE, SSNIT_2024_RATES
from salary_engine.calculators.types import (
    ContributionRates,
    PayrollBreakdown,
    PayrollInput,
    SsnitTiers,
)

if TYPE_CHECKING:
    from salary_engine.config import Settings

logger = logging.getLogger(__name__)


class PayrollEngine:
    """Main payroll calculation engine.

    Forward pipeline (each step rounded to cents before the next):
    1) Sum allowance components
    2) Gross pay = basic pay + allowances
    3) Employee SSNIT on basic pay
    4) Chargeable income = gross - employee SSNIT (floored at 0)
    5) PAYE on chargeable income
    6) Total deductions = employee SSNIT + PAYE + loan
    7) Net pay = gross - total deductions
    8) Employer SSNIT on basic pay (liability only)

    The reverse pipeline assumes no allowances and no loan, so gross pay
    equals basic pay.
    """

    def __init__(
        self,
        tax_calculator: TaxCalculator | None = None,
        rates: ContributionRates = SSNIT_2024_RATES,
    ):
        self.tax_calculator = tax_calculator or TaxCalculator()
        self.rates = rates

    @classmethod
    def from_settings(cls, settings: Settings) -> PayrollEngine:
        return cls(rates=settings.contribution_rates)

    def compute_breakdown(self, payroll_input: PayrollInput) -> PayrollBreakdown:
        """Calculate gross-to-net pay for one employee."""
        basic = round_to_cents(clamp_non_negative(payroll_input.basic_pay))
        allowances = round_to_cents(
            sum(
                (clamp_non_negative(c) for c in payroll_input.allowances.components()),
                ZERO,
            )
        )
        gross = round_to_cents(basic + allowances)

        employee_ssnit = round_to_cents(basic * self.rates.employee)
        chargeable = round_to_cents(clamp_non_negative(gross - employee_ssnit))
        tax = self.tax_calculator.calculate_paye(chargeable)

        loan = round_to_cents(clamp_non_negative(payroll_input.loan_deduction))
        total_deductions = round_to_cents(employee_ssnit + tax + loan)
        net = round_to_cents(gross - total_deductions)

        employer_ssnit = round_to_cents(basic * self.rates.employer)

        return PayrollBreakdown(
            basic_pay=basic,
            allowances_total=allowances,
            gross_pay=gross,
            employee_statutory_contribution=employee_ssnit,
            chargeable_income=chargeable,
            tax=tax,
            loan_deduction=loan,
            total_deductions=total_deductions,
            net_pay=net,
            employer_statutory_contribution=employer_ssnit,
        )

    def compute_reverse_breakdown(self, target_net_pay: Decimal) -> PayrollBreakdown:
        """Recover basic pay and all derived fields from a desired net pay.

        A target of zero returns an all-zero breakdown without solving.
        """
        net = clamp_non_negative(target_net_pay)
        if net == ZERO:
            return PayrollBreakdown.zero()

        chargeable = self.tax_calculator.chargeable_from_net(net)
        gross = chargeable / (ONE - self.rates.employee)
        basic = gross
        employee_ssnit = round_to_cents(basic * self.rates.employee)
        tax = self.tax_calculator.calculate_paye(chargeable)
        employer_ssnit = round_to_cents(basic * self.rates.employer)

        logger.debug(
            "Reverse breakdown: net=%s chargeable=%s gross=%s", net, chargeable, gross
        )

        return PayrollBreakdown(
            basic_pay=round_to_cents(basic),
            allowances_total=ZERO_MONEY,
            gross_pay=round_to_cents(gross),
            employee_statutory_contribution=employee_ssnit,
            chargeable_income=round_to_cents(chargeable),
            tax=tax,
            loan_deduction=ZERO_MONEY,
            total_deductions=round_to_cents(employee_ssnit + tax),
            net_pay=round_to_cents(net),
            employer_statutory_contribution=employer_ssnit,
        )

    def compute_ssnit_tiers(self, basic_pay: Decimal) -> SsnitTiers:
        """Split SSNIT contributions on basic pay by tier."""
        basic = clamp_non_negative(basic_pay)
        return SsnitTiers(
            tier1_employer=round_to_cents(basic * self.rates.employer_tier1),
            tier2_employee=round_to_cents(basic * self.rates.employee),
            tier2_employer=round_to_cents(basic * self.rates.employer_tier2),
            tier2_total=round_to_cents(basic * self.rates.tier2_total),
        )
