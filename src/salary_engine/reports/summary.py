"""Plain-text salary summary for copying to the clipboard."""

from __future__ import annotations

from salary_engine.calculators.money import DEFAULT_CURRENCY, format_money, format_rate
from salary_engine.calculators.tax_tables import SSNIT_2024_RATES
from salary_engine.calculators.types import ContributionRates, PayrollBreakdown, PayrollInput


def build_summary_text(
    payroll_input: PayrollInput,
    breakdown: PayrollBreakdown,
    rates: ContributionRates = SSNIT_2024_RATES,
    employee_name: str | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    name = (employee_name or "").strip()
    title = f"Salary Summary - {name}" if name else "Salary Summary"

    def money(amount):
        return format_money(amount, currency)

    allowances = payroll_input.allowances
    lines = [
        title,
        f"Basic salary: {money(breakdown.basic_pay)}",
        f"Food allowance: {money(allowances.food)}",
        f"Transport allowance: {money(allowances.transport)}",
        f"Utilities allowance: {money(allowances.utilities)}",
        f"Rent allowance: {money(allowances.rent)}",
        f"Other allowance: {money(allowances.other)}",
        f"Allowances total: {money(breakdown.allowances_total)}",
        f"Gross pay: {money(breakdown.gross_pay)}",
        f"Employee SSNIT ({format_rate(rates.employee)}): "
        f"{money(breakdown.employee_statutory_contribution)}",
        f"Chargeable income: {money(breakdown.chargeable_income)}",
        f"PAYE: {money(breakdown.tax)}",
        f"Loan deductions: {money(breakdown.loan_deduction)}",
        f"Total deductions: {money(breakdown.total_deductions)}",
        f"Net pay: {money(breakdown.net_pay)}",
        f"Employer SSNIT ({format_rate(rates.employer)}): "
        f"{money(breakdown.employer_statutory_contribution)}",
    ]
    return "\n".join(lines)
