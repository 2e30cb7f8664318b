"""Report projections over ledger entries.

Reports select and relabel stored fields; nothing is recalculated here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Sequence, Union

from salary_engine.calculators.money import format_rate
from salary_engine.calculators.tax_tables import SSNIT_2024_RATES
from salary_engine.calculators.types import ContributionRates
from salary_engine.services.ledger import LedgerEntry

Cell = Union[str, Decimal]


class ReportKind(str, Enum):
    """Report types offered for export."""

    PAYROLL = "payroll"
    PAYE = "paye"
    SSNIT = "ssnit"


@dataclass(frozen=True)
class Column:
    """One report column: display header, JSON key and field selector."""

    header: str
    key: str
    select: Callable[[LedgerEntry], Cell]


@dataclass(frozen=True)
class Report:
    """Tabular and structured projection of ledger entries."""

    kind: ReportKind
    title: str
    filename: str  # Stem without extension, e.g. paye-report-2024-06-30
    headers: list[str]
    rows: list[list[Cell]]
    records: list[dict[str, Any]]

    @property
    def is_empty(self) -> bool:
        return not self.rows


class ReportBuilder:
    """Builds payroll, PAYE and SSNIT reports.

    Column headers carry the configured SSNIT rates, e.g.
    "SSNIT Employee (5.5%)".
    """

    TITLES = {
        ReportKind.PAYROLL: "Payroll Report",
        ReportKind.PAYE: "PAYE Report",
        ReportKind.SSNIT: "SSNIT Report",
    }

    def __init__(self, rates: ContributionRates = SSNIT_2024_RATES):
        self.rates = rates

    def columns(self, kind: ReportKind) -> list[Column]:
        rates = self.rates
        employee = Column("Employee", "employee", lambda e: e.employee_name)

        if kind == ReportKind.PAYE:
            return [
                employee,
                Column("Chargeable Income", "chargeable_income", lambda e: e.breakdown.chargeable_income),
                Column("PAYE", "paye", lambda e: e.breakdown.tax),
            ]

        if kind == ReportKind.SSNIT:
            return [
                employee,
                Column("Basic Salary", "basic_salary", lambda e: e.breakdown.basic_pay),
                Column(
                    f"Tier 1 Employer ({format_rate(rates.employer_tier1)})",
                    "tier_1_employer",
                    lambda e: e.ssnit.tier1_employer,
                ),
                Column(
                    f"Tier 2 Employee ({format_rate(rates.employee)})",
                    "tier_2_employee",
                    lambda e: e.ssnit.tier2_employee,
                ),
                Column(
                    f"Tier 2 Employer ({format_rate(rates.employer_tier2)})",
                    "tier_2_employer",
                    lambda e: e.ssnit.tier2_employer,
                ),
                Column(
                    f"Tier 2 Total ({format_rate(rates.tier2_total)})",
                    "tier_2_total",
                    lambda e: e.ssnit.tier2_total,
                ),
            ]

        return [
            employee,
            Column("Basic Salary", "basic_salary", lambda e: e.breakdown.basic_pay),
            Column("Allowances", "allowances", lambda e: e.breakdown.allowances_total),
            Column("Gross Pay", "gross_pay", lambda e: e.breakdown.gross_pay),
            Column(
                f"SSNIT Employee ({format_rate(rates.employee)})",
                "ssnit_employee",
                lambda e: e.breakdown.employee_statutory_contribution,
            ),
            Column("PAYE", "paye", lambda e: e.breakdown.tax),
            Column("Loan", "loan", lambda e: e.breakdown.loan_deduction),
            Column("Total Deductions", "total_deductions", lambda e: e.breakdown.total_deductions),
            Column("Net Pay", "net_pay", lambda e: e.breakdown.net_pay),
            Column(
                f"SSNIT Employer ({format_rate(rates.employer)})",
                "ssnit_employer",
                lambda e: e.breakdown.employer_statutory_contribution,
            ),
        ]

    def build(
        self,
        kind: ReportKind,
        entries: Sequence[LedgerEntry],
        as_of: date | None = None,
    ) -> Report:
        """Project entries into a report of the given kind."""
        kind = ReportKind(kind)
        stamp = (as_of or date.today()).isoformat()
        columns = self.columns(kind)

        return Report(
            kind=kind,
            title=self.TITLES[kind],
            filename=f"{kind.value}-report-{stamp}",
            headers=[c.header for c in columns],
            rows=[[c.select(e) for c in columns] for e in entries],
            records=[{c.key: c.select(e) for c in columns} for e in entries],
        )
