"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from salary_engine.calculators.money import ZERO, parse_amount
from salary_engine.calculators.types import Allowances, PayrollInput


# ============================================================================
# Calculation schemas
# ============================================================================


class PayrollFields(BaseModel):
    """Salary form fields.

    Each amount accepts a number or free text; blank or unparsable text
    counts as zero and thousands separators are ignored.
    """

    basic: Decimal = ZERO
    food: Decimal = ZERO
    transportation: Decimal = ZERO
    utilities: Decimal = ZERO
    rent: Decimal = ZERO
    others: Decimal = ZERO
    loan: Decimal = ZERO

    @field_validator(
        "basic", "food", "transportation", "utilities", "rent", "others", "loan",
        mode="before",
    )
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        return parse_amount(value)

    def to_payroll_input(self) -> PayrollInput:
        return PayrollInput(
            basic_pay=self.basic,
            allowances=Allowances(
                food=self.food,
                transport=self.transportation,
                utilities=self.utilities,
                rent=self.rent,
                other=self.others,
            ),
            loan_deduction=self.loan,
        )


class ReverseRequest(BaseModel):
    """Schema for a net-to-gross request."""

    net_pay: Decimal = ZERO

    @field_validator("net_pay", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        return parse_amount(value)


class BreakdownResponse(BaseModel):
    """Schema for a payroll breakdown."""

    model_config = ConfigDict(from_attributes=True)

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


class TaxRequest(BaseModel):
    """Schema for a PAYE-only request on chargeable income."""

    chargeable_income: Decimal = ZERO

    @field_validator("chargeable_income", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        return parse_amount(value)


class TaxResponse(BaseModel):
    """Schema for a PAYE-only result."""

    chargeable_income: Decimal
    tax: Decimal
    marginal_rate: Decimal
    effective_rate: Decimal


class SummaryRequest(PayrollFields):
    """Schema for a text summary request."""

    name: str | None = None


class SummaryResponse(BaseModel):
    """Schema for a text summary."""

    text: str


class BracketResponse(BaseModel):
    """Schema for one PAYE bracket."""

    model_config = ConfigDict(from_attributes=True)

    lower_bound: Decimal
    upper_bound: Decimal | None = None
    marginal_rate: Decimal
    base_tax_at_lower: Decimal


class BracketTableResponse(BaseModel):
    """Schema for the active bracket table and SSNIT rates."""

    brackets: list[BracketResponse]
    ssnit_employee_rate: Decimal
    ssnit_employer_rate: Decimal


# ============================================================================
# Ledger schemas
# ============================================================================


class LedgerEntryCreate(PayrollFields):
    """Schema for adding an employee to the ledger."""

    name: str = ""


class SsnitTiersResponse(BaseModel):
    """Schema for SSNIT tier amounts."""

    model_config = ConfigDict(from_attributes=True)

    tier1_employer: Decimal
    tier2_employee: Decimal
    tier2_employer: Decimal
    tier2_total: Decimal


class LedgerEntryResponse(BaseModel):
    """Schema for a ledger entry."""

    model_config = ConfigDict(from_attributes=True)

    entry_id: UUID
    employee_name: str
    created_at: datetime
    breakdown: BreakdownResponse
    ssnit: SsnitTiersResponse


class LedgerListResponse(BaseModel):
    """Schema for listing ledger entries."""

    items: list[LedgerEntryResponse]
    total: int


# ============================================================================
# Report schemas
# ============================================================================


class ReportPreviewResponse(BaseModel):
    """Schema for a report preview."""

    kind: str
    title: str
    filename: str
    headers: list[str]
    rows: list[list[Any]]
    records: list[dict[str, Any]]


# ============================================================================
# Misc schemas
# ============================================================================


class ToolResponse(BaseModel):
    """Schema for a landing-page tool."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    href: str
    status: str


class ThemeResponse(BaseModel):
    """Schema for the theme preference."""

    theme: str


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = Field(default=None)
