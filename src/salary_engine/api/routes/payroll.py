"""Salary calculator endpoints."""

from decimal import Decimal

from fastapi import APIRouter, status

from salary_engine.api.dependencies import AppSettings, Engine
from salary_engine.api.schemas import (
    BracketResponse,
    BracketTableResponse,
    BreakdownResponse,
    PayrollFields,
    ReverseRequest,
    SummaryRequest,
    SummaryResponse,
    TaxRequest,
    TaxResponse,
)
from salary_engine.calculators.money import ZERO, round_to_cents
from salary_engine.reports.summary import build_summary_text

RATE_PRECISION = Decimal("0.0001")

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post(
    "/calculate",
    response_model=BreakdownResponse,
    status_code=status.HTTP_200_OK,
)
async def calculate(engine: Engine, payload: PayrollFields) -> BreakdownResponse:
    """Gross-to-net breakdown for the given salary fields."""
    breakdown = engine.compute_breakdown(payload.to_payroll_input())
    return BreakdownResponse.model_validate(breakdown)


@router.post(
    "/reverse",
    response_model=BreakdownResponse,
    status_code=status.HTTP_200_OK,
)
async def reverse(engine: Engine, payload: ReverseRequest) -> BreakdownResponse:
    """Net-to-gross breakdown (no allowances, no loan)."""
    breakdown = engine.compute_reverse_breakdown(payload.net_pay)
    return BreakdownResponse.model_validate(breakdown)


@router.post(
    "/summary",
    response_model=SummaryResponse,
    status_code=status.HTTP_200_OK,
)
async def summary(
    engine: Engine,
    settings: AppSettings,
    payload: SummaryRequest,
) -> SummaryResponse:
    """Plain-text summary of the current calculation."""
    payroll_input = payload.to_payroll_input()
    breakdown = engine.compute_breakdown(payroll_input)
    text = build_summary_text(
        payroll_input,
        breakdown,
        rates=engine.rates,
        employee_name=payload.name,
        currency=settings.currency_code,
    )
    return SummaryResponse(text=text)


@router.get("/brackets", response_model=BracketTableResponse)
async def brackets(engine: Engine) -> BracketTableResponse:
    """Active PAYE bracket table and SSNIT rates."""
    return BracketTableResponse(
        brackets=[BracketResponse.model_validate(b) for b in engine.tax_calculator.brackets],
        ssnit_employee_rate=engine.rates.employee,
        ssnit_employer_rate=engine.rates.employer,
    )


@router.post(
    "/tax",
    response_model=TaxResponse,
    status_code=status.HTTP_200_OK,
)
async def tax(engine: Engine, payload: TaxRequest) -> TaxResponse:
    """PAYE on a chargeable income, with the marginal and effective rates."""
    calculator = engine.tax_calculator
    chargeable = round_to_cents(payload.chargeable_income)
    paye = calculator.calculate_paye(chargeable)
    effective = (paye / chargeable).quantize(RATE_PRECISION) if chargeable > ZERO else ZERO
    return TaxResponse(
        chargeable_income=chargeable,
        tax=paye,
        marginal_rate=calculator.bracket_for(chargeable).marginal_rate,
        effective_rate=effective,
    )
