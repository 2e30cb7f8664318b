"""Pytest fixtures for salary engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from salary_engine.calculators.engine import PayrollEngine
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.types import Allowances, PayrollInput
from salary_engine.services.ledger import PayrollLedger


@pytest.fixture
def calculator() -> TaxCalculator:
    """Tax calculator over the built-in PAYE table."""
    return TaxCalculator()


@pytest.fixture
def engine() -> PayrollEngine:
    """Engine with the default SSNIT rates."""
    return PayrollEngine()


def _make_input(
    basic: str = "0",
    food: str = "0",
    transport: str = "0",
    utilities: str = "0",
    rent: str = "0",
    other: str = "0",
    loan: str = "0",
) -> PayrollInput:
    return PayrollInput(
        basic_pay=Decimal(basic),
        allowances=Allowances(
            food=Decimal(food),
            transport=Decimal(transport),
            utilities=Decimal(utilities),
            rent=Decimal(rent),
            other=Decimal(other),
        ),
        loan_deduction=Decimal(loan),
    )


@pytest.fixture
def make_input():
    """Factory for PayrollInput from string amounts."""
    return _make_input


@pytest.fixture
def ledger(engine: PayrollEngine) -> PayrollLedger:
    """Ledger with two employees, added Ama then Kofi (Kofi is newest)."""
    ledger = PayrollLedger()
    for name, payroll_input in (
        ("Ama Mensah", _make_input(basic="1000")),
        ("Kofi Boateng", _make_input(basic="2500", food="150", transport="100", loan="200")),
    ):
        breakdown = engine.compute_breakdown(payroll_input)
        ledger.add(name, payroll_input, breakdown, engine.compute_ssnit_tiers(breakdown.basic_pay))
    return ledger
