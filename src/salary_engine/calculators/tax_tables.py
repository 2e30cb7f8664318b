"""PAYE bracket tables and SSNIT rate sets.

Bracket tables use the same payload shape as stored tax rules:
{
    "tax_type": "paye",
    "brackets": [
        {"min": 0, "max": 490, "rate": 0, "flat": 0},
        {"min": 490, "max": 600, "rate": 0.05, "flat": 0},
        ...
        {"min": 50416.67, "max": null, "rate": 0.35, "flat": 13728.67}
    ]
}
"flat" is the tax owed at exactly "min".
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from salary_engine.calculators.money import ZERO, round_to_cents, to_decimal
from salary_engine.calculators.types import ONE, ContributionRates, TaxBracket

# Ghana PAYE 2024, monthly chargeable income (GHS)
GHANA_PAYE_2024_PAYLOAD: dict[str, Any] = {
    "tax_type": "paye",
    "jurisdiction_code": "GH",
    "brackets": [
        {"min": "0", "max": "490", "rate": "0", "flat": "0"},
        {"min": "490", "max": "600", "rate": "0.05", "flat": "0"},
        {"min": "600", "max": "730", "rate": "0.10", "flat": "5.50"},
        {"min": "730", "max": "3896.67", "rate": "0.175", "flat": "18.50"},
        {"min": "3896.67", "max": "19896.67", "rate": "0.25", "flat": "572.67"},
        {"min": "19896.67", "max": "50416.67", "rate": "0.30", "flat": "4572.67"},
        {"min": "50416.67", "max": None, "rate": "0.35", "flat": "13728.67"},
    ],
}

# SSNIT: 5.5% employee, 13% employer (5% Tier 1 + 8% Tier 2)
SSNIT_2024_RATES = ContributionRates(
    employee=Decimal("0.055"),
    employer_tier1=Decimal("0.05"),
    employer_tier2=Decimal("0.08"),
)


class BracketTableError(ValueError):
    """Raised when a bracket table breaks an ordering or consistency rule."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        if index is not None:
            message = f"Bracket {index}: {message}"
        super().__init__(message)


def brackets_from_payload(payload: dict[str, Any]) -> list[TaxBracket]:
    """Parse brackets from a tax rule payload.

    Raises:
        BracketTableError: If the payload is not a JSON object
    """
    if not isinstance(payload, dict):
        raise BracketTableError(
            f"Tax rule payload must be an object, got {type(payload).__name__}"
        )

    brackets = []
    for b in payload.get("brackets", []):
        brackets.append(
            TaxBracket(
                lower_bound=to_decimal(b["min"]),
                upper_bound=to_decimal(b["max"]) if b.get("max") is not None else None,
                marginal_rate=to_decimal(b["rate"]),
                base_tax_at_lower=to_decimal(b.get("flat", 0)),
            )
        )
    return brackets


def brackets_to_payload(brackets: Sequence[TaxBracket]) -> dict[str, Any]:
    """Inverse of brackets_from_payload (amounts as strings)."""
    return {
        "tax_type": "paye",
        "brackets": [
            {
                "min": str(b.lower_bound),
                "max": str(b.upper_bound) if b.upper_bound is not None else None,
                "rate": str(b.marginal_rate),
                "flat": str(b.base_tax_at_lower),
            }
            for b in brackets
        ],
    }


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """Check that a bracket table is usable for progressive tax.

    Rules:
    - at least one bracket, the first starting at 0
    - ascending and contiguous (each upper bound is the next lower bound)
    - only the last bracket is unbounded, and it must be
    - marginal rates lie in [0, 1]
    - each base tax equals the cumulative tax of the lower brackets,
      compared at cent precision since published tables round it

    Raises:
        BracketTableError: On the first rule that does not hold
    """
    if not brackets:
        raise BracketTableError("Bracket table is empty")

    if brackets[0].lower_bound != ZERO:
        raise BracketTableError("First bracket must start at 0", index=0)
    if brackets[0].base_tax_at_lower != ZERO:
        raise BracketTableError("First bracket must have zero base tax", index=0)

    last = len(brackets) - 1
    for i, bracket in enumerate(brackets):
        if not ZERO <= bracket.marginal_rate <= ONE:
            raise BracketTableError(
                f"Marginal rate {bracket.marginal_rate} outside [0, 1]", index=i
            )

        if bracket.upper_bound is None:
            if i != last:
                raise BracketTableError("Only the last bracket may be unbounded", index=i)
            continue

        if i == last:
            raise BracketTableError("Last bracket must be unbounded", index=i)
        if bracket.upper_bound <= bracket.lower_bound:
            raise BracketTableError(
                f"Upper bound {bracket.upper_bound} not above lower bound "
                f"{bracket.lower_bound}",
                index=i,
            )

        following = brackets[i + 1]
        if following.lower_bound != bracket.upper_bound:
            raise BracketTableError(
                f"Upper bound {bracket.upper_bound} does not meet next lower bound "
                f"{following.lower_bound}",
                index=i,
            )

        expected_base = round_to_cents(bracket.tax_at(bracket.upper_bound))
        if round_to_cents(following.base_tax_at_lower) != expected_base:
            raise BracketTableError(
                f"Base tax {following.base_tax_at_lower} inconsistent with "
                f"cumulative tax {expected_base}",
                index=i + 1,
            )


GHANA_PAYE_2024: tuple[TaxBracket, ...] = tuple(brackets_from_payload(GHANA_PAYE_2024_PAYLOAD))
