"""Progressive PAYE calculation and its net-to-chargeable inverse."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from salary_engine.calculators.money import ZERO, clamp_non_negative, round_to_cents
from salary_engine.calculators.tax_tables import GHANA_PAYE_2024, ONE, validate_brackets
from salary_engine.calculators.types import TaxBracket


class TaxCalculator:
    """Calculates PAYE over an ordered, contiguous bracket table.

    Tax for an income x in bracket [lower, upper):

        tax(x) = base_tax_at_lower + (x - lower) * marginal_rate

    The table is validated on construction, so exactly one bracket
    matches any non-negative income.
    """

    # Slack when matching an inverse candidate to its bracket. Published
    # base taxes are rounded to the cent, so adjacent bracket lines do not
    # meet exactly at the boundary.
    INVERSE_TOLERANCE = Decimal("0.0001")

    def __init__(self, brackets: Sequence[TaxBracket] = GHANA_PAYE_2024):
        validate_brackets(brackets)
        self.brackets: tuple[TaxBracket, ...] = tuple(brackets)

    def bracket_for(self, income: Decimal) -> TaxBracket:
        """Return the bracket containing income (negative income clamps to 0)."""
        income = clamp_non_negative(income)
        for bracket in self.brackets:
            if bracket.contains(income):
                return bracket
        # Unreachable for a validated table
        return self.brackets[-1]

    def calculate_paye(self, chargeable_income: Decimal) -> Decimal:
        """Calculate PAYE on chargeable income, rounded to cents."""
        income = clamp_non_negative(chargeable_income)
        if income == ZERO:
            return round_to_cents(ZERO)
        return round_to_cents(self.bracket_for(income).tax_at(income))

    def chargeable_from_net(self, net_pay: Decimal) -> Decimal:
        """Solve for the chargeable income that leaves net_pay after PAYE.

        For each bracket in ascending order, solves

            net = x - (base + (x - lower) * rate)

        for x and accepts the first candidate that lands inside the
        bracket (within INVERSE_TOLERANCE). Falls back to net_pay itself
        if no bracket accepts its candidate. The result is not rounded.
        """
        net = clamp_non_negative(net_pay)
        if net == ZERO:
            return ZERO

        tolerance = self.INVERSE_TOLERANCE
        for bracket in self.brackets:
            denominator = ONE - bracket.marginal_rate
            if denominator <= ZERO:
                continue

            candidate = (
                net
                + bracket.base_tax_at_lower
                - bracket.lower_bound * bracket.marginal_rate
            ) / denominator

            within_lower = candidate >= bracket.lower_bound - tolerance
            within_upper = (
                bracket.upper_bound is None
                or candidate <= bracket.upper_bound + tolerance
            )
            if within_lower and within_upper:
                return candidate

        return net
