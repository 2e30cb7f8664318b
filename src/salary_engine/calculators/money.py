"""Money helpers: cent rounding, text coercion and display formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")
CENT = Decimal("0.01")
ZERO_MONEY = ZERO.quantize(CENT)

DEFAULT_CURRENCY = "GHS"


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places, half-up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def clamp_non_negative(amount: Decimal) -> Decimal:
    """Return amount, or zero when it is negative."""
    return amount if amount > ZERO else ZERO


def to_decimal(value: Any) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def parse_amount(value: Any) -> Decimal:
    """Coerce a user-entered amount to a non-negative Decimal.

    Mirrors what a form field accepts:
    - None, blank and unparsable text become 0
    - thousands separators (",") are ignored
    - NaN and infinities become 0
    - negative values clamp to 0
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, str):
        text = value.replace(",", "").strip()
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return ZERO
    else:
        try:
            amount = to_decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            return ZERO

    if not amount.is_finite():
        return ZERO
    return clamp_non_negative(amount)


def format_money(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount for display, e.g. ``GHS 1,234.56``."""
    return f"{currency} {round_to_cents(amount):,.2f}"


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percent label, e.g. 0.055 -> ``5.5%``."""
    percent = (rate * 100).normalize()
    return f"{percent:f}%"
