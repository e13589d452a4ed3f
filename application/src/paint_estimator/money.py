"""Rounding and USD formatting helpers shared by the calculators."""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero (45.5 -> 46), not to even like round()."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_whole(value: float) -> int:
    """Round to the nearest whole currency unit."""
    return int(round_half_up(value, 0))


def round2(value: float) -> float:
    return round_half_up(value, 2)


def format_currency(amount: float, fraction_digits: int = 2) -> str:
    """Format a dollar amount, e.g. 1234.5 -> '$1,234.50' (or '$1,235' with 0 digits)."""
    rounded = round_half_up(abs(amount), fraction_digits)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,.{fraction_digits}f}"
