"""
Numeric helpers shared by the engine and its explanation trace.

Rounding is half away from zero at every step (``2.675 -> 2.68``,
``-2.5 -> -3``).  Values are rounded from their shortest decimal repr, so a
float that prints as ``2.675`` rounds the way it reads.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round2(value: float) -> float:
    return round_half_away(value, 2)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def format_number(value: float) -> str:
    """Render a number without trailing zeros: ``21.5``, ``35``, ``0.88``."""
    # + 0.0 folds -0.0 into 0.0
    return f"{value + 0.0:g}"
