"""Formatting helpers for quote output.

Provides human-readable currency, area and rate strings the way they appear
on a quote (e.g. '$205.00', '25,000 sq ft', '$0.0120').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from greenquote.models.pricing import PriceResult


def format_currency(amount: float) -> str:
    """Format a currency amount.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$12,500')
    - Amounts < $10,000: with cents (e.g., '$205.00')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_sq_ft(sq_ft: float) -> str:
    """Format an area as '12,345 sq ft'."""
    return f"{sq_ft:,.0f} sq ft"


def format_rate(rate: float) -> str:
    """Format a per-square-foot rate to four decimals ('$0.0120')."""
    return f"${rate:.4f}"


def format_price_breakdown(result: PriceResult) -> list[str]:
    """One display line per priced tier, e.g. '5,000 sq ft @ $0.0120 = $60.00'."""
    return [
        f"{format_sq_ft(t.sq_ft_in_tier)} @ {format_rate(t.rate)} = {format_currency(t.price)}"
        for t in result.breakdown
    ]
