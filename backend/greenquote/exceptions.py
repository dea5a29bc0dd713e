"""Custom exception hierarchy for the GreenQuote engine."""

from __future__ import annotations


class GreenQuoteError(Exception):
    """Base exception for all GreenQuote errors."""


class ConfigurationError(GreenQuoteError):
    """Raised when engine configuration cannot be loaded."""


class PolygonNotFoundError(GreenQuoteError):
    """Raised when a vertex edit targets a polygon the session does not own."""

    def __init__(self, polygon_id: str) -> None:
        super().__init__(f"No polygon with id '{polygon_id}' in this session")
        self.polygon_id = polygon_id


class InvalidPricingTiersError(GreenQuoteError):
    """Raised when a quote is priced against tiers that fail validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid pricing tiers: " + "; ".join(errors))
        self.errors = list(errors)
