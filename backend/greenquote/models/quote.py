"""Quote pricing output and the record handed to quote storage."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from greenquote.models.enums import AreaSource, PricingMode, PropertyType, ServiceFrequency
from greenquote.models.pricing import PriceResult, PricingSnapshot


class Addon(BaseModel):
    """An account-specific add-on service charged per visit."""

    id: str
    name: str
    price_per_visit: float = Field(ge=0)


class QuoteLineItem(BaseModel):
    """One line of the price breakdown shown on a quote."""

    label: str
    amount: float
    note: str = ""


class QuotePricing(BaseModel):
    """Per-visit and monthly price for a lawn, with how it was derived."""

    area_price: PriceResult
    base_price: float
    addons_total: float
    per_visit: float
    monthly: float
    frequency: ServiceFrequency
    line_items: list[QuoteLineItem] = Field(default_factory=list)
    snapshot: PricingSnapshot
    minimum_applied: bool = False

    @property
    def pricing_mode(self) -> PricingMode:
        return self.snapshot.mode


class QuoteRecord(BaseModel):
    """Everything the quote-storage collaborator persists for one saved quote.

    Frozen: once built the record, and the pricing snapshot inside it, never
    change.
    """

    model_config = ConfigDict(frozen=True)

    property_type: PropertyType
    property_address: str | None = None
    area_source: AreaSource
    area_sq_ft: int
    polygons: list[list[dict[str, float]]] = Field(default_factory=list)
    frequency: ServiceFrequency
    addons: list[Addon] = Field(default_factory=list)
    base_price_per_visit: float
    total_price_per_visit: float
    monthly_estimate: float
    pricing: PricingSnapshot
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_storage_dict(self) -> dict[str, Any]:
        """Flat column mapping for the quotes table."""
        return {
            "property_type": self.property_type.value,
            "property_address": self.property_address,
            "area_source": self.area_source.value,
            "area_sq_ft": self.area_sq_ft,
            "polygon_path": self.polygons,
            "frequency": self.frequency.value,
            "addons": [a.model_dump() for a in self.addons],
            "base_price_per_visit": self.base_price_per_visit,
            "total_price_per_visit": self.total_price_per_visit,
            "monthly_estimate": self.monthly_estimate,
            "pricing_mode": self.pricing.mode.value,
            "pricing_tiers_snapshot": (
                [t.to_storage_dict() for t in self.pricing.tiers_snapshot]
                if self.pricing.tiers_snapshot is not None
                else None
            ),
            "flat_rate_snapshot": self.pricing.flat_rate_snapshot,
            "created_at": self.created_at.isoformat(),
        }
