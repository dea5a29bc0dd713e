"""Square-footage pricing models: tiers, results, and quote-time snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from greenquote.models.enums import PricingMode

if TYPE_CHECKING:
    from greenquote.config import PricingSettings


class PricingTier(BaseModel):
    """One marginal-rate band.

    ``up_to_sq_ft`` is the exclusive upper bound of the band in total square
    footage; ``None`` means "no limit". Values are deliberately unconstrained
    here so a bad table can reach ``validate_pricing_tiers`` intact. Stored
    account settings use ``up_to_sqft`` / ``rate_per_sqft`` keys, which are
    accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    up_to_sq_ft: float | None = Field(
        default=None,
        validation_alias=AliasChoices("up_to_sq_ft", "up_to_sqft"),
    )
    rate_per_sq_ft: float = Field(
        validation_alias=AliasChoices("rate_per_sq_ft", "rate_per_sqft"),
    )

    @property
    def is_unlimited(self) -> bool:
        return self.up_to_sq_ft is None

    def to_storage_dict(self) -> dict[str, float | None]:
        """Tier in the stored settings/quote shape (``up_to_sqft`` keys)."""
        return {"up_to_sqft": self.up_to_sq_ft, "rate_per_sqft": self.rate_per_sq_ft}


class TierBreakdown(BaseModel):
    """The slice of a quote's area priced within one tier."""

    range_start: float
    range_end: float | None
    sq_ft_in_tier: float
    rate: float
    price: float
    label: str


class PriceResult(BaseModel):
    """Price for a total area under either pricing mode."""

    mode: PricingMode
    total_sq_ft: float
    total_price: float
    breakdown: list[TierBreakdown] = Field(default_factory=list)

    @property
    def effective_rate(self) -> float:
        """Blended $/sq ft actually charged."""
        if self.total_sq_ft <= 0:
            return 0.0
        return self.total_price / self.total_sq_ft


class TierValidationResult(BaseModel):
    """Every problem found in a tier table, for display in a settings form."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


class PriceComparison(BaseModel):
    """Tiered vs flat pricing for the same area."""

    tiered_price: float
    flat_price: float
    savings: float
    savings_percent: float


class PricingSnapshot(BaseModel):
    """Immutable copy of the rates used when a quote was created.

    Account pricing can change later; a saved quote is always re-priced from
    its own snapshot, never from the live settings.
    """

    model_config = ConfigDict(frozen=True)

    mode: PricingMode
    tiers_snapshot: tuple[PricingTier, ...] | None = None
    flat_rate_snapshot: float | None = None

    @model_validator(mode="after")
    def rates_match_mode(self) -> PricingSnapshot:
        if self.mode == PricingMode.TIERED and not self.tiers_snapshot:
            msg = "tiered snapshot requires tiers_snapshot"
            raise ValueError(msg)
        if self.mode == PricingMode.FLAT and self.flat_rate_snapshot is None:
            msg = "flat snapshot requires flat_rate_snapshot"
            raise ValueError(msg)
        return self

    @classmethod
    def from_settings(cls, settings: PricingSettings) -> PricingSnapshot:
        """Freeze the rate configuration currently in effect for an account."""
        if settings.pricing_mode == PricingMode.TIERED:
            return cls(
                mode=PricingMode.TIERED,
                tiers_snapshot=tuple(t.model_copy() for t in settings.sqft_pricing_tiers),
            )
        return cls(mode=PricingMode.FLAT, flat_rate_snapshot=settings.price_per_sq_ft)

    def price_for(self, total_sq_ft: float) -> PriceResult:
        from greenquote.pricing import price_for

        if self.mode == PricingMode.TIERED:
            assert self.tiers_snapshot is not None
            return price_for(total_sq_ft, list(self.tiers_snapshot))
        assert self.flat_rate_snapshot is not None
        return price_for(total_sq_ft, self.flat_rate_snapshot)
