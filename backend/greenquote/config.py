"""Typed configuration for the estimator, polygon generator, and account pricing.

Each config is a validated pydantic model built once and passed down to the
component that needs it. Estimator guardrail thresholds and multipliers are
empirical tuning parameters, not correctness requirements.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from greenquote.data.pricing_defaults import (
    DEFAULT_FLAT_RATE_PER_SQ_FT,
    DEFAULT_MIN_PRICE_PER_VISIT,
    DEFAULT_PRICING_TIERS,
)
from greenquote.exceptions import ConfigurationError
from greenquote.models.enums import PricingMode
from greenquote.models.pricing import PricingTier


class EstimatorConfig(BaseModel):
    """Ratios and bounds used to turn a viewport into a lawn estimate."""

    # Lawn share of the viewport, by address precision
    street_address_ratio: float = Field(default=0.35, gt=0, le=1)
    area_level_ratio: float = Field(default=0.20, gt=0, le=1)

    min_lawn_sq_ft: float = Field(default=1_000.0, ge=0)
    max_lawn_sq_ft: float = Field(default=43_500.0, gt=0)
    rounding_sq_ft: float = Field(default=100.0, gt=0)

    # Used when the place has no viewport or bounds
    fallback_radius_m: float = Field(default=30.0, gt=0)
    fallback_lawn_fraction: float = Field(default=0.40, gt=0, le=1)

    # Whole-block (or larger) viewports
    large_viewport_threshold_sq_ft: float = Field(default=1_000_000.0, gt=0)
    large_viewport_ratio_factor: float = Field(default=0.20, gt=0, le=1)

    # Viewports too tight to trust the plain ratio
    small_viewport_threshold_sq_ft: float = Field(default=10_000.0, gt=0)
    small_viewport_multiplier: float = Field(default=1.5, ge=1)
    small_viewport_ratio_ceiling: float = Field(default=0.60, gt=0, le=1)

    @model_validator(mode="after")
    def bounds_are_ordered(self) -> EstimatorConfig:
        if self.min_lawn_sq_ft > self.max_lawn_sq_ft:
            msg = (
                f"min_lawn_sq_ft ({self.min_lawn_sq_ft}) must not exceed "
                f"max_lawn_sq_ft ({self.max_lawn_sq_ft})"
            )
            raise ValueError(msg)
        if self.small_viewport_threshold_sq_ft >= self.large_viewport_threshold_sq_ft:
            msg = "small_viewport_threshold_sq_ft must be below large_viewport_threshold_sq_ft"
            raise ValueError(msg)
        return self


class GeneratorConfig(BaseModel):
    """Shape parameters for synthesized yard polygons."""

    front_yard_ratio: float = Field(default=0.30, gt=0, lt=1)
    back_yard_ratio: float = Field(default=0.70, gt=0, lt=1)
    front_yard_aspect_ratio: float = Field(default=2.5, gt=0)
    back_yard_aspect_ratio: float = Field(default=1.2, gt=0)
    commercial_aspect_ratio: float = Field(default=2.0, gt=0)

    # Typical suburban lot depth; yard centres sit a fraction of it from the lot centre
    lot_depth_m: float = Field(default=40.0, gt=0)
    front_offset_fraction: float = Field(default=0.2, ge=0)
    back_offset_fraction: float = Field(default=0.4, ge=0)

    default_road_heading: float = Field(default=180.0, ge=0, lt=360)

    @model_validator(mode="after")
    def yard_ratios_sum_to_one(self) -> GeneratorConfig:
        total = self.front_yard_ratio + self.back_yard_ratio
        if abs(total - 1.0) > 1e-6:
            msg = f"front_yard_ratio + back_yard_ratio must equal 1.0, got {total}"
            raise ValueError(msg)
        return self


class PricingSettings(BaseModel):
    """Account-level pricing settings as stored for each account."""

    use_tiered_sqft_pricing: bool = True
    sqft_pricing_tiers: list[PricingTier] = Field(
        default_factory=lambda: list(DEFAULT_PRICING_TIERS),
    )
    price_per_sq_ft: float = Field(
        default=DEFAULT_FLAT_RATE_PER_SQ_FT, ge=0, allow_inf_nan=False,
    )
    min_price_per_visit: float = Field(
        default=DEFAULT_MIN_PRICE_PER_VISIT, ge=0, allow_inf_nan=False,
    )

    @field_validator("sqft_pricing_tiers", mode="before")
    @classmethod
    def tiers_default_when_null(cls, v: object) -> object:
        return list(DEFAULT_PRICING_TIERS) if v is None else v

    @field_validator("price_per_sq_ft", mode="before")
    @classmethod
    def flat_rate_default_when_unset(cls, v: object) -> object:
        # An unset or zero stored rate falls back to the default rate
        if v is None or v == 0:
            return DEFAULT_FLAT_RATE_PER_SQ_FT
        return v

    @property
    def pricing_mode(self) -> PricingMode:
        if self.use_tiered_sqft_pricing and self.sqft_pricing_tiers:
            return PricingMode.TIERED
        return PricingMode.FLAT


class EngineConfig(BaseModel):
    """Bundle of component configs, as loaded from a JSON file."""

    estimator: EstimatorConfig = Field(default_factory=EstimatorConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)


def load_engine_config(path: str | Path | None) -> EngineConfig:
    """Load an ``EngineConfig`` from a JSON file, or defaults when ``path`` is None.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or fails validation.
    """
    if path is None:
        return EngineConfig()

    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text())
    except FileNotFoundError as exc:
        msg = f"Config file not found: {config_path}"
        raise ConfigurationError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Config file is not valid JSON: {config_path}"
        raise ConfigurationError(msg) from exc

    try:
        return EngineConfig.model_validate(raw)
    except ValidationError as exc:
        msg = f"Invalid engine config in {config_path}: {exc}"
        raise ConfigurationError(msg) from exc
