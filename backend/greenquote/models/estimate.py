"""Viewport-based lawn area estimate."""

from __future__ import annotations

from pydantic import BaseModel, Field

from greenquote.models.enums import Confidence, Guardrail, PropertyType


class Estimate(BaseModel):
    """Output of the viewport estimator.

    ``confidence`` only drives the badge shown to the user; it never feeds
    back into any number. ``area_ratio`` and ``guardrail`` record how the
    lawn estimate was derived from the viewport.
    """

    estimated_area_sq_ft: float = Field(ge=0)
    confidence: Confidence
    property_type: PropertyType
    area_ratio: float
    viewport_area_sq_ft: float = Field(ge=0)
    guardrail: Guardrail = Guardrail.NONE

    @property
    def message(self) -> str:
        if self.confidence == Confidence.HIGH:
            return "Estimated from the street address. Adjust the outline to match the lawn."
        if self.confidence == Confidence.MEDIUM:
            return "Rough estimate from the area around this address. Please verify the outline."
        return "Low-confidence estimate. Draw the lawn boundary for an accurate quote."
