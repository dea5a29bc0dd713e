"""Enums for the GreenQuote domain models."""

from enum import StrEnum


class PropertyType(StrEnum):
    """Kind of property being quoted; drives polygon layout."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class Confidence(StrEnum):
    """Advisory precision label attached to an area estimate."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Guardrail(StrEnum):
    """Which branch of the viewport estimator shaped the result."""

    NONE = "none"
    FALLBACK = "fallback"
    LARGE_VIEWPORT = "large_viewport"
    SMALL_VIEWPORT = "small_viewport"


class PricingMode(StrEnum):
    """How square footage is converted into a price."""

    FLAT = "flat"
    TIERED = "tiered"


class DrawingState(StrEnum):
    """States of the manual drawing session."""

    IDLE = "idle"
    DRAWING = "drawing"


class AreaSource(StrEnum):
    """Where the quoted lawn size came from."""

    MEASURED = "measured"
    ESTIMATED = "estimated"
    MANUAL = "manual"


class ServiceFrequency(StrEnum):
    """Visit cadence offered on a quote."""

    ONE_TIME = "one_time"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi_weekly"
    MONTHLY = "monthly"
