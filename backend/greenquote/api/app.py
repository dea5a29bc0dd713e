"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from greenquote.config import PricingSettings
from greenquote.exceptions import GreenQuoteError, InvalidPricingTiersError
from greenquote.models.enums import AreaSource, PricingMode, PropertyType, ServiceFrequency
from greenquote.models.geo import Place  # noqa: TCH001 (FastAPI resolves at runtime)
from greenquote.models.polygon import Polygon
from greenquote.models.pricing import PricingTier  # noqa: TCH001
from greenquote.models.quote import Addon  # noqa: TCH001
from greenquote.pricing import compare_pricing, price_for, validate_pricing_tiers
from greenquote.services.session import ServiceAreaSession

if TYPE_CHECKING:
    from greenquote.engine import LawnQuoteEngine

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    place: Place
    property_type: PropertyType = PropertyType.RESIDENTIAL


class AreaRequest(BaseModel):
    polygons: list[Polygon] = Field(default_factory=list)


class TiersRequest(BaseModel):
    tiers: list[PricingTier] = Field(default_factory=list)


class PriceRequest(BaseModel):
    total_sq_ft: float = Field(ge=0)
    settings: PricingSettings = Field(default_factory=PricingSettings)


class QuoteRequest(BaseModel):
    polygons: list[Polygon] = Field(default_factory=list)
    property_type: PropertyType = PropertyType.RESIDENTIAL
    property_address: str | None = None
    area_source: AreaSource = AreaSource.MEASURED
    frequency: ServiceFrequency = ServiceFrequency.BI_WEEKLY
    addons: list[Addon] = Field(default_factory=list)
    settings: PricingSettings = Field(default_factory=PricingSettings)


def _session_for(polygons: list[Polygon]) -> ServiceAreaSession:
    session = ServiceAreaSession()
    session.replace_polygons(polygons)
    return session


def create_app(*, engine: LawnQuoteEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from environment variables on the
        first request that needs it.
    """
    from greenquote.api.deps import cors_origins

    app = FastAPI(title="GreenQuote", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.engine = engine

    def _get_engine() -> LawnQuoteEngine:
        eng: LawnQuoteEngine | None = app.state.engine
        if eng is not None:
            return eng
        from greenquote.api.deps import create_engine

        try:
            eng = create_engine()
        except GreenQuoteError as exc:
            logger.exception("Could not build engine from environment")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        eng = _get_engine()
        est, polygons = eng.estimate_polygons(request.place, request.property_type)
        summary = _session_for(polygons).summary
        return {
            "estimate": est.model_dump(mode="json"),
            "message": est.message,
            "polygons": [p.model_dump(mode="json") for p in polygons],
            "area": summary.model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # POST /api/area
    # ------------------------------------------------------------------

    @app.post("/api/area")
    def area(request: AreaRequest) -> dict[str, Any]:
        summary = _session_for(request.polygons).summary
        return summary.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/pricing/validate
    # ------------------------------------------------------------------

    @app.post("/api/pricing/validate")
    def validate_tiers(request: TiersRequest) -> dict[str, Any]:
        return validate_pricing_tiers(request.tiers).model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/price
    # ------------------------------------------------------------------

    @app.post("/api/price")
    def price(request: PriceRequest) -> dict[str, Any]:
        settings = request.settings
        if settings.pricing_mode == PricingMode.TIERED:
            validation = validate_pricing_tiers(settings.sqft_pricing_tiers)
            if not validation.valid:
                raise HTTPException(status_code=400, detail={"errors": validation.errors})
            result = price_for(request.total_sq_ft, settings.sqft_pricing_tiers)
            comparison = compare_pricing(
                request.total_sq_ft, settings.sqft_pricing_tiers, settings.price_per_sq_ft,
            )
        else:
            result = price_for(request.total_sq_ft, settings.price_per_sq_ft)
            comparison = None
        return {
            "price": result.model_dump(mode="json"),
            "effective_rate": result.effective_rate,
            "comparison": comparison.model_dump(mode="json") if comparison else None,
        }

    # ------------------------------------------------------------------
    # POST /api/quote
    # ------------------------------------------------------------------

    @app.post("/api/quote")
    def quote(request: QuoteRequest) -> dict[str, Any]:
        eng = _get_engine()
        session = _session_for(request.polygons)
        try:
            pricing = eng.price(
                session,
                request.settings,
                frequency=request.frequency,
                addons=request.addons,
            )
        except InvalidPricingTiersError as exc:
            raise HTTPException(status_code=400, detail={"errors": exc.errors}) from exc

        record = eng.build_quote_record(
            session,
            request.property_type,
            pricing,
            area_source=request.area_source,
            property_address=request.property_address,
            addons=request.addons,
        )
        return {
            "pricing": pricing.model_dump(mode="json"),
            "record": record.to_storage_dict(),
        }

    return app
