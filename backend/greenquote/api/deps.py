"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from greenquote.config import load_engine_config
from greenquote.engine import LawnQuoteEngine
from greenquote.factory import create_default_engine

logger = logging.getLogger(__name__)

_DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def create_engine() -> LawnQuoteEngine:
    """Create a LawnQuoteEngine from environment configuration.

    Reads GREENQUOTE_CONFIG_PATH (optional JSON file with ``estimator`` and
    ``generator`` sections). Raises ConfigurationError if the file is set but
    unusable.
    """
    config_path = os.environ.get("GREENQUOTE_CONFIG_PATH") or None
    if config_path is not None:
        logger.info("Loading engine config from %s", config_path)
    return create_default_engine(load_engine_config(config_path))


def cors_origins() -> list[str]:
    raw = os.environ.get("GREENQUOTE_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
