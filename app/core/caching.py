"""HTTP caching utilities for API responses."""

from fastapi import Response

from app.core.config import settings


def cache_prediction(response: Response) -> None:
    """Apply private short-term caching to a prediction.

    Experience scores move with the calendar, so predictions are only
    cached briefly and never by shared caches.
    """
    response.headers["Cache-Control"] = f"private, max-age={settings.prediction_cache_max_age}"


def cache_short(response: Response) -> None:
    """Apply short-term caching (5 minutes)."""
    response.headers["Cache-Control"] = "public, max-age=300, stale-while-revalidate=60"
