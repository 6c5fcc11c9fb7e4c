"""Pydantic schemas for API v1."""

from app.api.v1.schemas.prediction import (
    MatchupRequest,
    PillarBreakdown,
    PredictionAnalysis,
    PredictionResponse,
    WeightPreset,
    WeightPresetsResponse,
)

__all__ = [
    "MatchupRequest",
    "PillarBreakdown",
    "PredictionAnalysis",
    "PredictionResponse",
    "WeightPreset",
    "WeightPresetsResponse",
]
