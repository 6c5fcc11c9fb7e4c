"""Prediction endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.schemas.prediction import (
    MatchupRequest,
    PredictionResponse,
    WeightPreset,
    WeightPresetsResponse,
)
from app.core.caching import cache_prediction, cache_short
from app.core.exceptions import ValidationException
from app.prediction_engine import PillarWeights, PredictionEngine
from app.prediction_engine.weights import REDISTRIBUTION_SHARES

router = APIRouter(prefix="/predictions", tags=["Predictions"])

_engine = PredictionEngine()


def get_prediction_engine() -> PredictionEngine:
    """Dependency to get prediction engine."""
    return _engine


@router.post("/matchup", response_model=PredictionResponse)
async def predict_matchup(
    request: MatchupRequest,
    response: Response,
    engine: Annotated[PredictionEngine, Depends(get_prediction_engine)],
) -> PredictionResponse:
    """Predict the outcome of a matchup between two fighter profiles.

    Returns a detailed prediction including:
    - Win probability for each corner
    - Confidence score from data completeness
    - Breakdown of the six pillar scores
    - Key factors, warnings and a headline verdict
    """
    try:
        prediction = engine.predict_matchup(request.fighter1, request.fighter2)
    except ValueError as e:
        raise ValidationException(str(e))

    cache_prediction(response)
    return PredictionResponse.model_validate(prediction.to_dict())


@router.get("/weights", response_model=WeightPresetsResponse)
async def get_weight_presets(response: Response) -> WeightPresetsResponse:
    """Get the pillar weight presets used for each style matchup."""
    cache_short(response)
    return WeightPresetsResponse(
        default=WeightPreset(**PillarWeights.default().as_dict()),
        striker_vs_striker=WeightPreset(**PillarWeights.striker_vs_striker().as_dict()),
        grappler_vs_grappler=WeightPreset(**PillarWeights.grappler_vs_grappler().as_dict()),
        redistribution=dict(REDISTRIBUTION_SHARES),
    )
