"""Prediction-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.prediction_engine import FighterProfile


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PillarBreakdown(CamelModel):
    """Pillar scores, positive favours fighter 1 (red corner)."""

    striking_advantage: float = Field(description="Effective striking index")
    grappling_advantage: float = Field(description="Grappling dominance index")
    biometric_advantage: float = Field(description="Reach, ape index and age")
    finish_potential: float = Field(description="KO, submission and early-finish threat")
    historical_performance: float = Field(description="Win rate, streak and title defenses")
    experience_advantage: float = Field(description="Octagon experience")


class PredictionAnalysis(CamelModel):
    """Qualitative explanation of a prediction."""

    key_factors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    prediction: str = Field(description="Headline verdict")


class PredictionResponse(CamelModel):
    """Full prediction response."""

    fighter1_win_probability: float = Field(ge=0, le=100, description="Red corner, percent")
    fighter2_win_probability: float = Field(ge=0, le=100, description="Blue corner, percent")
    confidence_score: int = Field(ge=0, le=100, description="Data completeness 0-100")
    breakdown: PillarBreakdown
    analysis: PredictionAnalysis


class MatchupRequest(BaseModel):
    """Request for a matchup prediction between two resolved profiles."""

    fighter1: FighterProfile = Field(description="Red corner profile")
    fighter2: FighterProfile = Field(description="Blue corner profile")


class WeightPreset(BaseModel):
    """Pillar weights for one style matchup."""

    striking: float
    grappling: float
    biometric: float
    finish: float
    historical: float
    experience: float


class WeightPresetsResponse(BaseModel):
    """Weight presets used by the engine."""

    default: WeightPreset
    striker_vs_striker: WeightPreset
    grappler_vs_grappler: WeightPreset
    redistribution: dict[str, float]
