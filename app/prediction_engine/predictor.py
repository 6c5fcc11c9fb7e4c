"""Pillar-based predictor for fight outcomes.

Blends six pillar scores into a win probability for each corner.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from app.prediction_engine.confidence import ConfidenceScorer
from app.prediction_engine.explainer import Analysis, PredictionExplainer
from app.prediction_engine.feature_extractor import FeatureExtractor, FighterFeatures
from app.prediction_engine.normalization import amplify, clamp, round_half_away
from app.prediction_engine.pillars import (
    biometric_advantage,
    experience_advantage,
    finish_potential,
    grappling_advantage,
    historical_performance,
    striking_advantage,
)
from app.prediction_engine.profile import FighterProfile
from app.prediction_engine.styles import FightingStyle
from app.prediction_engine.tuning import EngineTuning
from app.prediction_engine.weights import PillarWeights

logger = logging.getLogger(__name__)


@dataclass
class PillarBreakdown:
    """Pillar scores, positive favours fighter 1."""

    striking: float = 0.0
    grappling: float = 0.0
    biometric: float = 0.0
    finish: float = 0.0
    historical: float = 0.0
    experience: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "striking": self.striking,
            "grappling": self.grappling,
            "biometric": self.biometric,
            "finish": self.finish,
            "historical": self.historical,
            "experience": self.experience,
        }

    def to_dict(self) -> dict[str, float]:
        """Rounded breakdown for API responses."""
        return {
            "strikingAdvantage": round_half_away(self.striking, 2),
            "grapplingAdvantage": round_half_away(self.grappling, 2),
            "biometricAdvantage": round_half_away(self.biometric, 2),
            "finishPotential": round_half_away(self.finish, 2),
            "historicalPerformance": round_half_away(self.historical, 2),
            "experienceAdvantage": round_half_away(self.experience, 2),
        }


@dataclass
class Prediction:
    """Fight prediction result."""

    fighter1_name: str
    fighter2_name: str

    # Percentages, one decimal
    fighter1_win_probability: float
    fighter2_win_probability: float

    confidence_score: int  # 0-100

    breakdown: PillarBreakdown = field(default_factory=PillarBreakdown)
    analysis: Analysis = field(default_factory=Analysis)

    # Diagnostics
    final_score: float = 0.0
    weights: PillarWeights = field(default_factory=PillarWeights.default)
    styles: tuple[FightingStyle, FightingStyle] = (
        FightingStyle.UNCLASSIFIED,
        FightingStyle.UNCLASSIFIED,
    )

    @property
    def key_factors(self) -> list[str]:
        return self.analysis.key_factors

    @property
    def warnings(self) -> list[str]:
        return self.analysis.warnings

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "fighter1WinProbability": self.fighter1_win_probability,
            "fighter2WinProbability": self.fighter2_win_probability,
            "confidenceScore": self.confidence_score,
            "breakdown": self.breakdown.to_dict(),
            "analysis": {
                "keyFactors": list(self.analysis.key_factors),
                "warnings": list(self.analysis.warnings),
                "prediction": self.analysis.prediction,
            },
        }


class PillarPredictor:
    """Predicts fight outcomes from six weighted pillars."""

    def __init__(self, tuning: EngineTuning | None = None):
        """Initialize predictor with tuning constants.

        Args:
            tuning: Optional custom tuning, uses defaults if None
        """
        self.tuning = tuning or EngineTuning.default()
        self.feature_extractor = FeatureExtractor()
        self.confidence_scorer = ConfidenceScorer()
        self.explainer = PredictionExplainer(self.tuning)

    def predict(
        self,
        fighter1: FighterProfile | dict[str, Any] | None,
        fighter2: FighterProfile | dict[str, Any] | None,
        now: date | None = None,
    ) -> Prediction:
        """Generate prediction for a fight.

        Args:
            fighter1: Red corner profile
            fighter2: Blue corner profile
            now: Reference date for experience, defaults to today (UTC)

        Returns:
            Prediction with probabilities, breakdown and analysis
        """
        if now is None:
            now = datetime.now(timezone.utc).date()

        profile1 = self.feature_extractor.to_profile(fighter1)
        profile2 = self.feature_extractor.to_profile(fighter2)
        f1 = self.feature_extractor.extract(profile1)
        f2 = self.feature_extractor.extract(profile2)

        breakdown = self.calculate_pillars(f1, f2, now)
        scores = breakdown.as_dict()

        base_weights = PillarWeights.for_styles(f1.style, f2.style)
        weights, moved = base_weights.redistribute(scores, self.tuning.signal_epsilon)
        if moved:
            logger.debug("Redistributed %.3f weight from pillars without data", moved)

        final_score = amplify(clamp(weights.blend(scores)), self.tuning.final_power)

        fighter1_probability = (final_score + 1) / 2 * 100
        fighter2_probability = 100 - fighter1_probability

        completeness = self.confidence_scorer.assess(profile1, profile2)
        analysis = self.explainer.explain(scores, final_score, completeness.score, f1, f2)

        logger.debug(
            "%s vs %s: pillars=%s styles=%s/%s final=%.4f",
            f1.fighter_name,
            f2.fighter_name,
            {name: round(score, 4) for name, score in scores.items()},
            f1.style.value,
            f2.style.value,
            final_score,
        )

        return Prediction(
            fighter1_name=f1.fighter_name,
            fighter2_name=f2.fighter_name,
            fighter1_win_probability=round_half_away(fighter1_probability, 1),
            fighter2_win_probability=round_half_away(fighter2_probability, 1),
            confidence_score=int(round_half_away(completeness.score)),
            breakdown=breakdown,
            analysis=analysis,
            final_score=final_score,
            weights=weights,
            styles=(f1.style, f2.style),
        )

    def calculate_pillars(
        self,
        f1: FighterFeatures,
        f2: FighterFeatures,
        now: date,
    ) -> PillarBreakdown:
        """Score all six pillars."""
        t = self.tuning
        return PillarBreakdown(
            striking=striking_advantage(f1, f2, t),
            grappling=grappling_advantage(f1, f2, t),
            biometric=biometric_advantage(f1, f2, t),
            finish=finish_potential(f1, f2, t),
            historical=historical_performance(f1, f2, t),
            experience=experience_advantage(f1, f2, t, now),
        )
