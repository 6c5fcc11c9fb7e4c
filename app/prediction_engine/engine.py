"""Main prediction engine orchestrator.

Coordinates profile validation, pillar scoring and reporting for single
matchups and whole fight cards.
"""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from pydantic import ValidationError

from app.prediction_engine.predictor import PillarPredictor, Prediction
from app.prediction_engine.profile import FighterProfile
from app.prediction_engine.tuning import EngineTuning

logger = logging.getLogger(__name__)

ProfileInput = FighterProfile | dict[str, Any] | None


class PredictionEngine:
    """Main prediction engine for UFC matchups.

    Orchestrates the prediction pipeline:
    1. Validate raw profiles
    2. Score the six pillars
    3. Blend, calibrate and explain
    """

    def __init__(self, tuning: EngineTuning | None = None):
        """Initialize prediction engine.

        Args:
            tuning: Optional custom tuning constants
        """
        self.predictor = PillarPredictor(tuning)

    @property
    def tuning(self) -> EngineTuning:
        return self.predictor.tuning

    def predict_matchup(
        self,
        fighter1: ProfileInput,
        fighter2: ProfileInput,
        now: date | None = None,
    ) -> Prediction:
        """Generate prediction for a matchup.

        Args:
            fighter1: Red corner profile
            fighter2: Blue corner profile
            now: Reference date for experience calculations

        Returns:
            Prediction for the matchup

        Raises:
            ValueError: If a profile is not a mapping of profile fields
        """
        try:
            profile1 = self.predictor.feature_extractor.to_profile(fighter1)
            profile2 = self.predictor.feature_extractor.to_profile(fighter2)
        except ValidationError as e:
            raise ValueError(f"Invalid fighter profile: {e.error_count()} error(s)") from e

        prediction = self.predictor.predict(profile1, profile2, now=now)

        logger.info(
            "Predicted %s vs %s: %.1f%% / %.1f%% (confidence %d)",
            prediction.fighter1_name,
            prediction.fighter2_name,
            prediction.fighter1_win_probability,
            prediction.fighter2_win_probability,
            prediction.confidence_score,
        )
        return prediction

    def predict_card(
        self,
        bouts: Iterable[tuple[ProfileInput, ProfileInput]],
        now: date | None = None,
    ) -> list[Prediction]:
        """Generate predictions for every bout on a card.

        Args:
            bouts: Pairs of (red corner, blue corner) profiles
            now: Reference date shared by every bout

        Returns:
            Predictions in card order; bouts with invalid profiles are skipped
        """
        predictions = []
        for index, (fighter1, fighter2) in enumerate(bouts):
            try:
                predictions.append(self.predict_matchup(fighter1, fighter2, now=now))
            except ValueError as e:
                logger.warning("Skipping bout %d: %s", index, e)
                continue
        return predictions
