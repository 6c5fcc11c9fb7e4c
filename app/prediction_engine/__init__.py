"""Prediction engine package.

This module contains the pillar-based scoring engine that compares two
fighter profiles and produces a calibrated win probability with an
explanation.
"""

from app.prediction_engine.engine import PredictionEngine
from app.prediction_engine.feature_extractor import FeatureExtractor, FighterFeatures
from app.prediction_engine.predictor import PillarBreakdown, PillarPredictor, Prediction
from app.prediction_engine.profile import FighterProfile
from app.prediction_engine.styles import FightingStyle
from app.prediction_engine.tuning import EngineTuning
from app.prediction_engine.weights import PillarWeights

__all__ = [
    "EngineTuning",
    "FeatureExtractor",
    "FighterFeatures",
    "FighterProfile",
    "FightingStyle",
    "PillarBreakdown",
    "PillarPredictor",
    "PillarWeights",
    "Prediction",
    "PredictionEngine",
]
