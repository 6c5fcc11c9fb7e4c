"""Qualitative analysis of a prediction.

Turns pillar scores and confidence into the key factors, warnings and
headline shown next to the probability bars. Copy is in French, as shown
on the product site.
"""

from dataclasses import dataclass, field

from app.prediction_engine.feature_extractor import FighterFeatures
from app.prediction_engine.tuning import EngineTuning

RED, BLUE = "coin rouge", "coin bleu"

STRIKING_FACTOR = "Avantage striking significatif pour le {corner}"
GRAPPLING_FACTOR = "Domination au sol probable du {corner}"
BIOMETRIC_FACTOR = "Différences physiques importantes entre les combattants"
FINISH_FACTOR = "Le {corner} a un meilleur potentiel de finition"
HISTORICAL_FACTOR = "Le {corner} possède un meilleur historique de performances"

LOW_DATA_WARNING = "Données limitées disponibles - prédiction moins fiable"
AGE_RISK_WARNING = "Facteur âge critique pour les catégories légères"

TOSS_UP = "Combat très serré - Peut aller dans les deux sens"
STRONG_RED = "Victoire probable du coin rouge"
SLIGHT_RED = "Léger avantage pour le coin rouge"
STRONG_BLUE = "Victoire probable du coin bleu"
SLIGHT_BLUE = "Léger avantage pour le coin bleu"


@dataclass
class Analysis:
    """Explanation attached to a prediction."""

    key_factors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    prediction: str = TOSS_UP


def _corner(score: float) -> str:
    return RED if score > 0 else BLUE


class PredictionExplainer:
    """Builds the qualitative analysis from pillar scores."""

    def __init__(self, tuning: EngineTuning):
        self.tuning = tuning

    def explain(
        self,
        scores: dict[str, float],
        final_score: float,
        confidence: float,
        f1: FighterFeatures,
        f2: FighterFeatures,
    ) -> Analysis:
        return Analysis(
            key_factors=self.key_factors(scores),
            warnings=self.warnings(confidence, f1, f2),
            prediction=self.headline(final_score),
        )

    def key_factors(self, scores: dict[str, float]) -> list[str]:
        threshold = self.tuning.key_factor_threshold
        factors: list[str] = []

        striking = scores["striking"]
        if abs(striking) > threshold:
            factors.append(STRIKING_FACTOR.format(corner=_corner(striking)))

        grappling = scores["grappling"]
        if abs(grappling) > threshold:
            factors.append(GRAPPLING_FACTOR.format(corner=_corner(grappling)))

        if abs(scores["biometric"]) > self.tuning.biometric_factor_threshold:
            factors.append(BIOMETRIC_FACTOR)

        finish = scores["finish"]
        if abs(finish) > threshold:
            factors.append(FINISH_FACTOR.format(corner=_corner(finish)))

        historical = scores["historical"]
        if abs(historical) > threshold:
            factors.append(HISTORICAL_FACTOR.format(corner=_corner(historical)))

        return factors

    def warnings(self, confidence: float, f1: FighterFeatures, f2: FighterFeatures) -> list[str]:
        warnings: list[str] = []

        if confidence < self.tuning.low_confidence:
            warnings.append(LOW_DATA_WARNING)

        if self._age_risk(f1) or self._age_risk(f2):
            warnings.append(AGE_RISK_WARNING)

        return warnings

    def headline(self, final_score: float) -> str:
        if abs(final_score) < self.tuning.toss_up:
            return TOSS_UP
        if final_score > self.tuning.clear_favourite:
            return STRONG_RED
        if final_score > 0:
            return SLIGHT_RED
        if final_score < -self.tuning.clear_favourite:
            return STRONG_BLUE
        return SLIGHT_BLUE

    def _age_risk(self, f: FighterFeatures) -> bool:
        t = self.tuning.biometric
        return f.age > t.decay_age and f.weight < t.decay_weight_ceiling
