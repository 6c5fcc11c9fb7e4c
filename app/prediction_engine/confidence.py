"""Confidence scoring for predictions.

Confidence reflects how complete the raw profiles are, not how lopsided
the matchup looks.
"""

from collections.abc import Callable
from dataclasses import dataclass

from app.prediction_engine.normalization import round_half_away
from app.prediction_engine.parsers import is_populated
from app.prediction_engine.profile import FighterProfile

# Canonical fields checked on each profile
CONFIDENCE_FIELDS: dict[str, Callable[[FighterProfile], str | None]] = {
    "age": lambda p: p.age,
    "height": lambda p: p.height,
    "reach": lambda p: p.reach,
    "sig_strikes_defense": lambda p: p.stats_block.sig_strikes_defense,
    "sig_strikes_landed_per_min": lambda p: p.striking_block.sig_strikes_landed_per_min,
    "sig_strikes_absorbed_per_min": lambda p: p.striking_block.sig_strikes_absorbed_per_min,
    "takedowns_avg_per_15_min": lambda p: p.grappling_block.takedowns_avg_per_15_min,
    "octagon_debut": lambda p: p.octagon_debut,
}


@dataclass
class DataCompleteness:
    """Populated canonical fields for both corners."""

    fighter1_fields: list[str]
    fighter2_fields: list[str]

    @property
    def populated(self) -> int:
        return len(self.fighter1_fields) + len(self.fighter2_fields)

    @property
    def total(self) -> int:
        return 2 * len(CONFIDENCE_FIELDS)

    @property
    def score(self) -> float:
        """Completeness as a 0-100 score."""
        return self.populated / self.total * 100


class ConfidenceScorer:
    """Calculates data-completeness confidence for a matchup."""

    def assess(self, f1: FighterProfile, f2: FighterProfile) -> DataCompleteness:
        return DataCompleteness(
            fighter1_fields=self._populated_fields(f1),
            fighter2_fields=self._populated_fields(f2),
        )

    def calculate(self, f1: FighterProfile, f2: FighterProfile) -> int:
        """Confidence score from 0 to 100."""
        return int(round_half_away(self.assess(f1, f2).score))

    def _populated_fields(self, profile: FighterProfile) -> list[str]:
        return [name for name, getter in CONFIDENCE_FIELDS.items() if is_populated(getter(profile))]
