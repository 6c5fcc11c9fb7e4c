"""Feature extractor for fight predictions.

Parses raw fighter profiles once into the numeric primitives the pillar
calculators consume.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from app.prediction_engine.parsers import (
    FinishRate,
    RecordLine,
    estimate_leg_reach,
    parse_debut_date,
    parse_fight_time,
    parse_finish_rate,
    parse_number,
    parse_record,
)
from app.prediction_engine.profile import FighterProfile
from app.prediction_engine.styles import FightingStyle, classify_style


@dataclass
class FighterFeatures:
    """Extracted features for a single fighter."""

    fighter_name: str = "Unknown"
    style: FightingStyle = FightingStyle.UNCLASSIFIED

    # Biometrics
    age: float = 0.0
    height: float = 0.0
    weight: float = 0.0
    reach: float = 0.0
    leg_reach: float = 0.0

    # Record
    record: RecordLine = field(default_factory=RecordLine)
    ko: FinishRate = field(default_factory=FinishRate)
    submission: FinishRate = field(default_factory=FinishRate)
    decision: FinishRate = field(default_factory=FinishRate)
    win_streak: float = 0.0
    first_round_finishes: float = 0.0
    title_defenses: float = 0.0

    # Striking (defense as a fraction)
    strikes_landed_per_min: float = 0.0
    strikes_absorbed_per_min: float = 0.0
    strike_defense: float = 0.0

    # Grappling (defense as a fraction)
    takedowns_per_15min: float = 0.0
    takedown_defense: float = 0.0
    submissions_per_15min: float = 0.0

    avg_fight_time: float = 0.0  # minutes
    debut: date | None = None


class FeatureExtractor:
    """Extracts numeric features from raw fighter profiles."""

    def extract(self, profile: FighterProfile | dict[str, Any] | None) -> FighterFeatures:
        """Extract features from a profile or a raw profile mapping."""
        profile = self.to_profile(profile)

        records = profile.record_block
        stats = profile.stats_block
        striking = profile.striking_block
        grappling = profile.grappling_block

        height = parse_number(profile.height)
        leg_reach = parse_number(profile.leg_reach) or estimate_leg_reach(height)

        return FighterFeatures(
            fighter_name=profile.display_name,
            style=classify_style(profile.fighting_style),
            age=parse_number(profile.age),
            height=height,
            weight=parse_number(profile.weight),
            reach=parse_number(profile.reach),
            leg_reach=leg_reach,
            record=parse_record(records.wld),
            ko=parse_finish_rate(records.wins_by_knockout),
            submission=parse_finish_rate(records.wins_by_submission),
            decision=parse_finish_rate(records.wins_by_decision),
            win_streak=parse_number(records.fight_win_streak),
            first_round_finishes=parse_number(records.first_round_finishes),
            title_defenses=parse_number(records.title_defenses),
            strikes_landed_per_min=parse_number(striking.sig_strikes_landed_per_min),
            strikes_absorbed_per_min=parse_number(striking.sig_strikes_absorbed_per_min),
            strike_defense=parse_number(stats.sig_strikes_defense) / 100,
            takedowns_per_15min=parse_number(grappling.takedowns_avg_per_15_min),
            takedown_defense=parse_number(stats.takedown_defense) / 100,
            submissions_per_15min=parse_number(grappling.submission_avg_per_15_min),
            avg_fight_time=parse_fight_time(stats.avg_fight_time),
            debut=parse_debut_date(profile.octagon_debut),
        )

    @staticmethod
    def to_profile(profile: FighterProfile | dict[str, Any] | None) -> FighterProfile:
        """Coerce a raw mapping into a ``FighterProfile``."""
        if profile is None:
            return FighterProfile()
        if isinstance(profile, FighterProfile):
            return profile
        return FighterProfile.model_validate(profile)
