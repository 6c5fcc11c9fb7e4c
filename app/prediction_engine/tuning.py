"""Engine tuning constants.

Sigmoid scales, amplification powers and matchup thresholds for the
pillar calculators. The values were fitted offline against historical
fight cards; they are collected here so they can be re-tuned without
touching pillar logic.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StrikingTuning:
    """Effective striking index constants."""

    hit_rate_share: float = 0.6
    damage_ratio_share: float = 0.4
    scale: float = 1.063
    power: float = 1.681


@dataclass(frozen=True)
class GrapplingTuning:
    """Grappling dominance index constants."""

    takedown_share: float = 0.7
    submission_share: float = 0.3
    # Fish-out-of-water: a wrestler who can get it down against someone
    # who cannot submit from the bottom
    threat_threshold: float = 1.0
    opponent_submission_ceiling: float = 0.5
    fish_out_of_water_bonus: float = 0.4
    # Near-perfect takedown defense
    elite_defense: float = 0.90
    elite_defense_discount: float = 0.2
    scale: float = 1.300
    power: float = 1.850


@dataclass(frozen=True)
class BiometricTuning:
    """Biometric advantage index constants."""

    reach_threshold: float = 3.0  # inches
    reach_scale: float = 0.3
    reach_share: float = 0.6
    ape_index_scale: float = 5.0
    ape_index_share: float = 0.4
    leg_reach_ratio: float = 0.48
    # Age decay only applies below welterweight
    decay_age: float = 35.0
    decay_weight_ceiling: float = 170.0  # lbs
    decay_span: float = 8.0
    decay_exponent: float = 2.2
    decay_magnitude: float = 0.5
    age_gap_threshold: float = 5.0
    age_gap_bonus: float = 0.3
    power: float = 1.320


@dataclass(frozen=True)
class FinishTuning:
    """Finish potential index constants."""

    ko_share: float = 0.45
    ko_scale: float = 1.2
    submission_share: float = 0.25
    submission_scale: float = 1.0
    rate_multiplier: float = 2.0
    first_round_share: float = 0.20
    first_round_scale: float = 0.5
    finisher_rate: float = 0.30
    decision_rate: float = 0.50
    vulnerability_bonus: float = 0.15
    power_puncher_rate: float = 0.40
    absorbed_per_min: float = 4.0
    # Fallback when no finish stats exist
    finisher_avg_time: float = 8.0  # minutes
    finisher_bonus: float = 0.2
    time_scale: float = 0.1
    time_share: float = 0.15
    power: float = 1.196


@dataclass(frozen=True)
class HistoricalTuning:
    """Historical performance index constants."""

    win_rate_multiplier: float = 4.0
    win_rate_scale: float = 2.0
    win_rate_share: float = 0.40
    streak_scale: float = 0.5
    streak_share: float = 0.35
    title_scale: float = 0.6
    title_share: float = 0.25
    padded_record_wins: int = 5
    padded_record_win_rate: float = 0.4
    padded_record_penalty: float = 0.2
    power: float = 1.5


@dataclass(frozen=True)
class ExperienceTuning:
    """Octagon experience index constants."""

    days_per_year: float = 365.0
    rookie_years: float = 1.5
    veteran_years: float = 4.0
    rookie_gap_bonus: float = 0.4
    scale: float = 0.35
    share: float = 0.5
    decline_years: float = 9.0
    decline_age: float = 35.0
    decline_penalty: float = 0.25
    power: float = 1.116


@dataclass(frozen=True)
class EngineTuning:
    """Complete constant table for the pillar predictor."""

    striking: StrikingTuning = field(default_factory=StrikingTuning)
    grappling: GrapplingTuning = field(default_factory=GrapplingTuning)
    biometric: BiometricTuning = field(default_factory=BiometricTuning)
    finish: FinishTuning = field(default_factory=FinishTuning)
    historical: HistoricalTuning = field(default_factory=HistoricalTuning)
    experience: ExperienceTuning = field(default_factory=ExperienceTuning)

    # Pillars below this magnitude carry no signal
    signal_epsilon: float = 0.001
    final_power: float = 1.63

    # Explainer thresholds
    key_factor_threshold: float = 0.2
    biometric_factor_threshold: float = 0.15
    low_confidence: float = 60.0
    toss_up: float = 0.15
    clear_favourite: float = 0.4

    @classmethod
    def default(cls) -> "EngineTuning":
        """Get default tuning."""
        return cls()
