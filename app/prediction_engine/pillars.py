"""Pillar calculators.

Each pillar compares the two corners on one axis and returns a signed
score, roughly in [-1, 1]. Positive always favours fighter 1 (red corner),
negative favours fighter 2 (blue corner). A pillar with no usable input
on either side returns exactly 0.
"""

from datetime import date

from app.prediction_engine.feature_extractor import FighterFeatures
from app.prediction_engine.normalization import amplify, clamp, sigmoid
from app.prediction_engine.tuning import EngineTuning

PILLARS = (
    "striking",
    "grappling",
    "biometric",
    "finish",
    "historical",
    "experience",
)


def striking_advantage(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Effective striking index: landed volume through the opponent's guard."""
    t = tuning.striking
    if f1.strikes_landed_per_min == 0 and f2.strikes_landed_per_min == 0:
        return 0.0

    f1_hit_rate = f1.strikes_landed_per_min * (1 - f2.strike_defense)
    f2_hit_rate = f2.strikes_landed_per_min * (1 - f1.strike_defense)

    hit_rate_delta = f1_hit_rate - f2_hit_rate
    damage_ratio_delta = _damage_ratio(f1) - _damage_ratio(f2)

    raw = hit_rate_delta * t.hit_rate_share + damage_ratio_delta * t.damage_ratio_share
    return amplify(sigmoid(raw, t.scale), t.power)


def _damage_ratio(f: FighterFeatures) -> float:
    if f.strikes_absorbed_per_min > 0:
        return f.strikes_landed_per_min / f.strikes_absorbed_per_min
    return f.strikes_landed_per_min


def takedown_threat(attacker: FighterFeatures, defender: FighterFeatures) -> float:
    """Takedowns per 15 minutes that get through the defender's defense."""
    return attacker.takedowns_per_15min * (1 - defender.takedown_defense)


def effective_takedown_threat(
    attacker: FighterFeatures,
    defender: FighterFeatures,
    tuning: EngineTuning,
) -> float:
    """Takedown threat after near-perfect defense is taken into account."""
    threat = takedown_threat(attacker, defender)
    if defender.takedown_defense >= tuning.grappling.elite_defense:
        return threat * tuning.grappling.elite_defense_discount
    return threat


def _fish_out_of_water_bonus(
    attacker: FighterFeatures,
    defender: FighterFeatures,
    tuning: EngineTuning,
) -> float:
    t = tuning.grappling
    if (
        takedown_threat(attacker, defender) > t.threat_threshold
        and defender.submissions_per_15min < t.opponent_submission_ceiling
    ):
        return t.fish_out_of_water_bonus
    return 0.0


def grappling_advantage(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Grappling dominance index."""
    t = tuning.grappling
    if f1.takedowns_per_15min == 0 and f2.takedowns_per_15min == 0:
        return 0.0

    takedown_delta = (
        effective_takedown_threat(f1, f2, tuning) - effective_takedown_threat(f2, f1, tuning)
    ) + (_fish_out_of_water_bonus(f1, f2, tuning) - _fish_out_of_water_bonus(f2, f1, tuning))
    submission_delta = f1.submissions_per_15min - f2.submissions_per_15min

    raw = takedown_delta * t.takedown_share + submission_delta * t.submission_share
    return amplify(sigmoid(raw, t.scale), t.power)


def age_decay_penalty(f: FighterFeatures, tuning: EngineTuning) -> float:
    """Penalty (<= 0) for a lighter-weight fighter past 35."""
    t = tuning.biometric
    if f.age > t.decay_age and f.weight < t.decay_weight_ceiling:
        return -t.decay_magnitude * ((f.age - t.decay_age) / t.decay_span) ** t.decay_exponent
    return 0.0


def biometric_advantage(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Biometric advantage index: reach, ape index and age."""
    t = tuning.biometric
    if not any((f1.height, f1.reach, f1.age, f2.height, f2.reach, f2.age)):
        return 0.0

    score = 0.0

    reach_delta = f1.reach - f2.reach
    if abs(reach_delta) > t.reach_threshold:
        score += sigmoid(reach_delta, t.reach_scale) * t.reach_share

    f1_ape_index = f1.reach / f1.height if f1.height > 0 else 1.0
    f2_ape_index = f2.reach / f2.height if f2.height > 0 else 1.0
    score += sigmoid(f1_ape_index - f2_ape_index, t.ape_index_scale) * t.ape_index_share

    score += age_decay_penalty(f1, tuning) - age_decay_penalty(f2, tuning)

    if abs(f1.age - f2.age) > t.age_gap_threshold:
        score += t.age_gap_bonus if f1.age < f2.age else -t.age_gap_bonus

    return amplify(clamp(score), t.power)


def finish_potential(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Finish potential index from KO, submission and early-finish records."""
    t = tuning.finish
    f1_ko, f2_ko = f1.ko.percentage, f2.ko.percentage
    f1_sub, f2_sub = f1.submission.percentage, f2.submission.percentage

    score = 0.0

    if f1_ko > 0 or f2_ko > 0:
        score += sigmoid((f1_ko - f2_ko) * t.rate_multiplier, t.ko_scale) * t.ko_share

    if f1_sub > 0 or f2_sub > 0:
        score += sigmoid((f1_sub - f2_sub) * t.rate_multiplier, t.submission_scale) * t.submission_share

    if f1.first_round_finishes > 0 or f2.first_round_finishes > 0:
        delta = f1.first_round_finishes - f2.first_round_finishes
        score += sigmoid(delta, t.first_round_scale) * t.first_round_share

    # Finishers against fighters who usually go the distance
    if f1_ko + f1_sub > t.finisher_rate and f2.decision.percentage > t.decision_rate:
        score += t.vulnerability_bonus
    if f2_ko + f2_sub > t.finisher_rate and f1.decision.percentage > t.decision_rate:
        score -= t.vulnerability_bonus

    # Power punchers against opponents who eat a lot of strikes
    if f1_ko > t.power_puncher_rate and f2.strikes_absorbed_per_min > t.absorbed_per_min:
        score += t.vulnerability_bonus
    if f2_ko > t.power_puncher_rate and f1.strikes_absorbed_per_min > t.absorbed_per_min:
        score -= t.vulnerability_bonus

    if f1_ko == 0 and f2_ko == 0 and f1_sub == 0 and f2_sub == 0:
        score += _fight_time_tendency(f1, f2, tuning)

    return amplify(clamp(score), t.power)


def _fight_time_tendency(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Shorter average fights as a finishing proxy."""
    t = tuning.finish
    f1_finisher = f1.avg_fight_time < t.finisher_avg_time
    f2_finisher = f2.avg_fight_time < t.finisher_avg_time

    score = 0.0
    if f1_finisher and not f2_finisher:
        score += t.finisher_bonus
    if f2_finisher and not f1_finisher:
        score -= t.finisher_bonus

    score += sigmoid(f2.avg_fight_time - f1.avg_fight_time, t.time_scale) * t.time_share
    return score


def historical_performance(f1: FighterFeatures, f2: FighterFeatures, tuning: EngineTuning) -> float:
    """Historical performance index: win rate, momentum and title defenses."""
    t = tuning.historical
    r1, r2 = f1.record, f2.record

    score = 0.0

    if r1.wins > 0 or r2.wins > 0:
        delta = (r1.win_rate - r2.win_rate) * t.win_rate_multiplier
        score += sigmoid(delta, t.win_rate_scale) * t.win_rate_share

    if f1.win_streak > 0 or f2.win_streak > 0:
        score += sigmoid(f1.win_streak - f2.win_streak, t.streak_scale) * t.streak_share

    if f1.title_defenses > 0 or f2.title_defenses > 0:
        score += sigmoid(f1.title_defenses - f2.title_defenses, t.title_scale) * t.title_share

    # Plenty of wins padding a losing record
    if r1.wins > t.padded_record_wins and r1.win_rate < t.padded_record_win_rate:
        score -= t.padded_record_penalty
    if r2.wins > t.padded_record_wins and r2.win_rate < t.padded_record_win_rate:
        score += t.padded_record_penalty

    return amplify(clamp(score), t.power)


def years_since(debut: date, now: date, tuning: EngineTuning) -> float:
    """Years of octagon experience as of ``now``."""
    return (now - debut).days / tuning.experience.days_per_year


def experience_advantage(
    f1: FighterFeatures,
    f2: FighterFeatures,
    tuning: EngineTuning,
    now: date,
) -> float:
    """Octagon experience index. Needs both debut dates."""
    t = tuning.experience
    if f1.debut is None or f2.debut is None:
        return 0.0

    f1_years = years_since(f1.debut, now, tuning)
    f2_years = years_since(f2.debut, now, tuning)

    score = 0.0

    # Rookie against veteran
    if f2_years < t.rookie_years and f1_years > t.veteran_years:
        score += t.rookie_gap_bonus
    if f1_years < t.rookie_years and f2_years > t.veteran_years:
        score -= t.rookie_gap_bonus

    score += sigmoid(f1_years - f2_years, t.scale) * t.share

    # Veteran past his physical prime
    if f1_years > t.decline_years and f1.age > t.decline_age:
        score -= t.decline_penalty
    if f2_years > t.decline_years and f2.age > t.decline_age:
        score += t.decline_penalty

    return amplify(clamp(score), t.power)
