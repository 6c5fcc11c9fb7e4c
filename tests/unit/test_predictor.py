"""Unit tests for the pillar predictor."""

from datetime import date

import pytest

from app.prediction_engine import FightingStyle, PillarPredictor, PillarWeights
from app.prediction_engine.explainer import (
    AGE_RISK_WARNING,
    BIOMETRIC_FACTOR,
    LOW_DATA_WARNING,
    SLIGHT_RED,
    TOSS_UP,
)
from tests.conftest import BLUE_PROFILE, make_profile

STRIKER_A = {
    "name": "Striker A",
    "reach": "76",
    "fighter_stats": {
        "sig_strikes_defense": "65",
        "striking_stats": {"sig_strikes_landed_per_min": "6.5"},
    },
}

STRIKER_B = {
    "name": "Striker B",
    "reach": "68",
    "fighter_stats": {
        "sig_strikes_defense": "40",
        "striking_stats": {"sig_strikes_landed_per_min": "2.1"},
    },
}


class TestProbabilities:
    """Tests for the probability contract."""

    def test_probabilities_sum_to_100(self, predictor, red_profile, blue_profile, reference_date):
        prediction = predictor.predict(red_profile, blue_profile, now=reference_date)

        total = prediction.fighter1_win_probability + prediction.fighter2_win_probability
        assert total == pytest.approx(100.0, abs=0.1)
        assert 0 <= prediction.fighter1_win_probability <= 100
        assert 0 <= prediction.confidence_score <= 100

    def test_corner_swap_symmetry(self, predictor, red_profile, blue_profile, reference_date):
        forward = predictor.predict(red_profile, blue_profile, now=reference_date)
        reverse = predictor.predict(blue_profile, red_profile, now=reference_date)

        assert reverse.fighter1_win_probability == pytest.approx(
            forward.fighter2_win_probability, abs=0.1
        )
        assert reverse.fighter2_win_probability == pytest.approx(
            forward.fighter1_win_probability, abs=0.1
        )
        assert reverse.confidence_score == forward.confidence_score

        for name, score in forward.breakdown.as_dict().items():
            assert reverse.breakdown.as_dict()[name] == pytest.approx(-score, abs=1e-9)

    def test_identical_profiles(self, predictor, red_profile, reference_date):
        prediction = predictor.predict(red_profile, make_profile(red_profile), now=reference_date)

        assert prediction.fighter1_win_probability == 50.0
        assert prediction.fighter2_win_probability == 50.0
        assert all(score == 0.0 for score in prediction.breakdown.as_dict().values())
        assert prediction.analysis.prediction == TOSS_UP
        assert prediction.key_factors == []

    def test_empty_profiles(self, predictor, reference_date):
        prediction = predictor.predict({}, {}, now=reference_date)

        assert prediction.fighter1_win_probability == 50.0
        assert prediction.fighter2_win_probability == 50.0
        assert prediction.confidence_score == 0
        assert prediction.fighter1_name == "Unknown"
        assert prediction.analysis.prediction == TOSS_UP
        assert prediction.warnings == [LOW_DATA_WARNING]

    def test_none_profiles(self, predictor, reference_date):
        prediction = predictor.predict(None, None, now=reference_date)
        assert prediction.fighter1_win_probability == 50.0


class TestStrikerMatchup:
    """Sparse striker profiles exercise redistribution and the explainer."""

    @pytest.fixture
    def prediction(self, predictor, reference_date):
        return predictor.predict(STRIKER_A, STRIKER_B, now=reference_date)

    def test_favours_better_striker(self, prediction):
        assert prediction.breakdown.striking == pytest.approx(0.93, abs=0.01)
        assert prediction.breakdown.biometric == pytest.approx(0.40, abs=0.01)
        assert prediction.fighter1_win_probability == pytest.approx(58.9, abs=0.5)
        assert prediction.analysis.prediction == SLIGHT_RED

    def test_pillars_without_data_are_zero(self, prediction):
        b = prediction.breakdown
        assert (b.grappling, b.finish, b.historical, b.experience) == (0.0, 0.0, 0.0, 0.0)

    def test_experience_weight_is_redistributed(self, prediction):
        weights = prediction.weights
        assert weights.experience == 0.0
        assert weights.biometric == PillarWeights.default().biometric
        assert weights.striking == pytest.approx(0.280 + 0.088 * 0.40)
        assert weights.total_weight() == pytest.approx(1.0)

    def test_analysis(self, prediction):
        assert prediction.confidence_score == 38
        assert prediction.key_factors == [
            "Avantage striking significatif pour le coin rouge",
            BIOMETRIC_FACTOR,
        ]
        assert prediction.warnings == [LOW_DATA_WARNING]


class TestStylesAndWeights:
    """Tests for style-based weight selection."""

    def test_style_pair_is_reported(self, predictor, red_profile, blue_profile, reference_date):
        prediction = predictor.predict(red_profile, blue_profile, now=reference_date)
        assert prediction.styles == (FightingStyle.STRIKER, FightingStyle.GRAPPLER)

    def test_striker_preset(self, predictor, red_profile, blue_profile, reference_date):
        boxer = make_profile(blue_profile, fighting_style="Boxing")
        prediction = predictor.predict(red_profile, boxer, now=reference_date)

        assert prediction.styles == (FightingStyle.STRIKER, FightingStyle.STRIKER)
        assert prediction.weights == PillarWeights.striker_vs_striker()

    def test_historical_not_blended_by_default(self, predictor, reference_date):
        records = {"wld": "20-1-0", "fight_win_streak": "9", "title_defenses": "3"}
        decorated = make_profile(STRIKER_A, records=records)

        plain = predictor.predict(STRIKER_A, STRIKER_B, now=reference_date)
        with_records = predictor.predict(decorated, STRIKER_B, now=reference_date)

        assert with_records.breakdown.historical > 0
        assert with_records.weights.historical == 0.0
        assert with_records.fighter1_win_probability == plain.fighter1_win_probability


class TestInputHandling:
    """Tests for tolerant profile handling."""

    def test_reference_date_changes_experience(self, predictor, red_profile, blue_profile):
        early = predictor.predict(red_profile, blue_profile, now=date(2017, 1, 1))
        late = predictor.predict(red_profile, blue_profile, now=date(2024, 6, 1))

        assert early.breakdown.experience != late.breakdown.experience

    def test_deterministic_for_fixed_date(self, predictor, red_profile, blue_profile, reference_date):
        first = predictor.predict(red_profile, blue_profile, now=reference_date)
        second = predictor.predict(red_profile, blue_profile, now=reference_date)

        assert first.to_dict() == second.to_dict()

    def test_numeric_values_are_coerced(self, predictor, reference_date):
        as_text = make_profile(STRIKER_A, age="29", height="72")
        as_numbers = make_profile(STRIKER_A, age=29, height=72)

        first = predictor.predict(as_text, STRIKER_B, now=reference_date)
        second = predictor.predict(as_numbers, STRIKER_B, now=reference_date)

        assert first.to_dict() == second.to_dict()

    def test_malformed_fields_do_not_raise(self, predictor, reference_date):
        malformed = {
            "name": "Garbage",
            "age": {"years": 30},
            "reach": "long",
            "octagon_debut": "someday",
            "records": "22-4-0",
            "fighter_stats": ["not", "an", "object"],
        }
        prediction = predictor.predict(malformed, BLUE_PROFILE, now=reference_date)

        assert prediction.fighter1_name == "Garbage"
        assert prediction.breakdown.experience == 0.0

    def test_striking_key_spellings(self, predictor, red_profile, blue_profile, reference_date):
        stats = dict(red_profile["fighter_stats"])
        stats["striking_stats"] = stats.pop("strinking_stats")
        respelled = make_profile(red_profile, fighter_stats=stats)

        original = predictor.predict(red_profile, blue_profile, now=reference_date)
        corrected = predictor.predict(respelled, blue_profile, now=reference_date)

        assert original.breakdown.striking != 0.0
        assert corrected.to_dict() == original.to_dict()

    def test_age_risk_warning(self, predictor, red_profile, blue_profile, reference_date):
        veteran = make_profile(blue_profile, age="38")
        prediction = predictor.predict(red_profile, veteran, now=reference_date)

        assert AGE_RISK_WARNING in prediction.warnings
        assert prediction.breakdown.biometric > 0

    def test_to_dict_contract(self, predictor, red_profile, blue_profile, reference_date):
        data = predictor.predict(red_profile, blue_profile, now=reference_date).to_dict()

        assert set(data) == {
            "fighter1WinProbability",
            "fighter2WinProbability",
            "confidenceScore",
            "breakdown",
            "analysis",
        }
        assert set(data["breakdown"]) == {
            "strikingAdvantage",
            "grapplingAdvantage",
            "biometricAdvantage",
            "finishPotential",
            "historicalPerformance",
            "experienceAdvantage",
        }
        assert set(data["analysis"]) == {"keyFactors", "warnings", "prediction"}


def test_default_tuning():
    predictor = PillarPredictor()
    assert predictor.tuning.final_power == 1.63
