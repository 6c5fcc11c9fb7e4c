"""Shared test fixtures."""

import copy
from datetime import date
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.prediction_engine import PredictionEngine, PillarPredictor

REFERENCE_DATE = date(2024, 6, 1)


# =============================================================================
# Profile Factories
# =============================================================================

RED_PROFILE: dict[str, Any] = {
    "name": "Red Corner",
    "profile_url": "https://www.ufc.com/athlete/red-corner",
    "age": "31",
    "height": "71",
    "weight": "155",
    "reach": "74",
    "leg_reach": "40",
    "fighting_style": "Muay Thai",
    "octagon_debut": "2016-03-05",
    "records": {
        "wld": "22-4-0 (W-L-D)",
        "wins_by_knockout": "12 (55%)",
        "wins_by_submission": "3 (14%)",
        "wins_by_decision": "7 (32%)",
        "fight_win_streak": "5",
        "first_round_finishes": "6",
        "title_defenses": "1",
    },
    "fighter_stats": {
        "sig_strikes_defense": "58%",
        "takedown_defense": "78%",
        "avg_fight_time": "10:12",
        "strinking_stats": {
            "sig_strikes_landed_per_min": "5.8",
            "sig_strikes_absorbed_per_min": "3.1",
            "sig_str_by_target": {"head": "812", "body": "220", "leg": "190"},
        },
        "grappling_stats": {
            "takedowns_avg_per_15_min": "0.8",
            "submission_avg_per_15_min": "0.3",
        },
    },
}

BLUE_PROFILE: dict[str, Any] = {
    "name": "Blue Corner",
    "profile_url": "https://www.ufc.com/athlete/blue-corner",
    "age": "36",
    "height": "69",
    "weight": "155",
    "reach": "70",
    "fighting_style": "Wrestler",
    "octagon_debut": "Aug. 17, 2013",
    "records": {
        "wld": "19-7-0 (W-L-D)",
        "wins_by_knockout": "4 (21%)",
        "wins_by_submission": "6 (32%)",
        "wins_by_decision": "9 (47%)",
        "fight_win_streak": "1",
        "first_round_finishes": "3",
        "title_defenses": "0",
    },
    "fighter_stats": {
        "sig_strikes_defense": "49%",
        "takedown_defense": "65%",
        "avg_fight_time": "13:40",
        "striking_stats": {
            "sig_strikes_landed_per_min": "3.4",
            "sig_strikes_absorbed_per_min": "4.2",
        },
        "grappling_stats": {
            "takedowns_avg_per_15_min": "3.9",
            "submission_avg_per_15_min": "1.1",
        },
    },
}


def make_profile(base: dict[str, Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Copy a profile and apply top-level overrides."""
    profile = copy.deepcopy(base) if base else {}
    profile.update(overrides)
    return profile


# =============================================================================
# Pre-built Fixtures
# =============================================================================

@pytest.fixture
def red_profile() -> dict[str, Any]:
    return make_profile(RED_PROFILE)


@pytest.fixture
def blue_profile() -> dict[str, Any]:
    return make_profile(BLUE_PROFILE)


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def predictor() -> PillarPredictor:
    """Create predictor instance."""
    return PillarPredictor()


@pytest.fixture
def engine() -> PredictionEngine:
    """Create engine instance."""
    return PredictionEngine()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
