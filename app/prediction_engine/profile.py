"""Fighter profile input records.

Mirrors the athlete documents produced by the stats scraper. Every field
is optional and kept as raw text; parsing happens in the feature
extractor.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _coerce_text(value: Any) -> str | None:
    """Keep strings, stringify numbers, drop anything else."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _coerce_block(value: Any) -> Any:
    """Drop nested blocks that are not objects."""
    if value is None or isinstance(value, (dict, BaseModel)):
        return value
    return None


class ProfileModel(BaseModel):
    """Base for raw profile blocks."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class StrikesByTarget(ProfileModel):
    """Significant strikes split by target."""

    head: str | None = None
    body: str | None = None
    leg: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)


class StrikingStats(ProfileModel):
    """Per-minute striking output."""

    sig_strikes_landed_per_min: str | None = None
    sig_strikes_absorbed_per_min: str | None = None
    sig_str_by_target: StrikesByTarget | None = None

    @field_validator("sig_strikes_landed_per_min", "sig_strikes_absorbed_per_min", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)

    @field_validator("sig_str_by_target", mode="before")
    @classmethod
    def coerce_block(cls, v: Any) -> Any:
        return _coerce_block(v)


class GrapplingStats(ProfileModel):
    """Per-15-minute grappling output."""

    takedowns_avg_per_15_min: str | None = None
    submission_avg_per_15_min: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)


class FighterStatsBlock(ProfileModel):
    """Career performance statistics."""

    sig_strikes_defense: str | None = None
    takedown_defense: str | None = None
    avg_fight_time: str | None = None
    # The scraper emits this key as "strinking_stats"
    striking_stats: StrikingStats | None = Field(
        default=None,
        validation_alias=AliasChoices("striking_stats", "strinking_stats"),
    )
    grappling_stats: GrapplingStats | None = None

    @field_validator("sig_strikes_defense", "takedown_defense", "avg_fight_time", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)

    @field_validator("striking_stats", "grappling_stats", mode="before")
    @classmethod
    def coerce_block(cls, v: Any) -> Any:
        return _coerce_block(v)


class FighterRecords(ProfileModel):
    """Record and finish breakdown."""

    wld: str | None = None  # "24-5-0 (W-L-D)"
    wins_by_knockout: str | None = None  # "16 (67%)"
    wins_by_submission: str | None = None
    wins_by_decision: str | None = None
    fight_win_streak: str | None = None
    first_round_finishes: str | None = None
    title_defenses: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)


class FighterProfile(ProfileModel):
    """Raw athlete profile for one corner of a matchup."""

    name: str | None = None
    profile_url: str | None = None
    status: str | None = None
    trains_at: str | None = None

    age: str | None = None
    height: str | None = None
    weight: str | None = None
    reach: str | None = None
    leg_reach: str | None = None

    fighting_style: str | None = None
    octagon_debut: str | None = None

    records: FighterRecords | None = None
    fighter_stats: FighterStatsBlock | None = None

    @field_validator(
        "name",
        "profile_url",
        "status",
        "trains_at",
        "age",
        "height",
        "weight",
        "reach",
        "leg_reach",
        "fighting_style",
        "octagon_debut",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _coerce_text(v)

    @field_validator("records", "fighter_stats", mode="before")
    @classmethod
    def coerce_block(cls, v: Any) -> Any:
        return _coerce_block(v)

    @property
    def display_name(self) -> str:
        """Name for logs and reports."""
        return self.name or "Unknown"

    # Convenience accessors for nested blocks

    @property
    def record_block(self) -> FighterRecords:
        return self.records or FighterRecords()

    @property
    def stats_block(self) -> FighterStatsBlock:
        return self.fighter_stats or FighterStatsBlock()

    @property
    def striking_block(self) -> StrikingStats:
        return self.stats_block.striking_stats or StrikingStats()

    @property
    def grappling_block(self) -> GrapplingStats:
        return self.stats_block.grappling_stats or GrapplingStats()
