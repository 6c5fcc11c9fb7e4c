"""Parsers for loosely-typed fighter profile fields.

Profile values come straight from scraped athlete pages, so every parser
here tolerates missing or malformed input and falls back to zero.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RECORD_RE = re.compile(r"(\d+)-(\d+)-(\d+)")
_COUNT_RE = re.compile(r"^(\d+)")
_PERCENT_RE = re.compile(r"\((\d+(?:\.\d+)?)\s*%\)")

DEBUT_DATE_FORMATS = (
    "%Y-%m-%d",
    "%b. %d, %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%m/%d/%Y",
)

LEG_REACH_RATIO = 0.48


@dataclass(frozen=True)
class RecordLine:
    """Parsed W-L-D record."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
    win_rate: float = 0.0


@dataclass(frozen=True)
class FinishRate:
    """Parsed "count (percent%)" finish breakdown."""

    count: int = 0
    percentage: float = 0.0  # fraction, 67% -> 0.67


def parse_number(value: Any) -> float:
    """Parse the leading decimal of a value, 0 when there is none.

    ``"72.5 in"`` reads as 72.5 and ``"55%"`` as 55.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_RE.match(str(value))
        if not match:
            return 0.0
        try:
            number = float(match.group(0))
        except ValueError:
            return 0.0
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def parse_record(wld: str | None) -> RecordLine:
    """Parse a ``"24-5-0 (W-L-D)"`` record line."""
    if not wld:
        return RecordLine()

    match = _RECORD_RE.search(wld)
    if not match:
        return RecordLine()

    wins, losses, draws = (int(group) for group in match.groups())
    total = wins + losses + draws
    win_rate = wins / total if total > 0 else 0.0

    return RecordLine(wins=wins, losses=losses, draws=draws, win_rate=win_rate)


def parse_finish_rate(value: str | None) -> FinishRate:
    """Parse a ``"16 (67%)"`` finish breakdown.

    Count and percentage are read independently; a missing part is 0.
    """
    if not value:
        return FinishRate()

    count_match = _COUNT_RE.match(value)
    percent_match = _PERCENT_RE.search(value)

    count = int(count_match.group(1)) if count_match else 0
    percentage = float(percent_match.group(1)) / 100 if percent_match else 0.0

    return FinishRate(count=count, percentage=percentage)


def parse_fight_time(value: str | None) -> float:
    """Convert an ``"MM:SS"`` average fight time to decimal minutes."""
    if not value:
        return 0.0
    parts = value.split(":")
    if len(parts) != 2:
        return 0.0
    return parse_number(parts[0]) + parse_number(parts[1]) / 60


def parse_debut_date(value: str | None) -> date | None:
    """Parse an octagon debut date, ``None`` when it cannot be read."""
    if not value:
        return None

    text = value.strip()
    for fmt in DEBUT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # ISO timestamps, e.g. "2014-07-12T00:00:00Z"
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def estimate_leg_reach(height: float) -> float:
    """Estimate leg reach from height when the profile has none."""
    return height * LEG_REACH_RATIO


def is_populated(value: Any) -> bool:
    """Whether a raw profile field holds usable data."""
    return value is not None and value != "" and value != "0"
