"""Fighting style classification.

Profiles carry a free-text style label ("Muay Thai", "Wrestler",
"Brazilian Jiu-Jitsu", ...). Only two families change the pillar weights,
so labels are folded into a small closed enumeration by substring rules.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

STRIKER_KEYWORDS = ("striker", "boxing", "kickbox", "muay")
GRAPPLER_KEYWORDS = ("wrestler", "grappler", "jiu-jitsu", "sambo")


class FightingStyle(str, Enum):
    """Style families used for weight selection."""

    STRIKER = "striker"
    GRAPPLER = "grappler"
    UNCLASSIFIED = "unclassified"


def classify_style(label: str | None) -> FightingStyle:
    """Classify a free-text style label.

    Striker keywords win when a label mentions both families.
    """
    text = (label or "").lower()
    if any(keyword in text for keyword in STRIKER_KEYWORDS):
        return FightingStyle.STRIKER
    if any(keyword in text for keyword in GRAPPLER_KEYWORDS):
        return FightingStyle.GRAPPLER
    if text:
        logger.debug("Unclassified fighting style: %s", label)
    return FightingStyle.UNCLASSIFIED
