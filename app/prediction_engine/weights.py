"""Prediction weights configuration.

Pillar weights for the final blend, with style-dependent presets and
adaptive redistribution for pillars that carry no data.
"""

from dataclasses import asdict, dataclass, replace

from app.prediction_engine.styles import FightingStyle

# Share of a disabled pillar's weight given to each core pillar
REDISTRIBUTION_SHARES = {
    "striking": 0.40,
    "grappling": 0.35,
    "finish": 0.25,
}


@dataclass(frozen=True)
class PillarWeights:
    """Weights for the six pillars.

    The default preset sums to 1.0. Style presets are close to 1.0 but are
    not renormalised.
    """

    striking: float = 0.280
    grappling: float = 0.300
    biometric: float = 0.132
    finish: float = 0.200
    # Computed and reported, not blended by default
    historical: float = 0.000
    experience: float = 0.088

    @classmethod
    def default(cls) -> "PillarWeights":
        """Get default weights."""
        return cls()

    @classmethod
    def striker_vs_striker(cls) -> "PillarWeights":
        """Weights when both corners are strikers."""
        return cls(
            striking=0.40,
            grappling=0.08,
            biometric=0.15,
            finish=0.18,
            historical=0.15,
            experience=0.04,
        )

    @classmethod
    def grappler_vs_grappler(cls) -> "PillarWeights":
        """Weights when both corners are grapplers."""
        return cls(
            striking=0.15,
            grappling=0.40,
            biometric=0.05,
            finish=0.18,
            historical=0.18,
            experience=0.04,
        )

    @classmethod
    def for_styles(cls, style1: FightingStyle, style2: FightingStyle) -> "PillarWeights":
        """Select the preset for a style matchup."""
        if style1 == style2 == FightingStyle.STRIKER:
            return cls.striker_vs_striker()
        if style1 == style2 == FightingStyle.GRAPPLER:
            return cls.grappler_vs_grappler()
        return cls.default()

    def total_weight(self) -> float:
        """Calculate total of all weights."""
        return (
            self.striking
            + self.grappling
            + self.biometric
            + self.finish
            + self.historical
            + self.experience
        )

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def blend(self, scores: dict[str, float]) -> float:
        """Weighted sum of pillar scores."""
        return sum(scores[name] * weight for name, weight in self.as_dict().items())

    def redistribute(
        self,
        scores: dict[str, float],
        epsilon: float = 0.001,
    ) -> tuple["PillarWeights", float]:
        """Move weight away from pillars without signal.

        Biometric and experience pillars whose score is below ``epsilon``
        hand their weight to striking, grappling and finish.

        Returns:
            Adjusted weights and the total weight that was moved
        """
        disabled = {}
        for name in ("biometric", "experience"):
            if abs(scores[name]) < epsilon:
                disabled[name] = 0.0

        moved = sum(getattr(self, name) for name in disabled)
        if not disabled:
            return self, 0.0

        boosted = {
            name: getattr(self, name) + moved * share
            for name, share in REDISTRIBUTION_SHARES.items()
        }
        return replace(self, **disabled, **boosted), moved
