"""Nonlinear transforms shared by every pillar."""

import math


def sigmoid(x: float, scale: float = 1.0) -> float:
    """Map any real onto (-1, 1).

    Equivalent to ``2 / (1 + exp(-x * scale)) - 1``. A larger scale
    saturates faster, so smaller raw deltas already read as near +/-1.
    """
    # tanh form is exactly odd and cannot overflow
    return math.tanh(x * scale / 2.0)


def amplify(x: float, power: float = 1.3) -> float:
    """Stretch mid-range values towards the extremes, keeping the sign."""
    sign = 1.0 if x >= 0 else -1.0
    return sign * math.pow(abs(x), power)


def clamp(x: float, low: float = -1.0, high: float = 1.0) -> float:
    """Clamp a value to ``[low, high]``."""
    return max(low, min(high, x))


def round_half_away(x: float, digits: int = 0) -> float:
    """Round half away from zero, so ``round_half_away(-x) == -round_half_away(x)``."""
    factor = 10**digits
    rounded = math.floor(abs(x) * factor + 0.5) / factor
    if rounded == 0:
        return 0.0
    return math.copysign(rounded, x)
