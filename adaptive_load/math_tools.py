import math
from typing import Iterable

import numpy as np


class MathTools:
    """Provides the numeric helpers shared by the load engine calculators."""

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round to the nearest integer with halves rounded towards +inf."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def round_to_increment(value: float, increment: float) -> float:
        """Return ``value`` snapped to the nearest multiple of ``increment``."""
        if increment <= 0:
            raise ValueError("increment must be positive")
        return MathTools.round_half_up(value / increment) * increment

    @staticmethod
    def safe_mean(values: Iterable[float]) -> float:
        """Return the arithmetic mean of ``values`` or 0.0 when empty."""
        data = list(values)
        if not data:
            return 0.0
        return float(np.mean(np.array(data, dtype=float)))
