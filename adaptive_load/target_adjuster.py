from __future__ import annotations

from .math_tools import MathTools
from .schemas import ProgressionTargets


class TargetAdjuster:
    """Scale a session prescription down when readiness is low."""

    DEFAULT_INCREMENT: float = 2.5
    HIGH_READINESS: float = 80
    MODERATE_READINESS: float = 60
    LOW_READINESS: float = 40
    MIN_SETS: int = 2
    LIGHT_SESSION_RIR: int = 4

    @classmethod
    def weight_reduction(cls, weight_kg: float, fraction: float, increment: float) -> float:
        """Return ``fraction`` of ``weight_kg`` snapped to whole increments."""
        return MathTools.round_to_increment(weight_kg * fraction, increment)

    @classmethod
    def adjust_for_readiness(
        cls,
        base_targets: ProgressionTargets,
        readiness_score: float,
        min_weight_increment: float,
    ) -> ProgressionTargets:
        increment = (
            min_weight_increment if min_weight_increment > 0 else cls.DEFAULT_INCREMENT
        )

        if readiness_score >= cls.HIGH_READINESS:
            return base_targets

        if readiness_score >= cls.MODERATE_READINESS:
            return base_targets.model_copy(
                update={
                    "target_rir": base_targets.target_rir + 1,
                    "rest_seconds": base_targets.rest_seconds + 30,
                    "reason": (
                        f"{base_targets.reason} (adjusted for moderate readiness: "
                        f"{readiness_score:g}%)"
                    ),
                }
            )

        if readiness_score >= cls.LOW_READINESS:
            reduction = cls.weight_reduction(base_targets.weight_kg, 0.1, increment)
            return base_targets.model_copy(
                update={
                    "weight_kg": max(0.0, base_targets.weight_kg - reduction),
                    "target_rir": base_targets.target_rir + 2,
                    "sets": max(cls.MIN_SETS, base_targets.sets - 1),
                    "rest_seconds": base_targets.rest_seconds + 60,
                    "reason": f"Reduced targets due to low readiness ({readiness_score:g}%)",
                }
            )

        reduction = cls.weight_reduction(base_targets.weight_kg, 0.2, increment)
        return base_targets.model_copy(
            update={
                "weight_kg": max(0.0, base_targets.weight_kg - reduction),
                "target_rir": cls.LIGHT_SESSION_RIR,
                "sets": cls.MIN_SETS,
                "rest_seconds": base_targets.rest_seconds + 90,
                "progression_type": "technique",
                "reason": (
                    f"Very low readiness ({readiness_score:g}%) - light technique "
                    "session recommended"
                ),
            }
        )
