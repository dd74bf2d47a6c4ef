from __future__ import annotations

from .math_tools import MathTools
from .schemas import MuscleVolume, VolumeLandmarks, VolumeStatus


class VolumeClassifier:
    """Classify weekly set totals against MEV/MAV/MRV landmarks."""

    OPTIMAL_LOW: float = 0.8
    OPTIMAL_HIGH: float = 1.1

    DESCRIPTIONS: dict[str, dict[str, str]] = {
        "below_mev": {
            "label": "Below MEV",
            "description": "Not enough volume to maintain muscle. Consider adding sets.",
        },
        "effective": {
            "label": "Effective",
            "description": "Volume is sufficient for maintenance and some growth.",
        },
        "optimal": {
            "label": "Optimal",
            "description": "Volume is in the ideal range for maximum hypertrophy.",
        },
        "approaching_mrv": {
            "label": "Approaching MRV",
            "description": "High volume - good for overreaching but monitor recovery.",
        },
        "exceeding_mrv": {
            "label": "Exceeding MRV",
            "description": "Volume exceeds recoverable limit. Risk of overtraining.",
        },
    }

    @classmethod
    def status(cls, total_sets: float, landmarks: VolumeLandmarks) -> VolumeStatus:
        mev, mav, mrv = landmarks.as_tuple()
        if total_sets < mev:
            return "below_mev"
        if total_sets < mav * cls.OPTIMAL_LOW:
            return "effective"
        if total_sets <= mav * cls.OPTIMAL_HIGH:
            return "optimal"
        if total_sets <= mrv:
            return "approaching_mrv"
        return "exceeding_mrv"

    @staticmethod
    def percent_of_mrv(total_sets: float, landmarks: VolumeLandmarks) -> int:
        if landmarks.mrv <= 0:
            return 0
        return MathTools.round_half_up(total_sets / landmarks.mrv * 100)

    @classmethod
    def describe(cls, status: str) -> dict[str, str]:
        """Return a label and description for ``status``."""
        return dict(cls.DESCRIPTIONS[status])

    @classmethod
    def classify(cls, volume: MuscleVolume) -> MuscleVolume:
        return volume.model_copy(
            update={
                "status": cls.status(volume.total_sets, volume.landmarks),
                "percent_of_mrv": cls.percent_of_mrv(volume.total_sets, volume.landmarks),
            }
        )
