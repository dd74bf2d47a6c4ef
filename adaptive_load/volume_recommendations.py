from __future__ import annotations

import math
from typing import Mapping

from .math_tools import MathTools
from .schemas import MuscleVolume, VolumeRecommendation, WeeklyMuscleVolume


class VolumeRecommendationGenerator:
    """Turn classified weekly volume into per-muscle set targets."""

    # Most urgent corrective actions first.
    STATUS_PRIORITY: dict[str, int] = {
        "exceeding_mrv": 0,
        "below_mev": 1,
        "approaching_mrv": 2,
        "effective": 3,
        "optimal": 4,
    }

    DELOAD_FRACTION: float = 0.5

    @classmethod
    def recommend_muscle(
        cls, data: MuscleVolume, week_in_meso: int, is_deload_week: bool
    ) -> VolumeRecommendation:
        mev, mav, mrv = data.landmarks.as_tuple()
        current = data.total_sets
        base = {
            "muscle_group": data.muscle_group,
            "status": data.status,
            "current_sets": current,
        }

        if is_deload_week:
            return VolumeRecommendation(
                **base,
                target_range=(math.floor(mev * cls.DELOAD_FRACTION), mev),
                message="Deload week: reduce volume for recovery",
                action="decrease",
            )

        if data.status == "below_mev":
            return VolumeRecommendation(
                **base,
                target_range=(mev, mav),
                message=f"Add {mev - current} sets to reach minimum effective volume",
                action="increase",
            )
        if data.status == "effective":
            return VolumeRecommendation(
                **base,
                target_range=(min(mav, current + week_in_meso), mav),
                message="Room to add volume for more growth stimulus",
                action="increase",
            )
        if data.status == "optimal":
            return VolumeRecommendation(
                **base,
                target_range=(math.floor(mav * 0.9), math.ceil(mav * 1.1)),
                message="Optimal volume - maintain this level",
                action="optimal",
            )
        if data.status == "approaching_mrv":
            return VolumeRecommendation(
                **base,
                target_range=(mav, mrv),
                message="High volume - good for planned overreach, monitor fatigue",
                action="maintain",
            )
        return VolumeRecommendation(
            **base,
            target_range=(mav, mrv),
            message=f"Reduce by {current - mrv} sets to prevent overtraining",
            action="decrease",
        )

    @classmethod
    def generate_recommendations(
        cls,
        volume_map: Mapping[str, MuscleVolume],
        week_in_meso: int,
        is_deload_week: bool = False,
    ) -> list[VolumeRecommendation]:
        """Return recommendations for every muscle, most severe status first."""
        recs = [
            cls.recommend_muscle(data, week_in_meso, is_deload_week)
            for data in volume_map.values()
        ]
        recs.sort(key=lambda r: cls.STATUS_PRIORITY[r.status])
        return recs

    @staticmethod
    def volume_progression(
        current: Mapping[str, MuscleVolume], previous: Mapping[str, MuscleVolume]
    ) -> dict[str, dict[str, int]]:
        """Return week-over-week set change per muscle."""
        changes: dict[str, dict[str, int]] = {}
        for muscle, data in current.items():
            prev = previous.get(muscle)
            prev_sets = prev.total_sets if prev is not None else 0
            change = data.total_sets - prev_sets
            if prev_sets > 0:
                percent = MathTools.round_half_up(change / prev_sets * 100)
            else:
                percent = 100 if data.total_sets > 0 else 0
            changes[muscle] = {"change": change, "percent_change": percent}
        return changes

    @staticmethod
    def volume_summary(volume_map: Mapping[str, MuscleVolume]) -> dict:
        below: list[str] = []
        optimal: list[str] = []
        over: list[str] = []
        total = 0
        for muscle, data in volume_map.items():
            total += data.total_sets
            if data.status == "below_mev":
                below.append(muscle)
            elif data.status == "optimal":
                optimal.append(muscle)
            elif data.status == "exceeding_mrv":
                over.append(muscle)
        avg = MathTools.safe_mean(d.percent_of_mrv for d in volume_map.values())
        return {
            "total_sets": total,
            "muscles_below_mev": below,
            "muscles_optimal": optimal,
            "muscles_over_mrv": over,
            "average_percent_mrv": MathTools.round_half_up(avg),
        }

    @staticmethod
    def to_weekly_records(
        user_id: str, week_start: str, volume_map: Mapping[str, MuscleVolume]
    ) -> list[WeeklyMuscleVolume]:
        return [
            WeeklyMuscleVolume(
                user_id=user_id,
                week_start=week_start,
                muscle_group=muscle,
                total_sets=data.total_sets,
                status=data.status,
                percent_of_mrv=data.percent_of_mrv,
            )
            for muscle, data in volume_map.items()
        ]
