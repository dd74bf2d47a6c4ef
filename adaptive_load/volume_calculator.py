from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Iterable, Mapping, Optional, Sequence

from .landmarks import DEFAULT_EXPERIENCE, landmarks_for
from .math_tools import MathTools
from .muscle_resolver import STANDARD_MUSCLE_GROUPS, MuscleResolver
from .schemas import ExerciseMeta, MuscleVolume, SetLog
from .volume_classifier import VolumeClassifier

logger = logging.getLogger(__name__)


class VolumeCalculator:
    """Aggregate a week's working sets into per-muscle set counts."""

    SECONDARY_CREDIT: float = 0.5

    @staticmethod
    def working_sets(sets: Iterable[SetLog]) -> list[SetLog]:
        return [s for s in sets if not s.is_warmup]

    @classmethod
    def _empty_map(
        cls, user_landmarks: Optional[Mapping[str, Any]], experience: str
    ) -> dict[str, dict]:
        return {
            muscle: {
                "direct": 0,
                "indirect": 0,
                "landmarks": landmarks_for(muscle, user_landmarks, experience),
            }
            for muscle in STANDARD_MUSCLE_GROUPS
        }

    @classmethod
    def _credit_exercise(
        cls, counts: dict[str, dict], exercise: ExerciseMeta, set_count: int
    ) -> None:
        primary = MuscleResolver.resolve_groups(exercise.primary_muscle)
        if not primary:
            logger.warning(
                "dropping unknown primary muscle %r for %s",
                exercise.primary_muscle,
                exercise.name or "exercise",
            )
        for group in primary:
            counts[group]["direct"] += set_count

        credit: dict[str, float] = defaultdict(float)
        seen: set[str] = set()
        for label in exercise.secondary_muscles:
            key = MuscleResolver.normalize(label)
            if key in seen:
                continue
            seen.add(key)
            resolved = MuscleResolver.resolve(key)
            if not resolved:
                logger.warning(
                    "dropping unknown secondary muscle %r for %s",
                    label,
                    exercise.name or "exercise",
                )
                continue
            for group, weight in resolved:
                if group in primary:
                    continue
                credit[group] += cls.SECONDARY_CREDIT * set_count * weight

        for group, value in credit.items():
            counts[group]["indirect"] += MathTools.round_half_up(value)

    @classmethod
    def calculate_weekly_volume(
        cls,
        exercise_sets: Iterable[tuple[ExerciseMeta, Sequence[SetLog]]],
        user_landmarks: Optional[Mapping[str, Any]] = None,
        experience: str = DEFAULT_EXPERIENCE,
    ) -> dict[str, MuscleVolume]:
        """Return per-muscle volume for ``(exercise, sets)`` pairs.

        Primary muscles receive one direct set per working set. Secondary
        muscles share half a set per working set, accumulated per group and
        rounded once. Every canonical muscle is present in the result.
        """
        counts = cls._empty_map(user_landmarks, experience)
        for exercise, sets in exercise_sets:
            set_count = len(cls.working_sets(sets))
            if set_count == 0:
                continue
            cls._credit_exercise(counts, exercise, set_count)

        result: dict[str, MuscleVolume] = {}
        for muscle, data in counts.items():
            volume = MuscleVolume(
                muscle_group=muscle,
                direct_sets=data["direct"],
                indirect_sets=data["indirect"],
                total_sets=data["direct"] + data["indirect"],
                landmarks=data["landmarks"],
            )
            result[muscle] = VolumeClassifier.classify(volume)
        return result

    @classmethod
    def calculate_volume_from_sets(
        cls,
        sets_by_block: Mapping[str, Sequence[SetLog]],
        block_exercise: Mapping[str, str],
        exercise_map: Mapping[str, ExerciseMeta],
        user_landmarks: Optional[Mapping[str, Any]] = None,
        experience: str = DEFAULT_EXPERIENCE,
    ) -> dict[str, MuscleVolume]:
        """Join raw set logs to exercises through their block ids."""
        pairs: list[tuple[ExerciseMeta, Sequence[SetLog]]] = []
        for block_id, sets in sets_by_block.items():
            exercise_id = block_exercise.get(block_id)
            if exercise_id is None:
                logger.debug("no exercise block %s", block_id)
                continue
            exercise = exercise_map.get(exercise_id)
            if exercise is None:
                logger.debug("no exercise %s for block %s", exercise_id, block_id)
                continue
            pairs.append((exercise, sets))
        return cls.calculate_weekly_volume(pairs, user_landmarks, experience)
