from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .schemas import VolumeLandmarks

logger = logging.getLogger(__name__)

EXPERIENCE_LEVELS = ("novice", "intermediate", "advanced")
DEFAULT_EXPERIENCE = "intermediate"

FALLBACK_LANDMARKS = VolumeLandmarks(mev=4, mav=10, mrv=16)

# (mev, mav, mrv) weekly sets per canonical muscle group.
_LANDMARK_TABLE: dict[str, dict[str, tuple[int, int, int]]] = {
    "novice": {
        "chest_upper": (4, 8, 12),
        "chest_lower": (4, 10, 14),
        "front_delts": (0, 4, 8),
        "lateral_delts": (6, 14, 20),
        "rear_delts": (4, 10, 16),
        "lats": (6, 12, 18),
        "upper_back": (6, 12, 18),
        "traps": (2, 10, 16),
        "biceps": (4, 10, 14),
        "triceps": (4, 10, 14),
        "forearms": (0, 6, 10),
        "quads": (6, 12, 18),
        "hamstrings": (4, 10, 14),
        "glutes": (4, 10, 16),
        "glute_med": (0, 4, 8),
        "adductors": (0, 4, 8),
        "calves": (6, 12, 18),
        "abs": (4, 10, 16),
        "obliques": (0, 6, 10),
        "erectors": (0, 4, 6),
    },
    "intermediate": {
        "chest_upper": (6, 10, 16),
        "chest_lower": (6, 12, 18),
        "front_delts": (0, 6, 12),
        "lateral_delts": (8, 16, 24),
        "rear_delts": (6, 12, 20),
        "lats": (8, 14, 22),
        "upper_back": (8, 14, 22),
        "traps": (4, 12, 20),
        "biceps": (6, 12, 18),
        "triceps": (6, 12, 18),
        "forearms": (2, 8, 14),
        "quads": (8, 14, 22),
        "hamstrings": (6, 12, 18),
        "glutes": (6, 12, 20),
        "glute_med": (2, 6, 12),
        "adductors": (2, 6, 12),
        "calves": (8, 14, 22),
        "abs": (6, 12, 20),
        "obliques": (2, 8, 14),
        "erectors": (2, 6, 10),
    },
    "advanced": {
        "chest_upper": (8, 14, 20),
        "chest_lower": (8, 16, 22),
        "front_delts": (2, 10, 16),
        "lateral_delts": (10, 20, 28),
        "rear_delts": (8, 16, 24),
        "lats": (10, 18, 26),
        "upper_back": (10, 18, 26),
        "traps": (6, 16, 24),
        "biceps": (8, 16, 22),
        "triceps": (8, 16, 22),
        "forearms": (4, 12, 18),
        "quads": (10, 18, 26),
        "hamstrings": (8, 16, 22),
        "glutes": (8, 16, 24),
        "glute_med": (4, 10, 16),
        "adductors": (4, 10, 16),
        "calves": (10, 18, 26),
        "abs": (8, 16, 24),
        "obliques": (4, 12, 18),
        "erectors": (4, 10, 14),
    },
}

DEFAULT_VOLUME_LANDMARKS: dict[str, dict[str, VolumeLandmarks]] = {
    level: {
        muscle: VolumeLandmarks(mev=mev, mav=mav, mrv=mrv)
        for muscle, (mev, mav, mrv) in table.items()
    }
    for level, table in _LANDMARK_TABLE.items()
}


def coerce_landmarks(value: Any) -> Optional[VolumeLandmarks]:
    """Turn a landmarks-like value into ``VolumeLandmarks`` or ``None``."""
    if value is None:
        return None
    if isinstance(value, VolumeLandmarks):
        return value
    try:
        if isinstance(value, Mapping):
            return VolumeLandmarks(
                mev=int(value["mev"]), mav=int(value["mav"]), mrv=int(value["mrv"])
            )
        mev, mav, mrv = value
        return VolumeLandmarks(mev=int(mev), mav=int(mav), mrv=int(mrv))
    except (KeyError, TypeError, ValueError):
        return None


def landmarks_for(
    muscle: str,
    user_landmarks: Optional[Mapping[str, Any]] = None,
    experience: str = DEFAULT_EXPERIENCE,
) -> VolumeLandmarks:
    """Return usable landmarks for ``muscle``.

    The user's table wins, then the default table for ``experience``, then
    ``FALLBACK_LANDMARKS``. Entries breaking ``0 <= mev <= mav <= mrv`` or
    ``mrv > 0`` are skipped.
    """
    if user_landmarks:
        candidate = coerce_landmarks(user_landmarks.get(muscle))
        if candidate is not None:
            if candidate.is_valid():
                return candidate
            logger.warning(
                "ignoring invalid landmarks %s for %s", candidate.as_tuple(), muscle
            )
    table = DEFAULT_VOLUME_LANDMARKS.get(
        experience, DEFAULT_VOLUME_LANDMARKS[DEFAULT_EXPERIENCE]
    )
    default = table.get(muscle)
    if default is not None and default.is_valid():
        return default
    return FALLBACK_LANDMARKS
