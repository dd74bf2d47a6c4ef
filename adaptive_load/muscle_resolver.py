from __future__ import annotations

from typing import Optional

STANDARD_MUSCLE_GROUPS: tuple[str, ...] = (
    "chest_upper",
    "chest_lower",
    "front_delts",
    "lateral_delts",
    "rear_delts",
    "lats",
    "upper_back",
    "traps",
    "biceps",
    "triceps",
    "forearms",
    "quads",
    "hamstrings",
    "glutes",
    "glute_med",
    "adductors",
    "calves",
    "abs",
    "obliques",
    "erectors",
)

DETAILED_TO_STANDARD: dict[str, str] = {
    "chest_upper": "chest_upper",
    "chest_mid": "chest_lower",
    "chest_lower": "chest_lower",
    "front_delts": "front_delts",
    "lateral_delts": "lateral_delts",
    "rear_delts": "rear_delts",
    "lats": "lats",
    "upper_back": "upper_back",
    "rhomboids": "upper_back",
    "upper_traps": "traps",
    "lower_traps": "traps",
    "erectors": "erectors",
    "triceps_long": "triceps",
    "triceps_lateral": "triceps",
    "triceps_medial": "triceps",
    "biceps_long": "biceps",
    "biceps_short": "biceps",
    "brachialis": "biceps",
    "brachioradialis": "forearms",
    "forearm_flexors": "forearms",
    "forearm_extensors": "forearms",
    "quads_rectus_femoris": "quads",
    "quads_vastus": "quads",
    "hamstrings_biceps_femoris": "hamstrings",
    "hamstrings_semis": "hamstrings",
    "glute_max": "glutes",
    "glute_med": "glute_med",
    "adductors": "adductors",
    "abductors": "glute_med",
    "calves_gastrocnemius": "calves",
    "calves_soleus": "calves",
    "abs_rectus": "abs",
    "abs_obliques": "obliques",
}

# Legacy labels that name a region rather than one standard group.
LEGACY_TO_STANDARD: dict[str, tuple[str, ...]] = {
    "chest": ("chest_upper", "chest_lower"),
    "back": ("lats", "upper_back"),
    "shoulders": ("front_delts", "lateral_delts", "rear_delts"),
    "biceps": ("biceps",),
    "triceps": ("triceps",),
    "quads": ("quads",),
    "hamstrings": ("hamstrings",),
    "glutes": ("glutes",),
    "calves": ("calves",),
    "abs": ("abs",),
    "adductors": ("adductors",),
    "forearms": ("forearms",),
    "traps": ("traps",),
}


class MuscleResolver:
    """Map muscle labels from any supported vocabulary to canonical groups.

    Resolution returns ``(group, weight)`` pairs. A label that expands to
    several groups shares a weight of 1.0 evenly between them. Unknown labels
    resolve to an empty list.
    """

    STANDARD = "standard"
    DETAILED = "detailed"
    LEGACY = "legacy"

    _STANDARD_SET = frozenset(STANDARD_MUSCLE_GROUPS)

    @staticmethod
    def normalize(label: str) -> str:
        return label.strip().lower().replace("-", "_").replace(" ", "_")

    @classmethod
    def vocabulary(cls, label: str) -> Optional[str]:
        """Return which vocabulary ``label`` belongs to, or ``None``."""
        key = cls.normalize(label)
        if key in cls._STANDARD_SET:
            return cls.STANDARD
        if key in DETAILED_TO_STANDARD:
            return cls.DETAILED
        if key in LEGACY_TO_STANDARD:
            return cls.LEGACY
        return None

    @classmethod
    def resolve(cls, label: str) -> list[tuple[str, float]]:
        key = cls.normalize(label)
        tag = cls.vocabulary(key)
        if tag == cls.STANDARD:
            return [(key, 1.0)]
        if tag == cls.DETAILED:
            return [(DETAILED_TO_STANDARD[key], 1.0)]
        if tag == cls.LEGACY:
            groups = LEGACY_TO_STANDARD[key]
            weight = 1.0 / len(groups)
            return [(g, weight) for g in groups]
        return []

    @classmethod
    def resolve_groups(cls, label: str) -> list[str]:
        return [group for group, _ in cls.resolve(label)]

    @classmethod
    def is_canonical(cls, label: str) -> bool:
        return cls.normalize(label) in cls._STANDARD_SET
