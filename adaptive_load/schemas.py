from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

VolumeStatus = Literal[
    "below_mev", "effective", "optimal", "approaching_mrv", "exceeding_mrv"
]
VolumeAction = Literal["increase", "maintain", "decrease", "optimal"]
ProgressionType = Literal["load", "reps", "sets", "technique"]
Urgency = Literal["low", "medium", "high"]
Mechanic = Literal["compound", "isolation"]


class VolumeLandmarks(BaseModel):
    """Weekly set landmarks for one muscle: MEV, MAV and MRV."""

    model_config = ConfigDict(frozen=True)

    mev: int
    mav: int
    mrv: int

    def is_valid(self) -> bool:
        return 0 <= self.mev <= self.mav <= self.mrv and self.mrv > 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.mev, self.mav, self.mrv)


class SetLog(BaseModel):
    """One performed set."""

    model_config = ConfigDict(frozen=True)

    reps: int = 0
    weight_kg: float = 0.0
    rpe: Optional[float] = None
    is_warmup: bool = False
    rest_seconds: Optional[int] = None


class ExerciseMeta(BaseModel):
    """Read-only exercise metadata needed for volume accounting."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    primary_muscle: str
    secondary_muscles: list[str] = Field(default_factory=list)
    mechanic: Mechanic = "compound"
    min_weight_increment_kg: float = 2.5


class MuscleVolume(BaseModel):
    muscle_group: str
    direct_sets: int = 0
    indirect_sets: int = 0
    total_sets: int = 0
    landmarks: VolumeLandmarks
    status: VolumeStatus = "below_mev"
    percent_of_mrv: int = 0


class WeeklyMuscleVolume(BaseModel):
    """Recomputable snapshot of one muscle's volume for a user and week."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    week_start: str
    muscle_group: str
    total_sets: int
    status: VolumeStatus
    percent_of_mrv: int


class VolumeRecommendation(BaseModel):
    muscle_group: str
    status: VolumeStatus
    current_sets: int
    target_range: tuple[int, int]
    message: str
    action: VolumeAction


class ReadinessCheckIn(BaseModel):
    """Pre-session check-in. The score is fixed at creation."""

    model_config = ConfigDict(frozen=True)

    sleep_hours: Optional[float] = None
    sleep_quality: Optional[float] = None
    stress_level: Optional[float] = None
    nutrition_rating: Optional[float] = None
    readiness_score: int


class FatigueState(BaseModel):
    """Rolling fatigue for one mesocycle.

    Every accepted session produces a new instance with ``version`` bumped and
    the session id appended to ``applied_session_ids``.
    """

    model_config = ConfigDict(frozen=True)

    mesocycle_id: str = ""
    fatigue_score: float = 0.0
    version: int = 0
    applied_session_ids: tuple[str, ...] = ()


class SessionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_rpe: float
    completion_percent: float


class DeloadSignal(BaseModel):
    model_config = ConfigDict(frozen=True)

    should_deload: bool
    reason: str
    urgency: Urgency


class ProgressionTargets(BaseModel):
    weight_kg: float
    rep_range: tuple[int, int] = (8, 12)
    target_rir: int = 2
    sets: int = 3
    rest_seconds: int = 120
    progression_type: ProgressionType = "load"
    reason: str = ""
