from .math_tools import MathTools
from .schemas import (
    DeloadSignal,
    ExerciseMeta,
    FatigueState,
    MuscleVolume,
    ProgressionTargets,
    ReadinessCheckIn,
    SessionSummary,
    SetLog,
    VolumeLandmarks,
    VolumeRecommendation,
    WeeklyMuscleVolume,
)
from .muscle_resolver import MuscleResolver, STANDARD_MUSCLE_GROUPS
from .landmarks import DEFAULT_VOLUME_LANDMARKS, landmarks_for
from .volume_classifier import VolumeClassifier
from .volume_calculator import VolumeCalculator
from .volume_recommendations import VolumeRecommendationGenerator
from .readiness import ReadinessScorer
from .fatigue import FatigueAccumulator, StaleFatigueStateError
from .deload import DeloadDecisionEngine
from .target_adjuster import TargetAdjuster
from .settings_schema import EngineSettings
from .config import YamlConfig
from .planning_service import TrainingLoadService

__all__ = [
    "MathTools",
    "DeloadSignal",
    "ExerciseMeta",
    "FatigueState",
    "MuscleVolume",
    "ProgressionTargets",
    "ReadinessCheckIn",
    "SessionSummary",
    "SetLog",
    "VolumeLandmarks",
    "VolumeRecommendation",
    "WeeklyMuscleVolume",
    "MuscleResolver",
    "STANDARD_MUSCLE_GROUPS",
    "DEFAULT_VOLUME_LANDMARKS",
    "landmarks_for",
    "VolumeClassifier",
    "VolumeCalculator",
    "VolumeRecommendationGenerator",
    "ReadinessScorer",
    "FatigueAccumulator",
    "StaleFatigueStateError",
    "DeloadDecisionEngine",
    "TargetAdjuster",
    "EngineSettings",
    "YamlConfig",
    "TrainingLoadService",
]
