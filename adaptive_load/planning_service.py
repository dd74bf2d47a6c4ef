from __future__ import annotations

from typing import Optional, Sequence

from .config import YamlConfig
from .deload import DeloadDecisionEngine
from .fatigue import FatigueAccumulator
from .readiness import ReadinessScorer
from .schemas import (
    DeloadSignal,
    ExerciseMeta,
    FatigueState,
    MuscleVolume,
    ProgressionTargets,
    ReadinessCheckIn,
    SessionSummary,
    SetLog,
)
from .settings_schema import EngineSettings
from .target_adjuster import TargetAdjuster
from .volume_calculator import VolumeCalculator
from .volume_recommendations import VolumeRecommendationGenerator


class TrainingLoadService:
    """Wire the load engine calculators together for the planning layer."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    @classmethod
    def from_config(cls, config: YamlConfig) -> "TrainingLoadService":
        return cls(config.settings())

    def weekly_volume(
        self, exercise_sets: Sequence[tuple[ExerciseMeta, Sequence[SetLog]]]
    ) -> dict[str, MuscleVolume]:
        return VolumeCalculator.calculate_weekly_volume(
            exercise_sets,
            user_landmarks=self.settings.landmarks,
            experience=self.settings.experience,
        )

    def volume_report(
        self,
        exercise_sets: Sequence[tuple[ExerciseMeta, Sequence[SetLog]]],
        week_in_meso: int,
        is_deload_week: bool = False,
    ) -> dict:
        """Return the volume map with its recommendations and summary."""
        volume = self.weekly_volume(exercise_sets)
        return {
            "volume": volume,
            "recommendations": VolumeRecommendationGenerator.generate_recommendations(
                volume, week_in_meso, is_deload_week
            ),
            "summary": VolumeRecommendationGenerator.volume_summary(volume),
        }

    def check_in(
        self,
        sleep_hours: Optional[float] = None,
        sleep_quality: Optional[float] = None,
        stress_level: Optional[float] = None,
        nutrition_rating: Optional[float] = None,
        previous_session_rpe: Optional[float] = None,
        days_since_last_session: Optional[int] = None,
    ) -> dict:
        check_in = ReadinessScorer.create_check_in(
            sleep_hours,
            sleep_quality,
            stress_level,
            nutrition_rating,
            previous_session_rpe,
            days_since_last_session,
        )
        return {
            "check_in": check_in,
            "interpretation": ReadinessScorer.interpret(check_in.readiness_score),
        }

    def prescribe(
        self,
        base_targets: ProgressionTargets,
        check_in: ReadinessCheckIn,
        exercise: ExerciseMeta | None = None,
    ) -> ProgressionTargets:
        increment = (
            exercise.min_weight_increment_kg
            if exercise is not None
            else self.settings.default_weight_increment
        )
        if increment <= 0:
            increment = self.settings.default_weight_increment
        return TargetAdjuster.adjust_for_readiness(
            base_targets, check_in.readiness_score, increment
        )

    def complete_session(
        self,
        state: FatigueState,
        session_id: str,
        session_rpe: float,
        days_since_last_session: int,
        expected_version: Optional[int] = None,
    ) -> FatigueState:
        return FatigueAccumulator.apply_session(
            state,
            session_id,
            session_rpe,
            days_since_last_session,
            expected_version=expected_version,
        )

    def deload_signal(
        self,
        state: FatigueState,
        week_in_meso: int,
        deload_week: Optional[int],
        recent_sessions: Sequence[SessionSummary],
    ) -> DeloadSignal:
        return DeloadDecisionEngine.should_deload(
            state.fatigue_score,
            week_in_meso,
            deload_week,
            recent_sessions,
            lookback=self.settings.deload_lookback,
        )

    def fatigue_forecast(
        self, state: FatigueState, planned_sessions: int, expected_avg_rpe: float = 7.5
    ) -> dict:
        forecast = FatigueAccumulator.forecast_weekly_fatigue(
            state.fatigue_score, planned_sessions, expected_avg_rpe
        )
        forecast["level"] = FatigueAccumulator.fatigue_level(
            forecast["projected_fatigue"]
        )["level"]
        return forecast
