from __future__ import annotations

import logging
import math
from typing import Optional

from .math_tools import MathTools
from .schemas import FatigueState

logger = logging.getLogger(__name__)


class StaleFatigueStateError(ValueError):
    """Raised when a fatigue update is based on an outdated state version."""


class FatigueAccumulator:
    """Maintain the rolling 0-100 fatigue score of a mesocycle."""

    # Fatigue added by one session, keyed by rounded session RPE.
    ACCUMULATION: dict[int, float] = {5: 2, 6: 4, 7: 6, 8: 8, 9: 10, 10: 14}
    FALLBACK_RPE_FACTOR: float = 1.2
    FORECAST_FALLBACK_ACCUMULATION: float = 8.0
    RECOVERY_PER_DAY: float = 3.0
    MIN_SCORE: float = 0.0
    MAX_SCORE: float = 100.0

    LEVELS: tuple[tuple[float, str, str], ...] = (
        (25, "low", "Continue training as planned"),
        (50, "moderate", "Monitor closely, consider reducing volume next week"),
        (75, "high", "Volume deload recommended soon"),
    )

    FORECAST_MESSAGES: tuple[tuple[float, str], ...] = (
        (50, "Good capacity for high-intensity training"),
        (70, "Moderate fatigue - maintain current intensity"),
        (85, "Consider reducing volume or intensity this week"),
    )

    @classmethod
    def accumulation(cls, session_rpe: float) -> float:
        rounded = MathTools.round_half_up(session_rpe)
        if rounded in cls.ACCUMULATION:
            return cls.ACCUMULATION[rounded]
        return session_rpe * cls.FALLBACK_RPE_FACTOR

    @classmethod
    def update_fatigue(
        cls, current: float, session_rpe: float, days_since_last_session: int
    ) -> int:
        """Return fatigue after one completed session.

        Rest days recover fatigue before the session's load is added. This is
        a read-modify-write step and must run once per session.
        """
        recovery = days_since_last_session * cls.RECOVERY_PER_DAY
        new_fatigue = current - recovery + cls.accumulation(session_rpe)
        return MathTools.round_half_up(
            MathTools.clamp(new_fatigue, cls.MIN_SCORE, cls.MAX_SCORE)
        )

    @classmethod
    def fatigue_after_rest(cls, current: float, rest_days: int) -> float:
        return max(0.0, current - rest_days * cls.RECOVERY_PER_DAY)

    @classmethod
    def apply_session(
        cls,
        state: FatigueState,
        session_id: str,
        session_rpe: float,
        days_since_last_session: int,
        expected_version: Optional[int] = None,
    ) -> FatigueState:
        """Apply a completed session to ``state`` exactly once.

        A session id that was already applied returns ``state`` unchanged.
        When ``expected_version`` is given and differs from ``state.version``
        the update is refused with :class:`StaleFatigueStateError`.
        """
        if expected_version is not None and expected_version != state.version:
            raise StaleFatigueStateError(
                f"fatigue state version {state.version} does not match "
                f"expected {expected_version}"
            )
        if session_id in state.applied_session_ids:
            logger.info(
                "session %s already applied to mesocycle %s",
                session_id,
                state.mesocycle_id,
            )
            return state
        score = cls.update_fatigue(
            state.fatigue_score, session_rpe, days_since_last_session
        )
        return state.model_copy(
            update={
                "fatigue_score": score,
                "version": state.version + 1,
                "applied_session_ids": state.applied_session_ids + (session_id,),
            }
        )

    @classmethod
    def decay_state(cls, state: FatigueState, rest_days: int) -> FatigueState:
        """Return a projected state after ``rest_days`` without training."""
        return state.model_copy(
            update={"fatigue_score": cls.fatigue_after_rest(state.fatigue_score, rest_days)}
        )

    @classmethod
    def forecast_weekly_fatigue(
        cls,
        current: float,
        planned_sessions: int,
        expected_avg_rpe: float = 7.5,
    ) -> dict:
        """Project fatigue over a week of evenly spaced sessions."""
        if planned_sessions <= 0:
            recovered = max(0.0, current - 7 * cls.RECOVERY_PER_DAY)
            return {
                "projected_fatigue": MathTools.round_half_up(recovered),
                "recommendation": "No sessions planned - good time for recovery",
            }

        days_between = math.floor(7 / planned_sessions)
        per_session = cls.ACCUMULATION.get(
            MathTools.round_half_up(expected_avg_rpe),
            cls.FORECAST_FALLBACK_ACCUMULATION,
        )
        fatigue = current
        for i in range(planned_sessions):
            rest = 0 if i == 0 else days_between
            fatigue = max(0.0, fatigue - rest * cls.RECOVERY_PER_DAY)
            fatigue = min(cls.MAX_SCORE, fatigue + per_session)

        recommendation = "High fatigue risk - strongly recommend deload"
        for limit, message in cls.FORECAST_MESSAGES:
            if fatigue < limit:
                recommendation = message
                break
        return {
            "projected_fatigue": MathTools.round_half_up(fatigue),
            "recommendation": recommendation,
        }

    @classmethod
    def fatigue_level(cls, score: float) -> dict[str, str]:
        for limit, level, recommendation in cls.LEVELS:
            if score < limit:
                return {"level": level, "recommendation": recommendation}
        return {
            "level": "critical",
            "recommendation": "Full deload or complete rest recommended immediately",
        }
