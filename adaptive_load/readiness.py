from __future__ import annotations

from typing import Optional

from .math_tools import MathTools
from .schemas import ReadinessCheckIn


class ReadinessScorer:
    """Combine subjective check-in answers into a 0-100 readiness score."""

    WEIGHTS: dict[str, float] = {
        "sleep": 0.35,
        "stress": 0.25,
        "nutrition": 0.20,
        "recovery": 0.20,
    }

    DEFAULT_SLEEP_HOURS: float = 7.0
    DEFAULT_RATING: int = 3
    DEFAULT_PREVIOUS_RPE: float = 7.0
    DEFAULT_REST_DAYS: int = 1

    # (low, high, score), inclusive bounds, first match wins.
    SLEEP_BANDS: tuple[tuple[float, float, float], ...] = (
        (7.0, 9.0, 100.0),
        (6.0, 7.0, 70.0),
        (9.0, 10.0, 85.0),
        (5.0, 6.0, 50.0),
    )
    SLEEP_FLOOR_SCORE: float = 30.0

    RECOVERY_BASE: float = 70.0
    HARD_SESSION_RPE: float = 9.0
    EASY_SESSION_RPE: float = 6.0

    INTERPRETATIONS: tuple[tuple[int, str, str, str], ...] = (
        (85, "excellent", "Excellent readiness for training",
         "Great day for progression or high-intensity work"),
        (70, "good", "Good readiness for training", "Proceed with planned workout"),
        (55, "moderate", "Moderate readiness",
         "Maintain current weights, focus on execution"),
        (40, "low", "Low readiness today",
         "Consider reducing volume or intensity by 10-20%"),
    )

    @classmethod
    def _sleep_hours_score(cls, hours: float) -> float:
        # Earlier bands own the shared edges, so 7h scores 100 and 6h scores 70.
        for low, high, score in cls.SLEEP_BANDS:
            if low <= hours <= high:
                return score
        return cls.SLEEP_FLOOR_SCORE

    @classmethod
    def _recovery_score(cls, previous_rpe: float, rest_days: int) -> float:
        score = cls.RECOVERY_BASE
        if previous_rpe >= cls.HARD_SESSION_RPE:
            score -= 15
        elif previous_rpe <= cls.EASY_SESSION_RPE:
            score += 10
        if rest_days >= 2:
            score += 15
        elif rest_days == 0:
            score -= 20
        return score

    @staticmethod
    def _rating(value: Optional[float], default: int) -> float:
        if value is None:
            return float(default)
        return MathTools.clamp(float(value), 1.0, 5.0)

    @classmethod
    def _stored_rating(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return cls._rating(value, cls.DEFAULT_RATING)

    @classmethod
    def readiness_score(
        cls,
        sleep_hours: Optional[float] = None,
        sleep_quality: Optional[float] = None,
        stress_level: Optional[float] = None,
        nutrition_rating: Optional[float] = None,
        previous_session_rpe: Optional[float] = None,
        days_since_last_session: Optional[int] = None,
    ) -> int:
        """Return the weighted readiness score in [0, 100].

        Missing answers default to neutral values and out-of-range answers
        are clamped rather than rejected.
        """
        sleep = MathTools.clamp(
            float(sleep_hours) if sleep_hours is not None else cls.DEFAULT_SLEEP_HOURS,
            0.0,
            24.0,
        )
        quality = cls._rating(sleep_quality, cls.DEFAULT_RATING)
        stress = cls._rating(stress_level, cls.DEFAULT_RATING)
        nutrition = cls._rating(nutrition_rating, cls.DEFAULT_RATING)
        previous_rpe = MathTools.clamp(
            float(previous_session_rpe)
            if previous_session_rpe is not None
            else cls.DEFAULT_PREVIOUS_RPE,
            1.0,
            10.0,
        )
        rest_days = max(
            0,
            int(days_since_last_session)
            if days_since_last_session is not None
            else cls.DEFAULT_REST_DAYS,
        )

        sleep_score = cls._sleep_hours_score(sleep) * (0.6 + quality * 0.1)
        stress_score = (6 - stress) * 20
        nutrition_score = nutrition * 20
        recovery_score = cls._recovery_score(previous_rpe, rest_days)

        total = (
            sleep_score * cls.WEIGHTS["sleep"]
            + stress_score * cls.WEIGHTS["stress"]
            + nutrition_score * cls.WEIGHTS["nutrition"]
            + recovery_score * cls.WEIGHTS["recovery"]
        )
        return MathTools.round_half_up(MathTools.clamp(total, 0.0, 100.0))

    @classmethod
    def create_check_in(
        cls,
        sleep_hours: Optional[float] = None,
        sleep_quality: Optional[float] = None,
        stress_level: Optional[float] = None,
        nutrition_rating: Optional[float] = None,
        previous_session_rpe: Optional[float] = None,
        days_since_last_session: Optional[int] = None,
    ) -> ReadinessCheckIn:
        score = cls.readiness_score(
            sleep_hours,
            sleep_quality,
            stress_level,
            nutrition_rating,
            previous_session_rpe,
            days_since_last_session,
        )
        # Store the answers as they were scored; unanswered stays None.
        return ReadinessCheckIn(
            sleep_hours=(
                MathTools.clamp(float(sleep_hours), 0.0, 24.0)
                if sleep_hours is not None
                else None
            ),
            sleep_quality=cls._stored_rating(sleep_quality),
            stress_level=cls._stored_rating(stress_level),
            nutrition_rating=cls._stored_rating(nutrition_rating),
            readiness_score=score,
        )

    @classmethod
    def interpret(cls, score: float) -> dict[str, str]:
        for threshold, level, message, recommendation in cls.INTERPRETATIONS:
            if score >= threshold:
                return {
                    "level": level,
                    "message": message,
                    "recommendation": recommendation,
                }
        return {
            "level": "poor",
            "message": "Poor readiness - recovery compromised",
            "recommendation": "Light technique work or rest day recommended",
        }
