from __future__ import annotations

import logging
from typing import Optional, Sequence

from .math_tools import MathTools
from .schemas import DeloadSignal, SessionSummary

logger = logging.getLogger(__name__)


class DeloadDecisionEngine:
    """Decide whether the current mesocycle needs a deload.

    Checks run in priority order and the first match wins:

    1. the current week is the scheduled deload week
    2. accumulated fatigue reached ``FATIGUE_THRESHOLD``
    3. the last ``MISSED_TARGET_SESSIONS`` sessions all missed their targets
    4. session RPE drifted upward by ``RPE_CREEP`` or more
    """

    FATIGUE_THRESHOLD: float = 75
    MISSED_TARGET_SESSIONS: int = 3
    COMPLETION_TARGET: float = 80
    RPE_CREEP: float = 1.5
    RPE_WINDOW: int = 3
    MIN_SESSIONS_FOR_CREEP: int = 6

    @classmethod
    def _missed_targets(cls, sessions: Sequence[SessionSummary]) -> bool:
        if len(sessions) < cls.MISSED_TARGET_SESSIONS:
            return False
        recent = sessions[-cls.MISSED_TARGET_SESSIONS:]
        missed = [s for s in recent if s.completion_percent < cls.COMPLETION_TARGET]
        return len(missed) >= cls.MISSED_TARGET_SESSIONS

    @classmethod
    def rpe_drift(cls, sessions: Sequence[SessionSummary]) -> float:
        """Average RPE of the latest sessions minus that of the earliest."""
        if len(sessions) < cls.MIN_SESSIONS_FOR_CREEP:
            return 0.0
        first = MathTools.safe_mean(s.session_rpe for s in sessions[: cls.RPE_WINDOW])
        last = MathTools.safe_mean(s.session_rpe for s in sessions[-cls.RPE_WINDOW:])
        return last - first

    @classmethod
    def should_deload(
        cls,
        fatigue_score: float,
        week_in_meso: int,
        deload_week: Optional[int],
        recent_sessions: Sequence[SessionSummary] = (),
        lookback: Optional[int] = None,
    ) -> DeloadSignal:
        sessions = list(recent_sessions)
        if lookback is not None and lookback > 0:
            sessions = sessions[-lookback:]

        if deload_week is not None and week_in_meso == deload_week:
            return DeloadSignal(
                should_deload=True,
                reason="Scheduled deload week in mesocycle",
                urgency="medium",
            )

        if fatigue_score >= cls.FATIGUE_THRESHOLD:
            logger.info("deload triggered by fatigue %s", fatigue_score)
            return DeloadSignal(
                should_deload=True,
                reason=f"High accumulated fatigue ({fatigue_score:g}/100)",
                urgency="high",
            )

        if cls._missed_targets(sessions):
            logger.info("deload triggered by missed session targets")
            return DeloadSignal(
                should_deload=True,
                reason="Consistently missing workout targets",
                urgency="high",
            )

        if len(sessions) >= cls.MIN_SESSIONS_FOR_CREEP and cls.rpe_drift(sessions) >= cls.RPE_CREEP:
            logger.info("deload triggered by RPE creep")
            return DeloadSignal(
                should_deload=True,
                reason="RPE increasing significantly - accumulated fatigue detected",
                urgency="medium",
            )

        return DeloadSignal(should_deload=False, reason="", urgency="low")
