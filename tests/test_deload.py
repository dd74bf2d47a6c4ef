import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from adaptive_load.deload import DeloadDecisionEngine
from adaptive_load.schemas import SessionSummary


def sessions(*rpes: float, completion: float = 100) -> list:
    return [SessionSummary(session_rpe=r, completion_percent=completion) for r in rpes]


class DeloadDecisionEngineTestCase(unittest.TestCase):
    def test_fatigue_threshold(self) -> None:
        signal = DeloadDecisionEngine.should_deload(75, 3, 5)
        self.assertTrue(signal.should_deload)
        self.assertEqual(signal.urgency, "high")
        self.assertEqual(signal.reason, "High accumulated fatigue (75/100)")
        self.assertFalse(DeloadDecisionEngine.should_deload(74, 3, 5).should_deload)

    def test_no_signal(self) -> None:
        signal = DeloadDecisionEngine.should_deload(20, 2, 5, sessions(7, 7, 7))
        self.assertFalse(signal.should_deload)
        self.assertEqual(signal.reason, "")
        self.assertEqual(signal.urgency, "low")

    def test_scheduled_week_wins(self) -> None:
        signal = DeloadDecisionEngine.should_deload(90, 5, 5)
        self.assertTrue(signal.should_deload)
        self.assertEqual(signal.urgency, "medium")
        self.assertEqual(signal.reason, "Scheduled deload week in mesocycle")

    def test_no_scheduled_week(self) -> None:
        self.assertFalse(DeloadDecisionEngine.should_deload(10, 5, None).should_deload)

    def test_missed_targets(self) -> None:
        history = sessions(7, 7) + sessions(7, 7, 7, completion=70)
        signal = DeloadDecisionEngine.should_deload(40, 3, 5, history)
        self.assertTrue(signal.should_deload)
        self.assertEqual(signal.urgency, "high")
        self.assertEqual(signal.reason, "Consistently missing workout targets")

    def test_one_completed_session_breaks_the_streak(self) -> None:
        history = sessions(7, 7, completion=70) + sessions(7)
        self.assertFalse(DeloadDecisionEngine.should_deload(40, 3, 5, history).should_deload)

    def test_rpe_creep(self) -> None:
        history = sessions(6, 6, 6, 8, 8, 8)
        self.assertAlmostEqual(DeloadDecisionEngine.rpe_drift(history), 2.0)
        signal = DeloadDecisionEngine.should_deload(40, 3, 5, history)
        self.assertTrue(signal.should_deload)
        self.assertEqual(signal.urgency, "medium")
        self.assertIn("RPE increasing", signal.reason)

    def test_rpe_creep_needs_six_sessions(self) -> None:
        history = sessions(6, 6, 8, 8, 8)
        self.assertEqual(DeloadDecisionEngine.rpe_drift(history), 0.0)
        self.assertFalse(DeloadDecisionEngine.should_deload(40, 3, 5, history).should_deload)

    def test_small_drift_is_ignored(self) -> None:
        history = sessions(7, 7, 7, 8, 8, 8)
        self.assertFalse(DeloadDecisionEngine.should_deload(40, 3, 5, history).should_deload)

    def test_lookback_limits_history(self) -> None:
        history = sessions(5, 5, 5, 6, 6, 6, 7, 7, 7)
        self.assertTrue(DeloadDecisionEngine.should_deload(40, 3, 5, history).should_deload)
        signal = DeloadDecisionEngine.should_deload(40, 3, 5, history, lookback=6)
        self.assertFalse(signal.should_deload)

    def test_trigger_is_logged(self) -> None:
        with self.assertLogs("adaptive_load.deload", level="INFO"):
            DeloadDecisionEngine.should_deload(80, 1, None)


if __name__ == "__main__":
    unittest.main()
