import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from adaptive_load.config import YamlConfig
from adaptive_load.fatigue import StaleFatigueStateError
from adaptive_load.planning_service import TrainingLoadService
from adaptive_load.schemas import (
    ExerciseMeta,
    FatigueState,
    ProgressionTargets,
    SessionSummary,
    SetLog,
)
from adaptive_load.settings_schema import EngineSettings


class TrainingLoadServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = EngineSettings(
            landmarks={"biceps": (2, 4, 6)},
            default_weight_increment=5.0,
            deload_lookback=6,
        )
        self.service = TrainingLoadService(self.settings)
        self.curl = ExerciseMeta(
            name="Curl",
            primary_muscle="biceps",
            secondary_muscles=["forearms"],
            mechanic="isolation",
            min_weight_increment_kg=1.0,
        )

    def test_weekly_volume_uses_settings(self) -> None:
        sets = [SetLog(reps=12, weight_kg=15.0)] * 7
        volume = self.service.weekly_volume([(self.curl, sets)])
        self.assertEqual(volume["biceps"].status, "exceeding_mrv")
        self.assertEqual(volume["forearms"].indirect_sets, 4)

    def test_volume_report(self) -> None:
        sets = [SetLog(reps=12, weight_kg=15.0)] * 7
        report = self.service.volume_report([(self.curl, sets)], 2)
        self.assertEqual(report["recommendations"][0].muscle_group, "biceps")
        self.assertEqual(report["recommendations"][0].action, "decrease")
        self.assertIn("biceps", report["summary"]["muscles_over_mrv"])
        self.assertEqual(len(report["volume"]), 20)

    def test_check_in_and_prescribe(self) -> None:
        result = self.service.check_in(
            sleep_hours=4,
            sleep_quality=1,
            stress_level=5,
            nutrition_rating=2,
            previous_session_rpe=9,
            days_since_last_session=0,
        )
        check_in = result["check_in"]
        self.assertLess(check_in.readiness_score, 40)
        self.assertEqual(result["interpretation"]["level"], "poor")

        base = ProgressionTargets(weight_kg=20.0, sets=4)
        targets = self.service.prescribe(base, check_in, self.curl)
        self.assertAlmostEqual(targets.weight_kg, 16.0)
        self.assertEqual(targets.progression_type, "technique")
        self.assertEqual(targets.sets, 2)

    def test_prescribe_uses_default_increment(self) -> None:
        check_in = self.service.check_in(
            sleep_hours=4, sleep_quality=1, stress_level=5, nutrition_rating=2,
            previous_session_rpe=9, days_since_last_session=0,
        )["check_in"]
        base = ProgressionTargets(weight_kg=60.0)
        no_increment = self.curl.model_copy(update={"min_weight_increment_kg": 0})
        self.assertAlmostEqual(
            self.service.prescribe(base, check_in, no_increment).weight_kg, 50.0
        )
        self.assertAlmostEqual(self.service.prescribe(base, check_in).weight_kg, 50.0)

    def test_complete_session(self) -> None:
        state = FatigueState(mesocycle_id="meso-1")
        state = self.service.complete_session(state, "s1", 10, 0, expected_version=0)
        self.assertEqual(state.fatigue_score, 14)
        with self.assertRaises(StaleFatigueStateError):
            self.service.complete_session(state, "s2", 10, 0, expected_version=0)

    def test_deload_signal_uses_lookback(self) -> None:
        history = [
            SessionSummary(session_rpe=rpe, completion_percent=100)
            for rpe in (5, 5, 5, 6, 6, 6, 7, 7, 7)
        ]
        state = FatigueState(fatigue_score=30)
        self.assertFalse(self.service.deload_signal(state, 2, 5, history).should_deload)
        unlimited = TrainingLoadService()
        self.assertTrue(unlimited.deload_signal(state, 2, 5, history).should_deload)

    def test_fatigue_forecast(self) -> None:
        forecast = self.service.fatigue_forecast(FatigueState(fatigue_score=30), 0)
        self.assertEqual(forecast["projected_fatigue"], 9)
        self.assertEqual(forecast["level"], "low")

    def test_from_config(self) -> None:
        path = "test_service_settings.yaml"
        try:
            YamlConfig(path).save({"experience": "novice"})
            service = TrainingLoadService.from_config(YamlConfig(path))
            self.assertEqual(service.settings.experience, "novice")
            volume = service.weekly_volume([])
            self.assertEqual(volume["biceps"].landmarks.as_tuple(), (4, 10, 14))
        finally:
            if os.path.exists(path):
                os.remove(path)


class PackageExportsTestCase(unittest.TestCase):
    def test_records_are_exported(self) -> None:
        import adaptive_load

        for name in (
            "ProgressionTargets",
            "FatigueState",
            "SessionSummary",
            "SetLog",
            "ExerciseMeta",
            "ReadinessCheckIn",
            "EngineSettings",
            "TrainingLoadService",
        ):
            self.assertIn(name, adaptive_load.__all__)
            self.assertTrue(hasattr(adaptive_load, name), name)
        self.assertIs(adaptive_load.FatigueState, FatigueState)

    def test_service_from_package_exports(self) -> None:
        from adaptive_load import (
            ExerciseMeta as Meta,
            SetLog as Log,
            TrainingLoadService as Service,
        )

        press = Meta(name="Press", primary_muscle="front_delts")
        volume = Service().weekly_volume([(press, [Log(reps=8)] * 3)])
        self.assertEqual(volume["front_delts"].direct_sets, 3)


if __name__ == "__main__":
    unittest.main()
