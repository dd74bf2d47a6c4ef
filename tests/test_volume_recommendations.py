import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from adaptive_load.schemas import MuscleVolume, VolumeLandmarks
from adaptive_load.volume_classifier import VolumeClassifier
from adaptive_load.volume_recommendations import VolumeRecommendationGenerator


def volume(muscle: str, total: int, landmarks: tuple = (6, 12, 18)) -> MuscleVolume:
    mev, mav, mrv = landmarks
    return VolumeClassifier.classify(
        MuscleVolume(
            muscle_group=muscle,
            direct_sets=total,
            total_sets=total,
            landmarks=VolumeLandmarks(mev=mev, mav=mav, mrv=mrv),
        )
    )


class VolumeRecommendationTestCase(unittest.TestCase):
    def recommend(self, data: MuscleVolume, week: int = 1, deload: bool = False):
        return VolumeRecommendationGenerator.recommend_muscle(data, week, deload)

    def test_below_mev(self) -> None:
        rec = self.recommend(volume("biceps", 4))
        self.assertEqual(rec.status, "below_mev")
        self.assertEqual(rec.action, "increase")
        self.assertEqual(rec.target_range, (6, 12))
        self.assertEqual(rec.message, "Add 2 sets to reach minimum effective volume")

    def test_effective(self) -> None:
        rec = self.recommend(volume("biceps", 7), week=2)
        self.assertEqual(rec.status, "effective")
        self.assertEqual(rec.action, "increase")
        self.assertEqual(rec.target_range, (9, 12))
        rec = self.recommend(volume("biceps", 9), week=5)
        self.assertEqual(rec.target_range, (12, 12))

    def test_optimal(self) -> None:
        rec = self.recommend(volume("biceps", 11))
        self.assertEqual(rec.status, "optimal")
        self.assertEqual(rec.action, "optimal")
        self.assertEqual(rec.target_range, (10, 14))

    def test_approaching_mrv(self) -> None:
        rec = self.recommend(volume("biceps", 15))
        self.assertEqual(rec.status, "approaching_mrv")
        self.assertEqual(rec.action, "maintain")
        self.assertEqual(rec.target_range, (12, 18))

    def test_exceeding_mrv(self) -> None:
        rec = self.recommend(volume("biceps", 20))
        self.assertEqual(rec.status, "exceeding_mrv")
        self.assertEqual(rec.action, "decrease")
        self.assertEqual(rec.target_range, (12, 18))
        self.assertEqual(rec.message, "Reduce by 2 sets to prevent overtraining")

    def test_deload_week_decreases_everything(self) -> None:
        volume_map = {
            "biceps": volume("biceps", 4),
            "triceps": volume("triceps", 11),
            "calves": volume("calves", 25, (7, 12, 18)),
        }
        recs = VolumeRecommendationGenerator.generate_recommendations(
            volume_map, 4, is_deload_week=True
        )
        self.assertEqual(len(recs), 3)
        for rec in recs:
            self.assertEqual(rec.action, "decrease")
            self.assertEqual(rec.message, "Deload week: reduce volume for recovery")
        calves = [r for r in recs if r.muscle_group == "calves"][0]
        self.assertEqual(calves.target_range, (3, 7))

    def test_ordering_by_severity(self) -> None:
        volume_map = {
            "biceps": volume("biceps", 11),
            "triceps": volume("triceps", 7),
            "quads": volume("quads", 15),
            "calves": volume("calves", 2),
            "abs": volume("abs", 25),
        }
        recs = VolumeRecommendationGenerator.generate_recommendations(volume_map, 1)
        self.assertEqual(
            [r.status for r in recs],
            ["exceeding_mrv", "below_mev", "approaching_mrv", "effective", "optimal"],
        )

    def test_ordering_is_stable(self) -> None:
        volume_map = {"biceps": volume("biceps", 2), "triceps": volume("triceps", 3)}
        recs = VolumeRecommendationGenerator.generate_recommendations(volume_map, 1)
        self.assertEqual([r.muscle_group for r in recs], ["biceps", "triceps"])

    def test_volume_progression(self) -> None:
        current = {"biceps": volume("biceps", 12), "triceps": volume("triceps", 4)}
        previous = {"biceps": volume("biceps", 8)}
        changes = VolumeRecommendationGenerator.volume_progression(current, previous)
        self.assertEqual(changes["biceps"], {"change": 4, "percent_change": 50})
        self.assertEqual(changes["triceps"], {"change": 4, "percent_change": 100})
        zero = VolumeRecommendationGenerator.volume_progression(
            {"abs": volume("abs", 0)}, {}
        )
        self.assertEqual(zero["abs"], {"change": 0, "percent_change": 0})

    def test_volume_summary(self) -> None:
        volume_map = {
            "biceps": volume("biceps", 11),
            "triceps": volume("triceps", 2),
            "abs": volume("abs", 20),
        }
        summary = VolumeRecommendationGenerator.volume_summary(volume_map)
        self.assertEqual(summary["total_sets"], 33)
        self.assertEqual(summary["muscles_below_mev"], ["triceps"])
        self.assertEqual(summary["muscles_optimal"], ["biceps"])
        self.assertEqual(summary["muscles_over_mrv"], ["abs"])
        # 61, 11 and 111 percent of MRV
        self.assertEqual(summary["average_percent_mrv"], 61)
        empty = VolumeRecommendationGenerator.volume_summary({})
        self.assertEqual(empty["average_percent_mrv"], 0)

    def test_weekly_records(self) -> None:
        volume_map = {"biceps": volume("biceps", 11)}
        records = VolumeRecommendationGenerator.to_weekly_records(
            "user-1", "2024-01-01", volume_map
        )
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].user_id, "user-1")
        self.assertEqual(records[0].status, "optimal")
        self.assertEqual(records[0].percent_of_mrv, 61)


if __name__ == "__main__":
    unittest.main()
