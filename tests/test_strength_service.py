import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(os.path.dirname(__file__))
from strength_service import StrengthService
from sample_history import TODAY, exercise, session, single_set_series


class StrengthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = StrengthService()
        self.history = [
            session(40, exercise("Bench Press", (100, 1)), exercise("Squat", (140, 1))),
            session(10, exercise("Squat", (150, 1)), name="Legs"),
            session(5, exercise("Bench Press", (110, 1)), name="Push"),
            session(2, exercise("bench press", (105, 1))),
            session(1, exercise("Deadlift", (200, 1)), exercise("Plank")),
        ]

    def test_strength_score_against_last_month(self) -> None:
        score = self.service.strength_score(self.history, today=TODAY)
        self.assertEqual(score["total"], 460.0)
        self.assertEqual(score["previous_total"], 240.0)
        self.assertEqual(score["change"], 220.0)
        self.assertEqual(
            [lift["name"] for lift in score["lifts"]], ["Bench Press", "Squat", "Deadlift"]
        )

    def test_strength_score_custom_lifts(self) -> None:
        score = self.service.strength_score(self.history, big_lifts=["Squat"], today=TODAY)
        self.assertEqual(score["total"], 150.0)
        self.assertEqual(score["percent_change"], 7.14)

    def test_strength_score_empty(self) -> None:
        score = self.service.strength_score([], today=TODAY)
        self.assertEqual(score["total"], 0.0)
        self.assertIsNone(score["previous_total"])
        recent_only = self.service.strength_score(self.history[2:], today=TODAY)
        self.assertIsNone(recent_only["previous_total"])
        self.assertEqual(recent_only["change"], 0.0)

    def test_recent_prs(self) -> None:
        prs = self.service.recent_prs(self.history, today=TODAY)
        self.assertEqual(
            [(p["exercise_name"], p["days_ago"]) for p in prs],
            [("Deadlift", 1), ("Bench Press", 5), ("Squat", 10)],
        )
        self.assertEqual(prs[1]["session_name"], "Push")
        self.assertEqual(prs[1]["one_rep_max"], 110.0)
        self.assertEqual(self.service.recent_prs(self.history, days_back=3, today=TODAY)[0]["exercise_name"], "Deadlift")

    def test_exercise_lists(self) -> None:
        self.assertEqual(
            StrengthService.unique_exercises(self.history),
            ["Bench Press", "Deadlift", "Plank", "Squat", "bench press"],
        )
        self.assertEqual(StrengthService.most_frequent_exercises(self.history, 2), ["Bench Press", "Squat"])

    def test_sparkline_oldest_first(self) -> None:
        history = single_set_series("Squat", [100, 105, 110, 115])
        self.assertEqual(StrengthService.sparkline("Squat", history, points=3), [105.0, 110.0, 115.0])

    def test_smoothed_progress(self) -> None:
        history = single_set_series("Squat", [100, 110])
        progress = StrengthService.smoothed_progress("Squat", history, span=3)
        self.assertEqual([p["est_1rm"] for p in progress], [100.0, 110.0])
        self.assertEqual([p["ewma"] for p in progress], [100.0, 105.0])
        self.assertEqual(progress[-1]["date"], TODAY)


if __name__ == "__main__":
    unittest.main()
