import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(os.path.dirname(__file__))
from localization import Translator
from models import WorkoutExercise, WorkoutSet
from plateau_service import PlateauService
from sample_history import TODAY, exercise, session, single_set_series


class DetectPlateauTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = PlateauService()

    def test_flat_series_is_plateaued(self) -> None:
        history = single_set_series("Bench Press", [100, 100, 99, 100.5])
        result = self.service.detect_plateau("Bench Press", history, 3, today=TODAY)
        self.assertTrue(result["is_plateaued"])
        self.assertGreaterEqual(result["weeks_stagnant"], 1)
        self.assertEqual(result["sessions_stagnant"], 3)
        self.assertEqual(result["baseline_1rm"], 100.0)
        self.assertEqual(result["last_1rm"], 100.5)
        self.assertEqual(result["last_workout_date"], TODAY)
        self.assertEqual(result["severity"], "mild")
        self.assertLessEqual(len(result["suggestions"]), 4)

    def test_rising_series_is_not_plateaued(self) -> None:
        history = single_set_series("Squat", [100, 105, 110, 115])
        result = self.service.detect_plateau("Squat", history, today=TODAY)
        self.assertFalse(result["is_plateaued"])
        self.assertEqual(result["weeks_stagnant"], 0)
        self.assertEqual(result["suggestions"], [])
        self.assertEqual(result["suggested_action"], "Keep applying progressive overload")

    def test_not_enough_sessions(self) -> None:
        history = single_set_series("Squat", [100, 100])
        result = self.service.detect_plateau("Squat", history, today=TODAY)
        self.assertFalse(result["is_plateaued"])
        self.assertIsNone(result["last_1rm"])
        self.assertEqual(result["suggested_action"], "Keep training to establish baseline")

    def test_sessions_without_completed_sets(self) -> None:
        unfinished = WorkoutExercise(name="Squat", sets=(WorkoutSet(weight=100, reps=5),))
        history = [session(days, unfinished) for days in (0, 7, 14)]
        result = self.service.detect_plateau("Squat", history, today=TODAY)
        self.assertFalse(result["is_plateaued"])
        self.assertEqual(result["suggested_action"], "Complete more sets to track progress")

    def test_unknown_exercise(self) -> None:
        result = self.service.detect_plateau("Deadlift", [], today=TODAY)
        self.assertFalse(result["is_plateaued"])
        self.assertIsNone(result["last_workout_date"])

    def test_severity_grows_with_weeks(self) -> None:
        moderate = single_set_series("Squat", [100, 100, 100, 100], spacing=14)
        severe = single_set_series("Squat", [100, 100, 100, 100], spacing=28)
        moderate_result = self.service.detect_plateau("Squat", moderate, today=TODAY)
        severe_result = self.service.detect_plateau("Squat", severe, today=TODAY)
        self.assertEqual(moderate_result["weeks_stagnant"], 2)
        self.assertEqual(moderate_result["severity"], "moderate")
        self.assertEqual(severe_result["weeks_stagnant"], 4)
        self.assertEqual(severe_result["severity"], "severe")

    def test_only_recent_window_counts(self) -> None:
        history = single_set_series("Squat", [60, 100, 100, 100, 100, 100])
        result = self.service.detect_plateau("Squat", history, today=TODAY)
        self.assertTrue(result["is_plateaued"])
        self.assertEqual(result["baseline_1rm"], 100.0)
        self.assertFalse(self.service.detect_plateau("Squat", history[:3], today=TODAY)["is_plateaued"])


class RuleSuggestionsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = PlateauService()

    def test_capped_at_four(self) -> None:
        suggestions = self.service.rule_suggestions("Bench Press", 5)
        self.assertEqual(len(suggestions), 4)
        self.assertEqual(suggestions[0], "Consider a deload week (50-60% intensity)")
        self.assertIn("Add paused reps (2 second hold)", suggestions)

    def test_generic_exercise(self) -> None:
        suggestions = self.service.rule_suggestions("Farmer Carry", 1)
        self.assertEqual(
            suggestions,
            [
                "Get enough sleep (7-9h) and nutrition",
                "Check that you apply progressive overload (+2.5kg/week)",
            ],
        )

    def test_translated(self) -> None:
        service = PlateauService(Translator("nl"))
        self.assertIn("Voeg deficit deadlifts toe", service.rule_suggestions("Deadlift", 1))


class DetectAllPlateausTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = PlateauService()

    def test_sorted_by_weeks_stagnant(self) -> None:
        squat = single_set_series("Squat", [140, 140, 140, 140], spacing=28)
        bench = single_set_series("bench press", [100, 100, 100, 100])
        bench[-1] = session(0, exercise("Bench Press", (100, 1)))
        row = single_set_series("Barbell Row", [60, 70, 80, 90])
        plateaus = self.service.detect_all_plateaus(squat + bench + row, today=TODAY)
        self.assertEqual([p["exercise_name"] for p in plateaus], ["Squat", "Bench Press"])
        self.assertGreater(plateaus[0]["weeks_stagnant"], plateaus[1]["weeks_stagnant"])

    def test_short_history(self) -> None:
        history = single_set_series("Squat", [100, 100])
        self.assertEqual(self.service.detect_all_plateaus(history, today=TODAY), [])

    def test_summary(self) -> None:
        squat = single_set_series("Squat", [140, 140, 140, 140], spacing=28)
        summary = self.service.plateau_summary(squat, today=TODAY)
        self.assertEqual(summary["total_plateaus"], 1)
        self.assertEqual(summary["severe_count"], 1)
        self.assertEqual(summary["overall_status"], "critical")
        empty = self.service.plateau_summary([], today=TODAY)
        self.assertEqual(empty["overall_status"], "excellent")
        self.assertEqual(empty["top_plateaus"], [])


if __name__ == "__main__":
    unittest.main()
