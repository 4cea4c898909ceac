import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(os.path.dirname(__file__))
from deload_service import DeloadService
from localization import Translator
from plateau_service import PlateauService
from weekly_service import WeeklySummaryService
from sample_history import TODAY, exercise, session


def summaries(*volumes, workouts=3):
    return [{"total_volume": v, "total_workouts": workouts} for v in volumes]


def signal(severity):
    return {"type": "test", "severity": severity, "description": ""}


class DeloadSignalsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = DeloadService(WeeklySummaryService(), PlateauService())

    def test_flat_volume_needs_no_deload(self) -> None:
        result = self.service.recommend(summaries(*[1000] * 6))
        self.assertFalse(result["should_deload"])
        self.assertEqual(result["urgency"], "low")
        self.assertEqual(result["signals"], [])
        self.assertIsNone(result["protocol"])
        self.assertEqual(result["weeks_of_high_volume"], 0)
        self.assertEqual(
            result["recommendation"],
            "Your training looks good! Keep applying progressive overload.",
        )

    def test_declining_volume(self) -> None:
        result = self.service.recommend(summaries(1000, 1000, 1000, 1000, 700, 650))
        self.assertTrue(result["should_deload"])
        self.assertEqual([s["type"] for s in result["signals"]], ["volume_decline"])
        self.assertEqual(result["signals"][0]["severity"], "high")
        self.assertEqual(result["urgency"], "medium")
        self.assertEqual(result["protocol"]["volume_reduction"], 30)
        self.assertEqual(result["protocol"]["intensity_reduction"], 20)
        self.assertEqual(result["protocol"]["duration_weeks"], 1)

    def test_volume_decline_needs_two_drops(self) -> None:
        self.assertIsNone(self.service.volume_decline(summaries(1000, 700, 700)))
        self.assertIsNone(self.service.volume_decline(summaries(1000, 700)))
        self.assertIsNone(self.service.volume_decline(summaries(0, 0, 0)))
        mild = self.service.volume_decline(summaries(2000, 1899, 1804))
        self.assertEqual(mild["severity"], "low")

    def test_overreaching(self) -> None:
        found = self.service.overreaching(summaries(1000, 1000, 2500, 600, 1000, 1000))
        self.assertEqual(found["type"], "overreaching")
        self.assertEqual(found["severity"], "high")
        self.assertIsNone(self.service.overreaching(summaries(1000, 1100, 900, 1000)))

    def test_overreaching_spike_in_second_to_last_week(self) -> None:
        found = self.service.overreaching(summaries(1000, 1000, 1000, 1000, 2500, 500))
        self.assertIsNotNone(found)
        self.assertEqual(found["type"], "overreaching")
        self.assertIsNone(self.service.overreaching(summaries(1000, 1000, 1000, 1000, 1000, 2500)))

    def test_two_high_signals_are_critical(self) -> None:
        result = self.service.recommend(summaries(1000, 3000, 500, 1000, 700, 650))
        self.assertEqual(result["urgency"], "critical")
        self.assertEqual(result["protocol"]["volume_reduction"], 50)
        self.assertEqual(len(result["protocol"]["suggestions"]), 5)

    def test_accumulated_fatigue_requires_four_weeks(self) -> None:
        self.assertIsNone(self.service.accumulated_fatigue(summaries(1000, 1000, 1000)))
        self.assertIsNone(self.service.accumulated_fatigue(summaries(1000, 2000, 3000, 4000)))

    def test_multiple_plateaus(self) -> None:
        plateaus = [{"weeks_stagnant": w} for w in (4, 3, 1)]
        self.assertEqual(self.service.multiple_plateaus(plateaus)["severity"], "high")
        plateaus = [{"weeks_stagnant": w} for w in (4, 1, 1)]
        self.assertEqual(self.service.multiple_plateaus(plateaus)["severity"], "medium")
        self.assertIsNone(self.service.multiple_plateaus(plateaus[:2]))

    def test_performance_decline(self) -> None:
        history = [session(days, exercise("Squat", (100, 5))) for days in range(22, 10, -2)]
        history += [session(days, exercise("Squat", (80, 5))) for days in range(10, -2, -2)]
        found = self.service.performance_decline(history)
        self.assertEqual(found["type"], "performance_decline")
        self.assertEqual(found["severity"], "high")
        self.assertIsNone(self.service.performance_decline(history[:5]))

    def test_urgency_table(self) -> None:
        urgency = DeloadService.urgency
        self.assertEqual(urgency([]), "low")
        self.assertEqual(urgency([signal("low")]), "low")
        self.assertEqual(urgency([signal("medium")]), "low")
        self.assertEqual(urgency([signal("medium")] * 2), "medium")
        self.assertEqual(urgency([signal("high")]), "medium")
        self.assertEqual(urgency([signal("medium")] * 3), "high")
        self.assertEqual(urgency([signal("high"), signal("medium")]), "high")
        self.assertEqual(urgency([signal("high")] * 2), "critical")

    def test_low_urgency_does_not_deload(self) -> None:
        result = self.service.recommend(summaries(2000, 1899, 1804))
        self.assertEqual(result["urgency"], "low")
        self.assertFalse(result["should_deload"])
        self.assertIsNone(result["protocol"])
        self.assertEqual(
            result["recommendation"], "Monitor your progress. Some signs of fatigue detected."
        )

    def test_translated_protocol(self) -> None:
        service = DeloadService(WeeklySummaryService(), PlateauService(), Translator("nl"))
        protocol = service.deload_protocol("low")
        self.assertEqual(protocol["suggestions"][0], "Lichte deload: reduceer 1-2 sets per oefening")


class DeloadHistoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = DeloadService(WeeklySummaryService(), PlateauService())

    def test_steady_history(self) -> None:
        history = [
            session(days, exercise("Squat", (100 + days % 3, 5)))
            for days in range(0, 42, 2)
        ]
        result = self.service.detect_deload_need(history, today=TODAY)
        self.assertFalse(result["should_deload"])
        self.assertNotIn("volume_decline", [s["type"] for s in result["signals"]])

    def test_currently_deloading(self) -> None:
        history = [
            session(9, exercise("Bench Press", (100, 10))),
            session(7, exercise("Bench Press", (100, 10))),
            session(2, exercise("Bench Press", (60, 10))),
            session(0, exercise("Bench Press", (60, 10))),
        ]
        self.assertTrue(self.service.is_currently_deloading(history, TODAY))
        self.assertFalse(self.service.is_currently_deloading(history[:3], TODAY))
        self.assertFalse(self.service.is_currently_deloading(history[2:], TODAY))


if __name__ == "__main__":
    unittest.main()
