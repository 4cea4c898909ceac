from __future__ import annotations
import datetime
import logging
import math
from typing import Sequence

from localization import Translator
from models import WorkoutLog
from workout_metrics import WorkoutMetrics

logger = logging.getLogger(__name__)


class PlateauService:
    """Detect stagnating exercises and suggest ways through a plateau."""

    VARIANCE_KG: float = 1.0
    MAX_SUGGESTIONS: int = 4

    EXERCISE_CUES: tuple[tuple[tuple[str, ...], tuple[str, str]], ...] = (
        (
            ("bench", "press"),
            (
                "Add paused reps (2 second hold)",
                "Try a close-grip or incline variation",
            ),
        ),
        (
            ("squat",),
            (
                "Check your squat depth, full range of motion can help",
                "Try pause squats or box squats",
            ),
        ),
        (
            ("deadlift",),
            (
                "Add deficit deadlifts",
                "Try Romanian deadlifts for hamstring focus",
            ),
        ),
        (
            ("pull",),
            (
                "Increase time under tension (slower eccentric)",
                "Change your grip width",
            ),
        ),
    )

    def __init__(self, translator: Translator | None = None, threshold: int = 3) -> None:
        self.translator = translator or Translator()
        self.threshold = threshold

    @staticmethod
    def severity(weeks_stagnant: int) -> str:
        if weeks_stagnant >= 4:
            return "severe"
        if weeks_stagnant >= 2:
            return "moderate"
        return "mild"

    def rule_suggestions(self, exercise_name: str, weeks_stagnant: int) -> list[str]:
        """Return at most four remedies, the most specific first."""
        suggestions: list[str] = []
        if weeks_stagnant >= 4:
            suggestions.append("Consider a deload week (50-60% intensity)")
            suggestions.append("Switch to a variation of this exercise")
        elif weeks_stagnant >= 2:
            suggestions.append("Try different rep ranges (5x5 -> 3x8-10)")
            suggestions.append("Add sets at the same weight")

        name = exercise_name.lower()
        for keywords, cues in self.EXERCISE_CUES:
            if any(k in name for k in keywords):
                suggestions.extend(cues)
                break

        suggestions.append("Get enough sleep (7-9h) and nutrition")
        suggestions.append("Check that you apply progressive overload (+2.5kg/week)")
        return [self.translator.gettext(s) for s in suggestions[: self.MAX_SUGGESTIONS]]

    def detect_plateau(
        self,
        exercise_name: str,
        history: Sequence[WorkoutLog],
        threshold: int | None = None,
        today: datetime.date | None = None,
    ) -> dict:
        """Return plateau state for one exercise.

        The window holds the ``threshold + 2`` most recent sessions with the
        exercise. Its oldest 1RM is the baseline; each of the ``threshold - 1``
        most recent values counts as stagnant when it does not beat the
        baseline by more than 1 kg.
        """
        threshold = threshold or self.threshold
        today = today or datetime.date.today()
        sessions = WorkoutMetrics.sessions_with_exercise(exercise_name, history)
        window = sessions[: threshold + 2]
        result = {
            "exercise_name": exercise_name,
            "is_plateaued": False,
            "sessions_stagnant": 0,
            "last_1rm": None,
            "baseline_1rm": None,
            "last_workout_date": sessions[0].date if sessions else None,
            "weeks_stagnant": 0,
            "severity": "mild",
            "suggestions": [],
            "suggested_action": self.translator.gettext("Keep training to establish baseline"),
        }
        if len(window) < threshold:
            return result

        values = WorkoutMetrics.session_one_rep_maxes(exercise_name, window)
        if values:
            result["last_1rm"] = round(values[0][1]["value"], 2)
        if len(values) < threshold:
            result["suggested_action"] = self.translator.gettext(
                "Complete more sets to track progress"
            )
            return result

        baseline = values[-1][1]["value"]
        compared = values[: threshold - 1]
        stagnant = [
            (w, best) for w, best in compared if best["value"] <= baseline + self.VARIANCE_KG
        ]
        is_plateaued = len(stagnant) >= threshold - 1
        result.update(
            {
                "is_plateaued": is_plateaued,
                "sessions_stagnant": len(stagnant) + 1,
                "baseline_1rm": round(baseline, 2),
            }
        )
        if not is_plateaued:
            result["suggested_action"] = self.translator.gettext(
                "Keep applying progressive overload"
            )
            return result

        first_stagnant = min((w.date for w, _best in stagnant), default=values[0][0].date)
        days = max((today - first_stagnant).days, 0)
        weeks = max(1, math.ceil(days / 7))
        result.update(
            {
                "weeks_stagnant": weeks,
                "severity": self.severity(weeks),
                "suggestions": self.rule_suggestions(exercise_name, weeks),
                "suggested_action": self.translator.gettext(
                    "Time for a deload or variation in reps/sets"
                ),
            }
        )
        logger.debug("%s plateaued for %d weeks", exercise_name, weeks)
        return result

    def detect_all_plateaus(
        self,
        history: Sequence[WorkoutLog],
        threshold: int | None = None,
        today: datetime.date | None = None,
    ) -> list[dict]:
        """Return every plateaued exercise, longest stagnation first."""
        threshold = threshold or self.threshold
        if len(history) < threshold:
            return []
        names: dict[str, str] = {}
        for w in sorted(history, key=lambda w: w.date, reverse=True):
            for ex in w.exercises:
                names.setdefault(ex.name.lower(), ex.name)
        plateaus = []
        for name in names.values():
            detection = self.detect_plateau(name, history, threshold, today)
            if detection["is_plateaued"]:
                plateaus.append(detection)
        return sorted(plateaus, key=lambda p: p["weeks_stagnant"], reverse=True)

    def plateau_summary(
        self,
        history: Sequence[WorkoutLog],
        today: datetime.date | None = None,
    ) -> dict:
        """Return plateau counts by severity and an overall status."""
        plateaus = self.detect_all_plateaus(history, today=today)
        counts = {"severe": 0, "moderate": 0, "mild": 0}
        for p in plateaus:
            counts[p["severity"]] += 1
        if counts["severe"] > 0:
            status = "critical"
        elif counts["moderate"] >= 2:
            status = "attention"
        elif counts["moderate"] > 0 or counts["mild"] > 0:
            status = "good"
        else:
            status = "excellent"
        return {
            "total_plateaus": len(plateaus),
            "severe_count": counts["severe"],
            "moderate_count": counts["moderate"],
            "mild_count": counts["mild"],
            "top_plateaus": plateaus[:3],
            "overall_status": status,
        }
