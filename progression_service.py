from __future__ import annotations
import datetime
import logging
from typing import Optional, Sequence

from algorithms.math_tools import MathTools
from localization import Translator
from models import WorkoutExercise, WorkoutLog
from workout_metrics import WorkoutMetrics

logger = logging.getLogger(__name__)


class ProgressionService:
    """Compare an exercise's strength across periods and sessions."""

    SAME_BAND: float = 0.5
    PR_PERCENT: float = 5.0
    HIGH_REPS: int = 10
    LOW_REPS: int = 5

    def __init__(self, translator: Translator | None = None, trend_window: int = 5) -> None:
        self.translator = translator or Translator()
        self.trend_window = trend_window

    def _(self, key: str, **values) -> str:
        return self.translator.gettext(key).format(**values)

    @classmethod
    def classify_progression(
        cls, current: Optional[float], previous: Optional[float]
    ) -> str:
        """Return ``improved``, ``declined``, ``same`` or ``first-time``.

        Differences within 0.5 kg are treated as rounding noise from the 1RM
        estimate.
        """
        if previous is None or current is None:
            return "first-time"
        diff = current - previous
        if diff > cls.SAME_BAND:
            return "improved"
        if diff < -cls.SAME_BAND:
            return "declined"
        return "same"

    def period_progress(
        self,
        exercise_name: str,
        history: Sequence[WorkoutLog],
        period_days: int,
        today: datetime.date | None = None,
    ) -> dict:
        """Return the best 1RM inside the last ``period_days`` against the best before."""
        today = today or datetime.date.today()
        cutoff = today - datetime.timedelta(days=period_days)
        in_period = [w for w in history if w.date > cutoff]
        if not in_period:
            return {
                "current_1rm": None,
                "previous_1rm": None,
                "change": 0.0,
                "percent_change": 0.0,
                "session_count": 0,
                "trend": "stable",
            }
        before = [w for w in history if w.date <= cutoff]
        current_pr = WorkoutMetrics.personal_record(exercise_name, in_period)
        previous_pr = WorkoutMetrics.personal_record(exercise_name, before)
        current = current_pr["value"] if current_pr else None
        previous = previous_pr["value"] if previous_pr else None
        change = 0.0
        percent = 0.0
        if current is not None and previous is not None:
            change = current - previous
            percent = MathTools.percent_change(current, previous)
        trend = WorkoutMetrics.trend(
            exercise_name, history, min(len(in_period), self.trend_window)
        )
        return {
            "current_1rm": round(current, 2) if current is not None else None,
            "previous_1rm": round(previous, 2) if previous is not None else None,
            "change": round(change, 2),
            "percent_change": round(percent, 2),
            "session_count": len(in_period),
            "trend": trend["direction"],
        }

    def compare_to_previous(
        self,
        current_exercise: WorkoutExercise,
        previous_exercise: WorkoutExercise | None,
    ) -> dict:
        """Compare one exercise occurrence against the previous occurrence."""
        current_best = WorkoutMetrics.best_one_rep_max(current_exercise)
        current_volume = WorkoutMetrics.total_volume(current_exercise)
        result = {
            "current_1rm": round(current_best["value"], 2) if current_best else 0.0,
            "previous_1rm": None,
            "difference": 0.0,
            "percent_change": 0.0,
            "current_volume": round(current_volume, 2),
            "previous_volume": None,
            "volume_difference": 0.0,
            "status": "first-time",
        }
        if previous_exercise is None or current_best is None:
            return result
        previous_volume = WorkoutMetrics.total_volume(previous_exercise)
        result["previous_volume"] = round(previous_volume, 2)
        result["volume_difference"] = round(current_volume - previous_volume, 2)
        previous_best = WorkoutMetrics.best_one_rep_max(previous_exercise)
        if previous_best is None:
            return result
        diff = current_best["value"] - previous_best["value"]
        result.update(
            {
                "previous_1rm": round(previous_best["value"], 2),
                "difference": round(diff, 2),
                "percent_change": round(
                    MathTools.percent_change(current_best["value"], previous_best["value"]), 2
                ),
                "status": self.classify_progression(
                    current_best["value"], previous_best["value"]
                ),
            }
        )
        return result

    def exercise_progression(
        self,
        exercise_name: str,
        current_exercise: WorkoutExercise,
        history: Sequence[WorkoutLog],
        exclude_id: str | None = None,
    ) -> dict:
        """Compare ``current_exercise`` with its latest occurrence in history."""
        sessions = WorkoutMetrics.sessions_with_exercise(exercise_name, history, exclude_id)
        previous = sessions[0].find_exercise(exercise_name) if sessions else None
        return self.compare_to_previous(current_exercise, previous)

    def overload_suggestion(self, current_exercise: WorkoutExercise, progression: dict) -> dict:
        """Return the next progressive-overload step for an exercise."""
        best = WorkoutMetrics.best_one_rep_max(current_exercise)
        if best is None:
            return {"type": "maintain", "message": self._("Complete a full set to get suggestions")}

        status = progression.get("status")
        if status == "improved" and progression.get("percent_change", 0.0) >= self.PR_PERCENT:
            return {
                "type": "new-pr",
                "message": self._(
                    "New PR! +{diff}kg 1RM (+{pct:.1f}%)",
                    diff=MathTools.round_to(progression["difference"], 0.5),
                    pct=progression["percent_change"],
                ),
            }
        if best["reps"] >= self.HIGH_REPS:
            increase = 2.5 if best["weight"] <= 20 else 5.0
            target = MathTools.round_to(best["weight"] + increase, MathTools.WEIGHT_INCREMENT)
            return {
                "type": "increase-weight",
                "message": self._(
                    "You did {reps} reps! Try {weight}kg for 6-8 reps next time",
                    reps=best["reps"],
                    weight=target,
                ),
                "suggested_weight": target,
            }
        if best["reps"] <= self.LOW_REPS and status == "same":
            return {
                "type": "increase-reps",
                "message": self._(
                    "Try to reach {low}-{high} reps with {weight}kg",
                    low=best["reps"] + 2,
                    high=best["reps"] + 3,
                    weight=best["weight"],
                ),
                "suggested_reps": best["reps"] + 2,
            }
        if status == "improved":
            return {
                "type": "maintain",
                "message": self._("Good progress! Keep this weight until you reach 10+ reps"),
            }
        if status == "declined":
            target = MathTools.round_to(best["weight"] * 0.9, MathTools.WEIGHT_INCREMENT)
            logger.debug("%s declined, suggesting %.1fkg volume work", current_exercise.name, target)
            return {
                "type": "maintain",
                "message": self._(
                    "Focus on recovery. Use {weight}kg for volume work", weight=target
                ),
                "suggested_weight": target,
            }
        return {"type": "add-set", "message": self._("Try adding an extra set for more volume")}
