from __future__ import annotations
import datetime
from typing import Optional, Sequence

from algorithms.math_tools import MathTools
from localization import Translator
from models import WorkoutLog
from volume_service import MuscleVolumeService


class WeeklySummaryService:
    """Aggregate history into Monday-start calendar weeks."""

    TREND_PERCENT: float = 5.0

    def __init__(
        self,
        volume_service: Optional[MuscleVolumeService] = None,
        translator: Translator | None = None,
    ) -> None:
        self.volume_service = volume_service
        self.translator = translator or Translator()

    def _(self, key: str, **values) -> str:
        return self.translator.gettext(key).format(**values)

    @staticmethod
    def week_bounds(
        weeks_ago: int = 0, today: datetime.date | None = None
    ) -> tuple[datetime.date, datetime.date]:
        """Return Monday and Sunday of the week ``weeks_ago`` weeks before ``today``."""
        today = today or datetime.date.today()
        monday = today - datetime.timedelta(days=today.weekday()) - datetime.timedelta(
            weeks=weeks_ago
        )
        return monday, monday + datetime.timedelta(days=6)

    def weekly_summary(
        self,
        history: Sequence[WorkoutLog],
        weeks_ago: int = 0,
        today: datetime.date | None = None,
    ) -> dict:
        start, end = self.week_bounds(weeks_ago, today)
        week = [w for w in history if start <= w.date <= end]

        total_exercises = 0
        total_sets = 0
        total_reps = 0
        total_volume = 0.0
        total_calories = 0.0
        total_duration = 0.0
        exercise_stats: dict[str, dict] = {}
        for w in week:
            total_exercises += len(w.exercises)
            total_duration += w.duration_minutes
            for ex in w.exercises:
                total_calories += ex.estimated_calories or 0.0
                stats = exercise_stats.setdefault(ex.name, {"sets": 0, "best_weight": 0.0})
                for s in ex.completed_sets():
                    total_sets += 1
                    total_reps += s.reps
                    total_volume += s.weight * s.reps
                    stats["sets"] += 1
                    stats["best_weight"] = max(stats["best_weight"], s.weight)

        top_exercises = sorted(
            (
                {"name": name, "sets": data["sets"], "best_weight": data["best_weight"]}
                for name, data in exercise_stats.items()
            ),
            key=lambda x: x["sets"],
            reverse=True,
        )[:5]

        muscle_groups: list[dict] = []
        imbalances: list[dict] = []
        if self.volume_service is not None:
            volume = self.volume_service.aggregate(week)
            muscle_groups = [
                {"group": v["group"], "sets": v["total_sets"], "volume": v["total_volume"]}
                for v in volume
            ]
            imbalances = self.volume_service.detect_imbalances(volume)

        insights: list[str] = []
        if not week:
            insights.append(self._("No workouts this week - time to get started!"))
        elif len(week) >= 4:
            insights.append(self._("Great week! {count} workouts completed", count=len(week)))
        elif len(week) >= 2:
            insights.append(self._("Nice work! {count} workouts this week", count=len(week)))
        if total_volume > 0:
            insights.append(
                self._("Total volume: {volume}k kg moved", volume=round(total_volume / 1000))
            )
        if imbalances:
            insights.append(imbalances[0]["suggestion"])
        if top_exercises:
            insights.append(
                self._(
                    "Top exercise: {name} ({sets} sets)",
                    name=top_exercises[0]["name"],
                    sets=top_exercises[0]["sets"],
                )
            )

        return {
            "week_start": start,
            "week_end": end,
            "total_workouts": len(week),
            "total_exercises": total_exercises,
            "total_sets": total_sets,
            "total_reps": total_reps,
            "total_volume": round(total_volume),
            "total_calories": round(total_calories, 2),
            "avg_workout_duration": round(total_duration / len(week)) if week else 0,
            "muscle_groups": muscle_groups,
            "top_exercises": top_exercises,
            "insights": insights,
        }

    def weekly_summaries(
        self,
        history: Sequence[WorkoutLog],
        weeks: int = 6,
        today: datetime.date | None = None,
    ) -> list[dict]:
        """Return summaries for the last ``weeks`` weeks, oldest first."""
        today = today or datetime.date.today()
        return [self.weekly_summary(history, ago, today) for ago in range(weeks - 1, -1, -1)]

    def compare_weeks(
        self,
        history: Sequence[WorkoutLog],
        today: datetime.date | None = None,
    ) -> dict:
        current = self.weekly_summary(history, 0, today)
        last = self.weekly_summary(history, 1, today)
        volume_change = MathTools.percent_change(current["total_volume"], last["total_volume"])
        if volume_change > self.TREND_PERCENT:
            trend = "improving"
        elif volume_change < -self.TREND_PERCENT:
            trend = "declining"
        else:
            trend = "stable"
        return {
            "current_week": current,
            "last_week": last,
            "trend": trend,
            "volume_change": round(volume_change, 2),
            "workout_change": current["total_workouts"] - last["total_workouts"],
        }
