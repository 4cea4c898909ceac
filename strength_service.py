from __future__ import annotations
import datetime
from collections import Counter
from typing import Sequence

from algorithms.math_tools import MathTools
from models import WorkoutLog
from workout_metrics import WorkoutMetrics


class StrengthService:
    """Strength overview figures for dashboards."""

    BIG_LIFTS: tuple[str, ...] = ("Bench Press", "Squat", "Deadlift", "Overhead Press")

    @staticmethod
    def unique_exercises(history: Sequence[WorkoutLog]) -> list[str]:
        return sorted({ex.name for w in history for ex in w.exercises})

    @staticmethod
    def most_frequent_exercises(history: Sequence[WorkoutLog], limit: int = 6) -> list[str]:
        counts = Counter(ex.name for w in history for ex in w.exercises)
        return [name for name, _count in counts.most_common(limit)]

    def strength_score(
        self,
        history: Sequence[WorkoutLog],
        big_lifts: Sequence[str] | None = None,
        today: datetime.date | None = None,
    ) -> dict:
        """Return the sum of big-lift PRs now and as of one month ago."""
        big_lifts = big_lifts or self.BIG_LIFTS
        today = today or datetime.date.today()
        if not history:
            return {
                "total": 0.0,
                "lifts": [],
                "previous_total": None,
                "change": 0.0,
                "percent_change": 0.0,
            }
        lifts = []
        total = 0.0
        for name in big_lifts:
            pr = WorkoutMetrics.personal_record(name, history)
            if pr is not None:
                lifts.append({"name": name, "one_rep_max": round(pr["value"], 2)})
                total += pr["value"]

        month_ago = today - datetime.timedelta(days=30)
        older = [w for w in history if w.date <= month_ago]
        previous_total = None
        if older:
            previous_total = 0.0
            for name in big_lifts:
                pr = WorkoutMetrics.personal_record(name, older)
                if pr is not None:
                    previous_total += pr["value"]
        change = total - previous_total if previous_total is not None else 0.0
        percent = MathTools.percent_change(total, previous_total) if previous_total else 0.0
        return {
            "total": round(total, 2),
            "lifts": lifts,
            "previous_total": round(previous_total, 2) if previous_total is not None else None,
            "change": round(change, 2),
            "percent_change": round(percent, 2),
        }

    @staticmethod
    def recent_prs(
        history: Sequence[WorkoutLog],
        days_back: int = 30,
        today: datetime.date | None = None,
    ) -> list[dict]:
        """Return PRs set within ``days_back`` days, most recent first."""
        today = today or datetime.date.today()
        cutoff = today - datetime.timedelta(days=days_back)
        best_so_far: dict[str, float] = {}
        prs: list[dict] = []
        for w in sorted(history, key=lambda w: w.date):
            for ex in w.exercises:
                best = WorkoutMetrics.best_one_rep_max(ex)
                if best is None:
                    continue
                key = ex.name.lower()
                if key in best_so_far and best["value"] <= best_so_far[key]:
                    continue
                best_so_far[key] = best["value"]
                if w.date > cutoff:
                    prs.append(
                        {
                            "exercise_name": ex.name,
                            "one_rep_max": round(best["value"], 2),
                            "date": w.date,
                            "session_name": w.name,
                            "weight": best["weight"],
                            "reps": best["reps"],
                            "days_ago": (today - w.date).days,
                        }
                    )
        return sorted(prs, key=lambda p: p["days_ago"])

    @staticmethod
    def sparkline(exercise_name: str, history: Sequence[WorkoutLog], points: int = 10) -> list[float]:
        """Return the best 1RM of the last ``points`` sessions, oldest first."""
        sessions = WorkoutMetrics.sessions_with_exercise(exercise_name, history)[:points]
        values = []
        for w in reversed(sessions):
            best = WorkoutMetrics.best_one_rep_max(w.find_exercise(exercise_name))
            values.append(round(best["value"], 2) if best else 0.0)
        return values

    @staticmethod
    def smoothed_progress(
        exercise_name: str, history: Sequence[WorkoutLog], span: int = 3
    ) -> list[dict]:
        """Return the chronological 1RM series with an EWMA trend line."""
        sessions = sorted(
            WorkoutMetrics.sessions_with_exercise(exercise_name, history), key=lambda w: w.date
        )
        pairs = WorkoutMetrics.session_one_rep_maxes(exercise_name, sessions)
        smoothed = MathTools.ewma([best["value"] for _w, best in pairs], span)
        return [
            {"date": w.date, "est_1rm": round(best["value"], 2), "ewma": round(ewma, 2)}
            for (w, best), ewma in zip(pairs, smoothed)
        ]
