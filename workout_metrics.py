from __future__ import annotations
from typing import Iterable, Optional

from algorithms.math_tools import MathTools
from models import WorkoutExercise, WorkoutLog


class WorkoutMetrics:
    """Strength and volume metrics shared by every analysis service."""

    TREND_THRESHOLD: float = 1.0

    @staticmethod
    def estimate_one_rep_max(weight: float, reps: int) -> float:
        return MathTools.brzycki_1rm(weight, reps)

    @staticmethod
    def best_one_rep_max(exercise: WorkoutExercise) -> Optional[dict]:
        """Return the set with the highest estimated 1RM in ``exercise``."""
        best: Optional[dict] = None
        for index, s in enumerate(exercise.sets):
            if not s.is_qualifying:
                continue
            est = MathTools.brzycki_1rm(s.weight, s.reps)
            if best is None or est > best["value"]:
                best = {
                    "value": est,
                    "weight": float(s.weight),
                    "reps": int(s.reps),
                    "set_index": index,
                }
        return best

    @staticmethod
    def total_volume(exercise: WorkoutExercise) -> float:
        """Sum ``weight * reps`` over the completed sets of ``exercise``."""
        return MathTools.volume([(s.reps, s.weight) for s in exercise.completed_sets()])

    @staticmethod
    def sessions_with_exercise(
        exercise_name: str,
        history: Iterable[WorkoutLog],
        exclude_id: str | None = None,
    ) -> list[WorkoutLog]:
        """Return sessions containing ``exercise_name``, most recent first."""
        sessions = [
            w
            for w in history
            if w.contains(exercise_name) and (exclude_id is None or w.id != exclude_id)
        ]
        return sorted(sessions, key=lambda w: w.date, reverse=True)

    @classmethod
    def session_one_rep_maxes(
        cls, exercise_name: str, sessions: Iterable[WorkoutLog]
    ) -> list[tuple[WorkoutLog, dict]]:
        """Pair each session with its best 1RM, skipping sessions without one."""
        result: list[tuple[WorkoutLog, dict]] = []
        for w in sessions:
            ex = w.find_exercise(exercise_name)
            best = cls.best_one_rep_max(ex) if ex is not None else None
            if best is not None:
                result.append((w, best))
        return result

    @classmethod
    def personal_record(
        cls, exercise_name: str, history: Iterable[WorkoutLog]
    ) -> Optional[dict]:
        """Return the highest best-1RM ever logged for ``exercise_name``."""
        record: Optional[dict] = None
        chronological = sorted(history, key=lambda w: w.date)
        for w, best in cls.session_one_rep_maxes(exercise_name, chronological):
            if record is None or best["value"] > record["value"]:
                record = {
                    "value": best["value"],
                    "date": w.date,
                    "weight": best["weight"],
                    "reps": best["reps"],
                    "session_name": w.name,
                }
        return record

    @classmethod
    def trend(
        cls,
        exercise_name: str,
        history: Iterable[WorkoutLog],
        window_size: int = 5,
    ) -> dict:
        """Return the direction of the best-1RM series over recent sessions."""
        recent = cls.sessions_with_exercise(exercise_name, history)[: max(window_size, 0)]
        values = [best["value"] for _w, best in cls.session_one_rep_maxes(exercise_name, recent)]
        if len(values) < 2:
            return {"direction": "stable", "average_delta": 0.0, "sample_count": len(values)}
        deltas = [newer - older for newer, older in zip(values, values[1:])]
        average = MathTools.mean(deltas)
        if average > cls.TREND_THRESHOLD:
            direction = "increasing"
        elif average < -cls.TREND_THRESHOLD:
            direction = "decreasing"
        else:
            direction = "stable"
        return {
            "direction": direction,
            "average_delta": round(average, 2),
            "sample_count": len(values),
        }

    @staticmethod
    def average_set_weight(sessions: Iterable[WorkoutLog]) -> float:
        """Mean weight of completed, loaded sets across ``sessions``."""
        weights = [
            s.weight
            for w in sessions
            for ex in w.exercises
            for s in ex.sets
            if s.completed and s.weight > 0
        ]
        return MathTools.mean(weights)
