from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence

from algorithms.exercise_classifier import ExerciseType, ExperienceTier
from algorithms.math_tools import MathTools
from algorithms.muscle_groups import MuscleGroupClassifier
from localization import Translator
from models import BodyStats, UserProfile, WorkoutExercise, WorkoutLog, latest_body_weight
from workout_metrics import WorkoutMetrics

logger = logging.getLogger(__name__)


class StartingWeightService:
    """Suggest a first working weight for an exercise.

    Three sources are tried in order and the first one that yields a value
    wins: the user's own history with the exercise, other exercises for the
    same muscle group, and finally body weight scaled by experience.
    """

    HISTORY_FACTOR: float = 0.95
    SIMILAR_FACTOR: float = 0.85
    FALLBACK_ADJUSTMENT: dict[str, float] = {
        ExerciseType.COMPOUND: 1.0,
        ExerciseType.ISOLATION: 0.6,
    }
    TYPE_MULTIPLIER: dict[str, float] = {
        ExerciseType.COMPOUND: 1.0,
        ExerciseType.ISOLATION: 0.4,
    }
    MIN_WEIGHT: float = 5.0

    def __init__(
        self,
        classifier: MuscleGroupClassifier,
        translator: Translator | None = None,
        increment: float = MathTools.WEIGHT_INCREMENT,
        default_body_weight: float = 75.0,
    ) -> None:
        self.classifier = classifier
        self.translator = translator or Translator()
        self.increment = increment
        self.default_body_weight = default_body_weight

    def _(self, key: str, **values) -> str:
        return self.translator.gettext(key).format(**values)

    @staticmethod
    def _average_weight(exercise: WorkoutExercise) -> float:
        return MathTools.mean(s.weight for s in exercise.completed_sets() if s.weight > 0)

    def exercise_performance(self, exercise_name: str, history: Sequence[WorkoutLog]) -> list[dict]:
        """Return per-session best 1RM and average weight, most recent first."""
        sessions = WorkoutMetrics.sessions_with_exercise(exercise_name, history)
        return [
            {
                "date": w.date,
                "best_1rm": best["value"],
                "avg_weight": self._average_weight(w.find_exercise(exercise_name)),
            }
            for w, best in WorkoutMetrics.session_one_rep_maxes(exercise_name, sessions)
        ]

    def similar_performance(
        self, exercise_name: str, muscle_group: str, history: Sequence[WorkoutLog]
    ) -> list[dict]:
        """Average 1RM and weight of other exercises in ``muscle_group``."""
        totals: dict[str, dict] = {}
        for w in history:
            for ex in w.exercises:
                if ex.matches(exercise_name) or self.classifier.classify(ex.name) != muscle_group:
                    continue
                best = WorkoutMetrics.best_one_rep_max(ex)
                if best is None:
                    continue
                data = totals.setdefault(
                    ex.name, {"total_1rm": 0.0, "total_weight": 0.0, "count": 0}
                )
                data["total_1rm"] += best["value"]
                data["total_weight"] += self._average_weight(ex)
                data["count"] += 1
        result = [
            {
                "exercise_name": name,
                "avg_1rm": data["total_1rm"] / data["count"],
                "avg_weight": data["total_weight"] / data["count"],
                "type": ExerciseType.classify(name),
            }
            for name, data in totals.items()
        ]
        return sorted(result, key=lambda x: x["avg_1rm"], reverse=True)

    def from_history(self, exercise_name: str, performance: Sequence[dict]) -> dict:
        recent = list(performance[:3])
        avg_weight = MathTools.mean(p["avg_weight"] for p in recent)
        return {
            "suggested_weight": MathTools.round_to(avg_weight * self.HISTORY_FACTOR, self.increment),
            "confidence": "high",
            "source": "history",
            "reasoning": self._(
                "Based on your recent performance (avg {weight:.1f}kg). Start slightly "
                "lighter to allow for progressive overload.",
                weight=avg_weight,
            ),
            "based_on": self._(
                "Last {count} workouts with {name}", count=len(recent), name=exercise_name
            ),
        }

    def from_similar(
        self, exercise_name: str, muscle_group: str, similar: Sequence[dict]
    ) -> dict:
        new_type = ExerciseType.classify(exercise_name)
        same_type = [s for s in similar if s["type"] == new_type]
        group = self.translator.gettext(muscle_group)
        if not same_type:
            top = similar[0]
            adjustment = self.FALLBACK_ADJUSTMENT[new_type]
            return {
                "suggested_weight": MathTools.round_to(
                    top["avg_weight"] * adjustment, self.increment
                ),
                "confidence": "low",
                "source": "similar",
                "reasoning": self._(
                    "Estimated from other {group} exercises, adjusted for a {type} movement.",
                    group=group,
                    type=self.translator.gettext(new_type),
                ),
                "based_on": self._("Performance on {names}", names=top["exercise_name"]),
            }
        top = same_type[:2]
        avg_weight = MathTools.mean(s["avg_weight"] for s in top)
        return {
            "suggested_weight": MathTools.round_to(avg_weight * self.SIMILAR_FACTOR, self.increment),
            "confidence": "medium",
            "source": "similar",
            "reasoning": self._(
                "Based on your performance on similar {group} exercises. Starting "
                "conservatively at 85% to ensure proper form.",
                group=group,
            ),
            "based_on": ", ".join(s["exercise_name"] for s in top),
        }

    def from_profile(
        self,
        exercise_name: str,
        profile: UserProfile,
        body_stats: Sequence[BodyStats] | None = None,
    ) -> dict:
        body_weight = (
            latest_body_weight(list(body_stats or []))
            or profile.weight
            or self.default_body_weight
        )
        tier = ExperienceTier.from_activity_level(profile.activity_level)
        ex_type = ExerciseType.classify(exercise_name)
        base = body_weight * ExperienceTier.multiplier(tier) * self.TYPE_MULTIPLIER[ex_type]
        return {
            "suggested_weight": max(self.MIN_WEIGHT, MathTools.round_to(base, self.increment)),
            "confidence": "low",
            "source": "profile",
            "reasoning": self._(
                "Estimated for {tier} level, {type} exercise - start light and increase gradually.",
                tier=self.translator.gettext(tier),
                type=self.translator.gettext(ex_type),
            ),
            "based_on": self._(
                "Experience level: {tier}, body weight: {weight}kg",
                tier=self.translator.gettext(tier),
                weight=round(body_weight, 1),
            ),
        }

    def suggest(
        self,
        exercise_name: str,
        history: Sequence[WorkoutLog],
        profile: UserProfile | None = None,
        body_stats: Sequence[BodyStats] | None = None,
    ) -> Optional[dict]:
        """Return a starting-weight suggestion or ``None`` when nothing is known."""
        performance = self.exercise_performance(exercise_name, history)
        if performance:
            logger.debug("Starting weight for %s from own history", exercise_name)
            return self.from_history(exercise_name, performance)

        muscle_group = self.classifier.classify(exercise_name)
        if muscle_group is not None:
            similar = self.similar_performance(exercise_name, muscle_group, history)
            if similar:
                logger.debug("Starting weight for %s from %s exercises", exercise_name, muscle_group)
                return self.from_similar(exercise_name, muscle_group, similar)

        if profile is not None:
            logger.debug("Starting weight for %s from profile", exercise_name)
            return self.from_profile(exercise_name, profile, body_stats)
        return None

    def suggest_for_template(
        self,
        exercise_names: Iterable[str],
        history: Sequence[WorkoutLog],
        profile: UserProfile | None = None,
        body_stats: Sequence[BodyStats] | None = None,
    ) -> dict[str, dict]:
        """Suggest starting weights for every exercise of a new template."""
        suggestions: dict[str, dict] = {}
        for name in exercise_names:
            suggestion = self.suggest(name, history, profile, body_stats)
            if suggestion is not None:
                suggestions[name] = suggestion
        return suggestions
