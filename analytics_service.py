from __future__ import annotations
import datetime
import logging
from typing import Optional, Sequence

from algorithms.math_tools import MathTools
from algorithms.muscle_groups import MuscleGroupClassifier, default_classifier
from config import load_settings
from deload_service import DeloadService
from localization import Translator
from models import BodyStats, UserProfile, WorkoutExercise, WorkoutLog
from plateau_service import PlateauService
from progression_service import ProgressionService
from settings_schema import AnalyticsSettings
from starting_weight_service import StartingWeightService
from strength_service import StrengthService
from streak_service import StreakService
from volume_service import MuscleVolumeService
from weekly_service import WeeklySummaryService
from workout_metrics import WorkoutMetrics

logger = logging.getLogger(__name__)


class TrainingAnalyticsService:
    """Compute training analytics from a full history snapshot.

    Every call recomputes its result from the history it is given; nothing
    is cached between calls.
    """

    def __init__(
        self,
        settings: AnalyticsSettings | None = None,
        classifier: MuscleGroupClassifier | None = None,
        translator: Translator | None = None,
    ) -> None:
        self.settings = settings or AnalyticsSettings()
        self.classifier = classifier or default_classifier(self.settings.catalog_path)
        self.translator = translator or Translator(self.settings.language)
        self.progression = ProgressionService(self.translator, self.settings.trend_window)
        self.plateaus = PlateauService(self.translator, self.settings.plateau_threshold)
        self.volume = MuscleVolumeService(
            self.classifier, self.translator, self.settings.volume_window_days
        )
        self.weekly = WeeklySummaryService(self.volume, self.translator)
        self.deload = DeloadService(
            self.weekly, self.plateaus, self.translator, self.settings.deload_weeks
        )
        self.starting_weights = StartingWeightService(
            self.classifier,
            self.translator,
            self.settings.weight_increment,
            self.settings.default_body_weight,
        )
        self.strength = StrengthService()
        self.streaks = StreakService()

    @classmethod
    def from_config(cls, path: str | None = None) -> "TrainingAnalyticsService":
        settings = load_settings(path)
        logger.debug("Loaded analytics settings: %s", settings.model_dump())
        return cls(settings)

    # core metrics

    @staticmethod
    def estimate_one_rep_max(weight: float, reps: int) -> float:
        return WorkoutMetrics.estimate_one_rep_max(weight, reps)

    @staticmethod
    def best_one_rep_max(exercise: WorkoutExercise) -> Optional[dict]:
        return WorkoutMetrics.best_one_rep_max(exercise)

    @staticmethod
    def total_volume(exercise: WorkoutExercise) -> float:
        return WorkoutMetrics.total_volume(exercise)

    @staticmethod
    def personal_record(exercise_name: str, history: Sequence[WorkoutLog]) -> Optional[dict]:
        return WorkoutMetrics.personal_record(exercise_name, history)

    def trend(
        self, exercise_name: str, history: Sequence[WorkoutLog], window_size: int | None = None
    ) -> dict:
        return WorkoutMetrics.trend(
            exercise_name, history, window_size or self.settings.trend_window
        )

    # progression and plateaus

    def period_progress(
        self,
        exercise_name: str,
        history: Sequence[WorkoutLog],
        period_days: int,
        today: datetime.date | None = None,
    ) -> dict:
        return self.progression.period_progress(exercise_name, history, period_days, today)

    def classify_progression(self, current: float | None, previous: float | None) -> str:
        return self.progression.classify_progression(current, previous)

    def detect_plateau(
        self, exercise_name: str, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> dict:
        return self.plateaus.detect_plateau(exercise_name, history, today=today)

    def detect_all_plateaus(
        self, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> list[dict]:
        return self.plateaus.detect_all_plateaus(history, today=today)

    # fatigue

    def deload_recommendation(
        self, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> dict:
        return self.deload.detect_deload_need(history, today=today)

    def is_currently_deloading(
        self, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> bool:
        return self.deload.is_currently_deloading(history, today)

    # muscle groups

    def muscle_group_volume(
        self, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> list[dict]:
        return self.volume.muscle_group_volume(history, today=today)

    def muscle_imbalances(
        self, history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> list[dict]:
        return self.volume.detect_imbalances(self.muscle_group_volume(history, today))

    # starting weights

    def suggest_starting_weight(
        self,
        exercise_name: str,
        history: Sequence[WorkoutLog],
        profile: UserProfile | None = None,
        body_stats: Sequence[BodyStats] | None = None,
    ) -> Optional[dict]:
        return self.starting_weights.suggest(exercise_name, history, profile, body_stats)

    def overview(
        self,
        history: Sequence[WorkoutLog],
        today: datetime.date | None = None,
    ) -> dict:
        """Return the figures a dashboard shows on one screen."""
        today = today or datetime.date.today()
        volume = self.muscle_group_volume(history, today)
        deload = self.deload_recommendation(history, today)
        if deload["should_deload"] and self.is_currently_deloading(history, today):
            deload = dict(deload, should_deload=False, already_deloading=True)
        return {
            "total_workouts": len(history),
            "total_volume": round(
                MathTools.volume(
                    [
                        (s.reps, s.weight)
                        for w in history
                        for ex in w.exercises
                        for s in ex.completed_sets()
                    ]
                ),
                2,
            ),
            "weekly": self.weekly.compare_weeks(history, today),
            "plateaus": self.plateaus.plateau_summary(history, today),
            "deload": deload,
            "muscle_volume": volume,
            "imbalances": self.volume.detect_imbalances(volume),
            "streak": self.streaks.workout_streak(history, today),
            "strength": self.strength.strength_score(history, today=today),
            "recent_prs": self.strength.recent_prs(history, today=today),
        }
