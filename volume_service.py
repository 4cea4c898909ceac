from __future__ import annotations
import datetime
import logging
from typing import Iterable, Sequence

from algorithms.math_tools import MathTools
from algorithms.muscle_groups import MuscleGroupClassifier
from localization import Translator
from models import WorkoutLog

logger = logging.getLogger(__name__)


class MuscleVolumeService:
    """Aggregate training volume per muscle group and flag imbalances."""

    ANTAGONIST_PAIRS: tuple[tuple[str, str], ...] = (
        ("chest", "back"),
        ("arms", "back"),
        ("abs", "back"),
    )
    IMBALANCE_RATIO: float = 2.0

    def __init__(
        self,
        classifier: MuscleGroupClassifier,
        translator: Translator | None = None,
        window_days: int = 7,
    ) -> None:
        self.classifier = classifier
        self.translator = translator or Translator()
        self.window_days = window_days

    def aggregate(self, sessions: Iterable[WorkoutLog]) -> list[dict]:
        """Sum completed sets, reps and volume per muscle group."""
        groups: dict[str, dict] = {}
        for w in sessions:
            for ex in w.exercises:
                group = self.classifier.classify(ex.name)
                if group is None:
                    continue
                data = groups.setdefault(
                    group, {"sets": 0, "reps": 0, "volume": 0.0, "exercises": []}
                )
                for s in ex.completed_sets():
                    data["sets"] += 1
                    data["reps"] += s.reps
                    data["volume"] += s.weight * s.reps
                if ex.name not in data["exercises"]:
                    data["exercises"].append(ex.name)
        result = [
            {
                "group": group,
                "total_sets": data["sets"],
                "total_reps": data["reps"],
                "total_volume": round(data["volume"]),
                "exercises": data["exercises"],
            }
            for group, data in groups.items()
        ]
        return sorted(result, key=lambda x: x["total_volume"], reverse=True)

    def muscle_group_volume(
        self,
        history: Sequence[WorkoutLog],
        days_back: int | None = None,
        today: datetime.date | None = None,
    ) -> list[dict]:
        """Return per-group volume for the trailing ``days_back`` days."""
        days_back = self.window_days if days_back is None else days_back
        today = today or datetime.date.today()
        cutoff = today - datetime.timedelta(days=days_back)
        return self.aggregate(w for w in history if w.date > cutoff)

    def detect_imbalances(self, volume_data: Sequence[dict]) -> list[dict]:
        """Compare antagonist pairs and name the under-trained side."""
        volumes = {v["group"]: v["total_volume"] for v in volume_data}
        imbalances: list[dict] = []
        for first, second in self.ANTAGONIST_PAIRS:
            vol1 = volumes.get(first, 0)
            vol2 = volumes.get(second, 0)
            if vol1 == 0 or vol2 == 0:
                continue
            if vol1 > vol2 * self.IMBALANCE_RATIO:
                over, under, ratio = first, second, vol1 / vol2
            elif vol2 > vol1 * self.IMBALANCE_RATIO:
                over, under, ratio = second, first, vol2 / vol1
            else:
                continue
            imbalances.append(
                {
                    "overtrained_group": over,
                    "undertrained_group": under,
                    "ratio": round(ratio, 2),
                    "suggestion": self.translator.gettext(
                        "Train more {under} - currently {ratio:.1f}x less than {over}"
                    ).format(
                        under=self.translator.gettext(under),
                        over=self.translator.gettext(over),
                        ratio=ratio,
                    ),
                }
            )
        if imbalances:
            logger.debug("Detected %d muscle imbalances", len(imbalances))
        return imbalances

    def compare_weekly_volume(
        self,
        history: Sequence[WorkoutLog],
        today: datetime.date | None = None,
    ) -> dict:
        """Compare the last 7 days with the 7 days before, per muscle group."""
        today = today or datetime.date.today()
        current_week = self.aggregate(w for w in history if (today - w.date).days < 7)
        previous_week = self.aggregate(
            w for w in history if 7 <= (today - w.date).days < 14
        )
        current = {v["group"]: v["total_volume"] for v in current_week}
        previous = {v["group"]: v["total_volume"] for v in previous_week}
        changes = []
        for group in list(current) + [g for g in previous if g not in current]:
            cur = current.get(group, 0)
            prev = previous.get(group, 0)
            changes.append(
                {
                    "group": group,
                    "current_volume": cur,
                    "previous_volume": prev,
                    "change": cur - prev,
                    "percent_change": round(MathTools.percent_change(cur, prev), 2),
                }
            )
        changes.sort(key=lambda c: abs(c["percent_change"]), reverse=True)
        return {
            "current_week": current_week,
            "previous_week": previous_week,
            "changes": changes,
        }
