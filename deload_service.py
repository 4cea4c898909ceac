from __future__ import annotations
import datetime
import logging
from typing import Optional, Sequence

from algorithms.math_tools import MathTools
from localization import Translator
from models import WorkoutLog
from plateau_service import PlateauService
from weekly_service import WeeklySummaryService
from workout_metrics import WorkoutMetrics

logger = logging.getLogger(__name__)


class DeloadService:
    """Combine fatigue signals from weekly summaries into a deload advice."""

    URGENCY_LEVELS: tuple[str, ...] = ("low", "medium", "high", "critical")
    DELOAD_URGENCIES: frozenset[str] = frozenset({"medium", "high", "critical"})

    PROTOCOLS: dict[str, dict] = {
        "critical": {
            "volume_reduction": 50,
            "intensity_reduction": 40,
            "duration_weeks": 1,
            "suggestions": (
                "Cut every exercise to 50% of your normal sets",
                "Use 60% of your normal weights",
                "Focus on technique and mindful movement",
                "Increase sleep to 8-9 hours per night",
                "Consider extra rest days this week",
            ),
        },
        "high": {
            "volume_reduction": 40,
            "intensity_reduction": 30,
            "duration_weeks": 1,
            "suggestions": (
                "Reduce volume by 40% (e.g. 5 sets -> 3 sets)",
                "Use 70% of your normal weights",
                "Keep the frequency but shorten workouts",
                "Focus on compound movements, skip accessories",
                "Increase protein intake (2g/kg) for recovery",
            ),
        },
        "medium": {
            "volume_reduction": 30,
            "intensity_reduction": 20,
            "duration_weeks": 1,
            "suggestions": (
                "Reduce sets by about 30% this week",
                "Use 75-80% of your normal weights",
                "Keep all exercises but with less volume",
                "Add stretching and mobility work",
                "Make sure nutrition and hydration are adequate",
            ),
        },
        "low": {
            "volume_reduction": 20,
            "intensity_reduction": 10,
            "duration_weeks": 1,
            "suggestions": (
                "Light deload: drop 1-2 sets per exercise",
                "Use about 85% of your normal weights",
                "Optional: replace one workout with active recovery",
                "Focus on sleep and stress management",
            ),
        },
    }

    RECOMMENDATIONS: dict[str, str] = {
        "critical": "Deload strongly recommended! Multiple signs of overtraining - rest this week.",
        "high": "Deload recommended this week or next. Your body needs recovery.",
        "medium": "Consider a deload within 1-2 weeks. Several signs of fatigue.",
        "low": "Monitor your progress. Some signs of fatigue detected.",
    }

    def __init__(
        self,
        weekly_service: WeeklySummaryService,
        plateau_service: PlateauService,
        translator: Translator | None = None,
        weeks_to_analyze: int = 6,
    ) -> None:
        self.weekly = weekly_service
        self.plateaus = plateau_service
        self.translator = translator or Translator()
        self.weeks_to_analyze = weeks_to_analyze

    def _(self, key: str, **values) -> str:
        return self.translator.gettext(key).format(**values)

    def _signal(self, signal_type: str, severity: str, description: str) -> dict:
        return {"type": signal_type, "severity": severity, "description": description}

    def volume_decline(self, summaries: Sequence[dict]) -> Optional[dict]:
        """Both of the last three weeks dropping 5% or more from the week before."""
        if len(summaries) < 3:
            return None
        volumes = [s["total_volume"] for s in summaries[-3:]]
        declines = 0
        for prev, cur in zip(volumes, volumes[1:]):
            if prev > 0 and cur <= prev * 0.95:
                declines += 1
        if declines < 2:
            return None
        total = -MathTools.percent_change(volumes[-1], volumes[0])
        severity = "high" if total > 20 else "medium" if total > 10 else "low"
        return self._signal(
            "volume_decline",
            severity,
            self._(
                "Volume dropped {pct:.0f}% over 3 weeks - possible fatigue", pct=total
            ),
        )

    def performance_decline(self, history: Sequence[WorkoutLog]) -> Optional[dict]:
        """Average set weight of the last 6 sessions against the 6 before."""
        if len(history) < 6:
            return None
        ordered = sorted(history, key=lambda w: w.date, reverse=True)
        recent = ordered[:6]
        previous = ordered[6:12]
        if len(previous) < 3:
            return None
        recent_avg = WorkoutMetrics.average_set_weight(recent)
        previous_avg = WorkoutMetrics.average_set_weight(previous)
        if previous_avg <= 0 or recent_avg > previous_avg * 0.95:
            return None
        decline = -MathTools.percent_change(recent_avg, previous_avg)
        return self._signal(
            "performance_decline",
            "high" if decline > 10 else "medium",
            self._(
                "Average weight {pct:.0f}% lower than the previous period", pct=decline
            ),
        )

    def accumulated_fatigue(self, summaries: Sequence[dict]) -> Optional[dict]:
        """Every one of the last four weeks well above their own average."""
        if len(summaries) < 4:
            return None
        recent = summaries[-4:]
        average = MathTools.mean(s["total_volume"] for s in recent)
        high_weeks = sum(
            1
            for s in recent
            if s["total_volume"] > average * 1.1 and s["total_workouts"] >= 3
        )
        if high_weeks < 4:
            return None
        return self._signal(
            "accumulated_fatigue",
            "medium",
            self._(
                "{weeks} weeks in a row of high volume - time to recover", weeks=high_weeks
            ),
        )

    def multiple_plateaus(self, plateaus: Sequence[dict]) -> Optional[dict]:
        if len(plateaus) < 3:
            return None
        long_plateaus = sum(1 for p in plateaus if p["weeks_stagnant"] >= 3)
        return self._signal(
            "multiple_plateaus",
            "high" if long_plateaus >= 2 else "medium",
            self._(
                "{count} exercises stagnated - possible systemic fatigue",
                count=len(plateaus),
            ),
        )

    def overreaching(self, summaries: Sequence[dict]) -> Optional[dict]:
        """A volume spike followed within two weeks by a crash."""
        if len(summaries) < 4:
            return None
        volumes = [s["total_volume"] for s in summaries]
        average = MathTools.mean(volumes)
        if average <= 0:
            return None
        for i in range(len(volumes) - 1):
            spike = volumes[i] > average * 1.5
            following = volumes[i + 1 : i + 3]
            crash = any(v < average * 0.8 for v in following)
            if spike and crash:
                return self._signal(
                    "overreaching",
                    "high",
                    self._("Volume spike followed by a crash - overreaching detected"),
                )
        return None

    @staticmethod
    def urgency(signals: Sequence[dict]) -> str:
        high = sum(1 for s in signals if s["severity"] == "high")
        medium = sum(1 for s in signals if s["severity"] == "medium")
        if high >= 2:
            return "critical"
        if (high >= 1 and medium >= 1) or medium >= 3:
            return "high"
        if high >= 1 or medium >= 2:
            return "medium"
        return "low"

    @staticmethod
    def high_volume_weeks(summaries: Sequence[dict]) -> int:
        if not summaries:
            return 0
        average = MathTools.mean(s["total_volume"] for s in summaries)
        return sum(
            1
            for s in summaries
            if s["total_workouts"] >= 3 and s["total_volume"] > average * 1.1
        )

    def deload_protocol(self, urgency: str) -> dict:
        """Return the fixed deload protocol for ``urgency``."""
        protocol = self.PROTOCOLS[urgency]
        return {
            "volume_reduction": protocol["volume_reduction"],
            "intensity_reduction": protocol["intensity_reduction"],
            "duration_weeks": protocol["duration_weeks"],
            "suggestions": [self.translator.gettext(s) for s in protocol["suggestions"]],
        }

    def recommend(
        self,
        weekly_summaries: Sequence[dict],
        history: Sequence[WorkoutLog] = (),
        plateaus: Sequence[dict] = (),
    ) -> dict:
        """Evaluate all signals on precomputed weekly summaries (oldest first)."""
        checks = (
            self.volume_decline(weekly_summaries),
            self.performance_decline(history),
            self.accumulated_fatigue(weekly_summaries),
            self.multiple_plateaus(plateaus),
            self.overreaching(weekly_summaries),
        )
        signals = [s for s in checks if s is not None]
        urgency = self.urgency(signals)
        should_deload = urgency in self.DELOAD_URGENCIES
        if signals:
            recommendation = self.translator.gettext(self.RECOMMENDATIONS[urgency])
            logger.debug(
                "Deload signals %s -> urgency %s",
                [s["type"] for s in signals],
                urgency,
            )
        else:
            recommendation = self.translator.gettext(
                "Your training looks good! Keep applying progressive overload."
            )
        return {
            "should_deload": should_deload,
            "urgency": urgency,
            "weeks_of_high_volume": self.high_volume_weeks(weekly_summaries),
            "signals": signals,
            "recommendation": recommendation,
            "protocol": self.deload_protocol(urgency) if should_deload else None,
        }

    def detect_deload_need(
        self,
        history: Sequence[WorkoutLog],
        weeks_to_analyze: int | None = None,
        today: datetime.date | None = None,
    ) -> dict:
        weeks = weeks_to_analyze or self.weeks_to_analyze
        summaries = self.weekly.weekly_summaries(history, weeks, today)
        plateaus = self.plateaus.detect_all_plateaus(history, today=today)
        return self.recommend(summaries, history, plateaus)

    def is_currently_deloading(
        self,
        history: Sequence[WorkoutLog],
        today: datetime.date | None = None,
    ) -> bool:
        """Return ``True`` when this week already runs 30% below last week."""
        current = self.weekly.weekly_summary(history, 0, today)
        last = self.weekly.weekly_summary(history, 1, today)
        if last["total_volume"] == 0:
            return False
        reduction = -MathTools.percent_change(current["total_volume"], last["total_volume"])
        return reduction >= 30 and current["total_workouts"] >= 2
