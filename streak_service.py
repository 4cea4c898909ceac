from __future__ import annotations
import datetime
from typing import Sequence

from models import WorkoutLog


class StreakService:
    """Daily workout streaks and a calendar of training days."""

    @staticmethod
    def workout_streak(
        history: Sequence[WorkoutLog], today: datetime.date | None = None
    ) -> dict:
        """Return current and longest streaks of consecutive training days.

        The current streak only counts when the last workout was today or
        yesterday.
        """
        today = today or datetime.date.today()
        dates = sorted({w.date for w in history}, reverse=True)
        if not dates:
            return {
                "current": 0,
                "longest": 0,
                "total_workouts": len(history),
                "workout_dates": [],
                "streak_dates": [],
                "last_workout_date": None,
            }

        streak_dates: list[datetime.date] = []
        if (today - dates[0]).days in (0, 1):
            for d in dates:
                if streak_dates and (streak_dates[-1] - d).days != 1:
                    break
                streak_dates.append(d)

        longest = current = 1
        for newer, older in zip(dates, dates[1:]):
            if (newer - older).days <= 1:
                current += 1
            else:
                longest = max(longest, current)
                current = 1
        longest = max(longest, current)

        return {
            "current": len(streak_dates),
            "longest": longest,
            "total_workouts": len(history),
            "workout_dates": dates,
            "streak_dates": streak_dates,
            "last_workout_date": dates[0],
        }

    @staticmethod
    def is_streak_at_risk(streak: dict, today: datetime.date | None = None) -> bool:
        """Return ``True`` when today is the last day to keep the streak alive."""
        today = today or datetime.date.today()
        if streak["current"] == 0 or streak["last_workout_date"] is None:
            return False
        return (today - streak["last_workout_date"]).days == 1

    @staticmethod
    def workout_calendar(
        history: Sequence[WorkoutLog],
        days: int = 90,
        today: datetime.date | None = None,
    ) -> dict[datetime.date, int]:
        """Return workouts per day for the last ``days`` days."""
        today = today or datetime.date.today()
        calendar = {today - datetime.timedelta(days=i): 0 for i in range(days)}
        for w in history:
            if w.date in calendar:
                calendar[w.date] += 1
        return calendar
