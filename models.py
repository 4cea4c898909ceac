from __future__ import annotations
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class WorkoutSet(BaseModel):
    """A single logged set. Weight is in kilograms."""

    model_config = ConfigDict(frozen=True)

    weight: float = 0.0
    reps: int = 0
    completed: bool = False

    @property
    def is_qualifying(self) -> bool:
        """Return ``True`` when the set can feed strength calculations."""
        return self.completed and self.weight > 0 and self.reps > 0


class WorkoutExercise(BaseModel):
    """An exercise performed within a session, joined by display name."""

    model_config = ConfigDict(frozen=True)

    name: str
    sets: tuple[WorkoutSet, ...] = ()
    notes: Optional[str] = None
    duration_minutes: Optional[float] = None
    estimated_calories: Optional[float] = None

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def completed_sets(self) -> list[WorkoutSet]:
        return [s for s in self.sets if s.completed]

    def qualifying_sets(self) -> list[WorkoutSet]:
        return [s for s in self.sets if s.is_qualifying]


class WorkoutLog(BaseModel):
    """One training session as stored in history."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    date: datetime.date
    start_time: Optional[datetime.datetime] = None
    end_time: Optional[datetime.datetime] = None
    exercises: tuple[WorkoutExercise, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_timestamp(cls, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    @property
    def duration_minutes(self) -> float:
        """Return the session length in minutes, 0 while still active."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        seconds = (self.end_time - self.start_time).total_seconds()
        return max(seconds, 0.0) / 60

    def find_exercise(self, name: str) -> Optional[WorkoutExercise]:
        """Return the first exercise matching ``name`` case-insensitively."""
        for ex in self.exercises:
            if ex.matches(name):
                return ex
        return None

    def contains(self, name: str) -> bool:
        return self.find_exercise(name) is not None


class BodyStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: Optional[int] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    gender: Optional[str] = None
    activity_level: float = 1.2


def latest_body_weight(body_stats: list[BodyStats] | None) -> Optional[float]:
    """Return the most recently logged positive body weight."""
    if not body_stats:
        return None
    for entry in sorted(body_stats, key=lambda b: b.date, reverse=True):
        if entry.weight is not None and entry.weight > 0:
            return float(entry.weight)
    return None
