import datetime
import itertools

from models import WorkoutExercise, WorkoutLog, WorkoutSet

TODAY = datetime.date(2024, 6, 14)  # a Friday

_ids = itertools.count(1)


def sets(*pairs, completed=True):
    """Build sets from ``(weight, reps)`` pairs."""
    return tuple(WorkoutSet(weight=w, reps=r, completed=completed) for w, r in pairs)


def exercise(name, *pairs, **kwargs):
    return WorkoutExercise(name=name, sets=sets(*pairs), **kwargs)


def session(days_ago, *exercises, name="Workout", today=TODAY, minutes=None):
    date = today - datetime.timedelta(days=days_ago)
    start = end = None
    if minutes is not None:
        start = datetime.datetime.combine(date, datetime.time(18, 0))
        end = start + datetime.timedelta(minutes=minutes)
    return WorkoutLog(
        id=f"w{next(_ids)}",
        name=name,
        date=date,
        start_time=start,
        end_time=end,
        exercises=exercises,
    )


def single_set_series(name, weights, spacing=7, reps=1, today=TODAY):
    """One session per weight, oldest first, ``spacing`` days apart, ending today."""
    count = len(weights)
    return [
        session((count - 1 - i) * spacing, exercise(name, (w, reps)), today=today)
        for i, w in enumerate(weights)
    ]
