import math
from typing import Iterable, Optional

import numpy as np
import pandas as pd


class MathTools:
    """Provides essential mathematical utilities for workout calculations."""

    BRZYCKI_INTERCEPT: float = 1.0278
    BRZYCKI_SLOPE: float = 0.0278
    BRZYCKI_MAX_REPS: int = 12
    WEIGHT_INCREMENT: float = 2.5

    @classmethod
    def brzycki_1rm(cls, weight: float, reps: int) -> float:
        """Return the estimated one-rep max using the Brzycki formula.

        The formula is only accurate for 1-10 reps. Above 12 reps the rep
        term is held at 12, which keeps the denominator positive and makes
        high-rep estimates conservative rather than exact.
        """
        if reps < 1:
            raise ValueError("reps must be at least 1")
        if reps == 1:
            return float(weight)
        rep_term = min(reps, cls.BRZYCKI_MAX_REPS)
        return weight / (cls.BRZYCKI_INTERCEPT - cls.BRZYCKI_SLOPE * rep_term)

    @staticmethod
    def volume(sets: list[tuple[int, float]]) -> float:
        """Compute training volume as the sum of reps times weight."""
        vol = 0.0
        for reps, weight in sets:
            vol += reps * weight
        return vol

    @staticmethod
    def round_to(value: float, increment: float = 0.5) -> float:
        """Round ``value`` half-up to the nearest multiple of ``increment``."""
        if increment <= 0:
            raise ValueError("increment must be positive")
        return math.floor(value / increment + 0.5) * increment

    @staticmethod
    def percent_change(current: float, previous: float) -> float:
        """Return the change from ``previous`` to ``current`` in percent."""
        if previous == 0:
            return 0.0
        return (current - previous) / previous * 100.0

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        data = list(values)
        if not data:
            return 0.0
        return float(np.mean(np.array(data, dtype=float)))

    @staticmethod
    def ratio(numerator: float, denominator: float) -> Optional[float]:
        """Return ``numerator / denominator`` or ``None`` for a zero denominator."""
        if denominator == 0:
            return None
        return numerator / denominator

    @staticmethod
    def ewma(values: Iterable[float], span: int) -> list[float]:
        series = pd.Series(list(values), dtype=float)
        return [float(v) for v in series.ewm(span=span, adjust=False).mean()]
