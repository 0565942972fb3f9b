"""Descriptive statistics for commit-size analysis: mean, population stddev, outliers."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import numpy as np

_HUNDREDTHS = Decimal("0.01")


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero (0.125 -> 0.13)."""
    return float(Decimal(str(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> float:
    """``part / whole`` as a percentage rounded to 2 decimals; 0 when ``whole`` is 0."""
    if whole == 0:
        return 0.0
    return round2(part * 100 / whole)


class Statistics:
    """Statistical analysis methods."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Compute arithmetic mean."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def pstdev(values: Sequence[float]) -> float:
        """Compute population standard deviation (divides by n)."""
        if len(values) == 0:
            return 0.0
        return float(np.std(values, ddof=0))

    @staticmethod
    def outlier_mask(values: Sequence[float], k: float, absolute: float) -> list[bool]:
        """
        Flag values above ``mean + k * stddev`` or above ``absolute``.

        The two conditions are combined with OR: a value is flagged if it is
        either a statistical outlier or simply too big.

        Args:
            values: Observations
            k: Standard deviations above the mean
            absolute: Absolute ceiling

        Returns:
            One flag per value
        """
        if len(values) == 0:
            return []
        arr = np.asarray(values, dtype=float)
        cutoff = Statistics.mean(arr) + k * Statistics.pstdev(arr)
        return ((arr > cutoff) | (arr > absolute)).tolist()
