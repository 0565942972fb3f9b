"""Commit timing indicators: bursts of commits in quick succession."""

from typing import Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..math import percentage
from ..models import Commit
from ..temporal.ordering import sorted_by_time


def bursty_percentage(
    commits: Sequence[Commit], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> float:
    """
    Percentage of commits made within the burst window of their predecessor.

    Commits are ordered by time first. Each commit after the first is bursty
    if the gap to the previous one is strictly below the window, so a gap of
    exactly the window is not bursty. The denominator is the number of gaps.
    """
    if len(commits) <= 1:
        return 0.0

    ordered = sorted_by_time(commits)
    window = thresholds.burst_window
    bursty = sum(
        1 for prev, cur in zip(ordered, ordered[1:]) if cur.timestamp - prev.timestamp < window
    )
    return percentage(bursty, len(ordered) - 1)
