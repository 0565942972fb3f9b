"""Commit size indicators: averages, outlier share, first-commit suspicion."""

from typing import Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..math import Statistics, percentage, round2
from ..models import Commit, FirstCommitAnalysis, SizeMetrics
from ..temporal.ordering import sorted_by_time


def size_metrics(
    commits: Sequence[Commit], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> SizeMetrics:
    """All size-related indicators for a commit list."""
    ordered = sorted_by_time(commits)
    return SizeMetrics(
        avg_lines_per_commit=avg_lines_per_commit(ordered),
        large_commit_percentage=large_commit_percentage(ordered, thresholds),
        first_commit_analysis=analyze_first_commit(ordered, thresholds),
        avg_files_per_commit=avg_files_per_commit(ordered),
    )


def avg_lines_per_commit(commits: Sequence[Commit]) -> float:
    if not commits:
        return 0.0
    return round2(Statistics.mean([c.total_lines for c in commits]))


def avg_files_per_commit(commits: Sequence[Commit]) -> float:
    if not commits:
        return 0.0
    return round2(Statistics.mean([c.files_changed for c in commits]))


def large_commit_percentage(
    commits: Sequence[Commit], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> float:
    """
    Share of commits that are large.

    A commit is large when its line total is more than k population standard
    deviations above the mean, or above the absolute line threshold.
    """
    if not commits:
        return 0.0
    flags = Statistics.outlier_mask(
        [c.total_lines for c in commits],
        k=thresholds.large_commit_std_dev_multiplier,
        absolute=thresholds.large_commit_lines,
    )
    return percentage(sum(flags), len(commits))


def analyze_first_commit(
    commits: Sequence[Commit], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> FirstCommitAnalysis:
    """
    Size of the chronologically first commit and whether it looks dumped in.

    With a single commit only the single-commit threshold applies. Otherwise
    the first commit is suspicious if it exceeds ``multiplier`` times the
    mean of the remaining commits, or the absolute threshold.
    """
    if not commits:
        return FirstCommitAnalysis(lines=0, is_suspicious=False)

    first, *rest = sorted_by_time(commits)
    lines = first.total_lines

    if not rest:
        return FirstCommitAnalysis(
            lines=lines, is_suspicious=lines > thresholds.first_commit_single_threshold
        )

    avg_rest = Statistics.mean([c.total_lines for c in rest])
    suspicious = (
        lines > avg_rest * thresholds.first_commit_multiplier
        or lines > thresholds.first_commit_absolute_threshold
    )
    return FirstCommitAnalysis(lines=lines, is_suspicious=suspicious)
