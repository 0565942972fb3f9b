"""Basic repository metrics: commit counts, contributors, time span, cadence."""

import math
from datetime import timedelta
from typing import Sequence

from ..math import round2
from ..temporal.ordering import sorted_by_time
from ..models import BasicMetrics, Commit, ContributorStat

ONE_DAY = timedelta(days=1)


def aggregate_contributors(commits: Sequence[Commit]) -> list[ContributorStat]:
    """
    Commit counts per author email, most active first.

    Folds over the commits in the order given (git log order is newest
    first). The display name is the first one seen for each email, and ties
    keep first-seen order.
    """
    counts: dict[str, int] = {}
    names: dict[str, str] = {}
    for commit in commits:
        if commit.email not in counts:
            counts[commit.email] = 0
            names[commit.email] = commit.author
        counts[commit.email] += 1

    stats = [ContributorStat(email=e, name=names[e], commit_count=n) for e, n in counts.items()]
    return sorted(stats, key=lambda s: s.commit_count, reverse=True)


def basic_metrics(commits: Sequence[Commit]) -> BasicMetrics:
    """
    Calculate basic repository metrics from commit history.

    ``duration_days`` is the span from the first to the last commit rounded
    up to whole days. Commits spanning less than a full day still count as
    one day; only a zero span (all commits at the same instant, or a single
    commit) gives 0 days and 0 commits per day.
    """
    if not commits:
        return BasicMetrics(
            total_commits=0,
            contributors=0,
            first_commit="",
            last_commit="",
            duration_days=0,
            avg_commits_per_day=0.0,
            top_contributor="",
            contributor_stats=[],
        )

    ordered = sorted_by_time(commits)
    first, last = ordered[0].timestamp, ordered[-1].timestamp
    total = len(ordered)

    duration_days = math.ceil((last - first) / ONE_DAY)
    avg_per_day = round2(total / duration_days) if duration_days > 0 else 0.0

    stats = aggregate_contributors(commits)

    return BasicMetrics(
        total_commits=total,
        contributors=len(stats),
        first_commit=first.isoformat(),
        last_commit=last.isoformat(),
        duration_days=duration_days,
        avg_commits_per_day=avg_per_day,
        top_contributor=stats[0].email if stats else "",
        contributor_stats=stats,
    )
