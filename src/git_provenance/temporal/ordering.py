"""Commit ordering, with fail-fast checks on records that would corrupt the statistics."""

from typing import Sequence

from ..exceptions import MalformedCommitError
from ..models import Commit


def validate_commits(commits: Sequence[Commit]) -> None:
    """
    Reject commits that would silently corrupt the statistics.

    Raises:
        MalformedCommitError: On a missing timestamp or negative counts
    """
    for commit in commits:
        if commit.timestamp is None:
            raise MalformedCommitError(commit.hash, "missing timestamp")
        if commit.insertions < 0 or commit.deletions < 0:
            raise MalformedCommitError(commit.hash, "negative line counts")
        if commit.files_changed < 0:
            raise MalformedCommitError(commit.hash, "negative files changed")


def sorted_by_time(commits: Sequence[Commit]) -> list[Commit]:
    """Oldest first. Stable, so equal timestamps keep input order."""
    validate_commits(commits)
    return sorted(commits, key=lambda c: c.timestamp)
