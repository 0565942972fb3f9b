"""Tests for git_provenance.indicators.size module."""

from git_provenance.config import ThresholdConfig
from git_provenance.indicators.size import (
    analyze_first_commit,
    avg_files_per_commit,
    avg_lines_per_commit,
    large_commit_percentage,
    size_metrics,
)
from git_provenance.models import FirstCommitAnalysis


class TestAverages:
    def test_empty(self):
        assert avg_lines_per_commit([]) == 0.0
        assert avg_files_per_commit([]) == 0.0

    def test_avg_lines(self, three_commits):
        assert avg_lines_per_commit(three_commits) == 39.0

    def test_avg_files(self, make_commit):
        commits = [make_commit(files=["a"]), make_commit(files=["a", "b"])]
        assert avg_files_per_commit(commits) == 1.5


class TestLargeCommitPercentage:
    """Tests for the large-commit share."""

    def test_empty(self):
        assert large_commit_percentage([]) == 0.0

    def test_small_uniform_commits(self, three_commits):
        assert large_commit_percentage(three_commits) == 0.0

    def test_absolute_threshold(self, make_commit):
        commits = [make_commit(minutes=i, insertions=600) for i in range(4)]
        assert large_commit_percentage(commits) == 100.0

    def test_statistical_outlier(self, make_commit):
        commits = [make_commit(minutes=i, insertions=10) for i in range(9)]
        commits.append(make_commit(minutes=9, insertions=300))
        assert large_commit_percentage(commits) == 10.0

    def test_custom_threshold(self, make_commit):
        commits = [make_commit(minutes=i, insertions=60) for i in range(2)]
        assert large_commit_percentage(commits, ThresholdConfig(large_commit_lines=50)) == 100.0


class TestFirstCommit:
    """Tests for first-commit suspicion."""

    def test_empty(self):
        assert analyze_first_commit([]) == FirstCommitAnalysis(lines=0, is_suspicious=False)

    def test_single_large_commit(self, make_commit):
        result = analyze_first_commit([make_commit(insertions=800)])
        assert result == FirstCommitAnalysis(lines=800, is_suspicious=True)

    def test_single_commit_at_threshold(self, make_commit):
        """Exactly at the single-commit threshold is not suspicious."""
        assert not analyze_first_commit([make_commit(insertions=500)]).is_suspicious

    def test_multiple_of_rest_average(self, make_commit):
        commits = [
            make_commit(minutes=0, insertions=400),
            make_commit(minutes=1, insertions=100),
            make_commit(minutes=2, insertions=100),
        ]
        assert analyze_first_commit(commits) == FirstCommitAnalysis(400, True)

    def test_absolute_threshold(self, make_commit):
        commits = [
            make_commit(minutes=0, insertions=1001),
            make_commit(minutes=1, insertions=900),
        ]
        assert analyze_first_commit(commits).is_suspicious

    def test_uses_chronological_first(self, make_commit):
        """Input order does not matter; the earliest commit is examined."""
        late = make_commit(minutes=10, insertions=5)
        early = make_commit(minutes=0, insertions=2000)
        assert analyze_first_commit([late, early]).lines == 2000

    def test_ordinary_first_commit(self, three_commits):
        assert analyze_first_commit(three_commits) == FirstCommitAnalysis(60, False)


class TestSizeMetrics:
    def test_combined(self, three_commits):
        metrics = size_metrics(three_commits)
        assert metrics.avg_lines_per_commit == 39.0
        assert metrics.large_commit_percentage == 0.0
        assert metrics.first_commit_analysis.lines == 60
        assert metrics.avg_files_per_commit == 0.0
