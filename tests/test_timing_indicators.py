"""Tests for git_provenance.indicators.timing module."""

from git_provenance.config import ThresholdConfig
from git_provenance.indicators.timing import bursty_percentage


class TestBurstyPercentage:
    """Tests for commits made in quick succession."""

    def test_empty_and_single(self, make_commit):
        assert bursty_percentage([]) == 0.0
        assert bursty_percentage([make_commit()]) == 0.0

    def test_all_within_window(self, make_commit):
        commits = [make_commit(minutes=m) for m in (0, 5, 10)]
        assert bursty_percentage(commits) == 100.0

    def test_gap_equal_to_window_is_not_bursty(self, make_commit):
        commits = [make_commit(minutes=0), make_commit(minutes=30)]
        assert bursty_percentage(commits) == 0.0

    def test_gap_just_below_window(self, make_commit):
        commits = [make_commit(minutes=0), make_commit(minutes=29.99)]
        assert bursty_percentage(commits) == 100.0

    def test_denominator_is_gap_count(self, make_commit):
        """Three commits, two gaps, one of them short."""
        commits = [make_commit(minutes=m) for m in (0, 10, 120)]
        assert bursty_percentage(commits) == 50.0

    def test_unordered_input(self, make_commit):
        commits = [make_commit(minutes=m) for m in (120, 0, 10)]
        assert bursty_percentage(commits) == 50.0

    def test_custom_window(self, make_commit):
        commits = [make_commit(minutes=0), make_commit(minutes=45)]
        assert bursty_percentage(commits, ThresholdConfig(burst_window_minutes=60)) == 100.0
