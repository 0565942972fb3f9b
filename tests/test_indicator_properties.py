"""Cross-cutting checks that hold for every commit-based indicator."""

import pytest

from git_provenance.analysis import ProvenanceEngine
from git_provenance.indicators import bursty_percentage, message_pattern_percentage, size_metrics
from git_provenance.indicators import quality
from git_provenance.metrics import basic_metrics

HISTORIES = {
    "single": lambda mk: [mk(insertions=900, message="Initial commit")],
    "same_instant": lambda mk: [mk(minutes=0, insertions=5), mk(minutes=0, deletions=3)],
    "all_large": lambda mk: [mk(minutes=i * 120, insertions=800) for i in range(4)],
    "one_outlier": lambda mk: [mk(minutes=i, insertions=10) for i in range(9)]
    + [mk(minutes=9, insertions=400)],
    "all_templated_bursty": lambda mk: [
        mk(minutes=i * 5, message=f"feat: step {i}", files=["tests/test_a.py", "src/a.py"])
        for i in range(6)
    ],
    "shuffled": lambda mk: [
        mk(minutes=300, insertions=3, message="fix: typo", author="B", email="b@x"),
        mk(minutes=0, insertions=120, files=["a.py", "b.py"]),
        mk(minutes=10, insertions=7, files=["test_b.py"]),
        mk(minutes=10_000, insertions=2, message="update readme"),
    ],
}


def _percentages(commits):
    sizes = size_metrics(commits)
    return {
        "large": sizes.large_commit_percentage,
        "messages": message_pattern_percentage(commits),
        "bursty": bursty_percentage(commits),
        "tests": quality.test_file_ratio(commits),
    }


@pytest.fixture(params=sorted(HISTORIES))
def history(request, make_commit):
    return HISTORIES[request.param](make_commit)


class TestIndicatorProperties:
    """Range and repeatability checks over varied histories."""

    def test_percentages_within_bounds(self, history):
        for name, value in _percentages(history).items():
            assert 0.0 <= value <= 100.0, name

    def test_averages_not_negative(self, history):
        sizes = size_metrics(history)
        assert sizes.avg_lines_per_commit >= 0.0
        assert sizes.avg_files_per_commit >= 0.0
        assert basic_metrics(history).avg_commits_per_day >= 0.0

    def test_detectors_are_repeatable(self, history):
        assert size_metrics(history) == size_metrics(history)
        assert _percentages(history) == _percentages(history)
        assert basic_metrics(history) == basic_metrics(history)

    def test_input_left_unchanged(self, history):
        before = list(history)
        _percentages(history)
        basic_metrics(history)
        assert history == before

    def test_engine_repeatable(self, history, source_tree):
        engine = ProvenanceEngine()
        first = engine.analyze(history, source_tree)
        assert engine.analyze(history, source_tree) == first
        ai = first.ai_indicators
        for result in (
            ai.large_commit_percentage,
            ai.commit_message_patterns,
            ai.bursty_commit_percentage,
            ai.test_file_ratio,
            ai.code_non_typical_expression_ratio,
        ):
            assert 0.0 <= result.value <= 100.0
