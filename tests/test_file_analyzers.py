"""Tests for the file analyzer lifecycle and the concrete analyzers."""

import pytest

from git_provenance.exceptions import ScanStateError
from git_provenance.scanning import (
    CommentRatioAnalyzer,
    LineCounts,
    NonTypicalExpressionAnalyzer,
    ScanState,
)


class TestLifecycle:
    """Tests for the reset -> analyze -> finalize -> result state machine."""

    def test_starts_idle(self):
        assert CommentRatioAnalyzer().state is ScanState.IDLE

    def test_result_before_scan_raises(self):
        with pytest.raises(ScanStateError):
            CommentRatioAnalyzer().get_result()

    def test_analyze_before_reset_raises(self):
        with pytest.raises(ScanStateError):
            CommentRatioAnalyzer().analyze_file("a.ts", "// x\n", ".ts")

    def test_result_while_accumulating_raises(self):
        analyzer = CommentRatioAnalyzer()
        analyzer.reset()
        analyzer.analyze_file("a.ts", "x;\n", ".ts")
        with pytest.raises(ScanStateError):
            analyzer.get_result()

    def test_analyze_after_finalize_raises(self):
        analyzer = CommentRatioAnalyzer()
        analyzer.reset()
        analyzer.finalize()
        with pytest.raises(ScanStateError):
            analyzer.analyze_file("a.ts", "x;\n", ".ts")

    def test_double_finalize_raises(self):
        analyzer = NonTypicalExpressionAnalyzer()
        analyzer.reset()
        analyzer.finalize()
        with pytest.raises(ScanStateError):
            analyzer.finalize()

    def test_reset_starts_fresh_scan(self):
        """A second scan does not see totals from the first."""
        analyzer = CommentRatioAnalyzer()
        analyzer.reset()
        analyzer.analyze_file("a.ts", "// c\nx;\n", ".ts")
        analyzer.finalize()
        assert analyzer.get_result() == 100.0

        analyzer.reset()
        assert analyzer.state is ScanState.ACCUMULATING
        analyzer.analyze_file("b.ts", "x;\ny;\n", ".ts")
        analyzer.finalize()
        assert analyzer.get_result() == 0.0


class TestCommentRatioAnalyzer:
    def test_totals_across_files(self):
        analyzer = CommentRatioAnalyzer()
        analyzer.reset()
        analyzer.analyze_file("a.ts", "// c\nx;\n", ".ts")
        analyzer.analyze_file("b.py", "# c\n# d\ny = 1\nz = 2\n", ".py")
        analyzer.finalize()
        assert analyzer.totals == LineCounts(code_lines=3, comment_lines=3)
        assert analyzer.get_result() == 100.0

    def test_no_files(self):
        analyzer = CommentRatioAnalyzer()
        analyzer.reset()
        analyzer.finalize()
        assert analyzer.get_result() == 0.0


class TestNonTypicalExpressionAnalyzer:
    def test_counts_files_not_occurrences(self):
        analyzer = NonTypicalExpressionAnalyzer()
        analyzer.reset()
        analyzer.analyze_file("a.ts", "for (;;) {}\nfor (;;) {}\nwhile (x) {}\n", ".ts")
        analyzer.analyze_file("b.ts", "xs.map(f);\n", ".ts")
        analyzer.analyze_file("c.ts", "const y = 2;\n", ".ts")
        analyzer.finalize()
        assert analyzer.total_files == 3
        assert analyzer.files_with_constructs == 1
        assert analyzer.get_result() == 33.33

    def test_no_files(self):
        analyzer = NonTypicalExpressionAnalyzer()
        analyzer.reset()
        analyzer.finalize()
        assert analyzer.get_result() == 0.0
