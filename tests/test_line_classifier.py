"""Tests for git_provenance.scanning.classifier module."""

from git_provenance.scanning.classifier import LineCounts, classify_lines, comment_ratio
from git_provenance.scanning.languages import C_STYLE, DEFAULT_SYNTAX, PYTHON_STYLE


def _classify(text, syntax=C_STYLE):
    return classify_lines(text.split("\n"), syntax)


class TestClassifyLines:
    """Tests for comment/code line counting."""

    def test_blank_lines_ignored(self):
        assert _classify("\n   \n\t\n") == LineCounts(0, 0)

    def test_single_line_comments(self):
        counts = _classify("// one\nint x = 1;\n  // two\n")
        assert counts == LineCounts(code_lines=1, comment_lines=2)

    def test_trailing_comment_is_code(self):
        """Only a leading marker makes a comment line."""
        assert _classify("int x = 1; // note") == LineCounts(1, 0)

    def test_block_comment_spans_lines(self):
        text = "/*\n * doc\n * more\n */\nint main() {}\n"
        assert _classify(text) == LineCounts(code_lines=1, comment_lines=4)

    def test_block_opened_and_closed_on_one_line(self):
        text = "/* short */\nint x;\nint y;\n"
        assert _classify(text) == LineCounts(code_lines=2, comment_lines=1)

    def test_block_opener_after_code_counts_as_comment(self):
        """A line containing the opener anywhere counts as a comment."""
        text = "int x; /* start\nstill comment\nend */\nint y;\n"
        assert _classify(text) == LineCounts(code_lines=1, comment_lines=3)

    def test_python_one_line_docstring(self):
        text = 'def f():\n    """Doc."""\n    return 1\n'
        assert _classify(text, PYTHON_STYLE) == LineCounts(code_lines=2, comment_lines=1)

    def test_python_multiline_docstring_opener_does_not_enter_block(self):
        """Symmetric markers: the opener line also contains the closer."""
        text = '"""\nbody\n"""\n'
        assert _classify(text, PYTHON_STYLE) == LineCounts(code_lines=1, comment_lines=2)

    def test_default_syntax_has_no_block(self):
        assert _classify("# a\n/* b */\n", DEFAULT_SYNTAX) == LineCounts(1, 1)


class TestCommentRatio:
    def test_zero_code_lines(self):
        assert comment_ratio(10, 0) == 0.0

    def test_rounded(self):
        assert comment_ratio(1, 3) == 33.33

    def test_can_exceed_100(self):
        assert comment_ratio(30, 10) == 300.0


class TestLineCounts:
    def test_addition(self):
        assert LineCounts(1, 2) + LineCounts(3, 4) == LineCounts(4, 6)


class TestCommentOnlyFile:
    def test_comment_only_file_ratio_is_zero(self):
        """No code lines: two comment lines and a ratio of 0."""
        counts = _classify("// one\n// two\n")
        assert counts == LineCounts(code_lines=0, comment_lines=2)
        assert comment_ratio(counts.comment_lines, counts.code_lines) == 0.0
