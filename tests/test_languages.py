"""Tests for git_provenance.scanning.languages module."""

import pytest

from git_provenance.scanning.languages import (
    C_STYLE,
    DEFAULT_SYNTAX,
    PYTHON_STYLE,
    CommentSyntax,
    LanguageConfig,
    LanguageTable,
    default_language_table,
)


class TestCommentSyntax:
    """Tests for comment delimiter validation."""

    def test_block_markers_must_pair(self):
        """A block start without an end is rejected."""
        with pytest.raises(ValueError):
            CommentSyntax("//", "/*", None)

    def test_single_marker_required(self):
        with pytest.raises(ValueError):
            CommentSyntax("")

    def test_has_block(self):
        assert C_STYLE.has_block
        assert not DEFAULT_SYNTAX.has_block


class TestDefaultTable:
    """Tests for the built-in language table."""

    def test_known_extensions(self):
        table = default_language_table()
        assert table.comment_syntax_for(".ts") == C_STYLE
        assert table.comment_syntax_for(".py") == PYTHON_STYLE
        assert table.comment_syntax_for(".rb").block_start == "=begin"

    def test_unknown_extension_falls_back_to_hash(self):
        """Unknown extensions use '#' with no block syntax."""
        table = default_language_table()
        syntax = table.comment_syntax_for(".xyz")
        assert syntax.single == "#"
        assert not syntax.has_block

    def test_language_names(self):
        table = default_language_table()
        assert table.language_name(".tsx") == "TypeScript"
        assert table.language_name(".kt") == "Kotlin"
        assert table.language_name(".md") == "Unknown"

    def test_supported_extensions(self):
        extensions = default_language_table().supported_extensions()
        assert {".ts", ".tsx", ".js", ".jsx", ".py", ".java", ".go", ".rs"} <= extensions
        assert {".c", ".cpp", ".cs", ".php", ".rb", ".swift", ".kt"} <= extensions
        assert ".md" not in extensions

    def test_languages_listed_once(self):
        names = [config.name for config in default_language_table().languages()]
        assert len(names) == len(set(names)) == 13

    def test_default_table_is_shared(self):
        assert default_language_table() is default_language_table()


class TestCustomTable:
    def test_custom_language(self):
        table = LanguageTable([LanguageConfig("Lua", (".lua",), CommentSyntax("--", "--[[", "]]"))])
        assert table.is_supported(".lua")
        assert not table.is_supported(".ts")
        assert table.comment_syntax_for(".lua").single == "--"
