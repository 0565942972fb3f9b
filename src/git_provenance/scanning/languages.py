"""Language configurations: the single source of truth for comment syntax.

Adding a new language:
  1. Add a LanguageConfig entry to LANGUAGES below.
  2. That's it. The scanner and analyzers pick it up through the table.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class CommentSyntax:
    """Comment delimiters for one language.

    Block markers come in pairs: either both are set or neither is.
    """

    single: str
    block_start: Optional[str] = None
    block_end: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.single:
            raise ValueError("single-line comment marker is required")
        if (self.block_start is None) != (self.block_end is None):
            raise ValueError("block_start and block_end must be given together")

    @property
    def has_block(self) -> bool:
        return self.block_start is not None and self.block_end is not None


@dataclass(frozen=True)
class LanguageConfig:
    name: str
    extensions: tuple[str, ...]
    comment_syntax: CommentSyntax


# ── Re-usable building blocks ──────────────────────────────────────

C_STYLE = CommentSyntax("//", "/*", "*/")
PYTHON_STYLE = CommentSyntax("#", '"""', '"""')
RUBY_STYLE = CommentSyntax("#", "=begin", "=end")
DEFAULT_SYNTAX = CommentSyntax("#")


# ── Language definitions ───────────────────────────────────────────

LANGUAGES = (
    LanguageConfig("TypeScript", (".ts", ".tsx"), C_STYLE),
    LanguageConfig("JavaScript", (".js", ".jsx"), C_STYLE),
    LanguageConfig("Python", (".py",), PYTHON_STYLE),
    LanguageConfig("Java", (".java",), C_STYLE),
    LanguageConfig("Go", (".go",), C_STYLE),
    LanguageConfig("Rust", (".rs",), C_STYLE),
    LanguageConfig("C", (".c",), C_STYLE),
    LanguageConfig("C++", (".cpp",), C_STYLE),
    LanguageConfig("C#", (".cs",), C_STYLE),
    LanguageConfig("PHP", (".php",), C_STYLE),
    LanguageConfig("Ruby", (".rb",), RUBY_STYLE),
    LanguageConfig("Swift", (".swift",), C_STYLE),
    LanguageConfig("Kotlin", (".kt",), C_STYLE),
)


class LanguageTable:
    """Immutable extension -> language lookup.

    Built once and handed to whatever needs it; holds no mutable state, so
    concurrent readers are safe.
    """

    def __init__(self, languages: Iterable[LanguageConfig], default: CommentSyntax = DEFAULT_SYNTAX):
        by_ext: dict[str, LanguageConfig] = {}
        for config in languages:
            for ext in config.extensions:
                by_ext[ext] = config
        self._by_extension: Mapping[str, LanguageConfig] = MappingProxyType(by_ext)
        self._extensions = frozenset(by_ext)
        self._default = default

    def comment_syntax_for(self, extension: str) -> CommentSyntax:
        """Comment syntax for ``extension``; unknown extensions get ``#``."""
        config = self._by_extension.get(extension)
        return config.comment_syntax if config else self._default

    def language_name(self, extension: str) -> str:
        config = self._by_extension.get(extension)
        return config.name if config else UNKNOWN_LANGUAGE

    def is_supported(self, extension: str) -> bool:
        return extension in self._by_extension

    def supported_extensions(self) -> frozenset[str]:
        return self._extensions

    def languages(self) -> list[LanguageConfig]:
        seen: dict[str, LanguageConfig] = {}
        for config in self._by_extension.values():
            seen.setdefault(config.name, config)
        return list(seen.values())


@lru_cache(maxsize=1)
def default_language_table() -> LanguageTable:
    """The table for all built-in languages."""
    return LanguageTable(LANGUAGES)
