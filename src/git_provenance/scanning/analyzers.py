"""Concrete file analyzers: comment density and non-typical constructs."""

from typing import Optional

from ..math import percentage
from .base import FileAnalyzer
from .classifier import LineCounts, classify_lines, comment_ratio
from .expressions import has_non_typical_construct
from .languages import LanguageTable, default_language_table


class CommentRatioAnalyzer(FileAnalyzer[float]):
    """Comment lines per code line across the whole scan, as a percentage."""

    def __init__(self, table: Optional[LanguageTable] = None):
        self.table = table or default_language_table()
        self._totals = LineCounts()
        super().__init__()

    def supported_extensions(self) -> frozenset[str]:
        return self.table.supported_extensions()

    @property
    def totals(self) -> LineCounts:
        return self._totals

    def _clear(self) -> None:
        self._totals = LineCounts()

    def _observe(self, filepath: str, content: str, extension: str) -> LineCounts:
        return classify_lines(content.split("\n"), self.table.comment_syntax_for(extension))

    def _accumulate(self, observation: LineCounts) -> None:
        self._totals = self._totals + observation

    def _result(self) -> float:
        return comment_ratio(self._totals.comment_lines, self._totals.code_lines)


class NonTypicalExpressionAnalyzer(FileAnalyzer[float]):
    """Share of files using at least one for/while/do/switch construct.

    Counts files, not occurrences.
    """

    def __init__(self, table: Optional[LanguageTable] = None):
        self.table = table or default_language_table()
        self.total_files = 0
        self.files_with_constructs = 0
        super().__init__()

    def supported_extensions(self) -> frozenset[str]:
        return self.table.supported_extensions()

    def _clear(self) -> None:
        self.total_files = 0
        self.files_with_constructs = 0

    def _observe(self, filepath: str, content: str, extension: str) -> bool:
        return has_non_typical_construct(content, extension, self.table)

    def _accumulate(self, observation: bool) -> None:
        self.total_files += 1
        if observation:
            self.files_with_constructs += 1

    def _result(self) -> float:
        return percentage(self.files_with_constructs, self.total_files)
