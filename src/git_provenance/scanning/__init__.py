"""Scanning layer: language table, line classifier, construct detector, tree scanner."""

from .analyzers import CommentRatioAnalyzer, NonTypicalExpressionAnalyzer
from .base import FileAnalyzer, ScanState
from .classifier import LineCounts, classify_lines, comment_ratio
from .expressions import has_non_typical_construct
from .languages import (
    CommentSyntax,
    LanguageConfig,
    LanguageTable,
    default_language_table,
)
from .scanner import SKIP_DIRECTORIES, SKIP_FILES, FileSystemScanner, ScanSummary

__all__ = [
    "CommentRatioAnalyzer",
    "CommentSyntax",
    "FileAnalyzer",
    "FileSystemScanner",
    "LanguageConfig",
    "LanguageTable",
    "LineCounts",
    "NonTypicalExpressionAnalyzer",
    "SKIP_DIRECTORIES",
    "SKIP_FILES",
    "ScanState",
    "ScanSummary",
    "classify_lines",
    "comment_ratio",
    "default_language_table",
    "has_non_typical_construct",
]
