"""Analysis engine: composes the detectors and the scanner into one result."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..indicators import (
    bursty_percentage,
    message_pattern_percentage,
    metric_descriptions,
    size_metrics,
    test_file_ratio,
)
from ..logging_config import get_logger
from ..metrics import basic_metrics
from ..models import AIIndicators, AnalysisResult, Commit, MetricResult
from ..scanning import (
    CommentRatioAnalyzer,
    FileSystemScanner,
    LanguageTable,
    NonTypicalExpressionAnalyzer,
    default_language_table,
)
from ..scanning.scanner import ProgressCallback

logger = get_logger(__name__)


class ProvenanceEngine:
    """Computes every indicator for a commit list and its working tree.

    Holds no per-run state: analyzers are created for each call, so one
    engine can serve repeated or concurrent analyses.
    """

    def __init__(
        self,
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        language_table: Optional[LanguageTable] = None,
        scanner: Optional[FileSystemScanner] = None,
    ):
        self.thresholds = thresholds
        self.language_table = language_table or default_language_table()
        self.scanner = scanner or FileSystemScanner()
        self.descriptions = metric_descriptions(thresholds)

    def analyze(
        self,
        commits: Sequence[Commit],
        working_tree: str | Path,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AnalysisResult:
        """
        Run all detectors and the file scan.

        Args:
            commits: Commit records in any order
            working_tree: Checked-out tree to scan
            on_progress: Scan progress callback (files_done, files_total)

        Returns:
            Basic metrics plus the nine indicators
        """
        logger.debug(f"Analyzing {len(commits)} commits")
        basics = basic_metrics(commits)
        sizes = size_metrics(commits, self.thresholds)
        messages = message_pattern_percentage(commits)
        bursty = bursty_percentage(commits, self.thresholds)
        tests = test_file_ratio(commits)

        comments = CommentRatioAnalyzer(self.language_table)
        constructs = NonTypicalExpressionAnalyzer(self.language_table)
        summary = self.scanner.scan(working_tree, [comments, constructs], on_progress)
        logger.debug(
            f"Scanned {summary.files_processed}/{summary.files_found} files "
            f"({summary.files_failed} failed)"
        )

        d = self.descriptions
        indicators = AIIndicators(
            avg_lines_per_commit=MetricResult(
                sizes.avg_lines_per_commit, d["avg_lines_per_commit"]
            ),
            large_commit_percentage=MetricResult(
                sizes.large_commit_percentage, d["large_commit_percentage"]
            ),
            first_commit_analysis=MetricResult(
                sizes.first_commit_analysis, d["first_commit_analysis"]
            ),
            avg_files_per_commit=MetricResult(
                sizes.avg_files_per_commit, d["avg_files_per_commit"]
            ),
            commit_message_patterns=MetricResult(messages, d["commit_message_patterns"]),
            bursty_commit_percentage=MetricResult(bursty, d["bursty_commit_percentage"]),
            test_file_ratio=MetricResult(tests, d["test_file_ratio"]),
            code_comment_ratio=MetricResult(
                comments.get_result(),
                d["code_comment_ratio"],
                details={
                    "codeLines": comments.totals.code_lines,
                    "commentLines": comments.totals.comment_lines,
                },
            ),
            code_non_typical_expression_ratio=MetricResult(
                constructs.get_result(),
                d["code_non_typical_expression_ratio"],
                details={
                    "filesWithConstructs": constructs.files_with_constructs,
                    "totalFiles": constructs.total_files,
                },
            ),
        )
        return AnalysisResult(basic_metrics=basics, ai_indicators=indicators)
