"""Data models shared by the detectors, the engine and the formatters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Commit:
    """One commit as read from the version-control log."""

    hash: str
    author: str
    email: str
    timestamp: datetime
    message: str
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0
    files: tuple[str, ...] = ()

    @property
    def total_lines(self) -> int:
        return self.insertions + self.deletions


@dataclass(frozen=True)
class ContributorStat:
    email: str
    name: str
    commit_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "name": self.name, "commitCount": self.commit_count}


@dataclass(frozen=True)
class FirstCommitAnalysis:
    lines: int
    is_suspicious: bool

    def to_dict(self) -> dict[str, Any]:
        return {"lines": self.lines, "isSuspicious": self.is_suspicious}


@dataclass(frozen=True)
class MetricResult(Generic[T]):
    """A computed value with a human-readable description.

    ``details`` carries an optional structured payload for metrics whose
    value alone does not tell the whole story.
    """

    value: T
    description: str
    details: Optional[Any] = None

    def to_dict(self) -> dict[str, Any]:
        value = self.value.to_dict() if hasattr(self.value, "to_dict") else self.value
        data: dict[str, Any] = {"value": value, "description": self.description}
        if self.details is not None:
            data["details"] = (
                self.details.to_dict() if hasattr(self.details, "to_dict") else self.details
            )
        return data


@dataclass(frozen=True)
class SizeMetrics:
    avg_lines_per_commit: float
    large_commit_percentage: float
    first_commit_analysis: FirstCommitAnalysis
    avg_files_per_commit: float


@dataclass(frozen=True)
class BasicMetrics:
    total_commits: int
    contributors: int
    first_commit: str
    last_commit: str
    duration_days: int
    avg_commits_per_day: float
    top_contributor: str
    contributor_stats: list[ContributorStat] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCommits": self.total_commits,
            "contributors": self.contributors,
            "firstCommit": self.first_commit,
            "lastCommit": self.last_commit,
            "durationDays": self.duration_days,
            "avgCommitsPerDay": self.avg_commits_per_day,
            "topContributor": self.top_contributor,
            "contributorStats": [s.to_dict() for s in self.contributor_stats],
        }


@dataclass(frozen=True)
class AIIndicators:
    avg_lines_per_commit: MetricResult[float]
    large_commit_percentage: MetricResult[float]
    first_commit_analysis: MetricResult[FirstCommitAnalysis]
    avg_files_per_commit: MetricResult[float]
    commit_message_patterns: MetricResult[float]
    bursty_commit_percentage: MetricResult[float]
    test_file_ratio: MetricResult[float]
    code_comment_ratio: MetricResult[float]
    code_non_typical_expression_ratio: MetricResult[float]

    def to_dict(self) -> dict[str, Any]:
        return {
            "avgLinesPerCommit": self.avg_lines_per_commit.to_dict(),
            "largeCommitPercentage": self.large_commit_percentage.to_dict(),
            "firstCommitAnalysis": self.first_commit_analysis.to_dict(),
            "avgFilesPerCommit": self.avg_files_per_commit.to_dict(),
            "commitMessagePatterns": self.commit_message_patterns.to_dict(),
            "burstyCommitPercentage": self.bursty_commit_percentage.to_dict(),
            "testFileRatio": self.test_file_ratio.to_dict(),
            "codeCommentRatio": self.code_comment_ratio.to_dict(),
            "codeNonTypicalExpressionRatio": self.code_non_typical_expression_ratio.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the engine computes for one (commits, working tree) pair."""

    basic_metrics: BasicMetrics
    ai_indicators: AIIndicators

    def to_dict(self) -> dict[str, Any]:
        return {
            "basicMetrics": self.basic_metrics.to_dict(),
            "aiIndicators": self.ai_indicators.to_dict(),
        }


@dataclass(frozen=True)
class RepositoryReport:
    """An analysis result labelled with where it came from."""

    repository: str
    branch: str
    metrics: AnalysisResult
    analyzed_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "repository": self.repository,
            "branch": self.branch,
            "metrics": self.metrics.to_dict(),
            "analyzedAt": self.analyzed_at,
        }
