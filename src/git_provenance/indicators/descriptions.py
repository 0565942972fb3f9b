"""Human-readable descriptions of each indicator, with thresholds filled in."""

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig


def _fmt(value: float) -> str:
    return f"{value:g}"


def metric_descriptions(thresholds: ThresholdConfig = DEFAULT_THRESHOLDS) -> dict[str, str]:
    """Description text per indicator, keyed by the indicator's field name."""
    t = thresholds
    return {
        "avg_lines_per_commit": (
            "Average lines changed per commit. High values "
            f"(>{_fmt(t.avg_lines_high_threshold)}) may indicate AI-assisted bulk changes."
        ),
        "large_commit_percentage": (
            f"Percentage of commits with >{_fmt(t.large_commit_lines)} lines changed or more than "
            f"{_fmt(t.large_commit_std_dev_multiplier)} standard deviations above the mean. "
            "High values may suggest AI-generated code dumps."
        ),
        "first_commit_analysis": (
            "Size and suspicion level of the first commit. Large first commits "
            f"(>{_fmt(t.first_commit_multiplier)}x average or "
            f">{_fmt(t.first_commit_absolute_threshold)} lines) may indicate AI-generated "
            "project scaffolding."
        ),
        "avg_files_per_commit": (
            "Average number of files changed per commit. Very high values may indicate "
            "automated refactoring or AI assistance."
        ),
        "commit_message_patterns": (
            'Percentage of commits with AI-like message patterns (e.g., "Add:", "Update:", '
            '"Fix:"). High values suggest automated or templated commits.'
        ),
        "bursty_commit_percentage": (
            f"Percentage of commits made within {_fmt(t.burst_window_minutes)} minutes of the "
            "previous commit. High values may indicate rapid AI-assisted development."
        ),
        "test_file_ratio": (
            "Percentage of commits that modify test files. Low values "
            f"(<{_fmt(t.low_test_coverage_threshold)}%) might suggest AI-generated code without "
            "proper test coverage."
        ),
        "code_comment_ratio": (
            "Comment lines as a percentage of code lines across source files. Can exceed 100% "
            "in heavily documented code; unusually high or uniform values may indicate "
            "generated code."
        ),
        "code_non_typical_expression_ratio": (
            "Percentage of source files using traditional for/while/do-while/switch constructs "
            "that modern idiomatic code tends to avoid."
        ),
    }
