"""Commit-metadata indicators. Pure functions of the commit list."""

from .descriptions import metric_descriptions
from .messages import is_templated_message, message_pattern_percentage
from .quality import is_test_path, test_file_ratio
from .size import analyze_first_commit, size_metrics
from .timing import bursty_percentage

__all__ = [
    "analyze_first_commit",
    "bursty_percentage",
    "is_templated_message",
    "is_test_path",
    "message_pattern_percentage",
    "metric_descriptions",
    "size_metrics",
    "test_file_ratio",
]
