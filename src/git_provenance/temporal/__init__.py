"""Temporal analysis: git history extraction and commit ordering."""

from .git_extractor import GitExtractor, extract_commits
from .ordering import sorted_by_time, validate_commits
from .repository import cloned_repository, extract_repo_name, is_remote_url

__all__ = [
    "GitExtractor",
    "cloned_repository",
    "extract_commits",
    "extract_repo_name",
    "is_remote_url",
    "sorted_by_time",
    "validate_commits",
]
