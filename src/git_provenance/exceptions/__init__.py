"""Exception hierarchy for git-provenance."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    MalformedCommitError,
    ScanStateError,
)
from .base import ProvenanceError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .git import GitError

__all__ = [
    "ProvenanceError",
    "AnalysisError",
    "FileAccessError",
    "MalformedCommitError",
    "ScanStateError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "GitError",
]
