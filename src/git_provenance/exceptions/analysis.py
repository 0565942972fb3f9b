"""Analysis-related exceptions: file access, commit data, analyzer state."""

from pathlib import Path

from .base import ProvenanceError


class AnalysisError(ProvenanceError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MalformedCommitError(AnalysisError):
    """Raised when a commit record cannot feed the detectors."""

    def __init__(self, commit_hash: str, reason: str):
        super().__init__(
            f"Malformed commit: {commit_hash or '<unknown>'}",
            details={"commit": commit_hash, "reason": reason},
        )
        self.commit_hash = commit_hash
        self.reason = reason


class ScanStateError(AnalysisError):
    """Raised when an analyzer is used outside its scan lifecycle."""

    def __init__(self, analyzer: str, state: str, operation: str):
        super().__init__(
            f"{analyzer} cannot {operation} while {state}",
            details={"analyzer": analyzer, "state": state, "operation": operation},
        )
        self.analyzer = analyzer
        self.state = state
        self.operation = operation
