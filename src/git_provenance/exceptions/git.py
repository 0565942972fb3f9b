"""Git subprocess exceptions."""

from typing import Sequence

from .base import ProvenanceError


class GitError(ProvenanceError):
    """Raised when a git command fails or git is unavailable."""

    def __init__(self, command: Sequence[str], reason: str):
        super().__init__(
            f"git {' '.join(command)} failed",
            details={"reason": reason},
        )
        self.command = list(command)
        self.reason = reason
