"""Base formatter interface for git-provenance output rendering."""

from abc import ABC, abstractmethod

from ..models import RepositoryReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    #: File extension used when the report is written to a directory.
    extension = "txt"

    @abstractmethod
    def render(self, report: RepositoryReport) -> None:
        """Render the report to the terminal."""

    @abstractmethod
    def format(self, report: RepositoryReport) -> str:
        """Return formatted string representation of the report."""
