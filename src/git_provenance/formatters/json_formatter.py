"""JSON formatter for git-provenance."""

import json

from ..models import RepositoryReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON with camelCase keys."""

    extension = "json"

    def render(self, report: RepositoryReport) -> None:
        print(self.format(report))

    def format(self, report: RepositoryReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
