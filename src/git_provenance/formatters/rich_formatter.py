"""Rich terminal formatter for git-provenance."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import AIIndicators, BasicMetrics, MetricResult, RepositoryReport
from .base import BaseFormatter

MAX_CONTRIBUTORS = 10

_INDICATOR_LABELS = [
    ("avg_lines_per_commit", "Avg lines per commit", ""),
    ("large_commit_percentage", "Large commits", "%"),
    ("first_commit_analysis", "First commit", ""),
    ("avg_files_per_commit", "Avg files per commit", ""),
    ("commit_message_patterns", "Templated messages", "%"),
    ("bursty_commit_percentage", "Bursty commits", "%"),
    ("test_file_ratio", "Commits touching tests", "%"),
    ("code_comment_ratio", "Comment / code lines", "%"),
    ("code_non_typical_expression_ratio", "Files with loops/switch", "%"),
]


def _indicator_value(result: MetricResult, unit: str) -> str:
    value = result.value
    if hasattr(value, "is_suspicious"):
        flag = "[red]suspicious[/red]" if value.is_suspicious else "[green]normal[/green]"
        return f"{value.lines} lines ({flag})"
    return f"{value:g}{unit}"


class RichFormatter(BaseFormatter):
    """Summary panel, contributor table and indicator table.

    Repository, branch and author strings are escaped before they reach
    Rich markup; names like ``dependabot[bot]`` are common.
    """

    extension = "txt"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: RepositoryReport) -> None:
        basics = report.metrics.basic_metrics
        self._print_summary(report, basics)
        if basics.contributor_stats:
            self._print_contributors(basics)
        self._print_indicators(report.metrics.ai_indicators)

    def format(self, report: RepositoryReport) -> str:
        console = Console(record=True, file=io.StringIO(), width=self.console.width)
        RichFormatter(console).render(report)
        return console.export_text()

    # -- private helpers --

    def _print_summary(self, report: RepositoryReport, basics: BasicMetrics) -> None:
        span = (
            f"{basics.first_commit[:10]} .. {basics.last_commit[:10]}"
            if basics.total_commits
            else "no commits"
        )
        summary_text = (
            f"[bold]{escape(report.repository)}[/bold] on [cyan]{escape(report.branch)}[/cyan]\n"
            f"[yellow]{basics.total_commits}[/yellow] commits by "
            f"[yellow]{basics.contributors}[/yellow] contributors  |  "
            f"{span} ({basics.duration_days} days, "
            f"{basics.avg_commits_per_day:g}/day)\n"
            f"Top contributor: [green]{escape(basics.top_contributor or '-')}[/green]"
        )
        self.console.print(
            Panel(summary_text, title="[bold cyan]Repository[/bold cyan]", expand=False)
        )
        self.console.print()

    def _print_contributors(self, basics: BasicMetrics) -> None:
        shown = basics.contributor_stats[:MAX_CONTRIBUTORS]
        table = Table(title=f"Top {len(shown)} Contributors")
        table.add_column("#", style="dim", width=4)
        table.add_column("Name", style="yellow")
        table.add_column("Email", style="dim")
        table.add_column("Commits", justify="right")
        for i, stat in enumerate(shown, 1):
            table.add_row(str(i), escape(stat.name), escape(stat.email), str(stat.commit_count))
        self.console.print(table)
        self.console.print()

    def _print_indicators(self, indicators: AIIndicators) -> None:
        table = Table(title="AI Indicators", expand=True)
        table.add_column("Indicator", style="bold", no_wrap=True)
        table.add_column("Value", justify="right", no_wrap=True)
        table.add_column("Description", style="dim", ratio=1)
        for field_name, label, unit in _INDICATOR_LABELS:
            result = getattr(indicators, field_name)
            table.add_row(label, _indicator_value(result, unit), escape(result.description))
        self.console.print(table)
