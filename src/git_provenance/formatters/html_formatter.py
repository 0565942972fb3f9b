"""Self-contained HTML report for git-provenance.

One static page with inline CSS and no scripts, so it can be opened from a
local ``file://`` path or attached to a CI run. Every repository-supplied
string (names, emails, branch) is HTML-escaped.
"""

from html import escape

from ..models import AIIndicators, BasicMetrics, MetricResult, RepositoryReport
from .base import BaseFormatter

_INDICATOR_LABELS = [
    ("avg_lines_per_commit", "Avg Lines/Commit", ""),
    ("large_commit_percentage", "Large Commits", "%"),
    ("first_commit_analysis", "First Commit Size", ""),
    ("avg_files_per_commit", "Avg Files/Commit", ""),
    ("commit_message_patterns", "Commit Msg Patterns", "%"),
    ("bursty_commit_percentage", "Bursty Commits", "%"),
    ("test_file_ratio", "Test File Ratio", "%"),
    ("code_comment_ratio", "Comment/Code Ratio", "%"),
    ("code_non_typical_expression_ratio", "Non-typical Expressions", "%"),
]

_STYLE = """
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
       line-height: 1.6; color: #333; max-width: 1200px; margin: 0 auto; padding: 20px;
       background: #f8f9fa; }
.header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white;
          padding: 30px; border-radius: 10px; margin-bottom: 30px; text-align: center; }
.header h1 { margin: 0; font-size: 2.2em; }
.metrics-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(260px, 1fr));
                gap: 20px; margin-bottom: 30px; }
.metric-card { background: white; padding: 20px; border-radius: 10px;
               box-shadow: 0 2px 10px rgba(0,0,0,0.1); border-left: 4px solid #667eea; }
.metric-card h3 { margin: 0 0 10px 0; color: #667eea; font-size: 1.05em; }
.metric-value { font-size: 1.8em; font-weight: bold; color: #2c3e50; }
.metric-label { color: #7f8c8d; font-size: 0.9em; }
.panel { background: white; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1);
         overflow: hidden; margin-bottom: 30px; }
.panel h3 { background: #667eea; color: white; margin: 0; padding: 18px; }
table { width: 100%; border-collapse: collapse; }
th, td { padding: 12px 15px; text-align: left; border-bottom: 1px solid #eee; }
th { background: #f8f9fa; }
.ai-metric { padding: 18px; border-bottom: 1px solid #eee; }
.ai-metric-header { display: flex; justify-content: space-between; }
.ai-metric-name { font-weight: 600; }
.ai-metric-value { font-weight: bold; color: #667eea; }
.ai-metric-description { color: #7f8c8d; font-size: 0.95em; }
.suspicious { color: #e74c3c; }
.normal { color: #27ae60; }
.footer { text-align: center; color: #7f8c8d; font-size: 0.9em; }
"""


def _card(title: str, value: str, label: str) -> str:
    return (
        f'<div class="metric-card"><h3>{title}</h3>'
        f'<div class="metric-value">{value}</div>'
        f'<div class="metric-label">{label}</div></div>'
    )


def _indicator_value(result: MetricResult, unit: str) -> str:
    value = result.value
    if hasattr(value, "is_suspicious"):
        status = (
            '<span class="suspicious">Suspicious</span>'
            if value.is_suspicious
            else '<span class="normal">Normal</span>'
        )
        return f"{value.lines} lines {status}"
    return f"{value:g}{unit}"


class HtmlFormatter(BaseFormatter):
    """Render the report as a standalone HTML page."""

    extension = "html"

    def render(self, report: RepositoryReport) -> None:
        print(self.format(report))

    def format(self, report: RepositoryReport) -> str:
        basics = report.metrics.basic_metrics
        repository = escape(report.repository)
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Git Provenance Report - {repository}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="header">
<h1>Git Repository Analysis</h1>
<p>{repository} &bull; Branch: {escape(report.branch)}</p>
</div>
{self._summary(basics)}
{self._contributors(basics)}
{self._indicators(report.metrics.ai_indicators)}
<div class="footer"><p>Report generated on {escape(report.analyzed_at)}</p></div>
</body>
</html>
"""

    # -- private helpers --

    def _summary(self, basics: BasicMetrics) -> str:
        cards = [
            _card("Total Commits", f"{basics.total_commits:,}", "All commits in the repository"),
            _card("Contributors", str(basics.contributors), "Unique contributors"),
            _card("Development Duration", str(basics.duration_days), "Days of development"),
            _card("Average Activity", f"{basics.avg_commits_per_day:g}", "Commits per day"),
            _card(
                "Top Contributor",
                escape(basics.top_contributor or "-"),
                "Most active contributor",
            ),
            _card(
                "Timeline",
                escape(basics.first_commit[:10] or "-"),
                f"to {escape(basics.last_commit[:10] or '-')}",
            ),
        ]
        return '<div class="metrics-grid">' + "".join(cards) + "</div>"

    def _contributors(self, basics: BasicMetrics) -> str:
        if len(basics.contributor_stats) <= 1:
            return ""
        rows = []
        for rank, stat in enumerate(basics.contributor_stats, 1):
            share = stat.commit_count / basics.total_commits * 100
            rows.append(
                f"<tr><td>#{rank}</td><td>{escape(stat.email)}</td><td>{escape(stat.name)}</td>"
                f"<td>{stat.commit_count:,}</td><td>{share:.1f}%</td></tr>"
            )
        return (
            '<div class="panel"><h3>Contributors Breakdown</h3><table>'
            "<thead><tr><th>Rank</th><th>Email</th><th>Name</th><th>Commits</th>"
            "<th>Percentage</th></tr></thead>"
            f"<tbody>{''.join(rows)}</tbody></table></div>"
        )

    def _indicators(self, indicators: AIIndicators) -> str:
        blocks = []
        for field_name, label, unit in _INDICATOR_LABELS:
            result = getattr(indicators, field_name)
            blocks.append(
                '<div class="ai-metric"><div class="ai-metric-header">'
                f'<span class="ai-metric-name">{label}</span>'
                f'<span class="ai-metric-value">{_indicator_value(result, unit)}</span></div>'
                f'<div class="ai-metric-description">{escape(result.description)}</div></div>'
            )
        return '<div class="panel"><h3>AI Assistance Indicators</h3>' + "".join(blocks) + "</div>"
