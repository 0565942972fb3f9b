"""Public API for git-provenance.

Example:
    >>> from git_provenance import analyze_repository
    >>>
    >>> report = analyze_repository("/path/to/repo")
    >>> report.metrics.ai_indicators.bursty_commit_percentage.value
    12.5
    >>>
    >>> report = analyze_repository("https://github.com/user/repo.git", branch="main")
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .analysis import ProvenanceEngine
from .config import AnalysisConfig, load_config
from .exceptions import InvalidPathError
from .logging_config import get_logger
from .models import RepositoryReport
from .scanning import FileSystemScanner
from .scanning.scanner import ProgressCallback
from .temporal import cloned_repository, extract_commits, extract_repo_name, is_remote_url

logger = get_logger(__name__)


def build_engine(config: AnalysisConfig) -> ProvenanceEngine:
    scanner = FileSystemScanner(
        workers=config.workers, max_file_size_bytes=config.max_file_size_bytes
    )
    return ProvenanceEngine(thresholds=config.thresholds, scanner=scanner)


def analyze_repository(
    target: str | Path,
    branch: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> RepositoryReport:
    """Analyze a local repository or a remote URL.

    Remote URLs are cloned into a temporary directory that is removed
    afterwards. For local paths ``branch`` is informational only; the
    checked-out tree is analyzed.

    Args:
        target: Local path or clone URL
        branch: Branch to clone (remote targets)
        config: Analysis configuration (default: auto-discovered)
        on_progress: File scan progress callback

    Returns:
        RepositoryReport with metrics

    Raises:
        InvalidPathError: If a local target is not a directory
        GitError: If cloning or reading history fails
    """
    config = config or load_config()
    engine = build_engine(config)
    target_str = str(target)

    if is_remote_url(target_str):
        with cloned_repository(target_str, branch=branch) as path:
            return _analyze_local(engine, path, extract_repo_name(target_str), config, on_progress)

    path = Path(target_str).resolve()
    if not path.is_dir():
        raise InvalidPathError(path, "not a directory")
    return _analyze_local(engine, path, path.name, config, on_progress)


def _analyze_local(
    engine: ProvenanceEngine,
    path: Path,
    name: str,
    config: AnalysisConfig,
    on_progress: Optional[ProgressCallback],
) -> RepositoryReport:
    commits, branch = extract_commits(str(path), max_commits=config.git_max_commits)
    result = engine.analyze(commits, path, on_progress=on_progress)
    return RepositoryReport(
        repository=name,
        branch=branch,
        metrics=result,
        analyzed_at=datetime.now(timezone.utc).isoformat(),
    )
