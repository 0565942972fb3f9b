"""
git-provenance - commit history and source signals of AI-assisted development.

Reads a repository's git log and working tree and reports nine indicators
(commit size, first-commit size, message templates, commit bursts, test
activity, comment density and construct usage) next to basic repository
statistics.
"""

__version__ = "0.1.0"

from .api import analyze_repository
from .analysis import ProvenanceEngine
from .config import AnalysisConfig, ThresholdConfig, load_config
from .exceptions import ProvenanceError
from .models import AnalysisResult, Commit, RepositoryReport

__all__ = [
    "__version__",
    "analyze_repository",
    "ProvenanceEngine",
    "AnalysisConfig",
    "ThresholdConfig",
    "load_config",
    "ProvenanceError",
    "AnalysisResult",
    "Commit",
    "RepositoryReport",
]
