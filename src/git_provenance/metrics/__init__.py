"""Repository-level commit statistics."""

from .basic import aggregate_contributors, basic_metrics

__all__ = ["aggregate_contributors", "basic_metrics"]
