"""Analysis orchestration."""

from .engine import ProvenanceEngine

__all__ = ["ProvenanceEngine"]
