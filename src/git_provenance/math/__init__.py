"""Numeric helpers shared by the commit detectors."""

from .statistics import Statistics, percentage, round2

__all__ = ["Statistics", "percentage", "round2"]
