"""Data models for scene pacing."""

from .scene import Scene
from .metrics import ChartPoint, DerivedMetrics, SequenceStats
from .storyboard import Storyboard

__all__ = ["Scene", "ChartPoint", "DerivedMetrics", "SequenceStats", "Storyboard"]
