"""Analytics over scene appeal sequences."""

from .smoothing import check_factor, smooth, window_size
from .pacing import mean_absolute_change, pacing_score
from .stats import summarize

__all__ = [
    # Smoothing
    "check_factor",
    "smooth",
    "window_size",
    # Pacing
    "mean_absolute_change",
    "pacing_score",
    # Statistics
    "summarize",
]
