"""Pacing score derived from a smoothed appeal curve."""

from typing import Optional, Sequence

from ..config import config
from ..exceptions import InvalidParameter


def mean_absolute_change(values: Sequence[float]) -> float:
    """Return the mean of absolute successive differences (0.0 for N <= 1)."""
    if len(values) <= 1:
        return 0.0

    changes = [abs(values[i] - values[i - 1]) for i in range(1, len(values))]
    return sum(changes) / len(changes)


def pacing_score(smoothed: Sequence[float], scale: Optional[float] = None) -> float:
    """Score how evenly a smoothed appeal curve progresses.

    Higher mean absolute change means choppier pacing and a lower score.

    Args:
        smoothed: Smoothed appeal values in sequence order.
        scale: Multiplier applied to the mean absolute change.
            Defaults to config.pacing_scale.

    Returns:
        Score in [0, 100]. Sequences of one or zero scenes score 100.

    Raises:
        InvalidParameter: If the scale is not positive.
    """
    if scale is None:
        scale = config.pacing_scale
    if scale <= 0:
        raise InvalidParameter(f"Pacing scale must be positive, got {scale}")

    if len(smoothed) <= 1:
        return 100.0

    return max(0.0, 100.0 - mean_absolute_change(smoothed) * scale)
