"""Summary statistics over raw appeal values."""

from typing import Sequence

from ..models import SequenceStats


def summarize(appeals: Sequence[float]) -> SequenceStats:
    """Return min, max, range and average of the appeals.

    An empty sequence yields a SequenceStats with every field None.
    """
    if not appeals:
        return SequenceStats()

    low = min(appeals)
    high = max(appeals)
    return SequenceStats(
        min=low,
        max=high,
        range=high - low,
        average=sum(appeals) / len(appeals),
    )
