"""Moving-average smoothing of appeal curves."""

from typing import List, Sequence

from ..exceptions import InvalidParameter


def check_factor(factor: int) -> None:
    """Raise InvalidParameter unless factor is a non-negative integer."""
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise InvalidParameter(f"Smoothing factor must be an integer, got {factor!r}")
    if factor < 0:
        raise InvalidParameter(f"Smoothing factor must be >= 0, got {factor}")


def window_size(factor: int) -> int:
    """Return the odd moving-average window derived from a smoothing factor.

    Args:
        factor: Smoothing factor (>= 0).

    Returns:
        Window width, always odd and at least 1.

    Raises:
        InvalidParameter: If factor is negative or not an integer.
    """
    check_factor(factor)
    return max(1, (factor // 2) * 2 + 1)


def smooth(values: Sequence[float], factor: int) -> List[float]:
    """Smooth a sequence with a centered moving average.

    Windows are truncated at both ends of the sequence, so edge values are
    averaged over fewer samples instead of being padded or wrapped.

    Args:
        values: Appeal values in sequence order.
        factor: Smoothing factor. 0 disables smoothing.

    Returns:
        Smoothed values, same length as the input.

    Raises:
        InvalidParameter: If factor is negative or not an integer.
    """
    half_window = window_size(factor) // 2
    values = list(values)

    if factor == 0 or len(values) <= 1:
        return values

    last = len(values) - 1
    smoothed: List[float] = []
    for index in range(len(values)):
        start = max(0, index - half_window)
        end = min(last, index + half_window)
        window = values[start:end + 1]
        smoothed.append(sum(window) / len(window))

    return smoothed
