"""Neighbour smoothing across the bucket axis.

Every pass replaces each bucket with a weighted average of itself and the
buckets within `radius` of it, weight 1 / (1 + distance).  The window is
clamped at the ends of the array (no wraparound).
"""

import numpy as np


def _weight_matrix(size: int, radius: int) -> np.ndarray:
    """Row-normalised (size, size) matrix of neighbour weights."""
    idx = np.arange(size)
    distance = np.abs(idx[:, None] - idx[None, :])
    weights = np.where(distance <= radius, 1.0 / (1.0 + distance), 0.0)
    return weights / weights.sum(axis=1, keepdims=True)


def smooth(buckets: np.ndarray, passes: int, radius: int) -> np.ndarray:
    """Apply `passes` rounds of distance-weighted neighbour averaging.

    Each pass reads only the previous pass's buffer, so the result does
    not depend on iteration order.

    Args:
        buckets: bucket magnitudes, shape (N,)
        passes:  Number of smoothing passes.  0 = unchanged.
        radius:  Neighbour radius in buckets.  0 = unchanged.

    Returns:
        np.ndarray of float64, shape (N,)
    """
    if passes < 0:
        raise ValueError(f"passes must be >= 0, got {passes}")
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")

    result = np.array(buckets, dtype=np.float64)
    if passes == 0 or radius == 0 or result.size == 0:
        return result

    weights = _weight_matrix(result.size, radius)
    for _ in range(passes):
        result = weights @ result
    return result
