"""Peak normalisation and vec4 packing for the render uniforms.

Bucket i lands in row i // 4, column i % 4 of a (uniform_size, 4) array,
scaled so the loudest bucket of the frame reads 1.0.
"""

import math

import numpy as np

VEC_WIDTH = 4


def uniform_size_for(num_buckets: int) -> int:
    """Number of 4-wide rows needed to hold `num_buckets` values."""
    return math.ceil(num_buckets / VEC_WIDTH)


def normalize_buckets(buckets: np.ndarray, uniform_size: int | None = None) -> np.ndarray:
    """Scale buckets by the frame peak and pack them into 4-wide rows.

    Args:
        buckets:      animated bucket values, shape (N,)
        uniform_size: Rows in the output.  None = ceil(N / 4).  Buckets
                      that do not fit are dropped; unused slots stay 0.

    Returns:
        np.ndarray of float32, shape (uniform_size, 4), values 0-1
    """
    values = np.asarray(buckets, dtype=np.float64).ravel()
    if uniform_size is None:
        uniform_size = uniform_size_for(values.size)

    packed = np.zeros(uniform_size * VEC_WIDTH, dtype=np.float32)
    if values.size == 0:
        return packed.reshape(uniform_size, VEC_WIDTH)

    max_value = float(np.max(values))
    # Silence (or a garbage peak) would divide by zero: emit zeros instead
    if not math.isfinite(max_value) or max_value <= 0.0:
        return packed.reshape(uniform_size, VEC_WIDTH)

    count = min(values.size, packed.size)
    normalized = np.nan_to_num(values[:count] / max_value, nan=0.0,
                               posinf=1.0, neginf=0.0)
    packed[:count] = np.clip(normalized, 0.0, 1.0)
    return packed.reshape(uniform_size, VEC_WIDTH)
