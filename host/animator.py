"""Per-bucket frame-to-frame interpolation.

Holds the previous frame's bucket values and eases toward each new frame
by a fixed fraction, so bars glide instead of jumping.
"""

import numpy as np


class BucketAnimator:
    """Exponential moving average over bucket vectors of fixed length."""

    def __init__(self, num_buckets: int):
        if num_buckets < 1:
            raise ValueError(f"num_buckets must be >= 1, got {num_buckets}")
        self._previous = np.zeros(num_buckets, dtype=np.float64)

    @property
    def num_buckets(self) -> int:
        return self._previous.size

    @property
    def previous(self) -> np.ndarray:
        """Copy of the last animated bucket values."""
        return self._previous.copy()

    def animate(self, current: np.ndarray, interpolation_factor: float) -> np.ndarray:
        """Move the stored state toward `current` and return it.

        Args:
            current: smoothed bucket values, shape (num_buckets,)
            interpolation_factor: 0..1, fraction of the gap closed this
                frame.  1 snaps to `current`.

        Returns:
            np.ndarray of float64, shape (num_buckets,)
        """
        current = np.asarray(current, dtype=np.float64)
        if current.shape != self._previous.shape:
            raise ValueError(
                f"bucket vector has shape {current.shape}, "
                f"animator expects ({self.num_buckets},)"
            )
        if not 0.0 <= interpolation_factor <= 1.0:
            raise ValueError(
                f"interpolation_factor must be in [0, 1], got {interpolation_factor}"
            )

        self._previous += (current - self._previous) * interpolation_factor
        return self._previous.copy()

    def reset(self):
        """Zero the state.  Only used at startup."""
        self._previous[:] = 0.0
