"""Log-frequency bucketing of an FFT spectrum.

Each bin in the lower (non-mirrored) half of the spectrum is assigned to
one of N buckets spaced evenly in log2(frequency) between FREQ_MIN and
the Nyquist frequency.  Squared magnitudes are summed per bucket and the
square root taken, so wide high-frequency buckets read louder.
"""

import numpy as np

FREQ_MIN = 20.0


def bucketize(spectrum: np.ndarray, num_buckets: int, sample_rate: float,
              frequency_min: float = FREQ_MIN,
              frequency_max: float | None = None) -> np.ndarray:
    """Map FFT bins into log-spaced frequency buckets.

    Args:
        spectrum:      complex FFT output, full length (both halves).
        num_buckets:   Number of output buckets N.
        sample_rate:   Sample rate the spectrum was computed at, in Hz.
        frequency_min: Lower edge of bucket 0 in Hz.
        frequency_max: Upper edge of the last bucket in Hz.  None = Nyquist.

    Returns:
        np.ndarray of float64, shape (num_buckets,), values >= 0
    """
    if num_buckets < 1:
        raise ValueError(f"num_buckets must be >= 1, got {num_buckets}")
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if frequency_max is None:
        frequency_max = sample_rate / 2.0
    if frequency_min <= 0 or frequency_max <= frequency_min:
        raise ValueError(
            f"invalid frequency range {frequency_min}..{frequency_max} Hz"
        )
    if frequency_max > sample_rate / 2.0:
        raise ValueError(
            f"frequency_max {frequency_max} Hz is above Nyquist ({sample_rate / 2.0} Hz)"
        )

    buckets = np.zeros(num_buckets, dtype=np.float64)
    n = len(spectrum)
    half = n // 2
    if half == 0:
        return buckets

    bins = np.asarray(spectrum[:half])
    freqs = np.arange(half) * (sample_rate / n)

    min_log = np.log2(frequency_min)
    max_log = np.log2(frequency_max)

    # DC bin gives log2(0) = -inf and is dropped with the other
    # out-of-range bins below
    with np.errstate(divide="ignore"):
        log_freqs = np.log2(freqs)
    positions = np.floor((log_freqs - min_log) / (max_log - min_log) * num_buckets)

    valid = np.isfinite(positions) & (positions >= 0) & (positions < num_buckets)
    power = bins.real.astype(np.float64) ** 2 + bins.imag.astype(np.float64) ** 2

    np.add.at(buckets, positions[valid].astype(int), power[valid])
    return np.sqrt(buckets)
