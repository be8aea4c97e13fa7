"""FFT processing: channel flattening, Hann window, zero-padded FFT.

Turns one raw capture frame (a list of per-channel sample arrays) into a
complex spectrum whose length is the next power of two at or above the
flattened sample count.
"""

import numpy as np


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (int(n) - 1).bit_length()


def flatten_frame(frame) -> np.ndarray:
    """Concatenate all channels of a frame, channel 0 first.

    Args:
        frame: sequence of per-channel sample sequences, or a 2-D array
               shaped (channels, samples).  Channels may differ in length.

    Returns:
        np.ndarray of float32, shape (total_samples,)
    """
    channels = [np.asarray(ch, dtype=np.float32).ravel() for ch in frame]
    if not channels:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(channels)


def hann_window(size: int) -> np.ndarray:
    """0.5 * (1 - cos(2*pi*i / (size-1))); a single sample gets weight 1."""
    # np.hanning already returns [1.0] for size 1 and [] for size 0
    return np.hanning(size)


def compute_spectrum(frame) -> np.ndarray:
    """Windowed, zero-padded forward FFT of a raw frame.

    Args:
        frame: raw multi-channel frame, see flatten_frame().

    Returns:
        np.ndarray of complex, shape (next_power_of_two(n),), or an empty
        array when the frame holds no samples.
    """
    samples = flatten_frame(frame)
    if samples.size == 0:
        return np.zeros(0, dtype=np.complex64)

    size = next_power_of_two(samples.size)
    padded = np.zeros(size, dtype=np.float32)
    padded[:samples.size] = samples

    windowed = padded * hann_window(size)
    return np.fft.fft(windowed)
