"""Tests for log-frequency bucketing."""

import numpy as np
import pytest

from bucketizer import bucketize
from fft_processor import compute_spectrum

TEST_SR = 40000


def expected_bucket(freq, num_buckets=32, sample_rate=TEST_SR, freq_min=20.0):
    """Bucket index a pure tone at `freq` should land in."""
    lo = np.log2(freq_min)
    hi = np.log2(sample_rate / 2)
    return int(np.floor((np.log2(freq) - lo) / (hi - lo) * num_buckets))


def test_output_length(sine_frame):
    buckets = bucketize(compute_spectrum(sine_frame), 32, TEST_SR)
    assert buckets.shape == (32,)


def test_non_negative_for_random_spectrum():
    rng = np.random.default_rng(1)
    spectrum = rng.normal(size=2048) + 1j * rng.normal(size=2048)
    assert np.all(bucketize(spectrum, 32, TEST_SR) >= 0.0)


def test_zero_spectrum_gives_zero_buckets(silent_frame):
    buckets = bucketize(compute_spectrum(silent_frame), 32, TEST_SR)
    assert np.all(buckets == 0.0)


def test_empty_spectrum():
    assert np.all(bucketize(np.zeros(0, dtype=complex), 8, TEST_SR) == 0.0)


def test_sine_energy_lands_in_its_bucket(sine_frame):
    buckets = bucketize(compute_spectrum(sine_frame), 32, TEST_SR)
    target = expected_bucket(440.0)
    assert int(np.argmax(buckets)) == target
    others = np.delete(buckets, target)
    assert np.all(others < 0.1 * buckets[target])


def test_sum_of_squares_then_root():
    # 16-bin spectrum, 16 kHz: bins 0..7 at 0, 1k, 2k ... 7 kHz
    spectrum = np.zeros(16, dtype=complex)
    spectrum[4] = 3.0   # 4 kHz
    spectrum[5] = 4j    # 5 kHz
    buckets = bucketize(spectrum, 1, 16000, frequency_min=1000.0)
    assert buckets[0] == pytest.approx(5.0)


def test_below_min_frequency_is_discarded():
    spectrum = np.zeros(64, dtype=complex)
    spectrum[0] = 100.0   # DC
    spectrum[1] = 100.0   # 625 Hz at 40 kHz / 64
    buckets = bucketize(spectrum, 8, TEST_SR, frequency_min=1000.0)
    assert np.all(buckets == 0.0)


def test_floor_mapping_at_bucket_boundary():
    # One bucket per octave from 512 Hz to 8192 Hz: a bin exactly at 1024 Hz
    # opens bucket 1, the bin below it stays in bucket 0
    spectrum = np.zeros(32, dtype=complex)
    spectrum[1] = 1.0   # 512 Hz
    spectrum[2] = 2.0   # 1024 Hz
    buckets = bucketize(spectrum, 4, 16384, frequency_min=512.0)
    assert buckets[0] == pytest.approx(1.0)
    assert buckets[1] == pytest.approx(2.0)
    assert buckets[2] == 0.0


def test_custom_frequency_range_shifts_buckets(sine_frame):
    spectrum = compute_spectrum(sine_frame)
    buckets = bucketize(spectrum, 8, TEST_SR, frequency_min=200.0, frequency_max=800.0)
    lo, hi = np.log2(200.0), np.log2(800.0)
    target = int(np.floor((np.log2(440.0) - lo) / (hi - lo) * 8))
    assert int(np.argmax(buckets)) == target


@pytest.mark.parametrize("kwargs", [
    {"num_buckets": 0, "sample_rate": TEST_SR},
    {"num_buckets": 8, "sample_rate": 0},
    {"num_buckets": 8, "sample_rate": TEST_SR, "frequency_min": 500.0, "frequency_max": 400.0},
])
def test_bad_arguments_raise(kwargs):
    with pytest.raises(ValueError):
        bucketize(np.zeros(16, dtype=complex), **kwargs)


def test_max_frequency_above_nyquist_raises():
    with pytest.raises(ValueError):
        bucketize(np.zeros(16, dtype=complex), 8, TEST_SR, frequency_max=30000.0)
