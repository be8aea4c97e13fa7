import numpy as np
import pytest

TEST_SR = 40000
FRAME_LEN = 4096


@pytest.fixture
def silent_frame():
    """One channel of 4096 zero samples."""
    return [np.zeros(FRAME_LEN, dtype=np.float32)]


@pytest.fixture
def sine_frame():
    """One channel, 440 Hz sine at 40 kHz, 4096 samples."""
    t = np.arange(FRAME_LEN) / TEST_SR
    return [(0.8 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)]
