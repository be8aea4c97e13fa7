# host/config.py: analysis defaults and the tunable parameter set
#
# SAMPLE_RATE is the rate used to map FFT bins to frequencies.  It is a
# fixed constant and does not follow the capture device's rate.
#
# FREQUENCY_GAP: the min/max frequency bounds are always kept at least
#                this many Hz apart.

from dataclasses import dataclass, replace

from normalizer import uniform_size_for

SAMPLE_RATE = 40000
NUM_BUCKETS = 32

INTERPOLATION_FACTOR = 0.5  # fraction of the gap closed per frame
SMOOTHING = 2               # neighbour smoothing passes
SMOOTHING_SIZE = 4          # neighbour radius in buckets

FREQUENCY_MIN = 20.0
FREQUENCY_MAX = 20000.0
FREQUENCY_FLOOR = 20.0
FREQUENCY_CEILING = 22000.0
FREQUENCY_GAP = 512.0

TARGET_FPS = 60


def clamp_frequency_range(frequency_min: float, frequency_max: float,
                          gap: float = FREQUENCY_GAP,
                          floor: float = FREQUENCY_FLOOR,
                          ceiling: float = FREQUENCY_CEILING) -> tuple[float, float]:
    """Pull a min/max pair back into [floor, ceiling] with at least `gap` between.

    The minimum wins: if the pair is too close, the maximum is pushed up
    (and the minimum pulled down only when the ceiling leaves no room).
    """
    lo = min(max(frequency_min, floor), ceiling - gap)
    hi = min(max(frequency_max, lo + gap), ceiling)
    return lo, hi


@dataclass
class VisualizerConfig:
    """Parameters read by the pipeline on every tick."""

    num_buckets: int = NUM_BUCKETS
    sample_rate: int = SAMPLE_RATE
    interpolation_factor: float = INTERPOLATION_FACTOR
    smoothing: int = SMOOTHING
    smoothing_size: int = SMOOTHING_SIZE
    frequency_min: float = FREQUENCY_MIN
    frequency_max: float = FREQUENCY_MAX

    @property
    def uniform_size(self) -> int:
        return uniform_size_for(self.num_buckets)

    def validate(self):
        """Raise ValueError if any parameter is out of range."""
        if self.num_buckets < 1:
            raise ValueError(f"num_buckets must be >= 1, got {self.num_buckets}")
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if not 0.0 <= self.interpolation_factor <= 1.0:
            raise ValueError(
                "interpolation_factor must be in [0, 1], "
                f"got {self.interpolation_factor}"
            )
        if self.smoothing < 0:
            raise ValueError(f"smoothing must be >= 0, got {self.smoothing}")
        if self.smoothing_size < 0:
            raise ValueError(f"smoothing_size must be >= 0, got {self.smoothing_size}")
        if self.frequency_min <= 0:
            raise ValueError(f"frequency_min must be positive, got {self.frequency_min}")
        if self.frequency_max <= self.frequency_min:
            raise ValueError(
                f"frequency_max ({self.frequency_max}) must exceed "
                f"frequency_min ({self.frequency_min})"
            )
        if self.frequency_max > self.sample_rate / 2:
            raise ValueError(
                f"frequency_max ({self.frequency_max}) is above Nyquist "
                f"({self.sample_rate / 2})"
            )
        return self

    def with_frequency_range(self, frequency_min: float,
                             frequency_max: float) -> "VisualizerConfig":
        """Copy of this config with a clamped frequency range."""
        lo, hi = clamp_frequency_range(
            frequency_min, frequency_max,
            ceiling=min(FREQUENCY_CEILING, self.sample_rate / 2),
        )
        return replace(self, frequency_min=lo, frequency_max=hi)
