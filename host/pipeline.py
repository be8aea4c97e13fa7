"""Per-tick audio analysis pipeline.

    raw frame -> spectrum -> log buckets -> smoothing -> animation -> vec4 rows

One AudioPipeline lives for the whole run and owns the BucketAnimator,
the only state carried from one frame to the next.
"""

import logging

import numpy as np

from animator import BucketAnimator
from bucketizer import bucketize
from config import VisualizerConfig
from fft_processor import compute_spectrum
from normalizer import normalize_buckets
from smoother import smooth

logger = logging.getLogger(__name__)


class AudioPipeline:
    """Turns raw capture frames into normalised render values."""

    def __init__(self, config: VisualizerConfig, animator: BucketAnimator | None = None):
        """
        Args:
            config:   Tunable parameters.  Read and re-validated on every
                      frame, so edits take effect on the next tick.
            animator: Animation state to drive.  None = a fresh one sized
                      config.num_buckets.
        """
        config.validate()
        if animator is None:
            animator = BucketAnimator(config.num_buckets)
        elif animator.num_buckets != config.num_buckets:
            raise ValueError(
                f"animator holds {animator.num_buckets} buckets, "
                f"config asks for {config.num_buckets}"
            )
        self.config = config
        self._animator = animator
        self._frames_processed = 0

    @property
    def animator(self) -> BucketAnimator:
        return self._animator

    @property
    def frames_processed(self) -> int:
        return self._frames_processed

    def process_frame(self, frame) -> np.ndarray | None:
        """Run one frame through every stage.

        Args:
            frame: raw multi-channel frame (list of channel arrays or a
                   (channels, samples) array).

        Returns:
            np.ndarray of float32, shape (uniform_size, 4), values 0-1, or
            None when the frame holds no samples (state is left as is).
        """
        cfg = self.config.validate()
        spectrum = compute_spectrum(frame)
        if spectrum.size == 0:
            logger.debug("[pipeline] Empty frame, skipping")
            return None

        buckets = bucketize(spectrum, cfg.num_buckets, cfg.sample_rate,
                            cfg.frequency_min, cfg.frequency_max)
        buckets = smooth(buckets, cfg.smoothing, cfg.smoothing_size)
        animated = self._animator.animate(buckets, cfg.interpolation_factor)
        self._frames_processed += 1
        return normalize_buckets(animated, cfg.uniform_size)

    def tick(self, mailbox) -> np.ndarray | None:
        """Process the newest pending frame, if any.

        Returns None without touching the animation state when no frame
        has arrived since the last tick.
        """
        frame = mailbox.try_receive()
        if frame is None:
            return None
        return self.process_frame(frame)
