"""Spectrum visualizer: host entry point.

Captures audio from an input device, turns each block into a log-frequency
bucket spectrum and draws it as an animated bar chart at a fixed frame
rate.  Frames that arrive faster than the frame rate are dropped; ticks
with no new frame hold the last output.

Usage:
    python host/main.py [--device NAME] [--buckets 32] [--fps 60]
    python host/main.py --interpolation 0.3 --smoothing 3 --smoothing-size 2
"""

import argparse
import logging
import shutil
import signal
import time

from audio_capture import AudioCapture, BLOCK_SIZE, CHANNELS, SAMPLE_RATE as CAPTURE_RATE
from config import (
    FREQUENCY_MAX,
    FREQUENCY_MIN,
    INTERPOLATION_FACTOR,
    NUM_BUCKETS,
    SAMPLE_RATE,
    SMOOTHING,
    SMOOTHING_SIZE,
    TARGET_FPS,
    VisualizerConfig,
)
from frame_mailbox import FrameMailbox
from pipeline import AudioPipeline
from visualizer import ConsoleVisualizer, RenderUniforms

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spectrum visualizer host")
    parser.add_argument("--device",
                        help="Input device index or name substring "
                             "(default: system input)")
    parser.add_argument("--capture-rate", type=int, default=CAPTURE_RATE,
                        help=f"Capture sample rate in Hz (default: {CAPTURE_RATE})")
    parser.add_argument("--block-size", type=int, default=BLOCK_SIZE,
                        help=f"Samples per capture block (default: {BLOCK_SIZE})")
    parser.add_argument("--channels", type=int, default=CHANNELS,
                        help=f"Input channels (default: {CHANNELS})")
    parser.add_argument("--buckets", type=int, default=NUM_BUCKETS,
                        help=f"Number of frequency buckets (default: {NUM_BUCKETS})")
    parser.add_argument("--sample-rate", type=int, default=SAMPLE_RATE,
                        help="Rate used to map FFT bins to frequencies "
                             f"(default: {SAMPLE_RATE})")
    parser.add_argument("--interpolation", type=float, default=INTERPOLATION_FACTOR,
                        help="Frame-to-frame interpolation factor 0-1 "
                             f"(default: {INTERPOLATION_FACTOR})")
    parser.add_argument("--smoothing", type=int, default=SMOOTHING,
                        help=f"Neighbour smoothing passes (default: {SMOOTHING})")
    parser.add_argument("--smoothing-size", type=int, default=SMOOTHING_SIZE,
                        help=f"Neighbour smoothing radius (default: {SMOOTHING_SIZE})")
    parser.add_argument("--freq-min", type=float, default=FREQUENCY_MIN,
                        help=f"Lowest bucket edge in Hz (default: {FREQUENCY_MIN:g})")
    parser.add_argument("--freq-max", type=float, default=FREQUENCY_MAX,
                        help=f"Highest bucket edge in Hz (default: {FREQUENCY_MAX:g})")
    parser.add_argument("--fps", type=int, default=TARGET_FPS,
                        help=f"Frame rate (default: {TARGET_FPS})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def config_from_args(args) -> VisualizerConfig:
    """Build a VisualizerConfig from parsed arguments, clamping the frequency range."""
    config = VisualizerConfig(
        num_buckets=args.buckets,
        sample_rate=args.sample_rate,
        interpolation_factor=args.interpolation,
        smoothing=args.smoothing,
        smoothing_size=args.smoothing_size,
    )
    return config.with_frequency_range(args.freq_min, args.freq_max).validate()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    if args.fps <= 0:
        parser.error("--fps must be positive")

    device = args.device
    if device is not None and device.isdigit():
        device = int(device)

    mailbox = FrameMailbox()
    pipeline = AudioPipeline(config)
    size = shutil.get_terminal_size()
    uniforms = RenderUniforms.for_size(config.uniform_size, size.columns, size.lines)
    console = ConsoleVisualizer(config.num_buckets)

    logger.info("[host] Starting audio capture...")
    try:
        audio = AudioCapture(mailbox, device=device,
                             sample_rate=args.capture_rate,
                             block_size=args.block_size,
                             channels=args.channels)
    except RuntimeError as e:
        logger.error("[host] %s", e)
        return 1

    # Graceful shutdown
    running = True

    def shutdown(sig, frame):
        nonlocal running
        running = False

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    frame_interval = 1.0 / args.fps
    audio.start()
    logger.info("[host] Running at %d FPS with %d buckets (%d Hz, %d-sample blocks), "
                "press Ctrl+C to quit",
                args.fps, config.num_buckets, audio.sample_rate, audio.block_size)

    try:
        while running:
            t0 = time.monotonic()

            output = pipeline.tick(mailbox)
            if output is not None:
                size = shutil.get_terminal_size()
                uniforms.update(output, size.columns, size.lines)
            console.render(uniforms)

            # Sleep remainder of frame
            elapsed = time.monotonic() - t0
            if elapsed < frame_interval:
                time.sleep(frame_interval - elapsed)

    finally:
        print()
        logger.info("[host] Shutting down after %d frames (%d dropped)",
                    pipeline.frames_processed, mailbox.dropped)
        audio.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
