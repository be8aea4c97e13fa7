"""Audio capture from an input device via sounddevice.

Provides a threaded InputStream that posts each multi-channel block to a
FrameMailbox for the frame loop to pick up.
"""

import logging

import sounddevice as sd

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
BLOCK_SIZE = 4096  # ~93 ms at 44.1 kHz
CHANNELS = 2


def find_input_device(name: str) -> int | None:
    """Return the index of the first input device whose name contains `name`."""
    for i, dev in enumerate(sd.query_devices()):
        if name.lower() in dev["name"].lower() and dev["max_input_channels"] >= 1:
            return i
    return None


class AudioCapture:
    """Captures audio and posts (channels, samples) float32 frames."""

    def __init__(self, mailbox, device=None, sample_rate=SAMPLE_RATE,
                 block_size=BLOCK_SIZE, channels=CHANNELS):
        """
        Args:
            mailbox:     FrameMailbox that receives each captured block.
            device:      Device index, a name substring, or None for the
                         system default input.
            sample_rate: Sample rate in Hz.
            block_size:  Samples per channel per block.
            channels:    Number of input channels.
        """
        if isinstance(device, str):
            index = find_input_device(device)
            if index is None:
                raise RuntimeError(f"No input device matching '{device}' found")
            device = index
        self._mailbox = mailbox
        self._device = device
        self._sample_rate = sample_rate
        self._block_size = block_size
        self._channels = channels
        self._stream = None

    @property
    def sample_rate(self):
        return self._sample_rate

    @property
    def block_size(self):
        return self._block_size

    def start(self):
        """Open and start the audio stream."""
        self._stream = sd.InputStream(
            device=self._device,
            channels=self._channels,
            samplerate=self._sample_rate,
            blocksize=self._block_size,
            dtype="float32",
            callback=self._audio_callback,
        )
        self._stream.start()
        logger.info("[audio] Capturing %d ch at %d Hz, %d-sample blocks",
                    self._channels, self._sample_rate, self._block_size)

    def stop(self):
        """Stop and close the audio stream."""
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None

    def _audio_callback(self, indata, frames, time_info, status):
        if status:
            logger.warning("[audio] %s", status)
        # indata is (frames, channels); the pipeline wants one row per channel
        self._mailbox.post(indata.T.copy())
