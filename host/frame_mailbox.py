"""Latest-frame hand-off between the capture thread and the frame loop.

The capture callback posts every block; the frame loop polls once per
tick.  Only the newest undelivered frame is kept.
"""

import threading


class FrameMailbox:
    """Single-slot, non-blocking frame channel."""

    def __init__(self):
        self._lock = threading.Lock()
        self._frame = None
        self._dropped = 0

    def post(self, frame):
        """Store `frame`, replacing any frame the consumer has not taken."""
        with self._lock:
            if self._frame is not None:
                self._dropped += 1
            self._frame = frame

    def try_receive(self):
        """Return the pending frame and clear the slot, or None.  Never blocks."""
        with self._lock:
            frame = self._frame
            self._frame = None
        return frame

    @property
    def dropped(self) -> int:
        """Frames overwritten before the consumer received them."""
        with self._lock:
            return self._dropped
