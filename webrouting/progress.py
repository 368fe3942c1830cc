"""Transfer progress of an upload or download."""

from __future__ import annotations

import time

UNKNOWN_CONTENT_LENGTH = -1


class Progress:
    """Bytes transferred against an expected total, with timing.

    Times are taken from ``time.monotonic``.
    """

    UNKNOWN_CONTENT_LENGTH = UNKNOWN_CONTENT_LENGTH

    def __init__(self, total_bytes=UNKNOWN_CONTENT_LENGTH):
        now = time.monotonic()
        self.start_time = now
        self.last_update_time = now
        self.total_bytes = total_bytes
        self._total_bytes_transferred = 0

    @property
    def total_bytes_transferred(self):
        return self._total_bytes_transferred

    @total_bytes_transferred.setter
    def total_bytes_transferred(self, value):
        self._total_bytes_transferred = value
        self.last_update_time = time.monotonic()

    def fraction(self):
        """Completed fraction, 1.0 for an empty transfer, or UNKNOWN_CONTENT_LENGTH."""
        if self.total_bytes > 0:
            return self._total_bytes_transferred / self.total_bytes
        if self.total_bytes == 0:
            return 1.0
        return float(UNKNOWN_CONTENT_LENGTH)

    def bytes_per_second(self):
        """Average rate between the start and the last update."""
        elapsed = self.last_update_time - self.start_time
        if elapsed <= 0:
            return 0.0
        return self._total_bytes_transferred / elapsed

    def seconds_since_update(self):
        """Seconds elapsed since the last update."""
        return time.monotonic() - self.last_update_time