"""Client transfer events and streams that report upload/download progress."""

from __future__ import annotations

import io
from dataclasses import dataclass

from webrouting.progress import UNKNOWN_CONTENT_LENGTH, Progress

DEFAULT_BYTES_PER_UPDATE = 1024
DEFAULT_MAX_UPDATE_INTERVAL = 0.1


@dataclass
class ClientRequestProgressEvent:
    """Progress of sending a request body."""

    request: object
    progress: Progress


@dataclass
class ClientResponseProgressEvent:
    """Progress of receiving a response body."""

    request: object
    response: object
    progress: Progress


@dataclass
class ClientErrorEvent:
    """A failure during a client transaction; ``response`` may be ``None``."""

    request: object
    exception: BaseException
    response: object = None


class _ProgressTracker:
    def __init__(self, total_bytes, callback, bytes_per_update, max_update_interval):
        self.progress = Progress(total_bytes)
        self.transferred = 0
        self._callback = callback
        self._bytes_per_update = bytes_per_update
        self._max_update_interval = max_update_interval
        self._notify()

    def _notify(self):
        if self._callback is not None:
            self._callback(self.progress)

    def advance(self, count):
        if count <= 0:
            return
        self.transferred += count
        if self._bytes_per_update <= 0:
            return
        progress = self.progress
        if (
            self.transferred - progress.total_bytes_transferred >= self._bytes_per_update
            or progress.seconds_since_update() >= self._max_update_interval
            or self.transferred == progress.total_bytes
        ):
            progress.total_bytes_transferred = self.transferred
            self._notify()


class ProgressRequestStream(io.RawIOBase):
    """A writable stream that forwards to ``raw`` and reports progress.

    ``callback(progress)`` is called once on creation and then whenever
    ``bytes_per_update`` more bytes have gone out, ``max_update_interval``
    seconds have passed, or the total is reached. A ``bytes_per_update``
    of 0 turns updates off.
    """

    def __init__(
        self,
        raw,
        total_bytes=UNKNOWN_CONTENT_LENGTH,
        callback=None,
        bytes_per_update=DEFAULT_BYTES_PER_UPDATE,
        max_update_interval=DEFAULT_MAX_UPDATE_INTERVAL,
    ):
        super().__init__()
        self._raw = raw
        self._tracker = _ProgressTracker(
            total_bytes, callback, bytes_per_update, max_update_interval
        )

    @property
    def progress(self):
        return self._tracker.progress

    @property
    def bytes_transferred(self):
        return self._tracker.transferred

    def writable(self):
        return True

    def write(self, data):
        """Write ``data`` to the underlying stream; returns the byte count."""
        if self.closed:
            raise ValueError("write to closed stream")
        data = bytes(data)
        self._raw.write(data)
        self._tracker.advance(len(data))
        return len(data)

    def flush(self):
        if not self.closed and hasattr(self._raw, "flush"):
            self._raw.flush()


class ProgressResponseStream(io.RawIOBase):
    """A readable stream that reads from ``raw`` and reports progress.

    The callback rules are those of ``ProgressRequestStream``.
    """

    def __init__(
        self,
        raw,
        total_bytes=UNKNOWN_CONTENT_LENGTH,
        callback=None,
        bytes_per_update=DEFAULT_BYTES_PER_UPDATE,
        max_update_interval=DEFAULT_MAX_UPDATE_INTERVAL,
    ):
        super().__init__()
        self._raw = raw
        self._tracker = _ProgressTracker(
            total_bytes, callback, bytes_per_update, max_update_interval
        )

    @property
    def progress(self):
        return self._tracker.progress

    @property
    def bytes_transferred(self):
        return self._tracker.transferred

    def readable(self):
        return True

    def read(self, size=-1):
        """Read up to ``size`` bytes (all if negative) from the underlying stream."""
        if self.closed:
            raise ValueError("read from closed stream")
        data = self._raw.read(size) if size is not None and size >= 0 else self._raw.read()
        self._tracker.advance(len(data))
        return data

    def readinto(self, buffer):
        data = self.read(len(buffer))
        count = len(data)
        buffer[:count] = data
        return count