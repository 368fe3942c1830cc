"""Long-lived connections that queue frames for delivery to a client."""

from __future__ import annotations

import logging
import threading
from collections import deque

logger = logging.getLogger(__name__)


class BaseConnection:
    """A connection owned by a route, holding a thread-safe queue of frames.

    A connection starts out disconnected. ``open`` marks it connected and
    records the client's request headers and address. ``stop`` disconnects it.
    Frames are only queued while the connection is connected.
    """

    def __init__(self, route):
        self.route = route
        self._request_headers = {}
        self._client_address = None
        self._is_connected = False
        self._total_bytes_sent = 0
        self._frame_queue = deque()
        self._lock = threading.Lock()

    def open(self, request_headers=None, client_address=None):
        """Mark the connection as connected to a client."""
        with self._lock:
            self._request_headers = dict(request_headers or {})
            self._client_address = client_address
            self._is_connected = True

    def stop(self):
        """Disconnect from the client."""
        with self._lock:
            self._is_connected = False

    def send(self, frame):
        """Queue ``frame`` for the client; False if not connected."""
        with self._lock:
            if self._is_connected:
                self._frame_queue.append(frame)
                return True
        logger.error("Not connected, frame not sent.")
        return False

    def pop_frame(self):
        """Take the oldest queued frame, or ``None`` if the queue is empty."""
        with self._lock:
            return self._frame_queue.popleft() if self._frame_queue else None

    def record_bytes_sent(self, count):
        """Add ``count`` to the total bytes sent to the client."""
        if count < 0:
            raise ValueError(f"negative byte count: {count}")
        with self._lock:
            self._total_bytes_sent += count

    @property
    def request_headers(self):
        """A copy of the original request headers."""
        with self._lock:
            return dict(self._request_headers)

    @property
    def client_address(self):
        with self._lock:
            return self._client_address

    @property
    def is_connected(self):
        with self._lock:
            return self._is_connected

    @property
    def total_bytes_sent(self):
        with self._lock:
            return self._total_bytes_sent

    def send_queue_size(self):
        """The number of frames waiting to be sent."""
        with self._lock:
            return len(self._frame_queue)

    def clear_send_queue(self):
        """Drop every queued frame."""
        with self._lock:
            self._frame_queue.clear()