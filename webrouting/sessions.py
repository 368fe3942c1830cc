"""Choosing, reusing and pooling HTTP client sessions by host."""

from __future__ import annotations

import http.client
import logging
import threading
from dataclasses import dataclass
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_SECURE_SCHEMES = frozenset({"https", "wss"})

_WELL_KNOWN_PORTS = {
    "http": 80,
    "ws": 80,
    "https": 443,
    "wss": 443,
}


@dataclass(frozen=True)
class SessionHost:
    """The scheme, host and port a client session connects to."""

    scheme: str
    host: str
    port: int

    @property
    def secure(self):
        return self.scheme.lower() in _SECURE_SCHEMES

    def __str__(self):
        return f"{self.scheme}://{self.host}:{self.port}"


def extract_host(uri, session=None, header_host=None):
    """Work out the scheme, host and port a request to ``uri`` needs.

    Whatever the URI leaves out is taken from ``header_host`` (the request's
    Host header) or from the current ``session``. Raises ``ValueError`` if a
    part cannot be determined.
    """
    parts = urlsplit(uri)
    uri_scheme = parts.scheme.lower()

    scheme = uri_scheme
    if not scheme:
        if session is None:
            raise ValueError("No scheme specified for request.")
        scheme = "https" if session.secure else "http"

    host = parts.hostname or ""
    if not host:
        if header_host:
            host = header_host
        elif session is not None and session.host:
            host = session.host
        else:
            raise ValueError("No host specified for request.")

    port = parts.port or _WELL_KNOWN_PORTS.get(uri_scheme, 0)
    if not port:
        if session is None:
            raise ValueError("No port can be determined for request.")
        port = session.port

    return SessionHost(scheme, host, port)


def is_valid_session_for_host(session, host):
    """True if ``session`` connects to ``host`` with the same security."""
    return (
        host.secure == session.secure
        and host.host == session.host
        and host.port == session.port
    )


class _HTTPSession:
    """A session backed by an ``http.client`` connection."""

    def __init__(self, host, timeout=None):
        connection_class = (
            http.client.HTTPSConnection if host.secure else http.client.HTTPConnection
        )
        kwargs = {} if timeout is None else {"timeout": timeout}
        self.connection = connection_class(host.host, host.port, **kwargs)
        self.host = host.host
        self.port = host.port
        self.secure = host.secure

    @property
    def connected(self):
        return self.connection.sock is not None

    def close(self):
        self.connection.close()

    def __repr__(self):
        scheme = "https" if self.secure else "http"
        return f"<session {scheme}://{self.host}:{self.port} connected={self.connected}>"


class SessionPool:
    """A thread-safe pool of idle client sessions.

    A session is any object with ``host``, ``port``, ``secure`` and
    ``connected`` attributes. New sessions come from ``factory(host)``; by
    default an ``http.client`` connection is opened lazily.
    """

    def __init__(self, factory=None, timeout=None):
        if factory is None:

            def factory(host):
                return _HTTPSession(host, timeout)

        self._factory = factory
        self._sessions = []
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def get_session(self, host):
        """Take a connected idle session for ``host`` or make a new one.

        Idle sessions that are no longer connected are dropped on the way.
        """
        with self._lock:
            kept = []
            found = None
            for session in self._sessions:
                if found is not None:
                    kept.append(session)
                elif not session.connected:
                    logger.debug("Dropping disconnected session %r", session)
                elif is_valid_session_for_host(session, host):
                    logger.debug("Reusing session %r", session)
                    found = session
                else:
                    kept.append(session)
            self._sessions = kept
        if found is not None:
            return found
        logger.debug("No idle session for %s; creating one", host)
        return self._factory(host)

    def return_session(self, session):
        """Give a session back to the pool for later reuse."""
        with self._lock:
            self._sessions.append(session)