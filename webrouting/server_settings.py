"""Settings for servers, their threads and their TCP/HTTP parameters."""

from __future__ import annotations

import enum
import ipaddress
from dataclasses import dataclass, field
from datetime import timedelta

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8998
DEFAULT_USE_SSL = False
DEFAULT_USE_SESSIONS = True

_WELL_KNOWN_PORTS = {"http": 80, "https": 443}


class ThreadPriority(enum.IntEnum):
    """Relative thread priority."""

    LOWEST = 0
    LOW = 1
    NORMAL = 2
    HIGH = 3
    HIGHEST = 4


@dataclass
class ThreadSettings:
    """A thread's name and priority."""

    name: str = "default"
    priority: ThreadPriority = ThreadPriority.NORMAL


@dataclass
class TCPServerParams:
    """Thread pool and queue parameters of a TCP server."""

    thread_idle_time: timedelta = field(default_factory=lambda: timedelta(microseconds=10_000_000))
    max_threads: int = 0
    max_queued: int = 64
    thread_priority: ThreadPriority = ThreadPriority.NORMAL


@dataclass
class HTTPServerParams(TCPServerParams):
    """Parameters of an HTTP server."""

    server_name: str = ""
    software_version: str = ""
    timeout: timedelta = field(default_factory=lambda: timedelta(microseconds=60_000_000))
    keep_alive: bool = True
    keep_alive_timeout: timedelta = field(default_factory=lambda: timedelta(microseconds=15_000_000))
    max_keep_alive_requests: int = 0


def _to_networks(entries):
    return [ipaddress.ip_network(entry, strict=False) for entry in entries]


@dataclass
class BaseServerSettings:
    """Where a server listens and which clients it accepts."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    use_ssl: bool = DEFAULT_USE_SSL
    use_sessions: bool = DEFAULT_USE_SESSIONS
    whitelist: list = field(default_factory=list)
    blacklist: list = field(default_factory=list)

    def __post_init__(self):
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")
        self.whitelist = _to_networks(self.whitelist)
        self.blacklist = _to_networks(self.blacklist)

    def uri(self):
        """The base URI of the server; a well-known or zero port is left out."""
        scheme = "https" if self.use_ssl else "http"
        authority = f"[{self.host}]" if ":" in self.host else self.host
        if self.port and self.port != _WELL_KNOWN_PORTS[scheme]:
            authority = f"{authority}:{self.port}"
        return f"{scheme}://{authority}"