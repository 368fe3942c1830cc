"""Authentication scopes and how well they match one another."""

from __future__ import annotations

import enum
from urllib.parse import urlsplit

_WELL_KNOWN_PORTS = {
    "ftp": 21,
    "ssh": 22,
    "telnet": 23,
    "smtp": 25,
    "dns": 53,
    "http": 80,
    "ws": 80,
    "nntp": 119,
    "imap": 143,
    "ldap": 389,
    "https": 443,
    "wss": 443,
    "rtsp": 554,
    "sip": 5060,
    "sips": 5061,
    "xmpp": 5222,
}


class AuthenticationType(enum.Enum):
    """The kind of HTTP authentication a scope applies to."""

    NONE = "NONE"
    BASIC = "BASIC"
    DIGEST = "DIGEST"


class AuthScope:
    """A set of criteria that credentials apply to.

    Every field is optional; an unset field (``None``) matches anything.
    Empty strings, zero and ``AuthenticationType.NONE`` are treated as unset.
    """

    __slots__ = ("_scheme", "_host", "_port", "_realm", "_auth_type")

    def __init__(self, scheme=None, host=None, port=None, realm=None, auth_type=None):
        self.scheme = scheme
        self.host = host
        self.port = port
        self.realm = realm
        self.auth_type = auth_type

    @classmethod
    def from_uri(cls, uri):
        """Build a scope from the scheme, host and port of a URI.

        Realm and authentication type cannot be known from a URI.
        """
        parts = urlsplit(uri)
        scheme = parts.scheme.lower()
        port = parts.port or _WELL_KNOWN_PORTS.get(scheme)
        return cls(scheme=scheme, host=parts.hostname, port=port)

    @property
    def scheme(self):
        return self._scheme

    @scheme.setter
    def scheme(self, value):
        self._scheme = value or None

    @property
    def host(self):
        return self._host

    @host.setter
    def host(self, value):
        self._host = value or None

    @property
    def port(self):
        return self._port

    @port.setter
    def port(self, value):
        if value is None or value == 0:
            self._port = None
            return
        value = int(value)
        if not 0 < value <= 0xFFFF:
            raise ValueError(f"port out of range: {value}")
        self._port = value

    @property
    def realm(self):
        return self._realm

    @realm.setter
    def realm(self, value):
        self._realm = value or None

    @property
    def auth_type(self):
        return self._auth_type

    @auth_type.setter
    def auth_type(self, value):
        if value is None:
            self._auth_type = None
            return
        value = AuthenticationType(value)
        self._auth_type = None if value is AuthenticationType.NONE else value

    def _key(self):
        return (self._scheme, self._host, self._port, self._realm, self._auth_type)

    def match(self, other):
        """Score how well two scopes match.

        Returns -1 if a field set on both sides differs, otherwise the sum of
        the weights of the fields that are set on both sides and agree.
        """
        factor = 0
        for weight, mine, theirs in (
            (1, self._auth_type, other._auth_type),
            (2, self._realm, other._realm),
            (3, self._scheme, other._scheme),
            (4, self._port, other._port),
            (8, self._host, other._host),
        ):
            if mine is None or theirs is None:
                continue
            if mine != theirs:
                return -1
            factor += weight
        return factor

    def __eq__(self, other):
        if not isinstance(other, AuthScope):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, AuthScope):
            return NotImplemented
        return self.match(other) < 0

    def __repr__(self):
        return (
            f"AuthScope(scheme={self._scheme!r}, host={self._host!r}, "
            f"port={self._port!r}, realm={self._realm!r}, auth_type={self._auth_type!r})"
        )

    def __str__(self):
        def shown(value):
            return "Any" if value is None else str(value)

        auth = "Any" if self._auth_type is None else self._auth_type.value
        return (
            f"Scheme: {shown(self._scheme)}"
            f" Host: {shown(self._host)}"
            f" Port: {shown(self._port)}"
            f" Realm: {shown(self._realm)}"
            f" AuthType: {auth}"
        )