"""Server routes, their settings, and the request/response objects they see."""

from __future__ import annotations

import functools
import io
import logging
import re
from dataclasses import dataclass, field
from http import HTTPStatus
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_PATH_PATTERN = "/.*"


@dataclass
class ServerRequest:
    """An incoming HTTP request as seen by a route."""

    method: str = "GET"
    uri: str = "/"
    content_type: str = ""
    headers: dict = field(default_factory=dict)


class ServerResponse:
    """An outgoing HTTP response that can be sent exactly once."""

    def __init__(self, status=HTTPStatus.OK, reason=None):
        self.headers = {}
        self.content_type = ""
        self.chunked_transfer_encoding = False
        self._stream = None
        self.set_status_and_reason(status, reason)

    def set_status_and_reason(self, status, reason=None):
        """Set the status code and reason; the standard phrase is used if none is given."""
        self.status = int(status)
        if reason is None:
            try:
                reason = HTTPStatus(self.status).phrase
            except ValueError:
                reason = ""
        self.reason = reason

    @property
    def sent(self):
        return self._stream is not None

    def send(self):
        """Mark the headers as sent and return the stream for the body."""
        if self._stream is not None:
            raise RuntimeError("response has already been sent")
        self._stream = io.BytesIO()
        return self._stream

    @property
    def body(self):
        """The bytes written to the body so far."""
        return b"" if self._stream is None else self._stream.getvalue()


@dataclass
class ServerEventArgs:
    """A request, its response and the session they belong to."""

    request: ServerRequest
    response: ServerResponse
    session: object = None


@dataclass
class BaseRouteSettings:
    """What requests a route accepts.

    An empty set of methods or content types accepts any.
    """

    DEFAULT_ROUTE_PATH_PATTERN = DEFAULT_ROUTE_PATH_PATTERN

    route_path_pattern: str = DEFAULT_ROUTE_PATH_PATTERN
    require_secure_port: bool = False
    require_authentication: bool = False
    valid_http_methods: set = field(default_factory=set)
    valid_content_types: set = field(default_factory=set)

    def __post_init__(self):
        self.valid_http_methods = set(self.valid_http_methods)
        self.valid_content_types = set(self.valid_content_types)


@functools.lru_cache(maxsize=128)
def _compile(pattern):
    return re.compile(pattern)


def _split_media_type(value):
    essence = value.split(";", 1)[0].strip().lower()
    main, _, sub = essence.partition("/")
    return main.strip(), sub.strip()


def _media_type_matches_range(media_range, content_type):
    range_type, range_sub = _split_media_type(media_range)
    req_type, req_sub = _split_media_type(content_type)
    if range_type == "*" or req_type == "*":
        return True
    if range_type != req_type:
        return False
    return range_sub == "*" or req_sub == "*" or range_sub == req_sub


class BaseRoute:
    """A route that decides which requests it handles and answers them."""

    def __init__(self, settings=None):
        self.settings = settings if settings is not None else BaseRouteSettings()
        self.server = None
        self.stopped = False

    def setup(self, settings):
        """Replace the route's settings."""
        self.settings = settings

    @property
    def route_path_pattern(self):
        return self.settings.route_path_pattern

    def can_handle_request(self, request, is_secure_port):
        """True if the request's port, method, content type and path suit this route."""
        settings = self.settings
        if settings.require_secure_port and not is_secure_port:
            return False

        methods = settings.valid_http_methods
        if methods and request.method not in methods:
            return False

        content_types = settings.valid_content_types
        if content_types and not any(
            _media_type_matches_range(valid, request.content_type) for valid in content_types
        ):
            return False

        try:
            path = urlsplit(request.uri).path
        except ValueError as exc:
            logger.error("Invalid request URI %r: %s", request.uri, exc)
            return False
        path = path or "/"

        try:
            pattern = _compile(self.route_path_pattern)
        except re.error as exc:
            logger.error("Invalid route pattern %r: %s", self.route_path_pattern, exc)
            return False
        return pattern.fullmatch(path) is not None

    def dispatch(self, request, response):
        """Pass a request through the owning server, then through this route.

        The server must offer ``session_store.get_session(request, response)``
        and ``on_http_server_event(route, evt)``.
        """
        if self.server is None:
            raise RuntimeError("route has no server")
        session = self.server.session_store.get_session(request, response)
        evt = ServerEventArgs(request, response, session)
        self.server.on_http_server_event(self, evt)
        if response.sent:
            return evt
        self.handle_request(evt)
        if not response.sent:
            BaseRoute.handle_request(self, evt)
        return evt

    def handle_request(self, evt):
        """Send an HTML error page if no response has been sent yet."""
        response = evt.response
        if response.sent:
            return
        try:
            if response.status == HTTPStatus.OK:
                response.set_status_and_reason(
                    HTTPStatus.INTERNAL_SERVER_ERROR, "No handlers for route."
                )
            response.chunked_transfer_encoding = True
            response.content_type = "text/html"
            title = f"{response.status} - {response.reason}"
            page = (
                '<!DOCTYPE html><html><head><meta charset="utf-8"/><title>'
                f"{title}</title></head><body><h1>{title}</h1></body></html>"
            )
            response.send().write(page.encode("utf-8"))
        except Exception:
            logger.exception("Failed to send error response")

    def stop(self):
        """Mark the route as stopped."""
        self.stopped = True