"""Handlers that turn a client response into a useful value."""

from __future__ import annotations

import json


class HTTPStatusError(Exception):
    """A response carried a status that a handler does not accept."""

    def __init__(self, message, status):
        super().__init__(f"{message}: {status}")
        self.message = message
        self.status = status


def _is_success(response):
    return 200 <= int(response.status) < 300


class JSONResponseHandler:
    """Parse the body of a successful response as JSON.

    A response needs a ``status`` and a readable ``stream``.
    """

    def handle_response(self, response):
        if not _is_success(response):
            raise HTTPStatusError("Invalid HTTPResponse Code", response.status)
        return json.loads(response.stream.read())


class BufferResponseHandler:
    """Read the whole body of a response, whatever its status."""

    def handle_response(self, response):
        data = response.stream.read()
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)