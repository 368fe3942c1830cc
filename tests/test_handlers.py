import io
import json
from dataclasses import dataclass, field

import pytest

from webrouting.handlers import (
    BufferResponseHandler,
    HTTPStatusError,
    JSONResponseHandler,
)


@dataclass
class FakeResponse:
    status: int
    body: bytes = b""
    stream: io.BytesIO = field(init=False)

    def __post_init__(self):
        self.stream = io.BytesIO(self.body)


def test_json_handler_parses_success_body():
    document = {"hello": "jello", "items": [1, 2]}
    response = FakeResponse(200, json.dumps(document).encode("utf-8"))
    assert JSONResponseHandler().handle_response(response) == document


@pytest.mark.parametrize("status", [404, 500, 301])
def test_json_handler_rejects_error_status(status):
    response = FakeResponse(status, b"{}")
    with pytest.raises(HTTPStatusError) as info:
        JSONResponseHandler().handle_response(response)
    assert info.value.status == status
    assert info.value.message == "Invalid HTTPResponse Code"


def test_json_handler_reports_malformed_json():
    response = FakeResponse(200, b"not json")
    with pytest.raises(json.JSONDecodeError):
        JSONResponseHandler().handle_response(response)


def test_buffer_handler_returns_body():
    body = b"\x00\x01binary"
    assert BufferResponseHandler().handle_response(FakeResponse(200, body)) == body


def test_buffer_handler_ignores_status():
    body = b"missing"
    assert BufferResponseHandler().handle_response(FakeResponse(404, body)) == body


def test_buffer_handler_encodes_text_streams():
    response = FakeResponse(200)
    response.stream = io.StringIO("text")
    assert BufferResponseHandler().handle_response(response) == b"text"