import io

import pytest

from webrouting.client_progress import (
    ClientErrorEvent,
    ClientRequestProgressEvent,
    ClientResponseProgressEvent,
    ProgressRequestStream,
    ProgressResponseStream,
)
from webrouting.progress import Progress


def _recorder():
    seen = []

    def callback(progress):
        seen.append(progress.total_bytes_transferred)

    return seen, callback


def test_request_stream_forwards_and_reports():
    raw = io.BytesIO()
    seen, callback = _recorder()
    stream = ProgressRequestStream(raw, 10, callback, 4, 1e9)
    assert stream.write(b"abc") == 3
    stream.write(b"def")
    stream.write(b"ghij")
    assert raw.getvalue() == b"abcdefghij"
    assert seen == [0, 6, 10]
    assert stream.bytes_transferred == 10
    assert stream.progress.fraction() == 1.0


def test_request_stream_updates_disabled():
    raw = io.BytesIO()
    seen, callback = _recorder()
    stream = ProgressRequestStream(raw, 5, callback, 0, 0)
    stream.write(b"hello")
    assert seen == [0]
    assert stream.bytes_transferred == 5
    assert raw.getvalue() == b"hello"


def test_request_stream_interval_zero_reports_every_write():
    raw = io.BytesIO()
    seen, callback = _recorder()
    stream = ProgressRequestStream(raw, -1, callback, 100, 0)
    written = [stream.write(chunk) for chunk in (b"a", b"bb", b"ccc")]
    assert written == [1, 2, 3]
    assert seen == [0, 1, 3, 6]
    assert stream.bytes_transferred == 6
    assert raw.getvalue() == b"abbccc"


def test_request_stream_closed_raises():
    stream = ProgressRequestStream(io.BytesIO(), 3)
    stream.close()
    with pytest.raises(ValueError):
        stream.write(b"x")


def test_response_stream_reads_and_reports():
    payload = b"0123456789"
    seen, callback = _recorder()
    stream = ProgressResponseStream(io.BytesIO(payload), len(payload), callback, 4, 1e9)
    assert stream.read(3) == b"012"
    assert stream.read(3) == b"345"
    assert stream.read() == b"6789"
    assert stream.read(1) == b""
    assert seen == [0, 6, 10]
    assert stream.bytes_transferred == len(payload)


def test_response_stream_readall_and_buffered_wrapper():
    payload = bytes(range(256)) * 3
    stream = ProgressResponseStream(io.BytesIO(payload), len(payload), None, 1, 1e9)
    buffered = io.BufferedReader(stream)
    assert buffered.read() == payload
    assert stream.progress.total_bytes_transferred == len(payload)


def test_response_stream_readinto():
    stream = ProgressResponseStream(io.BytesIO(b"abcdef"), 6)
    buffer = bytearray(4)
    assert stream.readinto(buffer) == 4
    assert bytes(buffer) == b"abcd"
    assert stream.bytes_transferred == 4


def test_event_classes_hold_their_values():
    progress = Progress(10)
    error = RuntimeError("boom")
    request_event = ClientRequestProgressEvent("req", progress)
    response_event = ClientResponseProgressEvent("req", "resp", progress)
    error_event = ClientErrorEvent("req", error)
    assert request_event.progress is progress
    assert response_event.response == "resp"
    assert error_event.exception is error
    assert error_event.response is None