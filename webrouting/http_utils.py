"""Small helpers for HTTP streams and values."""

from __future__ import annotations

_CHUNK_SIZE = 64 * 1024


def join(values, delimiter=" ", add_trailing_delimiter=False):
    """Join the string forms of ``values`` with ``delimiter``.

    With ``add_trailing_delimiter`` a delimiter also follows the last value.
    """
    text = delimiter.join(str(value) for value in values)
    if add_trailing_delimiter and values:
        text += delimiter
    return text


def consume(stream):
    """Read ``stream`` to its end and return the number of bytes read.

    This blocks until the stream is exhausted.
    """
    total = 0
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            return total
        total += len(chunk)