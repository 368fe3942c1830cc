"""Server-sent event frames and WebSocket frames."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SSEFrame:
    """A server-sent event: UTF-8 data with an optional event name."""

    data: str
    event: str = ""


@dataclass(frozen=True)
class IndexedSSEFrame:
    """An SSE frame with an index, for caching and playback."""

    NOT_INDEXED: ClassVar[int] = 2**64 - 1

    frame: SSEFrame
    index: int = NOT_INDEXED

    @property
    def is_indexed(self):
        return self.index != self.NOT_INDEXED


class FrameFlag(enum.IntFlag):
    """Header bits of a WebSocket frame."""

    FIN = 0x80
    RSV1 = 0x40
    RSV2 = 0x20
    RSV3 = 0x10


OPCODE_MASK = 0x0F
OPCODE_CONTINUATION = 0x00
OPCODE_TEXT = 0x01
OPCODE_BINARY = 0x02
OPCODE_CLOSE = 0x08
OPCODE_PING = 0x09
OPCODE_PONG = 0x0A

FRAME_TEXT = FrameFlag.FIN | OPCODE_TEXT
FRAME_BINARY = FrameFlag.FIN | OPCODE_BINARY

_OPCODE_NAMES = {
    OPCODE_CONTINUATION: "CONTINUATION",
    OPCODE_TEXT: "TEXT",
    OPCODE_BINARY: "BINARY",
    OPCODE_CLOSE: "CLOSE",
    OPCODE_PING: "PING",
    OPCODE_PONG: "PONG",
}


def _bit_property(flag):
    def getter(self):
        return bool(self.flags & flag)

    def setter(self, value):
        self.flags = (self.flags | flag) if value else (self.flags & ~flag)

    return property(getter, setter)


class WebSocketFrame:
    """A WebSocket frame: a payload and its header flags."""

    def __init__(self, data=b"", flags=FRAME_TEXT):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = bytes(data)
        self.flags = int(flags)

    final = _bit_property(FrameFlag.FIN)
    rsv1 = _bit_property(FrameFlag.RSV1)
    rsv2 = _bit_property(FrameFlag.RSV2)
    rsv3 = _bit_property(FrameFlag.RSV3)

    @property
    def opcode(self):
        return self.flags & OPCODE_MASK

    @property
    def is_continuation(self):
        return self.opcode == OPCODE_CONTINUATION

    @property
    def is_text(self):
        return self.opcode == OPCODE_TEXT

    @property
    def is_binary(self):
        return self.opcode == OPCODE_BINARY

    @property
    def is_close(self):
        return self.opcode == OPCODE_CLOSE

    @property
    def is_ping(self):
        return self.opcode == OPCODE_PING

    @property
    def is_pong(self):
        return self.opcode == OPCODE_PONG

    @property
    def text(self):
        """The payload decoded as UTF-8."""
        return self.data.decode("utf-8", errors="replace")

    def __bytes__(self):
        return self.data

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, WebSocketFrame):
            return NotImplemented
        return self.flags == other.flags and self.data == other.data

    __hash__ = None

    def __repr__(self):
        return f"WebSocketFrame({self.data!r}, flags={self.flags:#04x})"

    def __str__(self):
        parts = [_OPCODE_NAMES.get(self.opcode, f"OPCODE_{self.opcode:#x}")]
        parts.extend(
            name
            for name, is_set in (
                ("FIN", self.final),
                ("RSV1", self.rsv1),
                ("RSV2", self.rsv2),
                ("RSV3", self.rsv3),
            )
            if is_set
        )
        description = f"{' '.join(parts)} ({len(self.data)} bytes)"
        if self.is_text:
            description += f": {self.text}"
        return description