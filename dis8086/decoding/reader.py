from __future__ import annotations

import struct

from .errors import StreamExhausted


class ByteCursor:
    """
    Forward-only reader over a machine-code buffer.

    The cursor is shared by every decoder touching one instruction, so the
    position after a successful decode is the first byte of the next one.
    After a `StreamExhausted` the position is not meaningful anymore.
    """

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data, self.pos = bytes(data), pos

    def _require(self, count: int) -> None:
        if self.remaining() < count:
            raise StreamExhausted(self.pos, count, self.remaining())

    def _unpack(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        self._require(size)
        (value,) = struct.unpack_from("<" + fmt, self.data, self.pos)
        self.pos += size
        return value

    def remaining(self) -> int:
        return max(len(self.data) - self.pos, 0)

    def at_end(self) -> bool:
        return self.remaining() == 0

    def peek(self, offset: int = 0) -> int:
        self._require(offset + 1)
        return self.data[self.pos + offset]

    def read_u8(self) -> int:
        return self._unpack("B")

    def read_s8(self) -> int:
        return self._unpack("b")

    def read_u16_le(self) -> int:
        return self._unpack("H")

    def read_s16_le(self) -> int:
        return self._unpack("h")


__all__ = ["ByteCursor"]
