from __future__ import annotations


class DecodeError(Exception):
    """Base class for failures while decoding an instruction stream."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class StreamExhausted(DecodeError):
    """Raised when fewer bytes remain than an in-progress decode requires."""

    def __init__(self, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"Stream exhausted at offset {offset}: need {needed}, "
            f"have {available} remaining",
            offset,
        )
        self.needed = needed
        self.available = available


class UnsupportedOpcode(DecodeError):
    """Raised when no known encoding matches the leading byte."""

    def __init__(self, opcode: int, offset: int) -> None:
        super().__init__(
            f"Unsupported opcode {opcode:#04x} at offset {offset}", offset
        )
        self.opcode = opcode


__all__ = ["DecodeError", "StreamExhausted", "UnsupportedOpcode"]
