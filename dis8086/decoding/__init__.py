"""
Typed decoding helpers for 8086 MOV instruction bytes.

Decoders read from a shared `ByteCursor` and produce `DecodedInstr` values
whose `str()` is the NASM rendering of the instruction.
"""

from .bind import (  # noqa: F401
    DecodedInstr,
    DirectAddress,
    Direction,
    EffectiveAddress,
    Immediate,
    Mode,
    Register,
    Size,
    Variant,
)
from .dispatcher import classify, decode_instruction  # noqa: F401
from .errors import DecodeError, StreamExhausted, UnsupportedOpcode  # noqa: F401
from .reader import ByteCursor  # noqa: F401

__all__ = [
    "ByteCursor",
    "DecodeError",
    "DecodedInstr",
    "DirectAddress",
    "Direction",
    "EffectiveAddress",
    "Immediate",
    "Mode",
    "Register",
    "Size",
    "StreamExhausted",
    "UnsupportedOpcode",
    "Variant",
    "classify",
    "decode_instruction",
]
