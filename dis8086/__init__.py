"""8086 MOV-family disassembler."""

from .disassembler import HEADER, Disassembly, disassemble, disassemble_text
from .decoding import DecodeError, StreamExhausted, UnsupportedOpcode

__all__ = [
    "HEADER",
    "DecodeError",
    "Disassembly",
    "StreamExhausted",
    "UnsupportedOpcode",
    "disassemble",
    "disassemble_text",
]
