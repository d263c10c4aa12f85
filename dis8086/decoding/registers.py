from __future__ import annotations

from typing import Tuple

from .bind import Register, Size

BYTE_REGISTERS: Tuple[str, ...] = ("al", "cl", "dl", "bl", "ah", "ch", "dh", "bh")
WORD_REGISTERS: Tuple[str, ...] = ("ax", "cx", "dx", "bx", "sp", "bp", "si", "di")

ACCUMULATOR = "ax"

_TABLES = {Size.BYTE: BYTE_REGISTERS, Size.WORD: WORD_REGISTERS}


def register_table(size: Size) -> Tuple[str, ...]:
    return _TABLES[size]


def register(size: Size, index: int) -> Register:
    return Register(register_table(size)[index & 0b111])


__all__ = [
    "ACCUMULATOR",
    "BYTE_REGISTERS",
    "WORD_REGISTERS",
    "register",
    "register_table",
]
