from __future__ import annotations

from typing import Tuple, Union

from .bind import DirectAddress, EffectiveAddress, Mode, Register, Size
from .reader import ByteCursor
from .registers import register

# Base expressions selected by the r/m field when mod != 11.
EA_BASES: Tuple[str, ...] = (
    "bx + si",
    "bx + di",
    "bp + si",
    "bp + di",
    "si",
    "di",
    "bp",
    "bx",
)

RM_DIRECT_ADDRESS = 0b110

RmOperand = Union[Register, EffectiveAddress, DirectAddress]


def resolve_rm(cursor: ByteCursor, mode: Mode, rm: int, size: Size) -> RmOperand:
    """
    Resolve the r/m operand of a ModR/M byte.

    `cursor` must sit right after the ModR/M byte; displacement bytes (0, 1
    or 2 depending on `mode`) are consumed from it.
    """
    if mode is Mode.REGISTER:
        return register(size, rm)

    base = EA_BASES[rm]
    width = displacement_width(mode, rm)
    if mode is Mode.MEMORY:
        if width:
            return DirectAddress(cursor.read_u16_le())
        return EffectiveAddress(base)
    disp = cursor.read_s8() if width == 1 else cursor.read_s16_le()
    return EffectiveAddress(base, disp)


def displacement_width(mode: Mode, rm: int) -> int:
    """Number of bytes `resolve_rm` consumes for the given mode and r/m."""
    if mode is Mode.MEMORY_DISP8:
        return 1
    if mode is Mode.MEMORY_DISP16:
        return 2
    if mode is Mode.MEMORY and rm == RM_DIRECT_ADDRESS:
        return 2
    return 0


__all__ = ["EA_BASES", "RM_DIRECT_ADDRESS", "displacement_width", "resolve_rm"]
