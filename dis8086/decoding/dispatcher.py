from __future__ import annotations

from typing import Tuple

from .bind import DecodedInstr, Variant
from .decode_map import decode_variant
from .errors import UnsupportedOpcode
from .reader import ByteCursor

# (mask, value, variant), longest fixed prefix first so a shorter mask never
# claims a byte that belongs to a more specific encoding.
OPCODE_PATTERNS: Tuple[Tuple[int, int, Variant], ...] = (
    (0b1111_1110, 0b1100_0110, Variant.IMM_RM),
    (0b1111_1100, 0b1000_1000, Variant.REG_RM),
    (0b1111_1100, 0b1010_0000, Variant.ACC_MEM),
    (0b1111_0000, 0b1011_0000, Variant.IMM_REG),
)


def classify(opcode: int, offset: int = 0) -> Variant:
    for mask, value, variant in OPCODE_PATTERNS:
        if opcode & mask == value:
            return variant
    raise UnsupportedOpcode(opcode, offset)


def decode_instruction(cursor: ByteCursor) -> DecodedInstr:
    """Decode one instruction starting at the cursor and advance past it."""
    variant = classify(cursor.peek(), cursor.pos)
    return decode_variant(variant, cursor)


__all__ = ["OPCODE_PATTERNS", "classify", "decode_instruction"]
