from __future__ import annotations

from typing import Callable, Dict

from .address import resolve_rm
from .bind import (
    DecodedInstr,
    Direction,
    DirectAddress,
    Immediate,
    Mode,
    Register,
    Size,
    Variant,
    direction_bit,
    mode_field,
    reg_field,
    rm_field,
    size_bit,
)
from .reader import ByteCursor
from .registers import ACCUMULATOR, register

DecoderFunc = Callable[[ByteCursor], DecodedInstr]


def _read_imm(cursor: ByteCursor, size: Size, *, explicit: bool = False) -> Immediate:
    # Sign is not recovered: 0xF4 renders as 244.
    value = cursor.read_u16_le() if size is Size.WORD else cursor.read_u8()
    return Immediate(value, size, explicit)


def _finish(
    cursor: ByteCursor,
    start: int,
    opcode: int,
    variant: Variant,
    dst,
    src,
) -> DecodedInstr:
    return DecodedInstr(
        offset=start,
        opcode=opcode,
        variant=variant,
        length=cursor.pos - start,
        dst=dst,
        src=src,
        raw=cursor.data[start : cursor.pos],
    )


def _dec_reg_rm(cursor: ByteCursor) -> DecodedInstr:
    """MOV r/m <-> reg: `1000_10dw mod reg r/m [disp-lo] [disp-hi]`."""
    start = cursor.pos
    opcode = cursor.read_u8()
    direction = direction_bit(opcode)
    size = size_bit(opcode)

    modrm = cursor.read_u8()
    reg = register(size, reg_field(modrm))
    rm = resolve_rm(cursor, mode_field(modrm), rm_field(modrm), size)

    if direction is Direction.TO_REGISTER:
        dst, src = reg, rm
    else:
        dst, src = rm, reg
    return _finish(cursor, start, opcode, Variant.REG_RM, dst, src)


def _dec_imm_reg(cursor: ByteCursor) -> DecodedInstr:
    """MOV reg, imm: `1011_wreg data [data-hi]`."""
    start = cursor.pos
    opcode = cursor.read_u8()
    size = size_bit(opcode, shift=3)
    dst = register(size, opcode & 0b111)
    src = _read_imm(cursor, size)
    return _finish(cursor, start, opcode, Variant.IMM_REG, dst, src)


def _dec_imm_rm(cursor: ByteCursor) -> DecodedInstr:
    """MOV r/m, imm: `1100_011w mod 000 r/m [disp...] data [data-hi]`."""
    start = cursor.pos
    opcode = cursor.read_u8()
    size = size_bit(opcode)

    modrm = cursor.read_u8()
    mode = mode_field(modrm)
    # reg field is reserved here and ignored
    dst = resolve_rm(cursor, mode, rm_field(modrm), size)
    src = _read_imm(cursor, size, explicit=mode is not Mode.REGISTER)
    return _finish(cursor, start, opcode, Variant.IMM_RM, dst, src)


def _dec_acc_mem(cursor: ByteCursor) -> DecodedInstr:
    """MOV ax <-> [addr]: `1010_00dw addr-lo addr-hi`."""
    start = cursor.pos
    opcode = cursor.read_u8()
    direction = direction_bit(opcode)
    acc = Register(ACCUMULATOR)
    mem = DirectAddress(cursor.read_u16_le())

    # d=0 loads the accumulator, d=1 stores it
    if direction is Direction.FROM_REGISTER:
        dst, src = acc, mem
    else:
        dst, src = mem, acc
    return _finish(cursor, start, opcode, Variant.ACC_MEM, dst, src)


DECODERS: Dict[Variant, DecoderFunc] = {
    Variant.REG_RM: _dec_reg_rm,
    Variant.IMM_REG: _dec_imm_reg,
    Variant.IMM_RM: _dec_imm_rm,
    Variant.ACC_MEM: _dec_acc_mem,
}


def decode_variant(variant: Variant, cursor: ByteCursor) -> DecodedInstr:
    return DECODERS[variant](cursor)


__all__ = ["DECODERS", "DecoderFunc", "decode_variant"]
