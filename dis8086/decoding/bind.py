from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union


class Variant(str, Enum):
    """Encoding shapes of the MOV family."""

    REG_RM = "register to/from register or memory"
    IMM_REG = "immediate to register"
    IMM_RM = "immediate to register or memory"
    ACC_MEM = "memory to/from accumulator"


class Direction(IntEnum):
    FROM_REGISTER = 0
    TO_REGISTER = 1


class Size(IntEnum):
    BYTE = 0
    WORD = 1

    @property
    def qualifier(self) -> str:
        return "word" if self is Size.WORD else "byte"


class Mode(IntEnum):
    MEMORY = 0b00
    MEMORY_DISP8 = 0b01
    MEMORY_DISP16 = 0b10
    REGISTER = 0b11


def direction_bit(byte: int, shift: int = 1) -> Direction:
    return Direction((byte >> shift) & 1)


def size_bit(byte: int, shift: int = 0) -> Size:
    return Size((byte >> shift) & 1)


def mode_field(byte: int) -> Mode:
    return Mode((byte >> 6) & 0b11)


def reg_field(byte: int) -> int:
    return (byte >> 3) & 0b111


def rm_field(byte: int) -> int:
    return byte & 0b111


@dataclass(frozen=True, slots=True)
class Register:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class EffectiveAddress:
    base: str
    disp: int = 0  # signed

    def __post_init__(self) -> None:
        if not -0x8000 <= self.disp <= 0x7FFF:
            raise ValueError(f"Displacement out of range: {self.disp}")

    def __str__(self) -> str:
        if self.disp == 0:
            return f"[{self.base}]"
        sign = "-" if self.disp < 0 else "+"
        return f"[{self.base} {sign} {abs(self.disp)}]"


@dataclass(frozen=True, slots=True)
class DirectAddress:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"Direct address out of range: {self.value:#x}")

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True, slots=True)
class Immediate:
    value: int
    size: Size
    explicit: bool = False  # render the byte/word qualifier

    def __post_init__(self) -> None:
        limit = 0xFFFF if self.size is Size.WORD else 0xFF
        if not 0 <= self.value <= limit:
            raise ValueError(f"Immediate out of range: {self.value:#x}")

    def __str__(self) -> str:
        if self.explicit:
            return f"{self.size.qualifier} {self.value}"
        return str(self.value)


Operand = Union[Register, EffectiveAddress, DirectAddress, Immediate]


@dataclass(frozen=True, slots=True)
class DecodedInstr:
    offset: int
    opcode: int
    variant: Variant
    length: int
    dst: Operand
    src: Operand
    mnemonic: str = "mov"
    raw: Optional[bytes] = None

    def __str__(self) -> str:
        return f"{self.mnemonic} {self.dst}, {self.src}"
