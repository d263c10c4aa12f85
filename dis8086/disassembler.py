"""Stream driver: turns a whole machine-code buffer into a NASM listing."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional

from .decoding.bind import DecodedInstr
from .decoding.dispatcher import decode_instruction
from .decoding.errors import DecodeError
from .decoding.reader import ByteCursor

logger = logging.getLogger(__name__)

HEADER = "bits 16"


@dataclass
class Disassembly:
    """Instructions decoded so far, plus the error that stopped the run, if any."""

    instructions: List[DecodedInstr] = field(default_factory=list)
    error: Optional[DecodeError] = None

    @property
    def complete(self) -> bool:
        return self.error is None

    @property
    def lines(self) -> List[str]:
        return [str(instr) for instr in self.instructions]

    def render(self, header: bool = True) -> str:
        out = f"{HEADER}\n\n" if header else ""
        return out + "".join(f"{line}\n" for line in self.lines)

    @property
    def text(self) -> str:
        return self.render()


def disassemble(data: bytes) -> Disassembly:
    cursor = ByteCursor(data)
    result = Disassembly()
    while not cursor.at_end():
        try:
            instr = decode_instruction(cursor)
        except DecodeError as exc:
            logger.warning(
                "Decoding stopped after %d instruction(s): %s",
                len(result.instructions),
                exc,
            )
            result.error = exc
            break
        logger.debug("%04x: %s (%d bytes)", instr.offset, instr, instr.length)
        result.instructions.append(instr)
    return result


def disassemble_text(data: bytes, strict: bool = False) -> str:
    result = disassemble(data)
    if strict and result.error is not None:
        raise result.error
    return result.text


__all__ = ["HEADER", "Disassembly", "disassemble", "disassemble_text"]
