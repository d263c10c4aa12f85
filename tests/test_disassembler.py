import logging

import pytest

from dis8086 import (
    HEADER,
    StreamExhausted,
    UnsupportedOpcode,
    disassemble,
    disassemble_text,
)

SCENARIOS = [
    (bytes([0b1000_1001, 0b1101_1110]), "mov si, bx"),
    (bytes([0b1000_1010, 0b0000_0000]), "mov al, [bx + si]"),
    (bytes([0b1000_1010, 0b0110_0000, 0b0000_0100]), "mov ah, [bx + si + 4]"),
    (bytes([0b1011_0001, 0b0000_1100]), "mov cl, 12"),
    (bytes([0b1100_0110, 0b0000_0011, 0b0000_0111]), "mov [bp + di], byte 7"),
    (bytes([0b1010_0001, 0b1111_1011, 0b0000_1001]), "mov ax, [2555]"),
    (bytes([0b1000_1011, 0b0101_0111, 0b1110_0000]), "mov dx, [bx - 32]"),
]

# listing 38: many register-to-register movs
MANY_REGISTER_MOV = bytes.fromhex("89d988e589da89de89fb88c888ed89c389f389fc89c5")


@pytest.mark.parametrize("data, expected", SCENARIOS)
def test_single_instruction_scenarios(data: bytes, expected: str) -> None:
    result = disassemble(data)
    assert result.complete
    assert result.lines == [expected]
    assert result.instructions[0].length == len(data)


def test_scenarios_concatenated_decode_in_order() -> None:
    data = b"".join(d for d, _ in SCENARIOS)
    result = disassemble(data)
    assert result.lines == [line for _, line in SCENARIOS]
    offsets = [instr.offset for instr in result.instructions]
    assert offsets == [0, 2, 4, 7, 9, 12, 15]


def test_text_has_header_and_trailing_newlines() -> None:
    text = disassemble_text(bytes.fromhex("89d988e5"))
    assert text == f"{HEADER}\n\nmov cx, bx\nmov ch, ah\n"


def test_many_register_mov_listing() -> None:
    assert disassemble(MANY_REGISTER_MOV).lines == [
        "mov cx, bx",
        "mov ch, ah",
        "mov dx, bx",
        "mov si, bx",
        "mov bx, di",
        "mov al, cl",
        "mov ch, ch",
        "mov bx, ax",
        "mov bx, si",
        "mov sp, di",
        "mov bp, ax",
    ]


def test_empty_input_is_complete() -> None:
    result = disassemble(b"")
    assert result.complete
    assert result.text == f"{HEADER}\n\n"


def test_render_without_header() -> None:
    assert disassemble(bytes([0xB1, 0x0C])).render(header=False) == "mov cl, 12\n"


def test_unsupported_opcode_keeps_partial_output() -> None:
    result = disassemble(bytes([0x89, 0xDE, 0x90, 0xB1, 0x0C]))
    assert not result.complete
    assert result.lines == ["mov si, bx"]
    assert isinstance(result.error, UnsupportedOpcode)
    assert result.error.opcode == 0x90
    assert result.error.offset == 2
    assert result.text.endswith("mov si, bx\n")


def test_truncated_tail_keeps_partial_output() -> None:
    result = disassemble(bytes([0xB1, 0x0C, 0xB8, 0x01]))
    assert result.lines == ["mov cl, 12"]
    assert isinstance(result.error, StreamExhausted)


def test_strict_text_raises() -> None:
    with pytest.raises(StreamExhausted):
        disassemble_text(bytes([0x8B]), strict=True)
    assert disassemble_text(bytes([0x8B])) == f"{HEADER}\n\n"


def test_decoding_is_repeatable() -> None:
    data = b"".join(d for d, _ in SCENARIOS)
    assert disassemble_text(data) == disassemble_text(data)


def test_stopped_run_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="dis8086.disassembler"):
        disassemble(bytes([0x90]))
    assert "Unsupported opcode 0x90" in caplog.text
