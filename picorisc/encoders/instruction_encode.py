#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Encoders for the 16-bit PicoRISC-V instruction format.

Instruction Encoding
====================

One encoder per opcode class, plus shorthands for load-immediate and NOP.
Every encoder validates its fields and raises ``InstructionEncodingError``
for values that don't fit.

Field layout (see ``picorisc.models.decoder``)::

    [15:13] funct3  [12:8] imm  [10:8] rs2  [7:5] rs1  [4:2] rd  [1:0] opcode

The immediate and rs2 share bits [10:8]. For I-type the immediate wins
(rs2 is whatever its low three bits are); for B-type the register compared
and the low three bits of the branch offset are the same bits.

Example Usage:
    >>> hex(enc_li(rd=1, imm=5))
    '0xe505'
    >>> hex(enc_r(0b000, rd=2, rs1=1, rs2=1))
    '0x128'
"""

from picorisc.config import (
    FUNCT3_MASK,
    FUNCT3_SHIFT,
    I_ADDI,
    I_LI,
    IMM_MASK,
    IMM_SHIFT,
    NUM_REGISTERS,
    OPCODE_B,
    OPCODE_I,
    OPCODE_MASK,
    OPCODE_R,
    OPCODE_S,
    RD_MASK,
    RD_SHIFT,
    RS1_MASK,
    RS1_SHIFT,
    RS2_MASK,
    RS2_SHIFT,
)
from picorisc.exceptions import InstructionEncodingError


def _pack_bits(*fields: tuple[int, int, int]) -> int:
    """Pack bit fields into a 16-bit instruction word.

    Args:
        fields: Variable number of tuples, each containing:
            - value: The value to insert
            - position: Bit position (LSB) where field starts
            - mask: Bit mask for the field width

    Returns:
        16-bit packed instruction word
    """
    result = 0
    for value, position, mask in fields:
        result |= (value & mask) << position
    return result


def _check_register(name: str, reg: int) -> None:
    if not 0 <= reg < NUM_REGISTERS:
        raise InstructionEncodingError(f"{name} must be r0-r7, got r{reg}")


def _check_field(name: str, value: int, mask: int) -> None:
    if not 0 <= value <= mask:
        raise InstructionEncodingError(f"{name} must be 0-{mask}, got {value}")


def enc_r(funct3: int, rd: int, rs1: int, rs2: int) -> int:
    """Encode an R-type instruction: rd <- ALU(rs1, rs2, funct3).

    Args:
        funct3: ALU selector (0-7)
        rd: Destination register
        rs1: First source register
        rs2: Second source register

    Returns:
        16-bit encoded instruction
    """
    _check_field("funct3", funct3, FUNCT3_MASK)
    _check_register("rd", rd)
    _check_register("rs1", rs1)
    _check_register("rs2", rs2)
    return _pack_bits(
        (funct3, FUNCT3_SHIFT, FUNCT3_MASK),
        (rs2, RS2_SHIFT, RS2_MASK),
        (rs1, RS1_SHIFT, RS1_MASK),
        (rd, RD_SHIFT, RD_MASK),
        (OPCODE_R, 0, OPCODE_MASK),
    )


def enc_i(funct3: int, rd: int, rs1: int, imm: int) -> int:
    """Encode an I-type instruction: rd <- op(rs1, imm).

    Args:
        funct3: 000 ADDI, 010 SLTI, 011 ANDI, 100 ORI, anything else LI
        rd: Destination register
        rs1: Source register (ignored by LI)
        imm: Unsigned 5-bit immediate (0-31)

    Returns:
        16-bit encoded instruction
    """
    _check_field("funct3", funct3, FUNCT3_MASK)
    _check_register("rd", rd)
    _check_register("rs1", rs1)
    _check_field("imm", imm, IMM_MASK)
    return _pack_bits(
        (funct3, FUNCT3_SHIFT, FUNCT3_MASK),
        (imm, IMM_SHIFT, IMM_MASK),
        (rs1, RS1_SHIFT, RS1_MASK),
        (rd, RD_SHIFT, RD_MASK),
        (OPCODE_I, 0, OPCODE_MASK),
    )


def enc_s(funct3: int, rd: int, rs1: int, rs2: int) -> int:
    """Encode an S-type instruction.

    The core performs no register write for S-type; rd selects which
    register is shown on ``result_out`` afterwards.

    Returns:
        16-bit encoded instruction
    """
    _check_field("funct3", funct3, FUNCT3_MASK)
    _check_register("rd", rd)
    _check_register("rs1", rs1)
    _check_register("rs2", rs2)
    return _pack_bits(
        (funct3, FUNCT3_SHIFT, FUNCT3_MASK),
        (rs2, RS2_SHIFT, RS2_MASK),
        (rs1, RS1_SHIFT, RS1_MASK),
        (rd, RD_SHIFT, RD_MASK),
        (OPCODE_S, 0, OPCODE_MASK),
    )


def enc_b(
    funct3: int, rs1: int, rs2: int, offset: int | None = None, rd: int = 0
) -> int:
    """Encode a B-type instruction: if cmp(rs1, rs2) then pc += offset.

    The offset is the 5-bit immediate, whose low three bits are rs2. When
    ``offset`` is omitted it defaults to ``rs2``; an explicit offset must
    agree with rs2 in bits [2:0].

    Args:
        funct3: Comparison in bits [1:0] (00 eq, 01 ne, 10 lt, 11 ge)
        rs1: First compared register
        rs2: Second compared register
        offset: Unsigned 5-bit branch offset
        rd: Value of bits [4:2]; latched as current_rd, not written

    Returns:
        16-bit encoded instruction
    """
    _check_field("funct3", funct3, FUNCT3_MASK)
    _check_register("rs1", rs1)
    _check_register("rs2", rs2)
    _check_register("rd", rd)
    if offset is None:
        offset = rs2
    _check_field("offset", offset, IMM_MASK)
    if offset & RS2_MASK != rs2:
        raise InstructionEncodingError(
            f"Branch offset {offset} has low bits {offset & RS2_MASK}, "
            f"which must equal rs2 (r{rs2})"
        )
    return _pack_bits(
        (funct3, FUNCT3_SHIFT, FUNCT3_MASK),
        (offset, IMM_SHIFT, IMM_MASK),
        (rs1, RS1_SHIFT, RS1_MASK),
        (rd, RD_SHIFT, RD_MASK),
        (OPCODE_B, 0, OPCODE_MASK),
    )


def enc_li(rd: int, imm: int, rs1: int = 0) -> int:
    """Encode LI: rd <- imm (I-type, funct3 = 111).

    Args:
        rd: Destination register
        imm: Unsigned 5-bit value (0-31)
        rs1: Don't-care field, exposed so callers can set bit 7

    Returns:
        16-bit encoded instruction
    """
    return enc_i(I_LI, rd, rs1, imm)


def enc_nop() -> int:
    """Encode a NOP: ``addi r0, r0, 0``.

    Returns:
        16-bit encoded instruction (0x0001)
    """
    return enc_i(I_ADDI, 0, 0, 0)
