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

"""Instruction decoder for the 16-bit compressed format.

Instruction Decoding
====================

Every 16-bit pattern is a structurally valid instruction. Fields, counted
from the low end of the word::

    15   13 12  11 10    8 7     5 4     2 1    0
    +------+------+-------+-------+-------+------+
    |funct3| imm[4:3] rs2 |  rs1  |  rd   |opcode|
    +------+------+-------+-------+-------+------+
                  |<- imm[4:0] ->|

The 5-bit immediate occupies bits [12:8] and overlaps rs2 in bits [10:8].

Opcode classes:
    - 00 R-type: rd <- ALU(rs1, rs2, funct3)
    - 01 I-type: ADDI / SLTI / ANDI / ORI, any other funct3 is LI
    - 10 S-type: no register write; result shown on the outputs
    - 11 B-type: branch on compare(rs1, rs2, funct3[1:0]) by imm
"""

from dataclasses import dataclass

from picorisc.config import (
    BRANCH_CMP_MASK,
    FUNCT3_MASK,
    FUNCT3_SHIFT,
    I_ADDI,
    I_ANDI,
    I_ORI,
    I_SLTI,
    IMM_BITS,
    IMM_MASK,
    IMM_SHIFT,
    MASK8,
    MASK16,
    OPCODE_B,
    OPCODE_I,
    OPCODE_MASK,
    OPCODE_R,
    OPCODE_S,
    OPCODE_SHIFT,
    RD_MASK,
    RD_SHIFT,
    RS1_MASK,
    RS1_SHIFT,
    RS2_MASK,
    RS2_SHIFT,
)
from picorisc.models.branch_model import BRANCH_MNEMONICS
from picorisc.utils.bit_utils import bit_field, sign_extend

R_MNEMONICS = ("add", "sub", "and", "or", "xor", "sll", "srl", "slt")
"""R-type mnemonics indexed by funct3."""

I_MNEMONICS = {I_ADDI: "addi", I_SLTI: "slti", I_ANDI: "andi", I_ORI: "ori"}
"""I-type mnemonics by funct3; any funct3 not listed is ``li``."""

OPCODE_NAMES = {OPCODE_R: "R", OPCODE_I: "I", OPCODE_S: "S", OPCODE_B: "B"}


@dataclass(frozen=True)
class DecodedInstruction:
    """Structural fields of one instruction word.

    Attributes:
        word: The 16-bit instruction
        opcode: Opcode class, bits [1:0]
        rd: Destination register, bits [4:2]
        rs1: First source register, bits [7:5]
        rs2: Second source register, bits [10:8]
        funct3: Sub-operation selector, bits [15:13]
        imm: Raw 5-bit immediate, bits [12:8]
        imm_extended: Immediate extended to 8 bits for arithmetic
    """

    word: int
    opcode: int
    rd: int
    rs1: int
    rs2: int
    funct3: int
    imm: int
    imm_extended: int

    @property
    def format(self) -> str:
        """Opcode class letter: R, I, S or B."""
        return OPCODE_NAMES[self.opcode]

    @property
    def mnemonic(self) -> str:
        """Name of the operation the core performs for this word."""
        if self.opcode == OPCODE_R:
            return R_MNEMONICS[self.funct3]
        if self.opcode == OPCODE_I:
            return I_MNEMONICS.get(self.funct3, "li")
        if self.opcode == OPCODE_S:
            return "store"
        return BRANCH_MNEMONICS[self.funct3 & BRANCH_CMP_MASK]


def decode(word: int, sign_extend_immediate: bool = False) -> DecodedInstruction:
    """Slice a 16-bit word into its fields.

    Args:
        word: Instruction word; bits above 15 are ignored
        sign_extend_immediate: Sign-extend the 5-bit immediate instead of
            zero-extending it (matches revisions that did so)

    Returns:
        DecodedInstruction with all fields filled in
    """
    word &= MASK16
    imm = bit_field(word, IMM_SHIFT, IMM_MASK)
    if sign_extend_immediate:
        imm_extended = sign_extend(imm, IMM_BITS) & MASK8
    else:
        imm_extended = imm
    return DecodedInstruction(
        word=word,
        opcode=bit_field(word, OPCODE_SHIFT, OPCODE_MASK),
        rd=bit_field(word, RD_SHIFT, RD_MASK),
        rs1=bit_field(word, RS1_SHIFT, RS1_MASK),
        rs2=bit_field(word, RS2_SHIFT, RS2_MASK),
        funct3=bit_field(word, FUNCT3_SHIFT, FUNCT3_MASK),
        imm=imm,
        imm_extended=imm_extended,
    )


def disassemble(word: int) -> str:
    """Render a word as assembly text, e.g. ``add r2, r1, r1``."""
    fields = decode(word)
    mnemonic = fields.mnemonic
    if fields.opcode == OPCODE_R:
        return f"{mnemonic} r{fields.rd}, r{fields.rs1}, r{fields.rs2}"
    if fields.opcode == OPCODE_I:
        if mnemonic == "li":
            return f"li r{fields.rd}, {fields.imm}"
        return f"{mnemonic} r{fields.rd}, r{fields.rs1}, {fields.imm}"
    if fields.opcode == OPCODE_S:
        return f"store r{fields.rd}, r{fields.rs1}, r{fields.rs2}"
    return f"{mnemonic} r{fields.rs1}, r{fields.rs2}, {fields.imm}"
