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

"""Operation tables mapping instruction mnemonics to encoders and evaluators.

Op Tables
=========

This module is the central registry that connects instruction mnemonics
(like "add", "li", "beq") to their corresponding:

    1. Encoder function: Converts instruction parameters to a 16-bit word
    2. Evaluator function: Computes the result in software (for verification)

Table Structure:
    Each table maps: mnemonic -> (encoder_function, evaluator_function)

    - R_ALU: Register-register operations, encoder(rd, rs1, rs2),
      evaluator(a, b) -> result
    - I_ALU: Immediate operations, encoder(rd, rs1, imm),
      evaluator(a, imm) -> result
    - STORES: S-type, encoder(rd, rs1, rs2), no evaluator
    - BRANCHES: Conditional branches, encoder(rs1, rs2, offset),
      evaluator(a, b) -> taken

Example Usage:
    >>> encoder, evaluator = R_ALU["add"]
    >>> word = encoder(rd=5, rs1=3, rs2=4)
    >>> result = evaluator(registers[3], registers[4])
"""

from collections.abc import Callable

from picorisc.config import (
    ALU_ADD,
    ALU_AND,
    ALU_OR,
    ALU_SLL,
    ALU_SLT,
    ALU_SRL,
    ALU_SUB,
    ALU_XOR,
    CMP_EQ,
    CMP_GE,
    CMP_LT,
    CMP_NE,
    I_ADDI,
    I_ANDI,
    I_LI,
    I_ORI,
    I_SLTI,
)
from picorisc.encoders.instruction_encode import enc_b, enc_i, enc_r, enc_s
from picorisc.models.alu_model import add, and_rv, or_rv, sll, slt, srl, sub, xor
from picorisc.models.branch_model import evaluate


def make_r_encoder(f3: int) -> Callable:
    """Create R-type instruction encoders."""
    return lambda rd, rs1, rs2: enc_r(f3, rd, rs1, rs2)


def make_i_encoder(f3: int) -> Callable:
    """Create I-type instruction encoders."""
    return lambda rd, rs1, imm: enc_i(f3, rd, rs1, imm)


def make_store_encoder(f3: int) -> Callable:
    """Create store instruction encoders."""
    return lambda rd, rs1, rs2: enc_s(f3, rd, rs1, rs2)


def make_branch_encoder(f3: int) -> Callable:
    """Create branch instruction encoders."""
    return lambda rs1, rs2, offset=None: enc_b(f3, rs1, rs2, offset)


def make_branch_evaluator(cmp: int) -> Callable:
    """Create a branch decision function for one comparison."""
    return lambda operand_a, operand_b: evaluate(operand_a, operand_b, cmp)


def load_immediate(_operand_a: int, imm: int) -> int:
    """LI evaluator: the result is the immediate itself."""
    return imm


# operation tables (mnemonic -> (encoder, evaluator))
R_ALU: dict[str, tuple[Callable, Callable]] = {
    "add": (make_r_encoder(ALU_ADD), add),
    "sub": (make_r_encoder(ALU_SUB), sub),
    "and": (make_r_encoder(ALU_AND), and_rv),
    "or": (make_r_encoder(ALU_OR), or_rv),
    "xor": (make_r_encoder(ALU_XOR), xor),
    "sll": (make_r_encoder(ALU_SLL), sll),
    "srl": (make_r_encoder(ALU_SRL), srl),
    "slt": (make_r_encoder(ALU_SLT), slt),
}

# I-type reuses the ALU with its own funct3 mapping (011 is AND, 100 is OR)
I_ALU: dict[str, tuple[Callable, Callable]] = {
    "addi": (make_i_encoder(I_ADDI), add),
    "slti": (make_i_encoder(I_SLTI), slt),
    "andi": (make_i_encoder(I_ANDI), and_rv),
    "ori": (make_i_encoder(I_ORI), or_rv),
    "li": (make_i_encoder(I_LI), load_immediate),
}

STORES: dict[str, tuple[Callable, None]] = {
    "store": (make_store_encoder(0b000), None),
}

BRANCHES: dict[str, tuple[Callable, Callable]] = {
    "beq": (make_branch_encoder(CMP_EQ), make_branch_evaluator(CMP_EQ)),
    "bne": (make_branch_encoder(CMP_NE), make_branch_evaluator(CMP_NE)),
    "blt": (make_branch_encoder(CMP_LT), make_branch_evaluator(CMP_LT)),
    "bge": (make_branch_encoder(CMP_GE), make_branch_evaluator(CMP_GE)),
}

ALL_OPERATIONS: tuple[str, ...] = (*R_ALU, *I_ALU, *STORES, *BRANCHES)
"""Every mnemonic the core distinguishes, for coverage tracking."""
