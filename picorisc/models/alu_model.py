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

"""Software model of the 8-bit ALU.

ALU Model
=========

Reference implementations of the eight ALU operations selected by funct3.
The ALU is purely combinational: every function here is side-effect free
and total over all 8-bit operand pairs.

Two decorators carry the datapath constraints so the operation bodies can
be written with plain Python integers:

    @mask_result
        Truncates the result to 8 bits (ADD/SUB wrap mod 256, SLL drops
        bits shifted past bit 7).

    @limit_shift
        Masks the second operand to its low 3 bits before the operation
        runs. The hardware shifter is only 3 bits wide, so a shift by 9 is
        a shift by 1.

Usage::

    from picorisc.models.alu_model import compute, add

    add(250, 10)              # 4
    compute(0x81, 9, 0b101)   # SLL by 1 -> 0x02
"""

from collections.abc import Callable
from functools import wraps

from picorisc.config import (
    ALU_ADD,
    ALU_AND,
    ALU_OR,
    ALU_SLL,
    ALU_SLT,
    ALU_SRL,
    ALU_SUB,
    ALU_XOR,
    FUNCT3_MASK,
    MASK8,
    SHIFT_AMOUNT_MASK,
)

AluFunction = Callable[[int, int], int]


def mask_result(func: AluFunction) -> AluFunction:
    """Truncate an operation's result to the 8-bit datapath."""

    @wraps(func)
    def wrapper(operand_a: int, operand_b: int) -> int:
        return func(operand_a & MASK8, operand_b & MASK8) & MASK8

    return wrapper


def limit_shift(func: AluFunction) -> AluFunction:
    """Mask the shift amount (second operand) to the 3-bit shifter width."""

    @wraps(func)
    def wrapper(operand_a: int, operand_b: int) -> int:
        return func(operand_a, operand_b & SHIFT_AMOUNT_MASK)

    return wrapper


@mask_result
def add(operand_a: int, operand_b: int) -> int:
    """ADD: wrapping addition."""
    return operand_a + operand_b


@mask_result
def sub(operand_a: int, operand_b: int) -> int:
    """SUB: wrapping subtraction."""
    return operand_a - operand_b


@mask_result
def and_rv(operand_a: int, operand_b: int) -> int:
    """AND: bitwise and."""
    return operand_a & operand_b


@mask_result
def or_rv(operand_a: int, operand_b: int) -> int:
    """OR: bitwise or."""
    return operand_a | operand_b


@mask_result
def xor(operand_a: int, operand_b: int) -> int:
    """XOR: bitwise exclusive or."""
    return operand_a ^ operand_b


@mask_result
@limit_shift
def sll(operand_a: int, operand_b: int) -> int:
    """SLL: logical shift left by ``operand_b & 7``."""
    return operand_a << operand_b


@mask_result
@limit_shift
def srl(operand_a: int, operand_b: int) -> int:
    """SRL: logical shift right by ``operand_b & 7``."""
    return operand_a >> operand_b


@mask_result
def slt(operand_a: int, operand_b: int) -> int:
    """SLT: 1 if ``operand_a < operand_b`` (unsigned), else 0."""
    return 1 if operand_a < operand_b else 0


ALU_OPERATIONS: dict[int, AluFunction] = {
    ALU_ADD: add,
    ALU_SUB: sub,
    ALU_AND: and_rv,
    ALU_OR: or_rv,
    ALU_XOR: xor,
    ALU_SLL: sll,
    ALU_SRL: srl,
    ALU_SLT: slt,
}
"""funct3 selector -> reference evaluator."""


def compute(operand_a: int, operand_b: int, operation: int) -> int:
    """Evaluate the ALU for a 3-bit operation selector.

    Only the low 3 bits of ``operation`` are decoded, so every selector
    maps to one of the eight operations.

    Args:
        operand_a: First operand (rs1 value)
        operand_b: Second operand (rs2 value)
        operation: funct3 selector

    Returns:
        8-bit result
    """
    return ALU_OPERATIONS[operation & FUNCT3_MASK](operand_a, operand_b)
