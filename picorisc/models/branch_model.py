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

"""Software model for the branch unit.

Determines whether conditional branches are taken based on register comparisons.
All comparisons are unsigned 8-bit.

Branch Model
============
"""

from picorisc.config import BRANCH_CMP_MASK, CMP_EQ, CMP_GE, CMP_LT, CMP_NE, MASK8
from picorisc.utils.validation import ValidationError

BRANCH_MNEMONICS = {
    CMP_EQ: "beq",
    CMP_NE: "bne",
    CMP_LT: "blt",
    CMP_GE: "bge",
}
"""Comparison selector -> branch mnemonic."""


def evaluate(operand_a: int, operand_b: int, comparison: int) -> bool:
    """Compute the taken/not-taken decision for a 2-bit comparison selector.

    Args:
        operand_a: Value from source register 1 (rs1)
        operand_b: Value from source register 2 (rs2)
        comparison: Selector; only bits [1:0] are decoded

    Returns:
        True if the branch is taken
    """
    operand_a &= MASK8
    operand_b &= MASK8
    comparison &= BRANCH_CMP_MASK
    if comparison == CMP_EQ:
        return operand_a == operand_b
    if comparison == CMP_NE:
        return operand_a != operand_b
    if comparison == CMP_LT:
        return operand_a < operand_b
    return operand_a >= operand_b


def branch_taken_decision(operation: str, operand_a: int, operand_b: int) -> bool:
    """Determine if a branch should be taken based on the branch mnemonic.

    Args:
        operation: Branch instruction mnemonic ("beq", "bne", "blt", "bge")
        operand_a: Value from source register 1 (rs1)
        operand_b: Value from source register 2 (rs2)

    Returns:
        True if branch condition is satisfied, False otherwise
    """
    for comparison, mnemonic in BRANCH_MNEMONICS.items():
        if mnemonic == operation:
            return evaluate(operand_a, operand_b, comparison)

    raise ValidationError(
        "Invalid branch operation",
        op=operation,
        valid_ops=list(BRANCH_MNEMONICS.values()),
    )
