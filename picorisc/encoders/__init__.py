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

"""PicoRISC-V instruction encoding utilities.

This package provides binary encoding for every instruction the core
executes.

Modules
-------
instruction_encode
    Encoders for the four 16-bit formats (R, I, S, B) plus LI and NOP

op_tables
    Mapping tables from instruction mnemonics to encoders and evaluators.
    This is the primary interface for instruction generation.

Usage
-----
To encode an instruction by mnemonic::

    from picorisc.encoders.op_tables import R_ALU, I_ALU, BRANCHES

    enc_add, eval_add = R_ALU["add"]
    word = enc_add(rd=1, rs1=2, rs2=3)  # add r1, r2, r3

    enc_beq, _ = BRANCHES["beq"]
    word = enc_beq(rs1=1, rs2=2, offset=10)  # beq r1, r2, +10
"""

from picorisc.encoders.op_tables import (
    R_ALU,
    I_ALU,
    STORES,
    BRANCHES,
    ALL_OPERATIONS,
)

__all__ = [
    "R_ALU",
    "I_ALU",
    "STORES",
    "BRANCHES",
    "ALL_OPERATIONS",
]
