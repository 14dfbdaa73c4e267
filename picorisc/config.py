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

"""Central configuration constants for the PicoRISC-V core model.

Config
======

Bit masks, field positions and encoding constants shared by the models,
encoders and testbenches. Import constants by name::

    from picorisc.config import MASK8, NUM_REGISTERS

Behavioural variants that differ between hardware revisions are grouped in
the frozen ``CoreConfig`` dataclass and passed to ``Core``.
"""

from dataclasses import dataclass

# Datapath widths
MASK8 = 0xFF
MASK16 = 0xFFFF

# Register file
NUM_REGISTERS = 8
ZERO_REGISTER = 0

# Instruction field layout: (shift, mask)
OPCODE_SHIFT, OPCODE_MASK = 0, 0b11
RD_SHIFT, RD_MASK = 2, 0b111
RS1_SHIFT, RS1_MASK = 5, 0b111
RS2_SHIFT, RS2_MASK = 8, 0b111
IMM_SHIFT, IMM_MASK = 8, 0b11111
FUNCT3_SHIFT, FUNCT3_MASK = 13, 0b111
IMM_BITS = 5

# Opcode classes
OPCODE_R = 0b00
OPCODE_I = 0b01
OPCODE_S = 0b10
OPCODE_B = 0b11

# ALU selectors (R-type funct3)
ALU_ADD = 0b000
ALU_SUB = 0b001
ALU_AND = 0b010
ALU_OR = 0b011
ALU_XOR = 0b100
ALU_SLL = 0b101
ALU_SRL = 0b110
ALU_SLT = 0b111

# Shifter width: only the low 3 bits of the shift amount reach the shifter
SHIFT_AMOUNT_MASK = 0b111

# I-type funct3; every other value selects load-immediate
I_ADDI = 0b000
I_SLTI = 0b010
I_ANDI = 0b011
I_ORI = 0b100
I_LI = 0b111

# Branch comparison selectors (funct3[1:0])
BRANCH_CMP_MASK = 0b11
CMP_EQ = 0b00
CMP_NE = 0b01
CMP_LT = 0b10
CMP_GE = 0b11

# Wire-level interface
LOAD_STROBE = 0x80
LOW7_MASK = 0x7F
OUTPUT_ENABLE_ALL = 0xFF
DEBUG_PC_MASK = 0b11111
DEBUG_PC_SHIFT = 3


@dataclass(frozen=True)
class CoreConfig:
    """Behavioural variants between hardware revisions.

    Attributes:
        sign_extend_immediate: Sign-extend the 5-bit immediate instead of
            zero-extending it. Off by default; some revisions do this.
        extra_execute_stage: Hold a validated instruction in an issue latch
            for one tick before executing it. Off by default.
    """

    sign_extend_immediate: bool = False
    extra_execute_stage: bool = False


DEFAULT_CORE_CONFIG = CoreConfig()
