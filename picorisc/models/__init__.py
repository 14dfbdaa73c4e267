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

"""Software models of the PicoRISC-V core.

This package contains the cycle-accurate model of the core and its
combinational building blocks. The co-simulation testbench compares the
DUT (Design Under Test) against these models tick by tick.

Modules
-------
alu_model
    The eight 8-bit ALU operations (add, sub, and, or, xor, sll, srl, slt).
    Uses decorators for result masking and shift limiting.

branch_model
    Branch decision logic: BEQ, BNE, BLT, BGE (unsigned comparisons)

register_file
    Eight 8-bit registers with R0 hardwired to zero

decoder
    Field slicing of 16-bit instruction words, mnemonics, disassembly

loader
    Two-phase instruction loader (low byte, then high byte)

core
    The core state machine: load, execute, commit, outputs

pin_model
    Wire-level adapter (rst_n, ui_in, uio_in -> uo_out, uio_out, uio_oe)

program_driver
    Instruction-level testbench driving the three-tick protocol

Usage
-----
::

    from picorisc.models import Core, ProgramDriver
    from picorisc.encoders.instruction_encode import enc_li

    driver = ProgramDriver(Core())
    driver.execute(enc_li(rd=1, imm=5))
    driver.core.registers.read(1)  # 5
"""

from picorisc.models.alu_model import (
    add,
    sub,
    and_rv,
    or_rv,
    xor,
    sll,
    srl,
    slt,
    compute,
)
from picorisc.models.branch_model import branch_taken_decision, evaluate
from picorisc.models.register_file import RegisterFile
from picorisc.models.decoder import DecodedInstruction, decode, disassemble
from picorisc.models.loader import InstructionLoader, LoaderPhase
from picorisc.models.core import (
    Core,
    CoreOutputs,
    CoreSnapshot,
    CoreState,
    ExecutionRecord,
)
from picorisc.models.pin_model import PinInterface, PinOutputs, pin_frames
from picorisc.models.program_driver import ProgramDriver

__all__ = [
    "add",
    "sub",
    "and_rv",
    "or_rv",
    "xor",
    "sll",
    "srl",
    "slt",
    "compute",
    "branch_taken_decision",
    "evaluate",
    "RegisterFile",
    "DecodedInstruction",
    "decode",
    "disassemble",
    "InstructionLoader",
    "LoaderPhase",
    "Core",
    "CoreOutputs",
    "CoreSnapshot",
    "CoreState",
    "ExecutionRecord",
    "PinInterface",
    "PinOutputs",
    "pin_frames",
    "ProgramDriver",
]
