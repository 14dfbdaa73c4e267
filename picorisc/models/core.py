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

"""Cycle-accurate model of the PicoRISC-V core state machine.

Core Model
==========

``Core`` owns the register file, program counter, instruction loader and
output latches, and advances them one clock tick per ``tick()`` call. Each
tick does exactly one of the following, in priority order:

    1. Reset asserted: zero all state, back to AWAIT_LOW
    2. Load enable asserted: one loader step, no register or PC change
    3. Validated instruction pending: decode, execute and commit it
    4. Otherwise: hold

Load completion and execution are separate ticks. Loading and running one
instruction therefore takes three ticks::

    tick A  load_enable=1  low_bus = 0x80 | word[6:0]
    tick B  load_enable=1  high_bus = word[15:8]        -> valid
    tick C  load_enable=0                               -> executes

Outputs (``CoreOutputs``) are derived from the committed state after each
tick:

    result_out  value of rs2 after a branch, otherwise value of current_rd
    debug_out   {pc[4:0], current_rd[2:0]}
    output_enable  constant 0xFF

Revision variants (sign-extended immediates, an extra issue tick before
execute) are selected with ``CoreConfig``.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from picorisc.config import (
    ALU_ADD,
    ALU_AND,
    ALU_OR,
    ALU_SLT,
    BRANCH_CMP_MASK,
    DEBUG_PC_MASK,
    DEBUG_PC_SHIFT,
    DEFAULT_CORE_CONFIG,
    I_ADDI,
    I_ANDI,
    I_ORI,
    I_SLTI,
    MASK8,
    OPCODE_B,
    OPCODE_I,
    OPCODE_R,
    OUTPUT_ENABLE_ALL,
    RD_MASK,
    CoreConfig,
)
from picorisc.models import alu_model, branch_model
from picorisc.models.decoder import DecodedInstruction, decode
from picorisc.models.loader import InstructionLoader, LoaderPhase
from picorisc.models.register_file import RegisterFile

log = logging.getLogger(__name__)

# I-type funct3 -> ALU selector; anything missing is load-immediate
I_TYPE_ALU_OPS = {
    I_ADDI: ALU_ADD,
    I_SLTI: ALU_SLT,
    I_ANDI: ALU_AND,
    I_ORI: ALU_OR,
}


class CoreState(Enum):
    """Externally visible phase of the core."""

    AWAIT_LOW = 0
    AWAIT_HIGH = 1
    EXECUTE_READY = 2


@dataclass(frozen=True)
class CoreOutputs:
    """Output signals after a tick.

    Attributes:
        result_out: Result byte (uo_out on the carrier)
        debug_out: {pc[4:0], current_rd[2:0]} (uio_out on the carrier)
        output_enable: Output-enable mask, always 0xFF
        branch_taken: Branch decision latch
        pc: Program counter
        current_rd: Destination register of the last executed instruction
    """

    result_out: int
    debug_out: int
    output_enable: int
    branch_taken: bool
    pc: int
    current_rd: int


@dataclass(frozen=True)
class CoreSnapshot:
    """All architectural state of the core, for comparisons."""

    registers: tuple[int, ...]
    pc: int
    loader_phase: LoaderPhase
    loader_accumulator: int
    loader_valid: bool
    issued: int | None
    current_rd: int
    branch_taken: bool
    output_register: int


@dataclass(frozen=True)
class ExecutionRecord:
    """What one execute cycle did.

    Attributes:
        cycle: Tick number on which the instruction executed
        instruction: Decoded instruction
        pc_before: PC before commit
        pc_after: PC after commit
        operand_a: Value read from rs1
        operand_b: Value read from rs2
        rd_written: Register written, or None when nothing was written
        rd_value: Value written (0 when nothing was written)
        branch_taken: Branch decision for B-type, None otherwise
    """

    cycle: int
    instruction: DecodedInstruction
    pc_before: int
    pc_after: int
    operand_a: int
    operand_b: int
    rd_written: int | None
    rd_value: int
    branch_taken: bool | None

    @property
    def mnemonic(self) -> str:
        return self.instruction.mnemonic


class Core:
    """The core state machine.

    Attributes:
        config: Revision variant selection
        registers: Register file (R0-R7)
        loader: Two-phase instruction loader
        pc: 8-bit program counter
        current_rd: Destination register latched by the last execute
        branch_taken: Branch decision latched by the last execute
        cycle: Free-running tick counter (not cleared by reset)
        last_execution: Record of the most recent execute cycle
    """

    def __init__(self, config: CoreConfig = DEFAULT_CORE_CONFIG) -> None:
        self.config = config
        self.registers = RegisterFile()
        self.loader = InstructionLoader()
        self.pc = 0
        self.current_rd = 0
        self.branch_taken = False
        self.cycle = 0
        self.last_execution: ExecutionRecord | None = None
        # Register shown on result_out: rs2 after a branch, rd otherwise
        self._output_register = 0
        # Issue latch, only used with extra_execute_stage
        self._issued: int | None = None

    # ------------------------------------------------------------------
    # Clocking
    # ------------------------------------------------------------------

    def tick(
        self,
        reset: bool = False,
        load_enable: bool = False,
        low_bus: int = 0,
        high_bus: int = 0,
    ) -> CoreOutputs:
        """Advance the core by one clock tick.

        Args:
            reset: Synchronous reset, active high
            load_enable: Marks this tick as part of the load handshake
            low_bus: Low instruction byte bus
            high_bus: High instruction byte bus

        Returns:
            Outputs after the tick
        """
        self.cycle += 1
        self.last_execution = None

        if reset:
            self.reset()
            return self.outputs

        if self.config.extra_execute_stage and self._issued is not None:
            word, self._issued = self._issued, None
            self.last_execution = self._execute(word)

        if load_enable:
            self.loader.step(low_bus, high_bus)
        elif self.loader.valid:
            word = self.loader.consume()
            if self.config.extra_execute_stage:
                self._issued = word
            else:
                self.last_execution = self._execute(word)

        return self.outputs

    def reset(self) -> None:
        """Force the zero state: registers, PC, loader and latches."""
        self.registers.reset()
        self.loader.reset()
        self.pc = 0
        self.current_rd = 0
        self.branch_taken = False
        self._output_register = 0
        self._issued = None
        log.debug("[Cycle %5d] RESET", self.cycle)

    # ------------------------------------------------------------------
    # Execute and commit
    # ------------------------------------------------------------------

    def _execute(self, word: int) -> ExecutionRecord:
        fields = decode(word, self.config.sign_extend_immediate)
        operand_a = self.registers.read(fields.rs1)
        operand_b = self.registers.read(fields.rs2)
        alu_result = alu_model.compute(operand_a, operand_b, fields.funct3)

        pc_before = self.pc
        next_pc = (self.pc + 1) & MASK8
        rd_written: int | None = None
        rd_value = 0
        taken: bool | None = None

        if fields.opcode == OPCODE_R:
            rd_written, rd_value = fields.rd, alu_result
        elif fields.opcode == OPCODE_I:
            alu_op = I_TYPE_ALU_OPS.get(fields.funct3)
            if alu_op is None:
                rd_value = fields.imm_extended
            else:
                rd_value = alu_model.compute(operand_a, fields.imm_extended, alu_op)
            rd_written = fields.rd
        elif fields.opcode == OPCODE_B:
            taken = branch_model.evaluate(
                operand_a, operand_b, fields.funct3 & BRANCH_CMP_MASK
            )
            if taken:
                next_pc = (self.pc + fields.imm_extended) & MASK8
        # S-type: no register write

        if rd_written is not None:
            self._commit_register(rd_written, rd_value)
            if rd_written == 0:
                rd_written, rd_value = None, 0
        self._commit_pc(next_pc)
        self.branch_taken = bool(taken)
        self.current_rd = fields.rd
        self._output_register = fields.rs2 if fields.opcode == OPCODE_B else fields.rd

        record = ExecutionRecord(
            cycle=self.cycle,
            instruction=fields,
            pc_before=pc_before,
            pc_after=next_pc,
            operand_a=operand_a,
            operand_b=operand_b,
            rd_written=rd_written,
            rd_value=rd_value,
            branch_taken=taken,
        )
        log.debug(
            "[Cycle %5d] %-6s 0x%04x PC: 0x%02x -> 0x%02x rd=r%d result=0x%02x",
            self.cycle,
            fields.mnemonic,
            fields.word,
            pc_before,
            next_pc,
            fields.rd,
            self.result_out,
        )
        return record

    def _commit_register(self, index: int, value: int) -> None:
        self.registers.write(index, value)

    def _commit_pc(self, value: int) -> None:
        self.pc = value & MASK8

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> CoreState:
        """Phase derived from the loader and issue latch."""
        if self.loader.valid or self._issued is not None:
            return CoreState.EXECUTE_READY
        if self.loader.awaiting_high:
            return CoreState.AWAIT_HIGH
        return CoreState.AWAIT_LOW

    @property
    def result_out(self) -> int:
        return self.registers.read(self._output_register)

    @property
    def debug_out(self) -> int:
        return ((self.pc & DEBUG_PC_MASK) << DEBUG_PC_SHIFT) | (
            self.current_rd & RD_MASK
        )

    @property
    def outputs(self) -> CoreOutputs:
        return CoreOutputs(
            result_out=self.result_out,
            debug_out=self.debug_out,
            output_enable=OUTPUT_ENABLE_ALL,
            branch_taken=self.branch_taken,
            pc=self.pc,
            current_rd=self.current_rd,
        )

    def snapshot(self) -> CoreSnapshot:
        """Copy of all architectural state (excludes the cycle counter)."""
        return CoreSnapshot(
            registers=self.registers.snapshot(),
            pc=self.pc,
            loader_phase=self.loader.phase,
            loader_accumulator=self.loader.accumulator,
            loader_valid=self.loader.valid,
            issued=self._issued,
            current_rd=self.current_rd,
            branch_taken=self.branch_taken,
            output_register=self._output_register,
        )
