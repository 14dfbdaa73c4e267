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

"""Instruction execution helper that encapsulates the drive-and-model pattern.

Instruction Executor
====================

This module provides the InstructionExecutor class that keeps the DUT and
the software pin model in lockstep. Every clock cycle goes through
``cycle()``, which:

1. Waits for the falling edge
2. Drives the input pins on the DUT
3. Clocks the pin model with the same inputs
4. Queues the model's outputs for the output monitor
5. Waits for the rising edge

On top of that it offers the instruction-level operations used by the
tests: reset, idle, the two-tick load, and load-plus-execute by word or by
mnemonic.

Usage:
    from picorisc.cocotb_tests.instruction_executor import InstructionExecutor

    executor = InstructionExecutor(dut_if, expected_queue)

    await executor.reset(cycles=10)
    await executor.execute_alu("li", rd=5, rs1=4, imm=5)
    await executor.execute_alu("add", rd=1, rs1=5, rs2=3)
    await executor.idle(cycles=3)
"""

from collections import deque

import cocotb
from cocotb.triggers import FallingEdge, RisingEdge

from picorisc.cocotb_tests.test_helpers import DUTInterface, TestStatistics
from picorisc.config import CoreConfig, DEFAULT_CORE_CONFIG
from picorisc.models.core import ExecutionRecord
from picorisc.models.pin_model import PinInterface, PinOutputs, pin_frames
from picorisc.utils.instruction_logger import InstructionLogger


class InstructionExecutor:
    """Drives the DUT and the pin model with identical inputs each cycle.

    Attributes:
        dut_if: DUT interface for signal access
        model: Pin-level software model
        expected_queue: Model outputs awaiting comparison by the monitor
        stats: Optional execution statistics
        log: If True, log every executed instruction
    """

    def __init__(
        self,
        dut_if: DUTInterface,
        expected_queue: deque,
        stats: TestStatistics | None = None,
        config: CoreConfig = DEFAULT_CORE_CONFIG,
        log: bool = False,
    ) -> None:
        self.dut_if = dut_if
        self.model = PinInterface(config=config)
        self.expected_queue = expected_queue
        self.stats = stats
        self.log = log

    async def cycle(self, rst_n: int, ui_in: int, uio_in: int = 0) -> PinOutputs:
        """Drive one clock cycle on both the DUT and the model.

        Returns:
            Model outputs expected after the rising edge
        """
        await FallingEdge(self.dut_if.clock)
        self.dut_if.drive(rst_n, ui_in, uio_in)
        expected = self.model.clock(rst_n, ui_in, uio_in)
        self.expected_queue.append(expected)
        await RisingEdge(self.dut_if.clock)
        if self.stats is not None:
            self.stats.cycles += 1
        return expected

    async def reset(self, cycles: int, settle_cycles: int = 2) -> None:
        """Hold reset for ``cycles`` clocks, then idle for ``settle_cycles``."""
        for _ in range(cycles):
            await self.cycle(rst_n=0, ui_in=0)
        await self.idle(settle_cycles)

    async def idle(self, cycles: int = 1) -> None:
        """Clock with the strobe deasserted."""
        for _ in range(cycles):
            await self.cycle(rst_n=1, ui_in=0)

    async def load(self, word: int) -> None:
        """Drive the two-tick load handshake for ``word``."""
        for ui_in, uio_in in pin_frames(word):
            await self.cycle(rst_n=1, ui_in=ui_in, uio_in=uio_in)

    async def execute(self, word: int) -> ExecutionRecord:
        """Load ``word`` and clock until the model executes it.

        Returns:
            The model's execution record
        """
        await self.load(word)
        core = self.model.core
        for _ in range(2 if core.config.extra_execute_stage else 1):
            await self.idle()
        record = core.last_execution
        assert record is not None, f"model did not execute 0x{word:04X}"

        if self.stats is not None:
            self.stats.record(record.mnemonic)
        if self.log:
            InstructionLogger.log_record(record)
        return record

    async def execute_alu(
        self,
        operation: str,
        rd: int,
        rs1: int,
        rs2: int = 0,
        imm: int = 0,
    ) -> ExecutionRecord:
        """Encode an R-type or I-type instruction by mnemonic and execute it.

        Args:
            operation: Instruction mnemonic (e.g., "add", "addi", "li")
            rd: Destination register
            rs1: Source register 1
            rs2: Source register 2 (R-type only)
            imm: Immediate value (I-type only)
        """
        from picorisc.encoders.op_tables import I_ALU, R_ALU

        if operation in R_ALU:
            encoder, _ = R_ALU[operation]
            word = encoder(rd, rs1, rs2)
        elif operation in I_ALU:
            encoder, _ = I_ALU[operation]
            word = encoder(rd, rs1, imm)
        else:
            raise ValueError(f"Unknown ALU operation: {operation}")

        record = await self.execute(word)
        if self.log:
            cocotb.log.info(
                f"{operation} r{rd}, r{rs1}, "
                f"{'r' + str(rs2) if operation in R_ALU else str(imm)}: "
                f"result=0x{self.model.core.registers.read(rd):02X}"
            )
        return record
