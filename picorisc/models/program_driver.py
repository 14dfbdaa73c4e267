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

"""Synchronous testbench driver for the core model.

Program Driver
==============

``ProgramDriver`` wraps the load-then-execute pattern so tests and tools
can work at the instruction level instead of the tick level:

1. Drive the two load ticks (low byte with the strobe, then high byte)
2. Drive idle ticks until the core executes the instruction
3. Return the core's ``ExecutionRecord``

Two ways to feed instructions are provided:

    execute_sequence(words)
        Stream words in order, ignoring the PC. This is what a host does
        with the real chip: the PC only shows up on the debug output.

    run(program, max_instructions)
        Treat ``program`` as an unbounded instruction buffer indexed by
        the PC, so taken branches redirect execution. Stops when the PC
        leaves the buffer or the instruction budget is spent; there is no
        HALT instruction.

Usage:
    driver = ProgramDriver()
    driver.reset()
    driver.execute(enc_li(rd=1, imm=5))
    assert driver.core.registers.read(1) == 5
"""

from collections.abc import Iterable, Sequence

from picorisc.config import LOAD_STROBE, LOW7_MASK, MASK8
from picorisc.models.core import Core, CoreOutputs, ExecutionRecord
from picorisc.utils.instruction_logger import InstructionLogger
from picorisc.utils.validation import HardwareAssertions


class ProgramDriver:
    """Drives the three-tick load/execute protocol against a ``Core``.

    Attributes:
        core: The core being driven
        strict: Assert that no half-finished load is pending before each
            new load
        trace: Log every executed instruction through ``InstructionLogger``
        strobe_in_low_byte: Present ``0x80 | word[6:0]`` on the low bus, as
            the wire protocol does. When False the low byte is presented
            verbatim, so words with bit 7 clear (rs1 in r0-r3) load intact.
    """

    def __init__(
        self,
        core: Core | None = None,
        strict: bool = False,
        trace: bool = False,
        strobe_in_low_byte: bool = True,
    ) -> None:
        self.core = core if core is not None else Core()
        self.strict = strict
        self.trace = trace
        self.strobe_in_low_byte = strobe_in_low_byte

    def reset(self, cycles: int = 1) -> CoreOutputs:
        """Hold reset for ``cycles`` ticks."""
        outputs = self.core.outputs
        for _ in range(cycles):
            outputs = self.core.tick(reset=True)
        return outputs

    def idle(self, cycles: int = 1) -> CoreOutputs:
        """Drive ``cycles`` ticks with load enable deasserted."""
        outputs = self.core.outputs
        for _ in range(cycles):
            outputs = self.core.tick()
        return outputs

    def load(self, word: int) -> None:
        """Drive the two load ticks for ``word``.

        The first tick presents ``0x80 | word[6:0]`` on the low bus (or
        ``word[7:0]`` without ``strobe_in_low_byte``), the second presents
        ``word[15:8]`` on the high bus.
        """
        if self.strict:
            HardwareAssertions.assert_load_complete(self.core)
        elif self.core.loader.awaiting_high:
            InstructionLogger.log_protocol_event(
                self.core.cycle,
                "TORN-LOAD",
                f"stale low byte 0x{self.core.loader.accumulator & MASK8:02x}",
            )
        if self.strobe_in_low_byte:
            low = LOAD_STROBE | (word & LOW7_MASK)
        else:
            low = word & MASK8
        self.core.tick(load_enable=True, low_bus=low)
        self.core.tick(load_enable=True, low_bus=low, high_bus=(word >> 8) & MASK8)

    def execute(self, word: int) -> ExecutionRecord:
        """Load ``word`` and clock the core until it executes.

        Returns:
            The execution record of ``word``
        """
        self.load(word)
        # One idle tick, or two when the core has an issue latch
        for _ in range(2 if self.core.config.extra_execute_stage else 1):
            self.core.tick()
        record = self.core.last_execution
        assert record is not None, "core did not execute the loaded instruction"
        if self.trace:
            InstructionLogger.log_record(record)
        return record

    def execute_sequence(self, words: Iterable[int]) -> list[ExecutionRecord]:
        """Execute words in the order given, regardless of the PC."""
        return [self.execute(word) for word in words]

    def run(
        self, program: Sequence[int], max_instructions: int = 256
    ) -> list[ExecutionRecord]:
        """Execute ``program[pc]`` repeatedly until the PC leaves the program.

        Args:
            program: Instruction buffer, indexed by PC
            max_instructions: Upper bound on executed instructions

        Returns:
            Execution records in execution order
        """
        records: list[ExecutionRecord] = []
        while len(records) < max_instructions and self.core.pc < len(program):
            records.append(self.execute(program[self.core.pc]))
        return records
