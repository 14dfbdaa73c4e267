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

"""Output pin monitors.

Monitors
========

The core has no valid/ready signalling on its outputs: every rising edge
produces a new (possibly unchanged) set of output pins. The test driver
clocks the software model with the same inputs it drives into the DUT and
queues the model's outputs; the monitor pops one expectation per rising
edge and compares once signals have settled.
"""

from collections import deque
from typing import Any

import cocotb
from cocotb.triggers import ReadOnly, RisingEdge

from picorisc.exceptions import MismatchError
from picorisc.models.pin_model import PinOutputs
from picorisc.utils.instruction_logger import InstructionLogger


class Monitor:
    """Base class for clocked monitors.

    Attributes:
        dut: CoCoTB DUT handle
        expected_queue: Expectations, oldest first
        checks: Number of comparisons performed
    """

    def __init__(self, dut: Any, expected_queue: deque) -> None:
        self.dut = dut
        self.expected_queue = expected_queue
        self.checks = 0

    def compare(self, cycle: int, expected: Any) -> None:
        raise NotImplementedError

    async def run(self) -> None:
        """Compare outputs after every rising edge that has an expectation."""
        cycle = 0
        while True:
            await RisingEdge(self.dut.clk)
            await ReadOnly()
            cycle += 1
            if not self.expected_queue:
                continue
            self.compare(cycle, self.expected_queue.popleft())
            self.checks += 1


class OutputPinMonitor(Monitor):
    """Checks ``uo_out``, ``uio_out`` and ``uio_oe`` against the model."""

    def compare(self, cycle: int, expected: PinOutputs) -> None:
        for name in ("uo_out", "uio_out", "uio_oe"):
            actual = int(getattr(self.dut, name).value)
            want = getattr(expected, name)
            if actual != want:
                InstructionLogger.log_mismatch(name, cycle, want, actual)
                raise MismatchError(
                    f"{name} mismatch at cycle {cycle}: got 0x{actual:02X}, "
                    f"expected 0x{want:02X}, RANDOM_SEED {cocotb.RANDOM_SEED}",
                    expected_value=want,
                    actual_value=actual,
                    cycle=cycle,
                )


async def output_monitor(dut: Any, expected_queue: deque) -> None:
    """Coroutine form of ``OutputPinMonitor`` for ``cocotb.start_soon``."""
    await OutputPinMonitor(dut, expected_queue).run()
