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

"""Two-phase instruction loader.

Instruction Loader
==================

Assembles one 16-bit instruction from two successive 8-bit bus transfers:

    1. Load tick in phase LOW: low bus -> accumulator[7:0], phase -> HIGH,
       validity cleared
    2. Load tick in phase HIGH: high bus -> accumulator[15:8], phase -> LOW,
       validity set

Ticks without load enable leave everything untouched, so a caller that
stops after the first transfer leaves the loader in phase HIGH. The next
load then completes with the stale low byte (a torn instruction). The
loader doesn't detect this; see ``HardwareAssertions.assert_load_complete``.
"""

from enum import Enum

from picorisc.config import MASK8, MASK16


class LoaderPhase(Enum):
    """Which half of the instruction the next load tick captures."""

    LOW = 0
    HIGH = 1


class InstructionLoader:
    """Accumulates two bus bytes into an instruction word.

    Attributes:
        phase: Half captured by the next load tick
        accumulator: Partially or fully assembled 16-bit word
        valid: Set once both halves are captured, cleared when consumed
    """

    def __init__(self) -> None:
        self.phase = LoaderPhase.LOW
        self.accumulator = 0
        self.valid = False

    @property
    def awaiting_high(self) -> bool:
        """True between the first and second load ticks."""
        return self.phase is LoaderPhase.HIGH

    def step(self, low_bus: int, high_bus: int) -> None:
        """Perform one load tick (load enable asserted).

        Args:
            low_bus: Byte captured in phase LOW
            high_bus: Byte captured in phase HIGH
        """
        if self.phase is LoaderPhase.LOW:
            self.accumulator = (self.accumulator & 0xFF00) | (low_bus & MASK8)
            self.phase = LoaderPhase.HIGH
            self.valid = False
        else:
            self.accumulator = ((high_bus & MASK8) << 8) | (self.accumulator & MASK8)
            self.phase = LoaderPhase.LOW
            self.valid = True

    def consume(self) -> int:
        """Hand the assembled word to the core and clear validity."""
        self.valid = False
        return self.accumulator & MASK16

    def reset(self) -> None:
        """Return to phase LOW with an empty accumulator."""
        self.phase = LoaderPhase.LOW
        self.accumulator = 0
        self.valid = False
