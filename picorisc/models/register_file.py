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

"""Software model of the core's register file.

Register File Model
===================

Eight 8-bit general-purpose registers, R0-R7. R0 is the zero register:
it always reads 0 and silently drops writes, so no sequence of writes can
make it observable as anything but zero.

The register file is owned by ``Core`` and written only from its commit
step. Testbenches may read it freely.
"""

from picorisc.config import MASK8, NUM_REGISTERS, ZERO_REGISTER
from picorisc.exceptions import RegisterAccessError


class RegisterFile:
    """Eight 8-bit registers with R0 hardwired to zero.

    Attributes:
        registers: Backing storage, one int per register
    """

    def __init__(self) -> None:
        """Initialize all registers to zero."""
        self.registers: list[int] = [0] * NUM_REGISTERS

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < NUM_REGISTERS:
            raise RegisterAccessError(
                f"Register index {index} outside R0-R{NUM_REGISTERS - 1}",
                index=index,
            )

    def read(self, index: int) -> int:
        """Read a register.

        Args:
            index: Register index (0-7)

        Returns:
            8-bit register value (always 0 for R0)
        """
        self._check_index(index)
        if index == ZERO_REGISTER:
            return 0
        return self.registers[index]

    def write(self, index: int, value: int) -> None:
        """Write a register; writes to R0 are ignored.

        Args:
            index: Register index (0-7)
            value: Value to store, truncated to 8 bits
        """
        self._check_index(index)
        if index == ZERO_REGISTER:
            return
        self.registers[index] = value & MASK8

    def reset(self) -> None:
        """Zero every register."""
        self.registers = [0] * NUM_REGISTERS

    def snapshot(self) -> tuple[int, ...]:
        """Return the values of R0-R7 as seen by a reader."""
        return tuple(self.read(index) for index in range(NUM_REGISTERS))

    def __getitem__(self, index: int) -> int:
        return self.read(index)

    def __repr__(self) -> str:
        values = " ".join(f"R{i}={v:02X}" for i, v in enumerate(self.snapshot()))
        return f"RegisterFile({values})"
