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

"""Wire-level view of the core through its 8-bit pin groups.

Pin Model
=========

The gateware top level exposes the core through three input groups and
three output groups:

    rst_n    active-low reset
    ui_in    bit 7: load strobe, bits 6:0: low instruction byte
    uio_in   high instruction byte
    uo_out   result_out
    uio_out  debug_out = {pc[4:0], current_rd[2:0]}
    uio_oe   output-enable mask, always 0xFF

``ui_in`` is captured whole as the low byte, so bit 7 of any instruction
loaded over the pins is the strobe and always reads 1. Words with bit 7
clear (rs1 in R0-R3) cannot be loaded verbatim through the pins.

This model is what the co-simulation testbench compares against the DUT.
"""

from dataclasses import dataclass

from picorisc.config import (
    DEFAULT_CORE_CONFIG,
    LOAD_STROBE,
    LOW7_MASK,
    MASK8,
    CoreConfig,
)
from picorisc.models.core import Core


@dataclass(frozen=True)
class PinOutputs:
    """Output pin groups after a clock edge."""

    uo_out: int
    uio_out: int
    uio_oe: int


def pin_frames(word: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return the ``(ui_in, uio_in)`` pairs of the two load ticks.

    The first tick carries the low seven bits with the strobe set; the
    second keeps the strobe asserted and presents the high byte.

    Args:
        word: 16-bit instruction

    Returns:
        Two ``(ui_in, uio_in)`` tuples
    """
    low = LOAD_STROBE | (word & LOW7_MASK)
    high = (word >> 8) & MASK8
    return ((low, 0), (low, high))


class PinInterface:
    """Drives a ``Core`` from pin-level values, one clock edge per call."""

    def __init__(
        self, core: Core | None = None, config: CoreConfig = DEFAULT_CORE_CONFIG
    ) -> None:
        self.core = core if core is not None else Core(config)

    def clock(self, rst_n: int, ui_in: int, uio_in: int) -> PinOutputs:
        """Apply one clock edge with the given input pins.

        Args:
            rst_n: Active-low reset (0 resets)
            ui_in: Dedicated input pins
            uio_in: Bidirectional pins, used as inputs

        Returns:
            Output pins after the edge
        """
        outputs = self.core.tick(
            reset=not rst_n,
            load_enable=bool(ui_in & LOAD_STROBE),
            low_bus=ui_in & MASK8,
            high_bus=uio_in & MASK8,
        )
        return PinOutputs(
            uo_out=outputs.result_out,
            uio_out=outputs.debug_out,
            uio_oe=outputs.output_enable,
        )

    @property
    def outputs(self) -> PinOutputs:
        """Output pins for the current state, without clocking."""
        outputs = self.core.outputs
        return PinOutputs(
            uo_out=outputs.result_out,
            uio_out=outputs.debug_out,
            uio_oe=outputs.output_enable,
        )
