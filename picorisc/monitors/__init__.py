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

"""Runtime verification monitors for DUT output checking.

This package contains monitor coroutines that run concurrently with tests,
continuously checking that DUT outputs match expected values.

Monitors
--------
output_monitor
    Watches every rising edge and verifies ``uo_out`` (result),
    ``uio_out`` (debug: pc[4:0], current_rd) and ``uio_oe`` against the
    software model's outputs for the same inputs.

How Monitors Work
-----------------
Monitors are async coroutines started with cocotb.start_soon() at test
initialization. They run in parallel with the main test loop:

1. Test loop drives inputs on the falling edge
2. Test loop clocks the pin model with the same inputs and queues its outputs
3. Monitor waits for the rising edge and for signals to settle
4. Monitor pops the expected outputs and compares
5. Monitor raises MismatchError on mismatch

Usage
-----
::

    from picorisc.monitors.monitors import output_monitor

    cocotb.start_soon(output_monitor(dut, expected_outputs_queue))
"""

from picorisc.monitors.monitors import (
    output_monitor,
    Monitor,
    OutputPinMonitor,
)

__all__ = [
    "output_monitor",
    "Monitor",
    "OutputPinMonitor",
]
