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

"""Co-simulation tests and testbench infrastructure for the PicoRISC-V core.

This package contains the CoCoTB tests that drive the gateware top level
and compare every output pin against the software pin model.

Test Modules
------------

Bring-up and Random Regression:
    test_core
        Add-then-stable bring-up, reset, loading protocol and clock/reset
        stability tests, plus the constrained-random regression with
        per-mnemonic coverage tracking.

Directed Tests:
    test_directed
        LI, ADD, taken/not-taken branches, stores and one pass over every
        ALU mnemonic.

Infrastructure:
    test_common
        TestConfig (clock period, reset cycles, loop counts)

    test_helpers
        DUTInterface and TestStatistics helper classes

    instruction_executor
        InstructionExecutor, which drives the DUT and the pin model in
        lockstep

Running Tests
-------------
From the build directory::

    make test TEST=test_random_regression
    make test TEST=test_branch_taken
"""

# Re-export commonly used classes for convenience
from picorisc.cocotb_tests.test_common import TestConfig
from picorisc.cocotb_tests.test_helpers import DUTInterface, TestStatistics
from picorisc.cocotb_tests.instruction_executor import InstructionExecutor

__all__ = [
    "TestConfig",
    "DUTInterface",
    "TestStatistics",
    "InstructionExecutor",
]
