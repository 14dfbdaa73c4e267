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

"""PicoRISC-V core model and verification framework.

This package provides a cycle-accurate software model of the PicoRISC-V
educational core (8-bit datapath, 16-bit instructions loaded over two
8-bit buses) and a CoCoTB (Coroutine-based Co-simulation Testbench)
environment that checks the gateware against it.

Package Structure
-----------------

Subpackages:
    models
        The core model: register file, ALU, decoder, branch unit,
        instruction loader, state machine, pin adapter, program driver

    encoders
        Instruction encoders and mnemonic -> (encoder, evaluator) tables

    monitors
        Runtime monitors comparing DUT output pins to the model

    cocotb_tests
        Co-simulation tests and infrastructure for the gateware

    utils
        Utility functions for bit manipulation, logging, and validation

Modules:
    config
        Central configuration constants (bit masks, field layout, etc.)
        and the CoreConfig revision variants

    verification_types
        Type aliases for type safety (Instruction, RegisterIndex, etc.)

    exceptions
        Custom exception hierarchy

Quick Start
-----------
Run the model's unit tests::

    pytest

Run the co-simulation tests against the gateware (needs a simulator)::

    make test TEST=test_add_then_stable
"""

# Re-export commonly used types for convenience
from picorisc.verification_types import Instruction, ProgramCounter, RegisterIndex
from picorisc.config import MASK8, MASK16, CoreConfig
from picorisc.models.core import Core, CoreOutputs, CoreState

__all__ = [
    "Instruction",
    "ProgramCounter",
    "RegisterIndex",
    "MASK8",
    "MASK16",
    "CoreConfig",
    "Core",
    "CoreOutputs",
    "CoreState",
]
