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

"""Utility functions for the core model and testbenches.

This package provides helper functions used throughout the project for
bit manipulation, logging, and validation.

Modules
-------
bit_utils
    Fixed-width helpers:
    - Field extraction from instruction words
    - Sign extension for arbitrary bit widths

instruction_logger
    Structured logging for instruction execution:
    - Formatted output with PC flow and register updates
    - Coverage summary reporting
    - Protocol events (reset, torn loads) and mismatches

validation
    Enhanced assertion utilities:
    - HardwareAssertions class for core-specific validations
    - Register index and immediate range checking
    - Load-protocol checks (torn loads, pin-loadable words)

Usage
-----
Import utilities as needed::

    from picorisc.utils.bit_utils import sign_extend
    from picorisc.utils.validation import HardwareAssertions

    # Sign extend a 5-bit immediate
    signed_imm = sign_extend(raw_imm, bits=5)

    # Validate a register index
    HardwareAssertions.assert_register_valid(reg_idx)
"""

from picorisc.utils.bit_utils import bit_field, sign_extend
from picorisc.utils.validation import HardwareAssertions, ValidationError

# Note: InstructionLogger is not imported at package level to avoid circular
# imports. Import it directly:
#     from picorisc.utils.instruction_logger import InstructionLogger

__all__ = [
    "sign_extend",
    "bit_field",
    "HardwareAssertions",
    "ValidationError",
]
