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

"""Validation utilities and improved assertions for testing.

Validation Utilities
====================

This module provides enhanced assertion and validation functions with
rich error reporting. Unlike standard Python assertions, these provide
detailed context to help debug failures quickly.

The core never reports protocol misuse on its own (the hardware has no
fault signalling). Testbenches use these helpers to turn misuse such as a
torn two-phase load into an assertion failure instead.

Provided Utilities:

    ValidationError: Enhanced AssertionError with context dict
        - Stores context as attributes
        - Formats context in error message

    Assertion Functions:
        - assert_equals(): Compare values with detailed mismatch info
        - assert_in_range(): Check value bounds
        - assert_bit_width(): Ensure value fits in bit width

    HardwareAssertions: core-specific checks
        - assert_register_valid(): Register index in [0, 7]
        - assert_immediate_5bit(): Immediate in [0, 31]
        - assert_load_complete(): No half-finished load pending
        - assert_pin_loadable(): Word survives the pin-level strobe bit

Example:
    >>> try:
    ...     assert_equals(0x0A, 0x05, "Register mismatch", cycle=12, reg="R2")
    ... except ValidationError as e:
    ...     print(e.context['cycle'])  # 12
    ...     print(e.context['expected'])  # 0x05
"""

from typing import Any

from picorisc.config import LOAD_STROBE, NUM_REGISTERS, IMM_BITS


class ValidationError(AssertionError):
    """Enhanced assertion error with context."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and context."""
        self.context = context
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        super().__init__(f"{message}\nContext:\n{context_str}" if context else message)


def assert_equals(
    actual: Any, expected: Any, message: str = "", **context: Any
) -> None:
    """Assert equality with enhanced error reporting."""
    if actual != expected:
        base_msg = message or f"Expected {expected}, got {actual}"
        raise ValidationError(
            base_msg,
            actual=actual,
            expected=expected,
            difference=actual - expected if isinstance(actual, int | float) else None,
            **context,
        )


def assert_in_range(
    value: int, min_val: int, max_val: int, name: str = "value"
) -> None:
    """Assert value is within range."""
    if not min_val <= value <= max_val:
        raise ValidationError(
            f"{name} out of range",
            value=value,
            min=min_val,
            max=max_val,
            out_by=min(abs(value - min_val), abs(value - max_val)),
        )


def assert_bit_width(value: int, bits: int, name: str = "value") -> None:
    """Assert value fits in specified bit width."""
    max_val = (1 << bits) - 1
    if value < 0 or value > max_val:
        raise ValidationError(
            f"{name} exceeds {bits}-bit width",
            value=hex(value),
            bits=bits,
            max_value=hex(max_val),
        )


class HardwareAssertions:
    """Core-specific assertion helpers."""

    @staticmethod
    def assert_register_valid(reg: int) -> None:
        """Assert register number is valid."""
        assert_in_range(reg, 0, NUM_REGISTERS - 1, "register")

    @staticmethod
    def assert_immediate_5bit(imm: int) -> None:
        """Assert immediate fits the unsigned 5-bit field."""
        assert_in_range(imm, 0, (1 << IMM_BITS) - 1, "5-bit immediate")

    @staticmethod
    def assert_load_complete(core: Any) -> None:
        """Assert the loader is not waiting for the second half of a load.

        A caller that deasserts load enable after only the first load tick
        leaves the loader waiting for a high byte; the next load then pairs
        a stale low byte with a new high byte.
        """
        if core.loader.awaiting_high:
            raise ValidationError(
                "Torn instruction load: low byte captured without high byte",
                accumulator=hex(core.loader.accumulator),
                cycle=core.cycle,
            )

    @staticmethod
    def assert_pin_loadable(word: int) -> None:
        """Assert a word's bit 7 is set so the pin-level strobe can't alter it.

        Over the pins, bit 7 of the low byte doubles as the load strobe and
        is captured as 1 for every loaded word.
        """
        if not word & LOAD_STROBE:
            raise ValidationError(
                "Instruction bit 7 is clear; the pin-level strobe will set it",
                instruction=f"0x{word:04X}",
                loaded_as=f"0x{word | LOAD_STROBE:04X}",
            )
