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

"""Bit-level helpers for the 8-bit datapath.

BIT UTILS
=========

This module provides utility functions for fixed-width arithmetic:
- Field extraction from instruction words
- Sign extension for arbitrary bit widths

Constants like MASK8, MASK16, etc. should be imported from config.
"""

__all__ = ["bit_field", "sign_extend"]


def bit_field(word: int, shift: int, mask: int) -> int:
    """Extract a field from a word.

    Args:
        word: Source word
        shift: Bit position of the field's least significant bit
        mask: Right-aligned mask for the field width

    Returns:
        Field value, right-aligned

    Example:
        >>> bit_field(0b1110_0000_0000_0000, 13, 0b111)
        7
    """
    return (word >> shift) & mask


def sign_extend(val: int, bits: int) -> int:
    """Sign extend a value to a specified length in bits.

    Args:
        val: Value to sign-extend
        bits: Number of bits in the original value

    Returns:
        Sign-extended value as a Python int (unbounded)

    Example:
        >>> sign_extend(0x1F, 5)
        -1
        >>> sign_extend(0x0F, 5)
        15
    """
    sign = 1 << (bits - 1)
    return (val & (sign - 1)) - (val & sign)

