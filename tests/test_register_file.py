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

"""Tests for the register file."""

import pytest

from picorisc.exceptions import RegisterAccessError, VerificationError
from picorisc.models.register_file import RegisterFile


class TestRegisterFile:
    def test_starts_zeroed(self):
        assert RegisterFile().snapshot() == (0,) * 8

    def test_write_then_read(self):
        regs = RegisterFile()
        regs.write(3, 0x42)
        assert regs.read(3) == 0x42
        assert regs[3] == 0x42

    def test_values_truncated_to_8_bits(self):
        regs = RegisterFile()
        regs.write(7, 0x1AB)
        assert regs.read(7) == 0xAB

    def test_zero_register_ignores_writes(self):
        regs = RegisterFile()
        for value in (1, 0x80, 0xFF, 0x100):
            regs.write(0, value)
            assert regs.read(0) == 0

    def test_reset(self):
        regs = RegisterFile()
        for index in range(8):
            regs.write(index, index + 1)
        regs.reset()
        assert regs.snapshot() == (0,) * 8

    def test_repr(self):
        regs = RegisterFile()
        regs.write(1, 5)
        assert "R1=05" in repr(regs)

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_out_of_range_index(self, index):
        regs = RegisterFile()
        with pytest.raises(RegisterAccessError) as excinfo:
            regs.read(index)
        assert excinfo.value.index == index
        with pytest.raises(VerificationError):
            regs.write(index, 1)
