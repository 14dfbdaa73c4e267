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

"""Tests for the instruction-level program driver."""

import logging

import pytest

from picorisc.encoders.instruction_encode import enc_b, enc_i, enc_li, enc_nop
from picorisc.models.program_driver import ProgramDriver
from picorisc.utils.validation import ValidationError


class TestExecute:
    def test_execute_returns_record(self, driver):
        record = driver.execute(enc_li(2, 6))
        assert record.mnemonic == "li"
        assert record.rd_written == 2
        assert record.pc_before == 0
        assert record.pc_after == 1

    def test_execute_sequence_ignores_pc(self, driver):
        records = driver.execute_sequence(
            [enc_li(5, 1), enc_b(0b000, rs1=5, rs2=5, offset=13), enc_li(4, 9)]
        )
        assert [r.mnemonic for r in records] == ["li", "beq", "li"]
        assert driver.core.registers.read(4) == 9
        assert driver.core.pc == 1 + 13 + 1

    def test_idle_and_reset_return_outputs(self, driver):
        driver.execute(enc_li(1, 3))
        assert driver.idle(2).result_out == 3
        assert driver.reset(3).result_out == 0


class TestRun:
    def test_forward_branch_skips_instructions(self, driver):
        program = [
            enc_li(5, 1),
            enc_b(0b000, rs1=5, rs2=5, offset=5),
            enc_li(3, 31),
            enc_li(3, 31),
            enc_li(3, 31),
            enc_li(3, 31),
            enc_li(4, 9),
        ]
        records = driver.run(program)
        assert len(records) == 3
        assert driver.core.registers.read(3) == 0
        assert driver.core.registers.read(4) == 9
        assert driver.core.pc == len(program)

    def test_backward_branch_loop(self, sign_extend_driver):
        program = [
            enc_li(7, 3, rs1=4),
            enc_li(6, 0, rs1=4),
            enc_i(0b000, 6, 6, 1),
            # bne r6, r7, -1
            enc_b(0b001, rs1=6, rs2=7, offset=31),
        ]
        records = sign_extend_driver.run(program)
        assert len(records) == 2 + 3 + 3
        assert sign_extend_driver.core.registers.read(6) == 3

    def test_instruction_budget(self, driver):
        spin = enc_b(0b000, rs1=4, rs2=0, offset=0)
        records = driver.run([spin], max_instructions=10)
        assert len(records) == 10
        assert driver.core.pc == 0

    def test_empty_program(self, driver):
        assert driver.run([]) == []


class TestStrictAndTrace:
    def test_strict_mode_flags_torn_load(self, core):
        driver = ProgramDriver(core, strict=True)
        core.tick(load_enable=True, low_bus=0x85)
        with pytest.raises(ValidationError, match="Torn instruction load"):
            driver.load(enc_nop())

    def test_non_strict_accepts_torn_load(self, driver):
        driver.core.tick(load_enable=True, low_bus=0x85)
        driver.load(enc_nop())
        # the handshake is now one tick out of phase with the loader
        assert driver.core.loader.awaiting_high
        assert not driver.core.loader.valid

    def test_trace_logs_each_instruction(self, core, caplog):
        caplog.set_level(logging.INFO, logger="picorisc.utils.instruction_logger")
        ProgramDriver(core, trace=True).execute(enc_li(1, 5))
        assert any("r1 ← 0x05" in message for message in caplog.messages)

    def test_torn_load_warning(self, driver, caplog):
        driver.core.tick(load_enable=True, low_bus=0x85)
        driver.load(enc_nop())
        assert "TORN-LOAD" in caplog.text
