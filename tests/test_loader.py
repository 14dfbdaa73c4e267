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

"""Tests for the two-phase instruction loader."""

from picorisc.models.loader import InstructionLoader, LoaderPhase


class TestInstructionLoader:
    def test_two_steps_assemble_word(self):
        loader = InstructionLoader()
        loader.step(0x85, 0x00)
        assert loader.phase is LoaderPhase.HIGH
        assert loader.awaiting_high
        assert not loader.valid

        loader.step(0x00, 0xE5)
        assert loader.phase is LoaderPhase.LOW
        assert loader.valid
        assert loader.consume() == 0xE585
        assert not loader.valid

    def test_first_step_clears_validity(self):
        loader = InstructionLoader()
        loader.step(0x11, 0)
        loader.step(0, 0x22)
        loader.step(0x33, 0)
        assert not loader.valid

    def test_high_step_keeps_low_byte(self):
        loader = InstructionLoader()
        loader.step(0xAB, 0xFF)
        loader.step(0xFF, 0xCD)
        assert loader.accumulator == 0xCDAB

    def test_torn_load_reuses_stale_low_byte(self):
        loader = InstructionLoader()
        loader.step(0x85, 0)
        # strobe dropped here; the next strobe is taken as the high half
        loader.step(0x99, 0x12)
        assert loader.valid
        assert loader.consume() == 0x1285

    def test_reset(self):
        loader = InstructionLoader()
        loader.step(0x85, 0)
        loader.reset()
        assert loader.phase is LoaderPhase.LOW
        assert loader.accumulator == 0
        assert not loader.valid
