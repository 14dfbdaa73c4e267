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

"""Tests for instruction decoding and disassembly."""

from picorisc.config import OPCODE_B, OPCODE_I, OPCODE_R, OPCODE_S
from picorisc.encoders import ALL_OPERATIONS
from picorisc.encoders.instruction_encode import enc_b, enc_i, enc_li, enc_r, enc_s
from picorisc.models.decoder import decode, disassemble


class TestFieldSlicing:
    def test_load_immediate(self):
        fields = decode(0xE505)
        assert fields.opcode == OPCODE_I
        assert fields.rd == 1
        assert fields.rs1 == 0
        assert fields.funct3 == 0b111
        assert fields.imm == 5
        assert fields.imm_extended == 5
        assert fields.mnemonic == "li"

    def test_register_register(self):
        fields = decode(0x0128)
        assert fields.opcode == OPCODE_R
        assert (fields.rd, fields.rs1, fields.rs2) == (2, 1, 1)
        assert fields.format == "R"
        assert fields.mnemonic == "add"

    def test_immediate_overlaps_rs2(self):
        fields = decode(enc_i(0b000, 1, 4, 0b11010))
        assert fields.imm == 0b11010
        assert fields.rs2 == 0b010

    def test_bits_above_15_ignored(self):
        assert decode(0x1_0128) == decode(0x0128)

    def test_opcode_classes(self):
        assert decode(enc_s(0, 1, 2, 3)).opcode == OPCODE_S
        assert decode(enc_b(0, 1, 2)).opcode == OPCODE_B
        assert decode(enc_s(0, 1, 2, 3)).mnemonic == "store"


class TestImmediateExtension:
    def test_zero_extension_is_default(self):
        assert decode(enc_li(1, 31)).imm_extended == 31

    def test_sign_extension_variant(self):
        assert decode(enc_li(1, 31), sign_extend_immediate=True).imm_extended == 0xFF
        assert decode(enc_li(1, 15), sign_extend_immediate=True).imm_extended == 15
        assert decode(enc_li(1, 16), sign_extend_immediate=True).imm_extended == 0xF0


class TestMnemonics:
    def test_unlisted_i_type_funct3_is_load_immediate(self):
        assert decode(enc_i(0b001, 1, 0, 3)).mnemonic == "li"
        assert decode(enc_i(0b101, 1, 0, 3)).mnemonic == "li"
        assert decode(enc_i(0b110, 1, 0, 3)).mnemonic == "li"

    def test_branch_uses_low_two_funct3_bits(self):
        assert decode(enc_b(0b101, 1, 2)).mnemonic == "bne"

    def test_every_word_decodes(self):
        # Decoding is total: no pattern is rejected
        for word in range(0, 0x10000, 7):
            assert decode(word).mnemonic in ALL_OPERATIONS


class TestDisassemble:
    def test_formats(self):
        assert disassemble(enc_li(1, 5)) == "li r1, 5"
        assert disassemble(enc_r(0, 2, 1, 1)) == "add r2, r1, r1"
        assert disassemble(enc_i(0, 1, 4, 3)) == "addi r1, r4, 3"
        assert disassemble(enc_s(0, 3, 4, 7)) == "store r3, r4, r7"
        assert disassemble(enc_b(0, 1, 2)) == "beq r1, r2, 2"
