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

"""Structured logging for instruction execution and debugging.

Instruction Logger
==================

Provides utilities for logging instruction execution with rich context,
making debugging and waveform correlation much easier. Records go to a
standard ``logging`` logger; inside a cocotb simulation they are rendered
by cocotb's log handlers alongside ``cocotb.log`` output.
"""

import logging

log = logging.getLogger(__name__)


class InstructionLogger:
    """Structured logging for instruction execution.

    Provides formatted, context-rich logging for instruction execution,
    making it easier to debug verification failures and correlate with
    waveforms.
    """

    @staticmethod
    def log_instruction_execution(
        cycle: int,
        operation: str,
        pc_current: int,
        pc_expected: int,
        destination_register: int | None,
        writeback_value: int,
        source_register_1: int,
        source_register_2: int,
        immediate: int | None = None,
        branch_taken: bool | None = None,
    ) -> None:
        """Log instruction execution with full context.

        Args:
            cycle: Current tick
            operation: Instruction mnemonic (e.g., "add", "li")
            pc_current: PC before the instruction
            pc_expected: PC after the instruction
            destination_register: Register written (or None)
            writeback_value: Value written to the destination
            source_register_1: First source register index
            source_register_2: Second source register index
            immediate: Immediate value (if applicable)
            branch_taken: Branch decision (for branches)
        """
        parts = [
            f"[Cycle {cycle:5d}]",
            f"{operation:6s}",
            f"PC: 0x{pc_current:02x} → 0x{pc_expected:02x}",
        ]

        if destination_register is not None:
            parts.append(f"r{destination_register} ← 0x{writeback_value:02x}")

        parts.append(f"(r{source_register_1}, r{source_register_2})")

        if immediate is not None:
            parts.append(f"imm={immediate}")

        if branch_taken is not None:
            parts.append(f"[{'TAKEN' if branch_taken else 'NOT-TAKEN'}]")

        log.info(" ".join(parts))

    @staticmethod
    def log_record(record) -> None:
        """Log an ``ExecutionRecord`` produced by the core model."""
        fields = record.instruction
        uses_immediate = fields.format in ("I", "B")
        InstructionLogger.log_instruction_execution(
            cycle=record.cycle,
            operation=record.mnemonic,
            pc_current=record.pc_before,
            pc_expected=record.pc_after,
            destination_register=record.rd_written,
            writeback_value=record.rd_value,
            source_register_1=fields.rs1,
            source_register_2=fields.rs2,
            immediate=fields.imm_extended if uses_immediate else None,
            branch_taken=record.branch_taken,
        )

    @staticmethod
    def log_protocol_event(cycle: int, event: str, details: str = "") -> None:
        """Log load-protocol events like resets or torn loads.

        Args:
            cycle: Current tick
            event: Event name (e.g., "RESET", "TORN-LOAD")
            details: Additional details about the event
        """
        details_str = f": {details}" if details else ""
        log.warning(f"[Cycle {cycle:5d}] PROTOCOL {event}{details_str}")

    @staticmethod
    def log_mismatch(
        component: str,
        cycle: int,
        expected: int,
        actual: int,
    ) -> None:
        """Log hardware-software mismatch for debugging.

        Args:
            component: Output that mismatched ("uo_out", "uio_out", ...)
            cycle: Tick when mismatch occurred
            expected: Expected value from software model
            actual: Actual value from hardware
        """
        log.error(
            f"[Cycle {cycle:5d}] MISMATCH {component}: "
            f"expected=0x{expected:02x}, actual=0x{actual:02x}"
        )

    @staticmethod
    def log_coverage_summary(
        instruction_counts: dict[str, int], threshold: int
    ) -> None:
        """Log instruction coverage summary.

        Args:
            instruction_counts: Dict mapping operation → execution count
            threshold: Minimum required execution count
        """
        from picorisc.encoders.op_tables import BRANCHES, I_ALU, STORES

        log.info("=" * 60)
        log.info("INSTRUCTION COVERAGE SUMMARY")
        log.info("=" * 60)

        alu_ops = []
        imm_ops = []
        store_ops = []
        branch_ops = []

        for op, count in sorted(instruction_counts.items()):
            if op in BRANCHES:
                branch_ops.append((op, count))
            elif op in STORES:
                store_ops.append((op, count))
            elif op in I_ALU:
                imm_ops.append((op, count))
            else:
                alu_ops.append((op, count))

        for category, ops in [
            ("ALU Operations", alu_ops),
            ("Immediate Operations", imm_ops),
            ("Store Operations", store_ops),
            ("Branch Operations", branch_ops),
        ]:
            if ops:
                log.info(f"\n{category}:")
                for op, count in ops:
                    status = "✓" if count >= threshold else "✗"
                    log.info(f"  {status} {op:10s}: {count:5d} executions")

        log.info("=" * 60)
