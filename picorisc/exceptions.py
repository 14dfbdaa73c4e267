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

"""Custom exceptions for model and verification errors.

Exceptions
==========

The core itself has no runtime error channel: every decode and ALU path is
total. These exceptions cover API misuse around the model (direct register
access, instruction encoding) and model/hardware disagreement during
co-simulation.
"""


class VerificationError(Exception):
    """Base exception for all model and verification failures.

    All project-specific exceptions inherit from this base class,
    allowing callers to catch them with a single handler.
    """

    pass


class RegisterAccessError(VerificationError):
    """Invalid register access attempt.

    Raised when a register index outside R0-R7 is passed directly to the
    register file. Decoded instructions can never produce such an index.
    """

    def __init__(self, message: str, index: int | None = None):
        """Initialize register access error with context.

        Args:
            message: Error description
            index: The offending register index
        """
        super().__init__(message)
        self.index = index


class CoverageError(VerificationError):
    """Insufficient instruction coverage.

    Raised when instruction coverage doesn't meet minimum thresholds,
    indicating that some instructions weren't tested adequately.
    """

    def __init__(self, message: str, failed_instructions: list[str] | None = None):
        """Initialize coverage error with failed instruction list.

        Args:
            message: Error description
            failed_instructions: Instructions below the coverage threshold
        """
        super().__init__(message)
        self.failed_instructions = failed_instructions or []


class InstructionEncodingError(VerificationError):
    """Invalid instruction encoding.

    Raised when attempting to encode an instruction with invalid parameters,
    such as out-of-range immediates, register indices, or a branch offset
    whose low bits disagree with rs2.
    """

    pass


class MismatchError(VerificationError):
    """Hardware-software mismatch detected.

    Raised when hardware outputs don't match software model expectations
    during co-simulation.
    """

    def __init__(
        self,
        message: str,
        expected_value: int | None = None,
        actual_value: int | None = None,
        cycle: int | None = None,
    ):
        """Initialize mismatch error with comparison context.

        Args:
            message: Error description
            expected_value: Expected value from software model
            actual_value: Actual value from hardware
            cycle: Simulation cycle when mismatch occurred
        """
        super().__init__(message)
        self.expected_value = expected_value
        self.actual_value = actual_value
        self.cycle = cycle
