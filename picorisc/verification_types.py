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

"""Type aliases and custom types for the core model.

Types
=====

This module defines NewTypes for better type safety and code clarity
throughout the model, encoders and testbenches.
"""

from typing import NewType

# Register-related types
RegisterIndex = NewType("RegisterIndex", int)
"""Register index (0-7, where 0 is hardwired to zero)."""

# Instruction-related types
Instruction = NewType("Instruction", int)
"""16-bit encoded instruction word."""

ProgramCounter = NewType("ProgramCounter", int)
"""8-bit program counter value."""
