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

"""Shared fixtures for the model unit tests.

The cocotb tests under ``picorisc/cocotb_tests`` need an HDL simulator and
are not collected here; everything in this directory runs against the
software model only.
"""

import pytest

from picorisc.config import CoreConfig
from picorisc.models.core import Core
from picorisc.models.program_driver import ProgramDriver


@pytest.fixture
def core():
    """A core straight out of reset."""
    core = Core()
    core.tick(reset=True)
    return core


@pytest.fixture
def driver(core):
    """Driver using the wire protocol (strobe in bit 7 of the low byte)."""
    return ProgramDriver(core)


@pytest.fixture
def verbatim_driver(core):
    """Driver that presents the low byte unmodified, so rs1 can be r0-r3."""
    return ProgramDriver(core, strobe_in_low_byte=False)


@pytest.fixture
def sign_extend_driver():
    core = Core(CoreConfig(sign_extend_immediate=True))
    core.tick(reset=True)
    return ProgramDriver(core)
