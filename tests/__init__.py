"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# SIMCORE Imports
from simcore.physics.time import UtcCalendar

# Common calendar dates
TEST_J2000_UTC = UtcCalendar(2000, 1, 1, 12, 0, 0.0)
TEST_START_UTC = UtcCalendar(2018, 12, 1, 12, 0, 0.0)
TEST_START_JD: float = 2458454.0
TEST_START_NS: int = 596937600 * 10**9
