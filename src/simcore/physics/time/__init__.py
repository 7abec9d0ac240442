"""Contains classes and conversion functions for absolute and elapsed time.

:class:`.Time` is an instant on a continuous, UTC-like timescale counted in integer nanoseconds
from J2000, :class:`.Duration` an elapsed number of seconds, and :class:`.UtcCalendar` the
calendar fields used to build or read back a :class:`.Time`.
"""

from __future__ import annotations

# Local Imports
from .stardate import Duration, Time, UtcCalendar

__all__ = ["Duration", "Time", "UtcCalendar"]
