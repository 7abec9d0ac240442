"""Main Module Documentation.

SIMCORE holds the numeric value types shared by the simulation engine: absolute and elapsed time
on a continuous nanosecond timescale anchored at J2000 (see :mod:`.physics.time`), and a
3-component vector for positions, velocities & forces (see :mod:`.physics.vector`).
"""

from __future__ import annotations

__version__ = "1.0.0"
