"""Global time & unit conversion constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`vallado_2013_astro`
    #. :cite:t:`meeus_1998_algorithms`, Chapter 7
"""

from __future__ import annotations

# Third Party Imports
from numpy import iinfo, int64

# Conversion constants
MIN2SEC = 60.0
HR2SEC = 3600.0
DAYS2SEC = 24.0 * 3600
SEC2DAYS = 1.0 / DAYS2SEC
SEC2NS = 1e9
NS2SEC = 1e-9
US2NS = 1000

NS_PER_SEC: int = 1_000_000_000
"""``int``: exact number of nanoseconds in a second."""
NS_PER_MIN: int = 60 * NS_PER_SEC
"""``int``: exact number of nanoseconds in a minute."""
NS_PER_HR: int = 60 * NS_PER_MIN
"""``int``: exact number of nanoseconds in an hour."""
NS_PER_DAY: int = 24 * NS_PER_HR
"""``int``: exact number of nanoseconds in a day, no leap seconds."""

# Epochs
JD_J2000: float = 2451545.0
"""``float``: Julian date of the J2000 epoch, 2000-01-01 12:00:00 on the UTC-like timescale."""
MJD_OFFSET: float = 2400000.5
"""``float``: offset subtracted from a Julian date to get a Modified Julian date."""

# Signed 64-bit nanosecond range
NS_MIN: int = int(iinfo(int64).min)
"""``int``: most negative representable nanosecond count."""
NS_MAX: int = int(iinfo(int64).max)
"""``int``: most positive representable nanosecond count."""
