"""Defines the :class:`.Time`, :class:`.Duration` & :class:`.UtcCalendar` classes.

The classes defined in this module rigidly differentiate between absolute instants and elapsed
time. An absolute :class:`.Time` is stored as an integer count of nanoseconds since the J2000
epoch (2000-01-01 12:00:00, Julian date 2451545.0), while a :class:`.Duration` is a plain number of
seconds. Keeping them as separate types stops an elapsed time from being passed where an instant
is expected.

The timescale is a continuous "UTC-like" one: leap seconds are NOT modeled, so every day is
exactly 86400 seconds long.

.. code-block:: python

    start = Time.fromUtcCalendar(UtcCalendar(2018, 12, 1, 12, 0, 0.0))
    stop = start + Duration.fromHours(3)

    assert stop > start
    assert (stop - start).seconds == 10800.0

Real-valued inputs are rounded to the nanosecond grid only when a :class:`.Time` is built, so
comparisons and hashing are exact integer operations.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta
from operator import index
from typing import NamedTuple

# Local Imports
from .. import constants as const
from .conversions import (
    checkNanosecondRange,
    julianDayNumberToCalendar,
    secondsToNanoseconds,
    utcToJulianDate,
)

J2000_DATETIME: datetime = datetime(2000, 1, 1, 12)
"""``datetime``: naive ``datetime`` of the J2000 epoch on the UTC-like timescale."""


class Duration:
    """Class representing an elapsed time in floating point seconds.

    Rounding to discrete nanoseconds only happens when a :class:`.Duration` is combined with a
    :class:`.Time`.
    """

    def __init__(self, seconds: float = 0.0):
        """Construct a :class:`.Duration`.

        Args:
            seconds (``float``, optional): elapsed seconds, any sign. Defaults to 0.
        """
        self.seconds = float(seconds)

    @classmethod
    def fromSeconds(cls, seconds: float) -> Duration:
        """Build a :class:`.Duration` from seconds."""
        return cls(seconds)

    @classmethod
    def fromMinutes(cls, minutes: float) -> Duration:
        """Build a :class:`.Duration` from minutes."""
        return cls(const.MIN2SEC * minutes)

    @classmethod
    def fromHours(cls, hours: float) -> Duration:
        """Build a :class:`.Duration` from hours."""
        return cls(const.HR2SEC * hours)

    @classmethod
    def fromDays(cls, days: float) -> Duration:
        """Build a :class:`.Duration` from days of exactly 86400 seconds."""
        return cls(const.DAYS2SEC * days)

    @classmethod
    def fromTimedelta(cls, time_delta: timedelta) -> Duration:
        """Convert a ``timedelta`` object to a :class:`.Duration`."""
        return cls(time_delta.total_seconds())

    def toTimedelta(self) -> timedelta:
        """Convert this :class:`.Duration` to a ``timedelta`` object."""
        return timedelta(seconds=self.seconds)

    def __eq__(self, other):
        """Compare the number of seconds of two durations."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds == other.seconds

    def __repr__(self):
        """Return a string representation of this :class:`.Duration`."""
        return f"Duration(seconds={self.seconds!r})"


class UtcCalendar(NamedTuple):
    """Gregorian calendar date & time of day on the UTC-like timescale.

    The fields aren't checked on construction, only when consumed by
    :meth:`.Time.fromUtcCalendar`.

    Attributes:
        year (``int``): calendar year, any sign.
        month (``int``): month of the year, 1-12.
        day (``int``): day of the month, 1-31.
        hour (``int``): hour of the day, 0-23.
        minute (``int``): minute of the hour, 0-59.
        second (``float``): second of the minute, [0, 60). No leap seconds.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0


class Time:
    """Absolute instant stored as an integer count of nanoseconds since J2000.

    Instances are immutable: arithmetic and conversions always return new objects.
    """

    __slots__ = ("_ns_since_j2000",)

    JD_J2000: float = const.JD_J2000
    """``float``: Julian date of the J2000 epoch."""

    def __init__(self, ns_since_j2000: int = 0):
        """Construct a :class:`.Time` from an exact nanosecond count.

        Args:
            ns_since_j2000 (``int``, optional): integer nanoseconds since J2000. Defaults to the
                epoch itself.

        Raises:
            ``TypeError``: `ns_since_j2000` isn't an integer, booleans included.
            :class:`.TimeOverflowError`: `ns_since_j2000` doesn't fit in a signed 64-bit integer.
        """
        if isinstance(ns_since_j2000, bool):
            raise TypeError("Time: nanoseconds must be an integer, not a bool.")
        self._ns_since_j2000 = checkNanosecondRange(index(ns_since_j2000))

    @classmethod
    def fromSecondsSinceJ2000(cls, seconds: float) -> Time:
        """Construct from seconds since J2000, rounded to the nearest nanosecond.

        Raises:
            :class:`.TimeOverflowError`: the nanosecond count doesn't fit in 64 bits.
        """
        return cls(secondsToNanoseconds(seconds))

    @classmethod
    def fromNanosecondsSinceJ2000(cls, nanoseconds: int) -> Time:
        """Construct from an exact integer number of nanoseconds since J2000.

        Raises:
            :class:`.TimeOverflowError`: `nanoseconds` doesn't fit in a signed 64-bit integer.
        """
        return cls(nanoseconds)

    @classmethod
    def fromJulianDate(cls, julian_date: float) -> Time:
        """Construct from a Julian date.

        Args:
            julian_date (``float``): Julian date on the UTC-like timescale

        Returns:
            :class:`.Time`: corresponding instant

        Raises:
            :class:`.TimeOverflowError`: the nanosecond count doesn't fit in 64 bits.
        """
        days = julian_date - const.JD_J2000
        seconds = days * const.DAYS2SEC
        return cls.fromSecondsSinceJ2000(seconds)

    @classmethod
    def fromUtcCalendar(cls, utc: UtcCalendar) -> Time:
        """Construct from calendar date & time fields.

        Args:
            utc (:class:`.UtcCalendar`): Gregorian date & time of day

        Returns:
            :class:`.Time`: corresponding instant

        Raises:
            :class:`.InvalidCalendarError`: a calendar field is out of range.
            :class:`.TimeOverflowError`: the nanosecond count doesn't fit in 64 bits.
        """
        julian_date = utcToJulianDate(
            utc.year,
            utc.month,
            utc.day,
            utc.hour,
            utc.minute,
            utc.second,
        )
        return cls.fromJulianDate(julian_date)

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> Time:
        """Convert a naive ``datetime`` object to a :class:`.Time`, exact to the microsecond.

        Args:
            date_time (``datetime``): naive ``datetime`` on the UTC-like timescale.

        Returns:
            :class:`.Time`: corresponding instant

        Raises:
            :class:`.TimeOverflowError`: the nanosecond count doesn't fit in 64 bits.
        """
        delta = date_time - J2000_DATETIME
        nanoseconds = (delta.days * 86400 + delta.seconds) * const.NS_PER_SEC
        nanoseconds += delta.microseconds * const.US2NS
        return cls(nanoseconds)

    @property
    def ns_since_j2000(self) -> int:
        """``int``: exact nanoseconds since J2000."""
        return self._ns_since_j2000

    @property
    def seconds_since_j2000(self) -> float:
        """``float``: seconds since J2000."""
        return float(self._ns_since_j2000) * const.NS2SEC

    @property
    def julian_date(self) -> float:
        """``float``: Julian date of this instant."""
        return const.JD_J2000 + (self.seconds_since_j2000 / const.DAYS2SEC)

    @property
    def modified_julian_date(self) -> float:
        """``float``: Modified Julian date of this instant, JD - 2400000.5."""
        return self.julian_date - const.MJD_OFFSET

    def toUtcCalendar(self) -> UtcCalendar:
        """Return the calendar date & time of day of this instant.

        The time of day is taken from the exact nanosecond remainder, so it doesn't suffer from
        the limited resolution of a floating point Julian date.
        """
        # Nanoseconds since 2000-01-01 00:00:00, J2000 is at noon
        since_midnight = self._ns_since_j2000 + const.NS_PER_DAY // 2
        days, ns_of_day = divmod(since_midnight, const.NS_PER_DAY)
        year, month, day = julianDayNumberToCalendar(int(const.JD_J2000) + days)

        hour, remainder = divmod(ns_of_day, const.NS_PER_HR)
        minute, remainder = divmod(remainder, const.NS_PER_MIN)

        return UtcCalendar(year, month, day, hour, minute, remainder * const.NS2SEC)

    def toDatetime(self) -> datetime:
        """Convert to a naive ``datetime``, truncated to the microsecond."""
        return J2000_DATETIME + timedelta(microseconds=self._ns_since_j2000 // const.US2NS)

    def __add__(self, other):
        """Shift this instant forward by a :class:`.Duration`."""
        if not isinstance(other, Duration):
            return NotImplemented
        delta = secondsToNanoseconds(other.seconds)
        return Time(self._ns_since_j2000 + delta)

    def __sub__(self, other):
        """Shift back by a :class:`.Duration`, or measure the gap to another :class:`.Time`."""
        if isinstance(other, Time):
            # Subtract the exact integers before converting to seconds
            return Duration(float(self._ns_since_j2000 - other._ns_since_j2000) * const.NS2SEC)
        if isinstance(other, Duration):
            delta = secondsToNanoseconds(other.seconds)
            return Time(self._ns_since_j2000 - delta)
        return NotImplemented

    def __eq__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 == other._ns_since_j2000

    def __ne__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 != other._ns_since_j2000

    def __lt__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 < other._ns_since_j2000

    def __le__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 <= other._ns_since_j2000

    def __gt__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 > other._ns_since_j2000

    def __ge__(self, other):
        """."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._ns_since_j2000 >= other._ns_since_j2000

    def __hash__(self):
        """Override hash to return just the integer nanosecond count."""
        return hash(self._ns_since_j2000)

    def __repr__(self):
        """Return a string representation of this :class:`.Time`."""
        date_time = self.toDatetime()

        return (
            f"Time(ns_since_j2000={self._ns_since_j2000}, "
            f"ISO={date_time.isoformat(timespec='microseconds')})"
        )

    def __str__(self):
        """Return a string representation of this :class:`.Time`."""
        return self.__repr__()
