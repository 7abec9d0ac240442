"""Helper functions that convert between different forms of time.

Everything here works on plain numbers so it can be shared by the value types in
:mod:`.stardate` without creating import cycles.
"""

from __future__ import annotations

# Third Party Imports
from numpy import copysign, fabs, floor, isfinite, modf

# Local Imports
from ...common.exceptions import InvalidCalendarError, TimeOverflowError
from ...common.logger import simcoreLogError
from .. import constants as const


def _truncatedDivision(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero rather than flooring."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def roundHalfAwayFromZero(value: float) -> int:
    """Round `value` to the nearest integer, resolving ties away from zero.

    Args:
        value (``float``): finite real number to round.

    Returns:
        ``int``: nearest integer to `value`.
    """
    fraction, whole = modf(value)
    if fabs(fraction) >= 0.5:
        whole += copysign(1.0, value)
    return int(whole)


def checkNanosecondRange(nanoseconds: int) -> int:
    """Ensure an integer nanosecond count fits in a signed 64-bit integer.

    Args:
        nanoseconds (``int``): candidate nanosecond count.

    Returns:
        ``int``: the unchanged `nanoseconds`.

    Raises:
        :class:`.TimeOverflowError`: `nanoseconds` falls outside of the signed 64-bit range.
    """
    if not const.NS_MIN <= nanoseconds <= const.NS_MAX:
        msg = f"Time overflow: {nanoseconds} ns doesn't fit in a signed 64-bit integer"
        simcoreLogError(msg)
        raise TimeOverflowError(msg)
    return nanoseconds


def secondsToNanoseconds(seconds: float) -> int:
    """Convert real-valued seconds to the nearest whole nanosecond.

    The range check happens on the rounded value before it is ever stored, so large inputs never
    wrap around.

    Args:
        seconds (``float``): number of seconds, any sign.

    Returns:
        ``int``: nearest nanosecond count, ties rounded away from zero.

    Raises:
        :class:`.TimeOverflowError`: the result is non-finite or outside of the signed 64-bit range.
    """
    nanoseconds = float(seconds) * const.SEC2NS
    if not isfinite(nanoseconds):
        msg = f"Time overflow converting {seconds} seconds to nanoseconds"
        simcoreLogError(msg)
        raise TimeOverflowError(msg)

    return checkNanosecondRange(roundHalfAwayFromZero(nanoseconds))


def validateUtcCalendar(month, day, hour, minute, second):
    """Check that calendar fields lie inside their domains.

    Days are only checked against 1-31; the number of days in the given month and leap years are not
    considered, so February 31st is accepted.

    Args:
        month (``int``): month of the year (1-12)
        day (``int``): day of the month (1-31)
        hour (``int``): hour of the day (0-23)
        minute (``int``): minute of the hour (0-59)
        second (``float``): second of the minute, [0, 60)

    Raises:
        :class:`.InvalidCalendarError`: any field is out of range.
    """
    if month < 1 or month > 12:
        msg = f"Invalid UTC calendar date: month must be an integer (1-12), got {month}"
    elif day < 1 or day > 31:
        msg = f"Invalid UTC calendar date: day must be an integer (1-31), got {day}"
    elif hour < 0 or hour > 23:
        msg = f"Invalid UTC calendar time: hour must be an integer (0-23), got {hour}"
    elif minute < 0 or minute > 59:
        msg = f"Invalid UTC calendar time: minute must be an integer (0-59), got {minute}"
    elif not 0.0 <= second < 60.0:
        msg = f"Invalid UTC calendar time: second must be a float [0, 60), got {second}"
    else:
        return

    simcoreLogError(msg)
    raise InvalidCalendarError(msg)


def utcToJulianDate(year, month, day, hour, minute, second) -> float:
    """From a Gregorian datetime in UTC [ymdhms], return the Julian date.

    No leap seconds are modeled. Results at century boundaries depend on the operation order below.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 7, Eqn 7.1

    Args:
        year (``int``): Calendar year, any sign
        month (``int``): Month of the year (1-12)
        day (``int``): Day of the month (1-31)
        hour (``int``): Hours in the day (0-23)
        minute (``int``): Minutes in the hour (0-59)
        second (``float``): Seconds in the minute, [0, 60)

    Returns:
        ``float``: corresponding Julian date

    Raises:
        :class:`.InvalidCalendarError`: any field is out of range.
    """
    validateUtcCalendar(month, day, hour, minute, second)

    # January & February count as months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    century = _truncatedDivision(year, 100)
    leap_correction = 2 - century + _truncatedDivision(century, 4)

    day_fraction = (hour + (minute + second / 60.0) / 60.0) / 24.0

    julian_date = (
        floor(365.25 * (year + 4716))
        + floor(30.6001 * (month + 1))
        + day
        + day_fraction
        + leap_correction
        - 1524.5
    )

    return float(julian_date)


def julianDayNumberToCalendar(day_number: int) -> tuple[int, int, int]:
    """Convert an integer Julian day number to its proleptic Gregorian calendar date.

    The day number is the Julian date at noon of the requested day, i.e. the Julian date of
    midnight plus one half.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 7

    Args:
        day_number (``int``): integer Julian day number

    Returns:
        ``tuple``: (year, month, day) integers
    """
    alpha = int(floor((day_number - 1867216.25) / 36524.25))
    shifted = day_number + 1 + alpha - alpha // 4 + 1524

    years = int(floor((shifted - 122.1) / 365.25))
    year_days = int(floor(365.25 * years))
    months = int(floor((shifted - year_days) / 30.6001))

    day = shifted - year_days - int(floor(30.6001 * months))
    month = months - 1 if months < 14 else months - 13
    year = years - 4716 if month > 2 else years - 4715

    return year, month, day
