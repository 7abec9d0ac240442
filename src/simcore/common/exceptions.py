"""Contains all the custom-defined exceptions used in SIMCORE."""

from __future__ import annotations


class TimeOverflowError(OverflowError):
    """Exception indicating a time value doesn't fit the signed 64-bit nanosecond range."""


class InvalidCalendarError(ValueError):
    """Exception indicating calendar fields fall outside their valid domains."""


class ShapeError(Exception):
    """Exception indicating an improperly shaped array was given."""
