"""Julian day and Julian century conversions around the J2000.0 epoch."""

import math
from datetime import date, datetime

from pytz import utc

from zmanimcalc.units import DAY_HOURS, HOUR_SECONDS, MINUTE_SECONDS, SECOND_MICROS

JULIAN_DAY_JAN_1_2000 = 2_451_545.0  # J2000.0
JULIAN_DAYS_PER_CENTURY = 36_525.0


def julian_day(day: date) -> float:
    """Return the Julian day of a date or UTC instant.

    A ``date`` or naive ``datetime`` gives the Julian day at 0h of its
    calendar date. An aware ``datetime`` is converted to UTC and keeps its
    fraction of the UTC day.

    Args:
        day: Calendar date, or an aware datetime.

    Returns:
        Julian day number (ending in .5 at 0h UTC).
    """
    fraction = 0.0
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(utc)
            seconds = (
                day.hour * HOUR_SECONDS
                + day.minute * MINUTE_SECONDS
                + day.second
                + day.microsecond / SECOND_MICROS
            )
            fraction = seconds / (DAY_HOURS * HOUR_SECONDS)
        day = day.date()

    year = float(day.year)
    month = float(day.month)
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = math.floor(2 - a + a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day.day
        + b
        - 1524.5
    ) + fraction


def julian_centuries_from_julian_day(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - JULIAN_DAY_JAN_1_2000) / JULIAN_DAYS_PER_CENTURY


def julian_day_from_julian_centuries(julian_centuries: float) -> float:
    """Inverse of ``julian_centuries_from_julian_day``."""
    return (julian_centuries * JULIAN_DAYS_PER_CENTURY) + JULIAN_DAY_JAN_1_2000
