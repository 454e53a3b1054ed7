"""Astronomical events as zoned datetimes: sunrise, sunset, twilight and noon.

Events that depend on a horizon crossing return None when the sun does not
reach the requested position on that date, which is common far north or south
and for deep twilight depressions in summer at mid latitudes.
"""

import math
from datetime import date, datetime, timedelta

from pytz import utc
from pytz.tzinfo import BaseTzInfo

from zmanimcalc import noaa
from zmanimcalc.elevation import GEOMETRIC_ZENITH
from zmanimcalc.models import GeoLocation
from zmanimcalc.units import DAY_HOURS, HOUR_SECONDS, MINUTE_SECONDS, SECOND_MICROS


def date_time_from_time_of_day(
    day: date, time_of_day: float, tz: BaseTzInfo
) -> datetime:
    """Build a zoned datetime on ``day`` from a UTC time of day.

    The UTC hours are split into hour/minute/second/microsecond, anchored on
    the year/month/day of ``day`` in UTC and converted to ``tz``. The local
    wall-clock time is then placed on the same year/month/day in ``tz``, so the
    result always falls on the requested local date. Any clock time carried by
    ``day`` is ignored.

    Args:
        day: Calendar date (``date`` or ``datetime``).
        time_of_day: UTC hours in [0, 24).
        tz: pytz timezone of the result.

    Returns:
        Aware datetime in ``tz`` with microsecond precision.
    """
    total_seconds = time_of_day * HOUR_SECONDS
    hour = math.floor(total_seconds / HOUR_SECONDS)
    remainder = math.fmod(total_seconds, HOUR_SECONDS)
    minute = math.floor(remainder / MINUTE_SECONDS)
    remainder = math.fmod(remainder, MINUTE_SECONDS)
    second = math.floor(remainder)
    microsecond = round((remainder - second) * SECOND_MICROS)

    utc_dt = datetime(
        day.year, day.month, day.day, hour, minute, second, tzinfo=utc
    ) + timedelta(microseconds=microsecond)
    local = utc_dt.astimezone(tz)
    # The DST flag picks the right pass through a repeated fall-back hour
    return tz.localize(
        datetime.combine(date(day.year, day.month, day.day), local.time()),
        is_dst=bool(local.dst()),
    )


def _to_zoned(day: date, location: GeoLocation, time_of_day: float | None) -> datetime | None:
    if time_of_day is None:
        return None
    return date_time_from_time_of_day(day, time_of_day, location.timezone)


def sunrise(day: date, location: GeoLocation) -> datetime | None:
    """Elevation-adjusted sunrise.

    The geometric zenith of 90° is adjusted by 50 arcminutes for refraction
    and the solar radius plus the dip due to ``location.elevation``.
    """
    return _to_zoned(
        day, location, noaa.utc_sunrise(day, location, GEOMETRIC_ZENITH, True)
    )


def sunset(day: date, location: GeoLocation) -> datetime | None:
    """Elevation-adjusted sunset. See ``sunrise``."""
    return _to_zoned(
        day, location, noaa.utc_sunset(day, location, GEOMETRIC_ZENITH, True)
    )


def sea_level_sunrise(day: date, location: GeoLocation) -> datetime | None:
    """Sunrise ignoring elevation (refraction and solar radius still apply)."""
    return sunrise_offset_by_degrees(day, location, GEOMETRIC_ZENITH)


def sea_level_sunset(day: date, location: GeoLocation) -> datetime | None:
    """Sunset ignoring elevation."""
    return sunset_offset_by_degrees(day, location, GEOMETRIC_ZENITH)


def sunrise_offset_by_degrees(
    day: date, location: GeoLocation, offset_zenith: float
) -> datetime | None:
    """Morning time at which the sun is at ``offset_zenith``, at sea level.

    The zenith is measured from the vertical, so 14° before sunrise is passed
    as ``GEOMETRIC_ZENITH + 14``.
    """
    return _to_zoned(
        day, location, noaa.utc_sunrise(day, location, offset_zenith, False)
    )


def sunset_offset_by_degrees(
    day: date, location: GeoLocation, offset_zenith: float
) -> datetime | None:
    """Evening time at which the sun is at ``offset_zenith``, at sea level."""
    return _to_zoned(
        day, location, noaa.utc_sunset(day, location, offset_zenith, False)
    )


def offset_time(time: datetime, delta: timedelta) -> datetime:
    """``time + delta`` with the pytz offset corrected across DST changes."""
    shifted = time + delta
    tz = shifted.tzinfo
    if hasattr(tz, "normalize"):
        return tz.normalize(shifted)
    return shifted


def temporal_hour(day_start: datetime, day_end: datetime) -> timedelta:
    """One twelfth of the span from ``day_start`` to ``day_end``.

    ``day_end`` before ``day_start`` is not checked and gives a negative hour.
    """
    return (day_end - day_start) / 12


def solar_noon(day: date, location: GeoLocation) -> datetime:
    """Time the sun transits the meridian (true noon, not mid sunrise-sunset)."""
    return date_time_from_time_of_day(
        day, noaa.utc_noon(day, location), location.timezone
    )


def solar_midnight(day: date, location: GeoLocation) -> datetime:
    """Solar midnight following ``day``: twelve hours after solar noon."""
    return offset_time(solar_noon(day, location), timedelta(hours=12))


def local_mean_time(day: date, location: GeoLocation, hours: float) -> datetime:
    """Clock time corresponding to ``hours`` of local mean time on ``day``.

    Local mean time puts noon at 12:00 on meridians divisible by 15° and shifts
    4 minutes per degree away from them. The result reflects the location's
    actual timezone and daylight saving time.

    Args:
        day: Calendar date.
        location: Observer location.
        hours: Local mean time of day in [0, 24).

    Returns:
        Aware datetime in the location's timezone.

    Raises:
        ValueError: If ``hours`` is outside [0, 24).
    """
    if not 0.0 <= hours < DAY_HOURS:
        raise ValueError(f"Hours must be in [0, 24): {hours}")
    time_of_day = math.fmod(
        math.fmod(hours - location.local_mean_time_offset(), DAY_HOURS) + DAY_HOURS,
        DAY_HOURS,
    )
    return date_time_from_time_of_day(day, time_of_day, location.timezone)
