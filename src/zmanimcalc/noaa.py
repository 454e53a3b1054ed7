"""Sunrise, sunset and solar noon in UTC using the NOAA algorithm.

The algorithm follows the implementation by NOAA's Surface Radiation Research
Branch, itself based on *Astronomical Algorithms* by Jean Meeus, with an added
adjustment of the zenith for elevation. Longitudes are negated internally
because the NOAA formulas take degrees west as positive.

When the sun never reaches the requested zenith on a date (polar day or night,
or a twilight depression too deep for the latitude) the crossing functions
return None.
"""

import logging
import math
from datetime import date

from zmanimcalc.elevation import adjusted_zenith
from zmanimcalc.ephemeris import equation_of_time, solar_declination
from zmanimcalc.julian import (
    julian_centuries_from_julian_day,
    julian_day,
    julian_day_from_julian_centuries,
)
from zmanimcalc.models import GeoLocation, Mode
from zmanimcalc.units import DAY_HOURS, DAY_MINUTES, HOUR_MINUTES

log = logging.getLogger(__name__)


def _normalize_hours(hours: float) -> float:
    """Wrap a UTC hour value into [0, 24)."""
    hours = math.fmod(hours, DAY_HOURS)
    if hours < 0:
        hours += DAY_HOURS
    if hours >= DAY_HOURS:
        # Tiny negatives round up to exactly 24.0
        return 0.0
    return hours


def sun_hour_angle_at_horizon(
    latitude: float, solar_dec: float, zenith: float, mode: Mode
) -> float | None:
    """Hour angle of the sun (radians) when its center is at ``zenith``.

    Args:
        latitude: Observer latitude (degrees).
        solar_dec: Solar declination (degrees).
        zenith: Target zenith angle (degrees).
        mode: SUNSET negates the angle.

    Returns:
        Hour angle in radians, or None if the sun never reaches ``zenith``.
    """
    lat_r = math.radians(latitude)
    solar_dec_r = math.radians(solar_dec)
    zenith_r = math.radians(zenith)

    cos_hour_angle = (
        math.cos(zenith_r) / (math.cos(lat_r) * math.cos(solar_dec_r))
    ) - (math.tan(lat_r) * math.tan(solar_dec_r))
    if not -1.0 <= cos_hour_angle <= 1.0:
        return None

    hour_angle = math.acos(cos_hour_angle)
    if mode is Mode.SUNSET:
        hour_angle = -hour_angle
    return hour_angle


def solar_noon_utc(julian_centuries: float, longitude: float) -> float:
    """True solar noon in UTC minutes after 0h of the day.

    Two passes: noon estimated from the equation of time at a rough noon, then
    refined at that estimate.

    Args:
        julian_centuries: Centuries since J2000.0 at 0h of the day.
        longitude: Degrees west positive.
    """
    century_start = julian_day_from_julian_centuries(julian_centuries)

    approx_tnoon = julian_centuries_from_julian_day(century_start + (longitude / 360.0))
    approx_eq_time = equation_of_time(approx_tnoon)
    approx_sol_noon = 720.0 + (longitude * 4.0) - approx_eq_time

    tnoon = julian_centuries_from_julian_day(
        century_start - 0.5 + (approx_sol_noon / DAY_MINUTES)
    )
    eq_time = equation_of_time(tnoon)
    return 720.0 + (longitude * 4.0) - eq_time


def approximate_utc_sun_position(
    approx_julian_centuries: float,
    latitude: float,
    longitude: float,
    zenith: float,
    mode: Mode,
) -> float | None:
    """One evaluation of the crossing time in UTC minutes.

    Args:
        approx_julian_centuries: Estimate of the event time in Julian centuries.
        latitude: Degrees north.
        longitude: Degrees west positive.
        zenith: Target zenith (degrees), already adjusted.
        mode: Morning or evening crossing.

    Returns:
        Minutes after 0h UTC (may be outside [0, 1440)), or None.
    """
    eq_time = equation_of_time(approx_julian_centuries)
    solar_dec = solar_declination(approx_julian_centuries)
    hour_angle = sun_hour_angle_at_horizon(latitude, solar_dec, zenith, mode)
    if hour_angle is None:
        return None

    delta = longitude - math.degrees(hour_angle)
    return 720.0 + (delta * 4.0) - eq_time


def utc_sun_position(
    day: date,
    location: GeoLocation,
    zenith: float,
    adjust_for_elevation: bool,
    mode: Mode,
) -> float | None:
    """UTC time of day at which the sun's center crosses ``zenith``.

    The zenith is adjusted for refraction and solar radius (and elevation when
    ``adjust_for_elevation``) if it is exactly 90°. The crossing is evaluated
    once at solar noon and once more at the first result.

    Args:
        day: Calendar date at 0h UTC, or an aware datetime whose UTC time of
            day seeds the solver.
        location: Observer location.
        zenith: Zenith angle in degrees.
        adjust_for_elevation: Include the dip due to ``location.elevation``.
        mode: SUNRISE or SUNSET.

    Returns:
        Hours after 0h UTC in [0, 24), or None if the event does not occur.
    """
    elevation = location.elevation if adjust_for_elevation else 0.0
    zenith = adjusted_zenith(zenith, elevation)
    jd = julian_day(day)
    longitude = -location.longitude

    noonmin = solar_noon_utc(julian_centuries_from_julian_day(jd), longitude)
    tnoon = julian_centuries_from_julian_day(jd + (noonmin / DAY_MINUTES))
    first_pass = approximate_utc_sun_position(
        tnoon, location.latitude, longitude, zenith, mode
    )
    if first_pass is None:
        log.debug(
            "No %s at zenith %s for lat=%s on %s",
            mode.value,
            zenith,
            location.latitude,
            day,
        )
        return None

    trefinement = julian_centuries_from_julian_day(jd + (first_pass / DAY_MINUTES))
    minutes = approximate_utc_sun_position(
        trefinement, location.latitude, longitude, zenith, mode
    )
    if minutes is None:
        log.debug(
            "No %s at zenith %s for lat=%s on %s after refinement",
            mode.value,
            zenith,
            location.latitude,
            day,
        )
        return None

    return _normalize_hours(minutes / HOUR_MINUTES)


def utc_sunrise(
    day: date, location: GeoLocation, zenith: float, adjust_for_elevation: bool
) -> float | None:
    """UTC hours of the morning crossing of ``zenith``."""
    return utc_sun_position(day, location, zenith, adjust_for_elevation, Mode.SUNRISE)


def utc_sunset(
    day: date, location: GeoLocation, zenith: float, adjust_for_elevation: bool
) -> float | None:
    """UTC hours of the evening crossing of ``zenith``."""
    return utc_sun_position(day, location, zenith, adjust_for_elevation, Mode.SUNSET)


def utc_noon(day: date, location: GeoLocation) -> float:
    """UTC hours of solar transit. Always defined."""
    julian_centuries = julian_centuries_from_julian_day(julian_day(day))
    noon = solar_noon_utc(julian_centuries, -location.longitude)
    return _normalize_hours(noon / HOUR_MINUTES)
