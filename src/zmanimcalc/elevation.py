"""Zenith constants and the elevation (dip) adjustment of the visible horizon."""

import math

# Zenith angles, degrees from the point directly overhead.
GEOMETRIC_ZENITH = 90.0
CIVIL_ZENITH = GEOMETRIC_ZENITH + 6.0
NAUTICAL_ZENITH = GEOMETRIC_ZENITH + 12.0
ASTRONOMICAL_ZENITH = GEOMETRIC_ZENITH + 18.0

REFRACTION = 34.0 / 60.0  # arcminutes of atmospheric refraction at the horizon
SOLAR_RADIUS = 16.0 / 60.0  # apparent radius of the solar disk
EARTH_RADIUS = 6_356.9  # km


def elevation_adjustment(elevation: float) -> float:
    """Dip of the horizon seen from ``elevation`` meters above sea level.

    Uses ``acos(R / (R + h))`` from *Calendrical Calculations* (Reingold &
    Dershowitz).

    Args:
        elevation: Observer height in meters, >= 0.

    Returns:
        Additional depression of the horizon in degrees.
    """
    return math.degrees(math.acos(EARTH_RADIUS / (EARTH_RADIUS + (elevation / 1_000.0))))


def adjusted_zenith(zenith: float, elevation: float) -> float:
    """Zenith of visible sunrise/sunset at ``elevation``.

    The sun's upper limb touches the horizon when its center is 50 arcminutes
    (refraction + solar radius) below the geometric horizon, plus the dip due
    to elevation. Only an exact 90° zenith is adjusted; twilight zeniths are
    offsets from the geometric horizon and are returned unchanged.
    """
    if zenith != GEOMETRIC_ZENITH:
        return zenith
    return zenith + SOLAR_RADIUS + REFRACTION + elevation_adjustment(elevation)
