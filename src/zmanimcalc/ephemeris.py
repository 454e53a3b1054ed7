"""Low-precision solar position series as functions of Julian centuries.

Angles are returned in degrees, the equation of time in minutes. Trigonometry
is done in radians at each call site. Normalisation uses ``math.fmod`` so that
negative centuries keep the sign of the dividend.
"""

import math


def _moon_ascending_node(julian_centuries: float) -> float:
    """Longitude of the moon's ascending node (degrees), for nutation terms."""
    return 125.04 - (1_934.136 * julian_centuries)


def sun_geometric_mean_anomaly(julian_centuries: float) -> float:
    """Geometric mean anomaly of the sun (degrees, within ±360)."""
    anomaly = 357.52911 + (
        julian_centuries * (35_999.05029 - (0.0001537 * julian_centuries))
    )
    return math.fmod(anomaly, 360.0)


def sun_geometric_mean_longitude(julian_centuries: float) -> float:
    """Geometric mean longitude of the sun (degrees, within ±360)."""
    longitude = 280.46646 + (
        julian_centuries * (36_000.76983 + (0.0003032 * julian_centuries))
    )
    return math.fmod(longitude, 360.0)


def earth_orbit_eccentricity(julian_centuries: float) -> float:
    """Unitless eccentricity of earth's orbit."""
    return 0.016708634 - (
        julian_centuries * (0.000042037 + (0.0000001267 * julian_centuries))
    )


def sun_equation_of_center(julian_centuries: float) -> float:
    """Equation of center for the sun (degrees)."""
    m = math.radians(sun_geometric_mean_anomaly(julian_centuries))
    sinm = math.sin(m)
    sin2m = math.sin(2.0 * m)
    sin3m = math.sin(3.0 * m)

    return (
        (sinm * (1.914602 - (julian_centuries * (0.004817 + (0.000014 * julian_centuries)))))
        + (sin2m * (0.019993 - (0.000101 * julian_centuries)))
        + (sin3m * 0.000289)
    )


def sun_true_longitude(julian_centuries: float) -> float:
    return sun_geometric_mean_longitude(julian_centuries) + sun_equation_of_center(
        julian_centuries
    )


def sun_apparent_longitude(julian_centuries: float) -> float:
    """True longitude corrected for nutation and aberration (degrees)."""
    omega = _moon_ascending_node(julian_centuries)
    return (
        sun_true_longitude(julian_centuries)
        - 0.00569
        - (0.00478 * math.sin(math.radians(omega)))
    )


def mean_obliquity_of_ecliptic(julian_centuries: float) -> float:
    """Mean axial tilt (degrees), expressed as 23° 26' plus arcseconds."""
    seconds = 21.448 - (
        julian_centuries
        * (46.8150 + (julian_centuries * (0.00059 - (julian_centuries * 0.001813))))
    )
    return 23.0 + ((26.0 + (seconds / 60.0)) / 60.0)


def obliquity_correction(julian_centuries: float) -> float:
    """Mean obliquity corrected by the nutation-of-node term (degrees)."""
    omega = _moon_ascending_node(julian_centuries)
    correction = mean_obliquity_of_ecliptic(julian_centuries) + (
        0.00256 * math.cos(math.radians(omega))
    )
    return math.fmod(correction, 360.0)


def solar_declination(julian_centuries: float) -> float:
    """Declination of the sun (degrees)."""
    epsilon = math.radians(obliquity_correction(julian_centuries))
    apparent_longitude = math.radians(sun_apparent_longitude(julian_centuries))
    sint = math.sin(epsilon) * math.sin(apparent_longitude)
    return math.degrees(math.asin(sint))


def equation_of_time(julian_centuries: float) -> float:
    """Difference between true and mean solar time.

    Args:
        julian_centuries: Julian centuries since J2000.0.

    Returns:
        Equation of time in minutes of clock time.
    """
    epsilon = math.radians(obliquity_correction(julian_centuries))
    l0 = math.radians(sun_geometric_mean_longitude(julian_centuries))
    m = math.radians(sun_geometric_mean_anomaly(julian_centuries))
    e = earth_orbit_eccentricity(julian_centuries)

    y = math.tan(epsilon / 2.0)
    y *= y

    sin2l0 = math.sin(2.0 * l0)
    sin4l0 = math.sin(4.0 * l0)
    cos2l0 = math.cos(2.0 * l0)
    sinm = math.sin(m)
    sin2m = math.sin(2.0 * m)

    eq_time = (
        (y * sin2l0)
        - (2.0 * e * sinm)
        + (4.0 * e * y * sinm * cos2l0)
        - (0.5 * y * y * sin4l0)
        - (1.25 * e * e * sin2m)
    )
    return math.degrees(eq_time) * 4.0
