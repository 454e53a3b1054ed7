"""Build a GeoLocation from bare coordinates by resolving its timezone."""

import logging

from pytz import timezone
from timezonefinder import TimezoneFinder

from zmanimcalc.models import GeoLocation

log = logging.getLogger(__name__)

_tf = TimezoneFinder()


class TimezoneNotFoundError(Exception):
    """No IANA timezone covers the requested coordinates."""


def locate(lat: float, lng: float, elevation: float = 0.0) -> GeoLocation:
    """Resolve coordinates to a GeoLocation carrying the local timezone.

    Args:
        lat: Latitude (decimal degrees).
        lng: Longitude (decimal degrees, positive east).
        elevation: Meters above sea level.

    Returns:
        GeoLocation with a pytz timezone.

    Raises:
        TimezoneNotFoundError: When timezonefinder has no zone for the point.
        ValueError: When the coordinates or elevation are out of range.
    """
    tz_str = _tf.timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise TimezoneNotFoundError(f"Timezone not found: lat={lat}, lng={lng}")
    log.debug("Resolved lat=%s, lng=%s to %s", lat, lng, tz_str)
    return GeoLocation(
        latitude=lat, longitude=lng, elevation=elevation, timezone=timezone(tz_str)
    )
