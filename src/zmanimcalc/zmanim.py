"""Zmanim (halachic times) built on sunrise, sunset and temporal hours.

A *shaah zmanis* (temporal hour) is 1/12 of the day from a day start
(sunrise or *alos*) to a day end (sunset or *tzeis*). *Alos* (dawn) and
*tzeis* (nightfall) are located relative to sunrise and sunset by a
``ZmanOffset``: degrees below the horizon, fixed minutes, or temporal minutes.

Elevation-based zmanim should not be relied on lekula without the guidance of
a posek. Functions that depend on sunrise or sunset return None when that
event does not occur.
"""

from datetime import date, datetime, timedelta

from zmanimcalc import astronomy
from zmanimcalc.elevation import GEOMETRIC_ZENITH
from zmanimcalc.models import (
    Degrees,
    GeoLocation,
    Minutes,
    MinutesZmaniyos,
    Mode,
    ZmanOffset,
)

# Temporal hours after the start of the day.
SOF_ZMAN_SHEMA_HOURS = 3.0
SOF_ZMAN_TEFILA_HOURS = 4.0
SOF_ZMAN_BIUR_CHAMETZ_HOURS = 5.0
MINCHA_GEDOLA_HOURS = 6.5
SAMUCH_LEMINCHA_KETANA_HOURS = 9.0
MINCHA_KETANA_HOURS = 9.5
PLAG_HAMINCHA_HOURS = 10.75


def hanetz(day: date, location: GeoLocation, use_elevation: bool) -> datetime | None:
    """Sunrise, elevation-adjusted when ``use_elevation`` else at sea level."""
    if use_elevation:
        return astronomy.sunrise(day, location)
    return astronomy.sea_level_sunrise(day, location)


def shkia(day: date, location: GeoLocation, use_elevation: bool) -> datetime | None:
    """Sunset, elevation-adjusted when ``use_elevation`` else at sea level."""
    if use_elevation:
        return astronomy.sunset(day, location)
    return astronomy.sea_level_sunset(day, location)


def shaah_zmanis(day_start: datetime, day_end: datetime) -> timedelta:
    """Length of a temporal hour for the given day boundaries."""
    return astronomy.temporal_hour(day_start, day_end)


def offset_by_minutes_zmanis(
    time: datetime, minutes: float, shaah: timedelta
) -> datetime:
    """``time`` moved by ``minutes`` temporal minutes of a ``shaah``-long hour."""
    return astronomy.offset_time(time, shaah * (minutes / 60.0))


def shaos_into_day(day_start: datetime, day_end: datetime, hours: float) -> datetime:
    """Instant ``hours`` temporal hours after ``day_start``.

    Scales the whole span rather than a rounded temporal hour, so 0 returns
    ``day_start`` and 12 returns ``day_end`` exactly. Fractional hours are
    allowed.

    Args:
        day_start: Start of the day (e.g. sunrise or alos).
        day_end: End of the day (e.g. sunset or tzeis). Must not precede
            ``day_start``; this is not checked.
        hours: Number of temporal hours.

    Returns:
        Aware datetime in the timezone of ``day_start``.
    """
    return astronomy.offset_time(day_start, (day_end - day_start) * (hours / 12.0))


def resolve_offset(
    day: date,
    location: GeoLocation,
    use_elevation: bool,
    offset: ZmanOffset,
    mode: Mode,
) -> datetime | None:
    """Locate a dawn or dusk event relative to sunrise or sunset.

    ``Degrees`` are always computed at sea level (``use_elevation`` is
    ignored) since they are anchored to a fixed position of the sun.
    ``Minutes`` and ``MinutesZmaniyos`` are measured from sunrise or sunset,
    elevation-adjusted per ``use_elevation``.

    Args:
        day: Calendar date.
        location: Observer location.
        use_elevation: Base minute offsets on elevation-adjusted events.
        offset: How far from sunrise/sunset.
        mode: SUNRISE for a time before sunrise, SUNSET for one after sunset.

    Returns:
        Aware datetime, or None if the underlying event does not occur.
    """
    morning = mode is Mode.SUNRISE
    sign = -1.0 if morning else 1.0

    match offset:
        case Degrees(degrees=degrees):
            zenith = GEOMETRIC_ZENITH + degrees
            if morning:
                return astronomy.sunrise_offset_by_degrees(day, location, zenith)
            return astronomy.sunset_offset_by_degrees(day, location, zenith)
        case Minutes(minutes=minutes):
            base = (hanetz if morning else shkia)(day, location, use_elevation)
            if base is None:
                return None
            return astronomy.offset_time(base, timedelta(minutes=sign * minutes))
        case MinutesZmaniyos(minutes=minutes, day_start=day_start, day_end=day_end):
            base = (hanetz if morning else shkia)(day, location, use_elevation)
            if base is None:
                return None
            return offset_by_minutes_zmanis(
                base, sign * minutes, shaah_zmanis(day_start, day_end)
            )
    raise TypeError(f"Unsupported offset: {offset!r}")


def alos(
    day: date, location: GeoLocation, use_elevation: bool, offset: ZmanOffset
) -> datetime | None:
    """*Alos hashachar* (dawn): ``offset`` before sunrise."""
    return resolve_offset(day, location, use_elevation, offset, Mode.SUNRISE)


def tzeis(
    day: date, location: GeoLocation, use_elevation: bool, offset: ZmanOffset
) -> datetime | None:
    """*Tzeis* (nightfall): ``offset`` after sunset."""
    return resolve_offset(day, location, use_elevation, offset, Mode.SUNSET)


def sof_zman_shema(day_start: datetime, day_end: datetime) -> datetime:
    """Latest *krias shema*: 3 temporal hours into the day."""
    return shaos_into_day(day_start, day_end, SOF_ZMAN_SHEMA_HOURS)


def sof_zman_tefila(day_start: datetime, day_end: datetime) -> datetime:
    """Latest *shacharis*: 4 temporal hours into the day."""
    return shaos_into_day(day_start, day_end, SOF_ZMAN_TEFILA_HOURS)


def sof_zman_biur_chametz(day_start: datetime, day_end: datetime) -> datetime:
    """Latest burning of chametz on Erev Pesach: 5 temporal hours."""
    return shaos_into_day(day_start, day_end, SOF_ZMAN_BIUR_CHAMETZ_HOURS)


def mincha_gedola(day_start: datetime, day_end: datetime) -> datetime:
    """Earliest *mincha*: 6.5 temporal hours."""
    return shaos_into_day(day_start, day_end, MINCHA_GEDOLA_HOURS)


def samuch_lemincha_ketana(day_start: datetime, day_end: datetime) -> datetime:
    return shaos_into_day(day_start, day_end, SAMUCH_LEMINCHA_KETANA_HOURS)


def mincha_ketana(day_start: datetime, day_end: datetime) -> datetime:
    """Preferred earliest *mincha*: 9.5 temporal hours."""
    return shaos_into_day(day_start, day_end, MINCHA_KETANA_HOURS)


def plag_hamincha(day_start: datetime, day_end: datetime) -> datetime:
    """Midway between mincha gedola and mincha ketana: 10.75 temporal hours."""
    return shaos_into_day(day_start, day_end, PLAG_HAMINCHA_HOURS)


def chatzos(day: date, location: GeoLocation) -> datetime:
    """Astronomical noon."""
    return astronomy.solar_noon(day, location)


def chatzos_halayla(day: date, location: GeoLocation) -> datetime:
    """Astronomical midnight after ``day``."""
    return astronomy.solar_midnight(day, location)


def fixed_local_chatzos(day: date, location: GeoLocation) -> datetime:
    """12:00 local mean time, in the location's clock time."""
    return astronomy.local_mean_time(day, location, 12.0)


def mincha_gedola_30_minutes(day: date, location: GeoLocation) -> datetime:
    """Thirty clock minutes after chatzos."""
    return astronomy.offset_time(chatzos(day, location), timedelta(minutes=30))
