"""Data model definitions — locations, event modes, and offset specifications."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pytz import utc
from pytz.tzinfo import BaseTzInfo

from zmanimcalc.units import HOUR_MINUTES


@dataclass(frozen=True)
class GeoLocation:
    """A point on earth plus the civil timezone used to format results."""

    latitude: float  # Degrees north of the equator (-90..90)
    longitude: float  # Degrees east of Greenwich (-180..180)
    elevation: float = 0.0  # Meters above sea level
    timezone: BaseTzInfo = utc  # pytz zone; only used for local wall-clock output

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be between -90 and 90: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"Longitude must be between -180 and 180: {self.longitude}"
            )
        if self.elevation < 0:
            raise ValueError(f"Elevation cannot be negative: {self.elevation}")

    def local_mean_time_offset(self) -> float:
        """Offset of local mean time from UTC in hours (4 minutes per degree).

        Daylight saving time is not reflected since a location has no date.
        """
        return (self.longitude * 4.0) / HOUR_MINUTES


class Mode(Enum):
    """Which horizon crossing of the day to solve for."""

    SUNRISE = "sunrise"
    SUNSET = "sunset"


class UseElevation(Enum):
    """When elevation is applied to calculations."""

    NO = "no"  # never
    HANETZ_SHKIA = "hanetz_shkia"  # only sunrise and sunset themselves
    ALL = "all"  # every event based on sunrise or sunset

    def to_bool(self, hanetz_or_shkia: bool) -> bool:
        """Resolve the policy for one event.

        Args:
            hanetz_or_shkia: True when the caller is computing sunrise or
                sunset directly.
        """
        if self is UseElevation.NO:
            return False
        if self is UseElevation.HANETZ_SHKIA:
            return hanetz_or_shkia
        return True


@dataclass(frozen=True)
class Degrees:
    """Sun ``degrees`` below the geometric horizon (always at sea level)."""

    degrees: float


@dataclass(frozen=True)
class Minutes:
    """Fixed clock minutes before sunrise / after sunset."""

    minutes: float


@dataclass(frozen=True)
class MinutesZmaniyos:
    """Temporal minutes before sunrise / after sunset.

    A temporal minute is 1/60 of the temporal hour of the day running from
    ``day_start`` to ``day_end``.
    """

    minutes: float
    day_start: datetime
    day_end: datetime


ZmanOffset = Degrees | Minutes | MinutesZmaniyos
