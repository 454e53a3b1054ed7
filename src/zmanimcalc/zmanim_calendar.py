"""Calendar of common zmanim for a date and location under an elevation policy."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from zmanimcalc import zmanim
from zmanimcalc.models import Degrees, GeoLocation, Minutes, UseElevation, ZmanOffset
from zmanimcalc.settings import default_use_elevation


@dataclass(frozen=True)
class ZmanimCalendar:
    """Common zmanim for ``date`` at ``location``.

    Sunrise and sunset used by other zmanim are sea-level or elevation-based
    according to ``use_elevation``. GRA zmanim divide the day from sunrise to
    sunset; MGA zmanim divide it from alos to tzeis at the given offset.
    Methods return None when a required event does not occur.
    """

    location: GeoLocation
    date: date  # Only year/month/day are used
    use_elevation: UseElevation = field(default_factory=default_use_elevation)

    def hanetz(self) -> datetime | None:
        use_elevation = self.use_elevation.to_bool(True)
        return zmanim.hanetz(self.date, self.location, use_elevation)

    def shkia(self) -> datetime | None:
        use_elevation = self.use_elevation.to_bool(True)
        return zmanim.shkia(self.date, self.location, use_elevation)

    def sea_level_sunrise(self) -> datetime | None:
        return zmanim.hanetz(self.date, self.location, False)

    def sea_level_sunset(self) -> datetime | None:
        return zmanim.shkia(self.date, self.location, False)

    def elevation_sunrise(self) -> datetime | None:
        return zmanim.hanetz(self.date, self.location, True)

    def elevation_sunset(self) -> datetime | None:
        return zmanim.shkia(self.date, self.location, True)

    def alos(self, offset: ZmanOffset) -> datetime | None:
        """Dawn ``offset`` before sunrise."""
        use_elevation = self.use_elevation.to_bool(False)
        return zmanim.alos(self.date, self.location, use_elevation, offset)

    def tzeis(self, offset: ZmanOffset) -> datetime | None:
        """Nightfall ``offset`` after sunset."""
        use_elevation = self.use_elevation.to_bool(False)
        return zmanim.tzeis(self.date, self.location, use_elevation, offset)

    def alos_72_minutes(self) -> datetime | None:
        return self.alos(Minutes(72.0))

    def alos_16_point_1_degrees(self) -> datetime | None:
        return self.alos(Degrees(16.1))

    def tzeis_72_minutes(self) -> datetime | None:
        return self.tzeis(Minutes(72.0))

    def tzeis_8_point_5_degrees(self) -> datetime | None:
        return self.tzeis(Degrees(8.5))

    def chatzos(self) -> datetime:
        return zmanim.chatzos(self.date, self.location)

    def chatzos_halayla(self) -> datetime:
        return zmanim.chatzos_halayla(self.date, self.location)

    def fixed_local_chatzos(self) -> datetime:
        return zmanim.fixed_local_chatzos(self.date, self.location)

    def mincha_gedola_30_minutes(self) -> datetime:
        return zmanim.mincha_gedola_30_minutes(self.date, self.location)

    def _gra_day(self) -> tuple[datetime, datetime] | None:
        start = self.hanetz()
        end = self.shkia()
        if start is None or end is None:
            return None
        return start, end

    def _mga_day(self, offset: ZmanOffset) -> tuple[datetime, datetime] | None:
        start = self.alos(offset)
        end = self.tzeis(offset)
        if start is None or end is None:
            return None
        return start, end

    def shaah_zmanis_gra(self) -> timedelta | None:
        day = self._gra_day()
        return None if day is None else zmanim.shaah_zmanis(*day)

    def shaah_zmanis_mga(self, offset: ZmanOffset) -> timedelta | None:
        day = self._mga_day(offset)
        return None if day is None else zmanim.shaah_zmanis(*day)

    def sof_zman_shema_gra(self) -> datetime | None:
        day = self._gra_day()
        return None if day is None else zmanim.sof_zman_shema(*day)

    def sof_zman_shema_mga(self, offset: ZmanOffset) -> datetime | None:
        day = self._mga_day(offset)
        return None if day is None else zmanim.sof_zman_shema(*day)

    def sof_zman_tefila_gra(self) -> datetime | None:
        day = self._gra_day()
        return None if day is None else zmanim.sof_zman_tefila(*day)

    def sof_zman_tefila_mga(self, offset: ZmanOffset) -> datetime | None:
        day = self._mga_day(offset)
        return None if day is None else zmanim.sof_zman_tefila(*day)

    def mincha_gedola_gra(self) -> datetime | None:
        day = self._gra_day()
        return None if day is None else zmanim.mincha_gedola(*day)

    def mincha_ketana_gra(self) -> datetime | None:
        day = self._gra_day()
        return None if day is None else zmanim.mincha_ketana(*day)

    def plag_hamincha_gra(self) -> datetime | None:
        day = self._gra_day()
        return None if day is None else zmanim.plag_hamincha(*day)
