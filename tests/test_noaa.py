from datetime import date, datetime

import pytest
from pytz import utc

from zmanimcalc import noaa
from zmanimcalc.elevation import ASTRONOMICAL_ZENITH, GEOMETRIC_ZENITH
from zmanimcalc.models import GeoLocation, Mode


@pytest.mark.parametrize(
    "t, longitude, expected",
    [
        (1.234, 35.03, 857.5377415545428),
        (9.876, 12.34, 775.5788864035511),
        (0.043, -34.56, 580.6941934839474),
    ],
)
def test_solar_noon_utc(t, longitude, expected):
    assert noaa.solar_noon_utc(t, longitude) == pytest.approx(expected, abs=1e-6)


def test_approximate_utc_sun_position():
    assert noaa.approximate_utc_sun_position(
        123.45, 31.78, 35.03, 91.57037635711369, Mode.SUNSET
    ) == pytest.approx(1236.5426352099616, abs=1e-6)
    assert noaa.approximate_utc_sun_position(
        45.45, 67.31, 3.35, 89.123, Mode.SUNRISE
    ) == pytest.approx(564.659110379488, abs=1e-6)


def test_hour_angle_sign_flips_for_sunset():
    rise = noaa.sun_hour_angle_at_horizon(31.78, 18.0, 90.833, Mode.SUNRISE)
    set_ = noaa.sun_hour_angle_at_horizon(31.78, 18.0, 90.833, Mode.SUNSET)
    assert rise is not None and rise > 0
    assert set_ == -rise


def test_hour_angle_out_of_domain():
    # Midsummer at 80°N: the sun never drops to the horizon.
    assert noaa.sun_hour_angle_at_horizon(80.0, 23.0, 90.833, Mode.SUNRISE) is None


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 8, 4), 2.959544300030197),
        (date(2025, 1, 26), 4.607887155117016),
        (date(2005, 5, 15), 2.7169504039525774),
    ],
)
def test_utc_sunrise_sea_level(beit_shemesh, day, expected):
    result = noaa.utc_sunrise(day, beit_shemesh, GEOMETRIC_ZENITH, False)
    assert result == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 8, 4), 16.56541683664536),
        (date(2025, 1, 26), 15.14486178521462),
        (date(2005, 5, 15), 16.495841422194637),
    ],
)
def test_utc_sunset_sea_level(beit_shemesh, day, expected):
    result = noaa.utc_sunset(day, beit_shemesh, GEOMETRIC_ZENITH, False)
    assert result == pytest.approx(expected, abs=1e-9)


def test_elevation_scenario():
    loc = GeoLocation(latitude=31.78, longitude=35.03, elevation=526.0)
    instant = datetime(2025, 7, 29, 10, 30, 26, tzinfo=utc)
    adjusted = noaa.utc_sun_position(instant, loc, 90.0, True, Mode.SUNRISE)
    sea_level = noaa.utc_sun_position(instant, loc, 90.0, False, Mode.SUNRISE)
    assert adjusted == pytest.approx(2.8371795341279333, abs=1e-9)
    assert sea_level == pytest.approx(2.8999327653799707, abs=1e-9)
    assert noaa.utc_sun_position(
        instant, loc, 96.7, True, Mode.SUNSET
    ) == pytest.approx(17.144401462315347, abs=1e-9)


def test_time_of_day_shifts_the_solution():
    loc = GeoLocation(latitude=31.78, longitude=35.03, elevation=526.0)
    midnight = noaa.utc_sun_position(date(2025, 7, 29), loc, 90.0, False, Mode.SUNRISE)
    morning = noaa.utc_sun_position(
        datetime(2025, 7, 29, 10, 30, 26, tzinfo=utc), loc, 90.0, False, Mode.SUNRISE
    )
    assert midnight != morning
    assert abs(midnight - morning) < 1 / 60


def test_normalize_hours_stays_below_24():
    assert noaa._normalize_hours(-1e-17) == 0.0
    assert noaa._normalize_hours(-1.5) == 22.5
    assert noaa._normalize_hours(25.0) == 1.0
    assert noaa._normalize_hours(0.0) == 0.0


@pytest.mark.parametrize(
    "fixture, sunrise, sunset",
    [
        ("lakewood", 11.153270653847327, 22.24410902650522),
        ("jerusalem", 3.65893933754938, 15.14635335602205),
        ("los_angeles", 14.007081524683, 1.3181997867511512),
        ("tokyo", 20.805701197448574, 8.07962870894405),
    ],
)
def test_utc_sunrise_sunset_with_elevation(request, fixture, sunrise, sunset):
    loc = request.getfixturevalue(fixture)
    day = date(2017, 10, 17)
    assert noaa.utc_sunrise(day, loc, GEOMETRIC_ZENITH, True) == pytest.approx(
        sunrise, abs=1e-9
    )
    assert noaa.utc_sunset(day, loc, GEOMETRIC_ZENITH, True) == pytest.approx(
        sunset, abs=1e-9
    )


def test_arctic_has_no_sunrise_or_sunset(arctic_nunavut):
    day = date(2017, 10, 17)
    assert noaa.utc_sunrise(day, arctic_nunavut, GEOMETRIC_ZENITH, True) is None
    assert noaa.utc_sunset(day, arctic_nunavut, GEOMETRIC_ZENITH, True) is None


@pytest.mark.parametrize("day", [date(2025, 1, 1), date(2025, 6, 21)])
def test_pole_has_no_sunset(day):
    pole = GeoLocation(latitude=90.0, longitude=0.0)
    assert noaa.utc_sunset(day, pole, GEOMETRIC_ZENITH, False) is None
    assert noaa.utc_sunrise(day, pole, GEOMETRIC_ZENITH, False) is None


def test_deep_twilight_missing_in_summer():
    london = GeoLocation(latitude=51.5072, longitude=-0.1276)
    day = date(2025, 6, 21)
    assert noaa.utc_sunrise(day, london, ASTRONOMICAL_ZENITH, False) is None
    assert noaa.utc_sunrise(day, london, GEOMETRIC_ZENITH, False) is not None


def test_results_are_normalized(los_angeles, tokyo):
    day = date(2017, 10, 17)
    for loc in (los_angeles, tokyo):
        for mode in Mode:
            hours = noaa.utc_sun_position(day, loc, GEOMETRIC_ZENITH, True, mode)
            assert 0.0 <= hours < 24.0


def test_deterministic(beit_shemesh):
    day = date(2025, 8, 4)
    first = noaa.utc_sunrise(day, beit_shemesh, GEOMETRIC_ZENITH, True)
    assert all(
        noaa.utc_sunrise(day, beit_shemesh, GEOMETRIC_ZENITH, True) == first
        for _ in range(5)
    )


def test_utc_noon_between_sunrise_and_sunset(beit_shemesh):
    day = date(2025, 8, 4)
    noon = noaa.utc_noon(day, beit_shemesh)
    rise = noaa.utc_sunrise(day, beit_shemesh, GEOMETRIC_ZENITH, False)
    set_ = noaa.utc_sunset(day, beit_shemesh, GEOMETRIC_ZENITH, False)
    assert rise < noon < set_
    # Transit is within a minute of the midpoint of sunrise and sunset.
    assert noon == pytest.approx((rise + set_) / 2, abs=1 / 60)
