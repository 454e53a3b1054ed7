from datetime import datetime, timedelta

import pytest
from pytz import timezone

from zmanimcalc.models import GeoLocation

JERUSALEM_TZ = timezone("Asia/Jerusalem")


@pytest.fixture
def beit_shemesh() -> GeoLocation:
    """Hills west of Jerusalem, used for most reference values."""
    return GeoLocation(
        latitude=31.79388, longitude=35.03684, elevation=586.19, timezone=JERUSALEM_TZ
    )


@pytest.fixture
def jerusalem() -> GeoLocation:
    return GeoLocation(
        latitude=31.7781161, longitude=35.233804, elevation=740.0, timezone=JERUSALEM_TZ
    )


@pytest.fixture
def lakewood() -> GeoLocation:
    return GeoLocation(
        latitude=40.0721087,
        longitude=-74.2400243,
        elevation=15.0,
        timezone=timezone("America/New_York"),
    )


@pytest.fixture
def los_angeles() -> GeoLocation:
    return GeoLocation(
        latitude=34.0201613,
        longitude=-118.6919095,
        elevation=71.0,
        timezone=timezone("America/Los_Angeles"),
    )


@pytest.fixture
def tokyo() -> GeoLocation:
    return GeoLocation(
        latitude=35.6733227,
        longitude=139.6403486,
        elevation=40.0,
        timezone=timezone("Asia/Tokyo"),
    )


@pytest.fixture
def arctic_nunavut() -> GeoLocation:
    return GeoLocation(
        latitude=81.7449398,
        longitude=-64.7945858,
        elevation=127.0,
        timezone=timezone("America/Toronto"),
    )


@pytest.fixture
def assert_close():
    """Compare aware datetimes to within a tolerance (default 1 ms)."""

    def _assert_close(
        actual: datetime | None,
        expected: datetime,
        tolerance: timedelta = timedelta(milliseconds=1),
    ) -> None:
        assert actual is not None
        assert abs(actual - expected) <= tolerance, f"{actual} != {expected}"

    return _assert_close
