"""Time unit conversion factors."""

SECOND_MICROS = 1_000_000.0  # microseconds in a second
SECOND_MILLIS = 1_000.0  # milliseconds in a second

MINUTE_SECONDS = 60.0  # seconds in a minute
MINUTE_MICROS = SECOND_MICROS * MINUTE_SECONDS  # microseconds in a minute

HOUR_MINUTES = 60.0  # minutes in an hour
HOUR_SECONDS = HOUR_MINUTES * MINUTE_SECONDS  # seconds in an hour
HOUR_MILLIS = HOUR_SECONDS * SECOND_MILLIS  # milliseconds in an hour

DAY_HOURS = 24.0  # hours in a day
DAY_MINUTES = DAY_HOURS * HOUR_MINUTES  # minutes in a day
