# tests/test_display.py

from datetime import datetime, timedelta, timezone

import pytest

from sunpath.display import (
    PLACEHOLDER,
    compass_direction,
    format_azimuth,
    format_dms,
    format_duration,
    format_event_time,
    shadow_azimuth,
)


@pytest.mark.parametrize(
    "az,expected",
    [(0, "N"), (22, "N"), (23, "NE"), (90, "E"), (180, "S"), (200, "S"), (270, "W"), (315, "NW"), (359, "N")],
)
def test_compass_direction(az, expected):
    assert compass_direction(az) == expected


def test_shadow_azimuth_points_away_from_the_sun():
    assert shadow_azimuth(49) == 229
    assert shadow_azimuth(180) == 0
    assert shadow_azimuth(311) == 131
    assert shadow_azimuth(0) == 180


def test_format_dms():
    assert format_dms(51.5074, -0.1278) == "51°30′26″ N, 0°7′40″ W"
    assert format_dms(-33.8688, 151.2093) == "33°52′7″ S, 151°12′33″ E"


def test_format_event_time():
    rise = datetime(2024, 6, 21, 3, 43, tzinfo=timezone.utc)
    assert format_event_time(rise, "Europe/London") == "04:43"
    assert format_event_time(rise) == "03:43"
    assert format_event_time(rise, -5, "%H:%M:%S") == "22:43:00"
    assert format_event_time(None, "Europe/London") == PLACEHOLDER


def test_format_azimuth():
    assert format_azimuth(49) == "049° NE"
    assert format_azimuth(311) == "311° NW"
    assert format_azimuth(None) == PLACEHOLDER


def test_format_duration():
    assert format_duration(timedelta(hours=16, minutes=38, seconds=59)) == "16 hrs and 38 mins"
    assert format_duration(timedelta(hours=7, minutes=5)) == "07 hrs and 05 mins"
    assert format_duration(None) == PLACEHOLDER
