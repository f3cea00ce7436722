# tests/test_events.py

import logging
from datetime import datetime, timedelta, timezone

import pytest
from zoneinfo import ZoneInfo

from sunpath import (
    SunEventResult,
    compute_solar_transit,
    compute_sun_position,
    compute_sun_rise_set,
    day_length,
    is_sun_up,
)
from sunpath.astro.horizon import sun_hour_angle_deg
from sunpath.core.time import local_day_window
from sunpath.engines._solver import argmin_scan, bisect_crossing, scan
from sunpath.engines.events import SUNRISE_SET_ALTITUDE_DEG

UTC = timezone.utc
LONDON = ZoneInfo("Europe/London")

CITIES = [
    # name, lat, lon, zone
    ("London", 51.5074, -0.1278, "Europe/London"),
    ("New York", 40.7128, -74.0060, "America/New_York"),
    ("Tokyo", 35.6762, 139.6503, "Asia/Tokyo"),
    ("Sydney", -33.8688, 151.2093, "Australia/Sydney"),
    ("Quito", -0.1807, -78.4678, "America/Guayaquil"),
]


def _local(dt, zone):
    return dt.astimezone(ZoneInfo(zone) if isinstance(zone, str) else zone)


def test_bisect_crossing_brackets_root():
    root = datetime(2024, 1, 1, 12, tzinfo=UTC)

    def f(t):
        return (t - root).total_seconds()

    found = bisect_crossing(f, root - timedelta(seconds=250), root + timedelta(seconds=350), iters=14)
    # returns the right end of the final bracket: 600 s / 2**14 wide
    assert timedelta(0) <= found - root <= timedelta(seconds=0.04)


def test_scan_and_argmin():
    start = datetime(2024, 1, 1, tzinfo=UTC)
    samples = list(scan(start, start + timedelta(hours=1), timedelta(minutes=10)))
    assert len(samples) == 7
    assert samples[-1] == start + timedelta(hours=1)

    best = argmin_scan(lambda t: abs((t - samples[4]).total_seconds()), samples)
    assert best == (samples[4], 0.0)
    assert argmin_scan(lambda t: 0.0, []) is None


def test_london_midsummer():
    """
    London, 2024-06-21: sunrise 04:43 BST at azimuth 49 deg,
    sunset 21:21 BST at azimuth 311 deg.
    """
    ev = compute_sun_rise_set(datetime(2024, 6, 21, 12, tzinfo=UTC), 51.5074, -0.1278, LONDON)
    assert ev.rise is not None and ev.set is not None

    rise = _local(ev.rise, LONDON)
    sset = _local(ev.set, LONDON)
    assert abs(rise - datetime(2024, 6, 21, 4, 43, tzinfo=LONDON)) < timedelta(minutes=6)
    assert abs(sset - datetime(2024, 6, 21, 21, 21, tzinfo=LONDON)) < timedelta(minutes=6)
    assert abs(ev.rise_azimuth_deg - 49) <= 2
    assert abs(ev.set_azimuth_deg - 311) <= 2

    length = day_length(ev)
    assert abs(length - timedelta(hours=16, minutes=38)) < timedelta(minutes=8)


def test_crossing_altitude_matches_threshold():
    ev = compute_sun_rise_set(datetime(2024, 4, 2, tzinfo=UTC), 48.8566, 2.3522, "Europe/Paris")
    for t in (ev.rise, ev.set):
        alt = compute_sun_position(t, 48.8566, 2.3522).altitude_deg
        # 0.04 s of refinement is far below 0.01 deg of motion
        assert alt == pytest.approx(SUNRISE_SET_ALTITUDE_DEG, abs=0.01)


@pytest.mark.parametrize("name,lat,lon,zone", CITIES)
def test_rise_precedes_set(name, lat, lon, zone):
    for month in (1, 4, 7, 10):
        when = datetime(2024, month, 15, 12, tzinfo=ZoneInfo(zone))
        ev = compute_sun_rise_set(when, lat, lon, zone)
        assert ev.rise is not None and ev.set is not None, name
        assert ev.rise < ev.set, name
        # both events fall inside the local day that was asked for
        start, end = local_day_window(when, zone)
        assert start <= ev.rise < end and start <= ev.set <= end


@pytest.mark.parametrize("lat", [0.0, 40.0, -40.0])
def test_equinox_azimuths_are_mirror_images(lat):
    ev = compute_sun_rise_set(datetime(2024, 3, 20, 12, tzinfo=UTC), lat, 0.0)
    assert ev.rise is not None and ev.set is not None
    # rise azimuth a <-> set azimuth 360 - a
    assert abs(ev.rise_azimuth_deg + ev.set_azimuth_deg - 360) <= 2
    assert 80 <= ev.rise_azimuth_deg <= 100


def test_polar_day_and_night():
    # Longyearbyen, Svalbard (78 N)
    summer = compute_sun_rise_set(datetime(2024, 6, 21, 12, tzinfo=UTC), 78.0, 15.6, "Europe/Oslo")
    winter = compute_sun_rise_set(datetime(2024, 12, 21, 12, tzinfo=UTC), 78.0, 15.6, "Europe/Oslo")
    for ev in (summer, winter):
        assert ev == SunEventResult(rise=None, set=None, rise_azimuth_deg=0, set_azimuth_deg=0)
        assert day_length(ev) is None


def test_polar_outcome_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="sunpath.engines.events"):
        compute_sun_rise_set(datetime(2024, 6, 21, 12, tzinfo=UTC), 78.0, 15.6)
    assert "rise=None set=None" in caplog.text


def test_civil_twilight_threshold_is_earlier():
    when = datetime(2024, 6, 21, 12, tzinfo=UTC)
    official = compute_sun_rise_set(when, 51.5074, -0.1278, LONDON)
    civil = compute_sun_rise_set(when, 51.5074, -0.1278, LONDON, threshold_deg=-6.0)
    assert civil.rise < official.rise
    assert civil.set > official.set


def test_wrong_zone_may_drop_an_event_but_never_raises():
    # Tokyo's sunset happens before its sunrise within a UTC day
    ev = compute_sun_rise_set(datetime(2024, 6, 21, 12, tzinfo=UTC), 35.6762, 139.6503, None)
    assert ev.rise is not None and ev.set is not None
    assert ev.set < ev.rise
    assert day_length(ev) is None


def test_unrepresentable_day_is_absence():
    far = datetime(9999, 12, 31, 12, tzinfo=UTC)
    assert compute_sun_rise_set(far, 10.0, 10.0) == SunEventResult()
    assert compute_solar_transit(far, 10.0, 10.0) is None


def test_transit_greenwich_equinox():
    # solar noon at Greenwich on 2024-03-20 is 12:07 UTC (equation of time -7.5 min)
    t = compute_solar_transit(datetime(2024, 3, 20, 8, tzinfo=UTC), 51.4779, 0.0)
    assert abs(t - datetime(2024, 3, 20, 12, 7, tzinfo=UTC)) < timedelta(minutes=5)


def test_transit_early_november():
    # solar noon at Greenwich on 2024-11-03 is 11:43:35 UTC
    t = compute_solar_transit(datetime(2024, 11, 3, 20, tzinfo=UTC), 51.4779, 0.0)
    assert abs(t - datetime(2024, 11, 3, 11, 43, 35, tzinfo=UTC)) < timedelta(minutes=5)


@pytest.mark.parametrize(
    "lat,lon,zone",
    [(51.4779, 0.0, None), (35.6762, 139.6503, "Asia/Tokyo"), (0.0, 179.0, None), (-45.0, -170.0, -11), (10.0, 75.0, 5.5)],
)
def test_transit_bounds_and_minimality(lat, lon, zone):
    when = datetime(2024, 8, 10, 12, tzinfo=UTC)
    t = compute_solar_transit(when, lat, lon, zone)
    start, end = local_day_window(when, zone)
    assert t is not None
    assert start <= t < end

    best = abs(sun_hour_angle_deg(t, lon))
    for i in range(144):
        sample = start + timedelta(minutes=10 * i)
        assert best <= abs(sun_hour_angle_deg(sample, lon))


def test_transit_on_whole_minutes_and_altitude_peak():
    when = datetime(2024, 6, 21, 12, tzinfo=UTC)
    t = compute_solar_transit(when, 51.4779, 0.0, LONDON)
    assert t.second == 0 and t.microsecond == 0
    peak = compute_sun_position(t, 51.4779, 0.0).altitude_deg
    for minutes in (-30, 30):
        assert compute_sun_position(t + timedelta(minutes=minutes), 51.4779, 0.0).altitude_deg < peak


def test_idempotent():
    when = datetime(2024, 2, 29, 7, 7, tzinfo=UTC)
    assert compute_sun_rise_set(when, 60.17, 24.94, "Europe/Helsinki") == compute_sun_rise_set(
        when, 60.17, 24.94, "Europe/Helsinki"
    )
    assert compute_solar_transit(when, 60.17, 24.94) == compute_solar_transit(when, 60.17, 24.94)


def test_is_sun_up_uses_rise_set_threshold():
    assert is_sun_up(0.5)
    assert is_sun_up(-0.5)
    assert not is_sun_up(-1.0)
    assert is_sun_up(-3.0, threshold_deg=-6.0)
