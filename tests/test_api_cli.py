# tests/test_api_cli.py

import sys
from datetime import datetime, timedelta, timezone

import pytest

from sunpath import sun_report
from sunpath.cli import main

UTC = timezone.utc


def test_sun_report_london_afternoon():
    r = sun_report(datetime(2024, 6, 21, 12, tzinfo=UTC), 51.5074, -0.1278, "Europe/London")

    assert r.when == datetime(2024, 6, 21, 12, tzinfo=UTC)
    assert r.coordinate.longitude_deg == pytest.approx(-0.1278)
    assert (r.azimuth_deg, r.altitude_deg) == r.position.rounded()
    assert r.direction == "S"
    assert r.shadow_azimuth_deg == (r.azimuth_deg + 180) % 360
    assert r.sun_up
    assert r.events.rise is not None and r.events.set is not None
    assert r.day_length == r.events.set - r.events.rise
    # solar noon at 0.13 W is a couple of minutes after 12:00 UTC
    assert abs(r.transit - datetime(2024, 6, 21, 12, 0, tzinfo=UTC)) < timedelta(minutes=6)


def test_sun_report_polar_night():
    r = sun_report(datetime(2024, 12, 21, 12, tzinfo=UTC), 78.0, 15.6, "Europe/Oslo")
    assert not r.sun_up
    assert r.events.rise is None and r.events.set is None
    assert r.day_length is None
    # the meridian passage still happens
    assert r.transit is not None


def test_sun_report_rejects_naive_and_bad_latitude():
    with pytest.raises(ValueError):
        sun_report(datetime(2024, 6, 21, 12), 51.5, 0.0)
    with pytest.raises(ValueError):
        sun_report(datetime(2024, 6, 21, 12, tzinfo=UTC), -91.0, 0.0)


def test_cli_jd(capsys):
    assert main(["jd", "--when", "2000-01-01T12:00:00Z"]) == 0
    out = capsys.readouterr().out
    assert "JD              = 2451545.000000" in out
    assert "d (J2000.0)     = 0.000000" in out


def test_cli_position(capsys):
    rc = main(["position", "--when", "2024-06-21T12:00:00Z", "--lat", "51.5", "--lon", "0"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Instant (UTC): 2024-06-21T12:00:00+00:00" in out
    assert "Azimuth" in out and "Altitude" in out


def test_cli_events_polar_day_prints_placeholders(capsys):
    rc = main(["events", "--when", "2024-06-21T12:00:00Z", "--lat", "78", "--lon", "15.6", "--tz", "Europe/Oslo"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Day    : 2024-06-21 (Europe/Oslo)" in out
    assert "Sunrise: –" in out
    assert "Sunset : –" in out
    assert "Duration of Day: –" in out


def test_cli_transit(capsys):
    rc = main(["transit", "--when", "2024-03-20T08:00:00Z", "--lat", "51.4779", "--lon", "0"])
    assert rc == 0
    assert "Solar Noon: 12:0" in capsys.readouterr().out


def test_cli_report(capsys):
    rc = main(
        ["report", "--when", "2024-06-21T13:00", "--lat", "51.5074", "--lon=-0.1278", "--tz", "Europe/London"]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert "Location : 51°30′26″ N, 0°7′40″ W" in out
    assert "Updated  : 21/06/24 13:00 (UTC+1)" in out
    assert "Sunrise  : 04:4" in out
    assert "Day      : 16 hrs and" in out


def test_ephemeris_extra_missing(monkeypatch):
    from sunpath.core.errors import EphemerisUnavailableError
    from sunpath.ephemeris import require_ephemeris

    # a None entry makes "import skyfield" raise ImportError
    monkeypatch.setitem(sys.modules, "skyfield", None)
    with pytest.raises(EphemerisUnavailableError):
        require_ephemeris()


def test_cli_diag_sun_path(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    import matplotlib

    matplotlib.use("Agg")
    out = tmp_path / "sun_path.png"
    rc = main(
        ["diag", "sun-path", "--date", "2024-06-21", "--lat", "51.5", "--lon", "0", "--tz", "Europe/London", "--out", str(out)]
    )
    assert rc == 0
    assert out.exists()
    assert "transit :" in capsys.readouterr().out
