# astro/horizon.py

from __future__ import annotations

import math
from datetime import datetime
from typing import Tuple

from ..core.angles import normalize_2pi, normalize_pi, wrap_deg
from ..core.time import days_since_j2000, local_sidereal_time_rad
from ..core.types import GeoCoordinate, HorizontalCoordinate, SunPosition
from .solar import sun_equatorial


def hour_angle_rad(ra_rad: float, dt: datetime, lon_deg: float) -> float:
    """Local hour angle in (-pi, pi]; negative east of the meridian (morning)."""
    return normalize_pi(local_sidereal_time_rad(dt, lon_deg) - ra_rad)


def horizontal(ra_rad: float, dec_rad: float, dt: datetime, lat_deg: float, lon_deg: float) -> HorizontalCoordinate:
    """
    Equatorial (RA, Dec) -> horizontal (azimuth, altitude) for an observer.
    Azimuth is measured from North, increasing towards East.
    """
    lat = math.radians(lat_deg)
    H = hour_angle_rad(ra_rad, dt, lon_deg)

    sin_alt = math.sin(lat) * math.sin(dec_rad) + math.cos(lat) * math.cos(dec_rad) * math.cos(H)
    alt = math.asin(max(-1.0, min(1.0, sin_alt)))

    # atan2 here is South-referenced; +pi turns it to North = 0, East = 90.
    az = math.atan2(
        math.sin(H),
        math.cos(H) * math.sin(lat) - math.tan(dec_rad) * math.cos(lat),
    ) + math.pi

    return HorizontalCoordinate(az_rad=normalize_2pi(az), alt_rad=alt)


def sun_horizontal(dt: datetime, coord: GeoCoordinate) -> HorizontalCoordinate:
    """Time base -> equatorial model -> horizon transform (no validation)."""
    eq = sun_equatorial(days_since_j2000(dt))
    return horizontal(eq.ra_rad, eq.dec_rad, dt, coord.latitude_deg, coord.longitude_deg)


def sun_hour_angle_deg(dt: datetime, lon_deg: float) -> float:
    """Sun's hour angle in degrees (-180, 180]."""
    eq = sun_equatorial(days_since_j2000(dt))
    return math.degrees(hour_angle_rad(eq.ra_rad, dt, lon_deg))


def compute_sun_position(dt: datetime, lat_deg: float, lon_deg: float) -> SunPosition:
    """
    Sun azimuth (deg True, [0,360), N=0 E=90) and altitude (deg) for an
    aware datetime and an observer position.
    """
    coord = GeoCoordinate(lat_deg, lon_deg).normalized()
    h = sun_horizontal(dt, coord)
    return SunPosition(
        azimuth_deg=wrap_deg(math.degrees(h.az_rad)),
        altitude_deg=math.degrees(h.alt_rad),
    )


def compute_sun_data(dt: datetime, lat_deg: float, lon_deg: float) -> Tuple[int, int]:
    """Integer-rounded (azimuth, altitude) for display."""
    return compute_sun_position(dt, lat_deg, lon_deg).rounded()
