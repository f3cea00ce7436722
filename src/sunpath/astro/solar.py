# astro/solar.py
"""
Low-order solar model: mean anomaly + three-term equation of center.

No nutation, aberration or secular drift of the obliquity; good to a few
arcminutes in declination, which is a few minutes of time at the horizon.
"""

from __future__ import annotations

import math
from datetime import datetime

from ..core.angles import normalize_2pi, wrap180
from ..core.time import days_since_j2000
from ..core.types import EquatorialCoordinate


PERIHELION_RAD = math.radians(102.9372)
OBLIQUITY_RAD = math.radians(23.4397)

# Sun's mean longitude at J2000 is M0 + P + 180 = 280.4663 deg.
_MEAN_ANOMALY_J2000_DEG = 357.5291
_MEAN_ANOMALY_RATE_DEG = 0.98560028


def mean_anomaly_rad(d: float) -> float:
    """(d: days since J2000.0)"""
    return math.radians(_MEAN_ANOMALY_J2000_DEG + _MEAN_ANOMALY_RATE_DEG * d)


def equation_of_center_rad(M: float) -> float:
    return (
        math.radians(1.9148) * math.sin(M)
        + math.radians(0.02) * math.sin(2.0 * M)
        + math.radians(0.0003) * math.sin(3.0 * M)
    )


def ecliptic_longitude_rad(d: float) -> float:
    """True ecliptic longitude L = M + C + P + pi (not wrapped)."""
    M = mean_anomaly_rad(d)
    return M + equation_of_center_rad(M) + PERIHELION_RAD + math.pi


def sun_equatorial(d: float) -> EquatorialCoordinate:
    """Right ascension [0, 2pi) and declination of the Sun, d days after J2000.0."""
    L = ecliptic_longitude_rad(d)
    sin_L = math.sin(L)
    ra = normalize_2pi(math.atan2(sin_L * math.cos(OBLIQUITY_RAD), math.cos(L)))
    dec = math.asin(sin_L * math.sin(OBLIQUITY_RAD))
    return EquatorialCoordinate(ra_rad=ra, dec_rad=dec)


def equation_of_time_minutes(dt: datetime) -> float:
    """
    Apparent minus mean solar time (minutes) as implied by this model:
      EOT = 4 * (L_mean - RA)   [degrees -> minutes]
    Positive when the sundial runs ahead of the clock (early November).
    """
    d = days_since_j2000(dt)
    M = mean_anomaly_rad(d)
    L_mean_deg = math.degrees(M + PERIHELION_RAD + math.pi)
    ra_deg = math.degrees(sun_equatorial(d).ra_rad)
    return 4.0 * wrap180(L_mean_deg - ra_deg)
