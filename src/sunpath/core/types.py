from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from math import isfinite
from typing import Optional

from .angles import wrap_longitude
from .errors import InvalidCoordinateError


@dataclass(frozen=True)
class GeoCoordinate:
    latitude_deg: float   # [-90, 90], positive North
    longitude_deg: float  # positive East

    def normalized(self) -> "GeoCoordinate":
        """Validate latitude and wrap longitude into [-180, 180)."""
        lat = float(self.latitude_deg)
        lon = float(self.longitude_deg)
        if not (isfinite(lat) and isfinite(lon)):
            raise InvalidCoordinateError(f"Non-finite coordinate: lat={lat}, lon={lon}")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinateError(f"Latitude {lat} outside [-90, 90]")
        return GeoCoordinate(latitude_deg=lat, longitude_deg=wrap_longitude(lon))


@dataclass(frozen=True)
class EquatorialCoordinate:
    ra_rad: float   # right ascension [0, 2pi)
    dec_rad: float  # declination [-pi/2, pi/2]


@dataclass(frozen=True)
class HorizontalCoordinate:
    az_rad: float   # 0 = North, increasing toward East, [0, 2pi)
    alt_rad: float  # [-pi/2, pi/2]


@dataclass(frozen=True)
class SunPosition:
    azimuth_deg: float   # [0, 360)
    altitude_deg: float  # [-90, 90]

    def rounded(self) -> tuple[int, int]:
        """Integer degrees for display. Azimuth 359.6 rounds to 0, not 360."""
        return int(round(self.azimuth_deg)) % 360, int(round(self.altitude_deg))


@dataclass(frozen=True)
class SunEventResult:
    """Sunrise/sunset for one local day. Absent events are None with azimuth 0."""
    rise: Optional[datetime] = None
    set: Optional[datetime] = None
    rise_azimuth_deg: int = 0
    set_azimuth_deg: int = 0


@dataclass(frozen=True)
class SunReport:
    """Everything a watch face needs for one refresh."""
    when: datetime
    coordinate: GeoCoordinate
    position: SunPosition
    azimuth_deg: int
    altitude_deg: int
    shadow_azimuth_deg: int
    direction: str
    sun_up: bool
    events: SunEventResult
    transit: Optional[datetime]
    day_length: Optional[timedelta]
