# ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Union

from ..core.errors import EphemerisUnavailableError
from ..core.time import to_utc
from ..core.types import SunPosition


@dataclass
class SkyfieldSun:
    """
    Apparent topocentric Sun position from a JPL ephemeris via skyfield.
    Airless (no refraction), like the low-order model it is compared with.

    Requires optional deps:
      pip install "sunpath[ephemeris]"
    The ephemeris file (de421.bsp by default) is downloaded into data_dir on
    first use.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, data_dir: Union[str, Path] = ".", bsp: str = "de421.bsp") -> "SkyfieldSun":
        try:
            from skyfield.api import Loader  # type: ignore
        except ImportError as e:
            raise EphemerisUnavailableError(
                "skyfield not available. Install extras:\n"
                "  pip install \"sunpath[ephemeris]\""
            ) from e

        loader = Loader(str(data_dir))
        return cls(ts=loader.timescale(), eph=loader(bsp))

    def position(self, dt: datetime, lat_deg: float, lon_deg: float) -> SunPosition:
        from skyfield.api import wgs84  # type: ignore

        t = self.ts.from_datetime(to_utc(dt))
        ground = self.eph["earth"] + wgs84.latlon(latitude_degrees=lat_deg, longitude_degrees=lon_deg)
        alt, az, _ = ground.at(t).observe(self.eph["sun"]).apparent().altaz()
        return SunPosition(azimuth_deg=float(az.degrees) % 360.0, altitude_deg=float(alt.degrees))
