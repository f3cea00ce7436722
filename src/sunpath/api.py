from __future__ import annotations

from datetime import datetime
from typing import Optional

from .astro.horizon import compute_sun_data, compute_sun_position
from .core.time import TzLike, to_utc
from .core.types import GeoCoordinate, SunReport
from .display import compass_direction, shadow_azimuth
from .engines.events import (
    compute_solar_transit,
    compute_sun_rise_set,
    day_length,
    is_sun_up,
)

__all__ = [
    "compute_sun_position",
    "compute_sun_data",
    "compute_sun_rise_set",
    "compute_solar_transit",
    "day_length",
    "is_sun_up",
    "sun_report",
]


def sun_report(
    when: datetime,
    lat_deg: float,
    lon_deg: float,
    tz: TzLike = None,
) -> SunReport:
    """
    Position, events and transit for one refresh of a display.

    Integer rounding happens here and nowhere upstream.
    """
    coord = GeoCoordinate(lat_deg, lon_deg).normalized()
    when_utc = to_utc(when)

    pos = compute_sun_position(when_utc, coord.latitude_deg, coord.longitude_deg)
    az, alt = pos.rounded()
    events = compute_sun_rise_set(when_utc, coord.latitude_deg, coord.longitude_deg, tz)
    transit: Optional[datetime] = compute_solar_transit(
        when_utc, coord.latitude_deg, coord.longitude_deg, tz
    )

    return SunReport(
        when=when_utc,
        coordinate=coord,
        position=pos,
        azimuth_deg=az,
        altitude_deg=alt,
        shadow_azimuth_deg=shadow_azimuth(az),
        direction=compass_direction(pos.azimuth_deg),
        sun_up=is_sun_up(pos.altitude_deg),
        events=events,
        transit=transit,
        day_length=day_length(events),
    )
