"""Text helpers for watch-face style consumers. Formatting only, no drawing."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from .core.time import TzLike, resolve_tz

PLACEHOLDER = "–"
COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def shadow_azimuth(azimuth_deg: int) -> int:
    """Direction a vertical stick's shadow points: opposite the Sun, 0..359."""
    return (int(azimuth_deg) + 180) % 360


def compass_direction(azimuth_deg: float) -> str:
    """8-point compass sector (45 deg wide, centred on N, NE, ...)."""
    index = int((azimuth_deg % 360.0 + 22.5) / 45.0) % 8
    return COMPASS_POINTS[index]


def _dms(decimal: float) -> tuple[int, int, int]:
    value = abs(decimal)
    deg = int(value)
    minutes_full = (value - deg) * 60.0
    minutes = int(minutes_full)
    seconds = int((minutes_full - minutes) * 60.0)
    return deg, minutes, seconds


def format_dms(lat_deg: float, lon_deg: float) -> str:
    """51.5074, -0.1278 -> 51°30′26″ N, 0°7′40″ W"""
    lat_d, lat_m, lat_s = _dms(lat_deg)
    lon_d, lon_m, lon_s = _dms(lon_deg)
    lat_dir = "N" if lat_deg >= 0 else "S"
    lon_dir = "E" if lon_deg >= 0 else "W"
    return f"{lat_d}°{lat_m}′{lat_s}″ {lat_dir}, {lon_d}°{lon_m}′{lon_s}″ {lon_dir}"


def format_event_time(dt: Optional[datetime], tz: TzLike = None, fmt: str = "%H:%M") -> str:
    """Local clock time of an event, or the placeholder when there is none."""
    if dt is None:
        return PLACEHOLDER
    return dt.astimezone(resolve_tz(tz)).strftime(fmt)


def format_azimuth(azimuth_deg: Optional[int]) -> str:
    """49 -> '049° NE'"""
    if azimuth_deg is None:
        return PLACEHOLDER
    return f"{int(azimuth_deg):03d}° {compass_direction(azimuth_deg)}"


def format_duration(td: Optional[timedelta]) -> str:
    if td is None:
        return PLACEHOLDER
    total = int(td.total_seconds())
    hours, rem = divmod(total, 3600)
    return f"{hours:02d} hrs and {rem // 60:02d} mins"
