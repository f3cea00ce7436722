from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
import math
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

from .angles import wrap_deg
from .errors import DayBoundaryError


TzLike = Union[None, tzinfo, str, float, int]

J2000_JD = 2451545.0  # 2000-01-01 12:00 UTC
_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

def to_utc(dt: datetime) -> datetime:
    """Aware datetime -> same instant in UTC. Naive datetimes are rejected."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)


def julian_day(dt: datetime) -> float:
    """
    Gregorian calendar date (UTC fields) -> Julian Day.

      JD = floor(365.25 (y+4716)) + floor(30.6001 (m+1)) + D + B - 1524.5
      B  = 2 - A + floor(A/4),  A = floor(y/100)

    with January and February counted as months 13 and 14 of the previous year.
    """
    u = to_utc(dt)
    y = u.year
    m = u.month
    D = (
        u.day
        + u.hour / 24.0
        + u.minute / 1440.0
        + (u.second + u.microsecond / 1e6) / 86400.0
    )
    if m <= 2:
        y -= 1
        m += 12
    A = y // 100
    B = 2 - A + A // 4
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + D + B - 1524.5


def days_since_j2000(dt: datetime) -> float:
    """Days (fractional) since J2000.0."""
    return julian_day(dt) - J2000_JD


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC) through the Unix timestamp.
    Agrees with julian_day() to float rounding; cheaper for bulk conversion.
    """
    t = to_utc(dt).timestamp()
    return _JD_UNIX_EPOCH + t / 86400.0


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    t = (jd - _JD_UNIX_EPOCH) * 86400.0
    return datetime.fromtimestamp(t, tz=timezone.utc)


# ============================================================
# Sidereal time
# ============================================================

def gmst_deg(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time (degrees, [0,360)):
      280.46061837 + 360.98564736629 d + 0.000387933 T^2 - T^3/38710000
    with d = JD - 2451545.0 and T = d / 36525.
    """
    d = jd - J2000_JD
    T = d / 36525.0
    gmst = 280.46061837 + 360.98564736629 * d + 0.000387933 * T * T - (T * T * T) / 38710000.0
    return wrap_deg(gmst)


def local_sidereal_time_rad(dt: datetime, longitude_deg: float) -> float:
    """Local sidereal time (radians, [0, 2pi)) at a longitude (degrees East)."""
    lst_deg = wrap_deg(gmst_deg(julian_day(dt)) + longitude_deg)
    return math.radians(lst_deg)


# ============================================================
# Local civil day (calendar collaborator)
# ============================================================

def resolve_tz(tz: TzLike) -> tzinfo:
    """
    Accepts:
      - None           -> UTC
      - tzinfo         -> as is
      - "Europe/Paris" -> zoneinfo.ZoneInfo
      - 5.5 / -7       -> fixed offset in hours
    """
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    if isinstance(tz, str):
        return ZoneInfo(tz)
    if isinstance(tz, (int, float)) and not isinstance(tz, bool):
        return timezone(timedelta(hours=float(tz)))
    raise TypeError(f"Unsupported time zone value: {tz!r}")


def local_date(dt: datetime, tz: TzLike = None) -> date:
    """Civil date of the instant as seen in tz."""
    return to_utc(dt).astimezone(resolve_tz(tz)).date()


def _local_midnight_utc(d: date, zone: tzinfo) -> datetime:
    return datetime(d.year, d.month, d.day, tzinfo=zone).astimezone(timezone.utc)


def start_of_local_day(dt: datetime, tz: TzLike = None) -> datetime:
    """UTC instant of the local midnight that opens the day containing dt."""
    return local_day_window(dt, tz)[0]


def local_day_window(dt: datetime, tz: TzLike = None) -> Tuple[datetime, datetime]:
    """
    [start, end) of the local calendar day containing dt, both in UTC.

    end is the next local midnight, so DST transition days span 23 or 25 hours.
    """
    zone = resolve_tz(tz)
    try:
        d = to_utc(dt).astimezone(zone).date()
        start = _local_midnight_utc(d, zone)
        end = _local_midnight_utc(d + timedelta(days=1), zone)
    except OverflowError as e:
        raise DayBoundaryError(f"Cannot resolve local day for {dt!r} in {zone}") from e
    return start, end


def utc_offset_hours(dt: datetime, tz: TzLike = None) -> Optional[float]:
    """UTC offset (hours) of tz at the given instant."""
    off = to_utc(dt).astimezone(resolve_tz(tz)).utcoffset()
    if off is None:
        return None
    return off.total_seconds() / 3600.0


def parse_when(text: str, tz: TzLike = None) -> datetime:
    """
    ISO-8601 string -> aware datetime.
    "2024-03-20", "2024-03-20T12:00" are read as local time in tz;
    an explicit offset ("...Z", "...+02:00") wins over tz.
    """
    s = text.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=resolve_tz(tz))
    return dt


def tz_from_arg(s: str) -> TzLike:
    """Command-line time zone: "5.5" / "-7" as hour offsets, anything else as a zone name."""
    try:
        return float(s)
    except ValueError:
        return s
