"""
sunpath.engines.events
----------------------
Sunrise, sunset and solar transit for the local calendar day containing an
instant.

Both finders work by brute force over the day: a coarse 10-minute scan of a
smooth function of time followed by a local refinement (bisection for the
horizon crossings, a 1-minute scan for the meridian passage). At most a few
hundred evaluations of the position model per call.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Optional

from ..astro.horizon import sun_horizontal, sun_hour_angle_deg
from ..core.angles import wrap_deg
from ..core.errors import DayBoundaryError
from ..core.time import TzLike, local_day_window
from ..core.types import GeoCoordinate, SunEventResult
from ._solver import argmin_scan, bisect_crossing, scan

logger = logging.getLogger(__name__)

# Apparent sunrise/sunset altitude of the Sun's centre (deg):
# refraction (~34') + solar radius (~16').
SUNRISE_SET_ALTITUDE_DEG = -0.833

SCAN_STEP_MINUTES = 10
BISECTION_ITERATIONS = 14
TRANSIT_REFINE_HALF_WINDOW_MINUTES = 15


def is_sun_up(altitude_deg: float, threshold_deg: float = SUNRISE_SET_ALTITUDE_DEG) -> bool:
    """Visibility test consistent with the rise/set finder."""
    return altitude_deg >= threshold_deg


def compute_sun_rise_set(
    dt: datetime,
    lat_deg: float,
    lon_deg: float,
    tz: TzLike = None,
    *,
    threshold_deg: float = SUNRISE_SET_ALTITUDE_DEG,
    step_minutes: int = SCAN_STEP_MINUTES,
    iterations: int = BISECTION_ITERATIONS,
) -> SunEventResult:
    """
    Sunrise/sunset for the local day (in tz) containing dt.

    A rise is the first step where altitude - threshold goes from negative to
    non-negative, a set the first step where it goes from non-negative to
    negative. Events that do not happen that day (polar day/night, or a day
    window that cuts through the night on the wrong side) come back as None
    with azimuth 0.
    """
    coord = GeoCoordinate(lat_deg, lon_deg).normalized()
    try:
        start, end = local_day_window(dt, tz)
    except DayBoundaryError as e:
        logger.debug("rise/set: %s", e)
        return SunEventResult()

    def alt_minus_threshold(t: datetime) -> float:
        return math.degrees(sun_horizontal(t, coord).alt_rad) - threshold_deg

    def azimuth_int(t: datetime) -> int:
        return int(round(wrap_deg(math.degrees(sun_horizontal(t, coord).az_rad)))) % 360

    rise: Optional[datetime] = None
    sset: Optional[datetime] = None
    rise_az = 0
    set_az = 0

    samples = scan(start, end, timedelta(minutes=step_minutes))
    t0 = next(samples)
    y0 = alt_minus_threshold(t0)

    for t1 in samples:
        y1 = alt_minus_threshold(t1)

        # rise: below -> above
        if rise is None and y0 < 0 and y1 >= 0:
            rise = bisect_crossing(alt_minus_threshold, t0, t1, iters=iterations)
            rise_az = azimuth_int(rise)

        # set: above -> below
        if sset is None and y0 >= 0 and y1 < 0:
            sset = bisect_crossing(alt_minus_threshold, t0, t1, iters=iterations)
            set_az = azimuth_int(sset)

        if rise is not None and sset is not None:
            break

        t0, y0 = t1, y1

    if rise is None or sset is None:
        logger.debug(
            "rise/set: lat=%.4f lon=%.4f day=%s rise=%s set=%s",
            coord.latitude_deg, coord.longitude_deg, start.isoformat(), rise, sset,
        )

    return SunEventResult(rise=rise, set=sset, rise_azimuth_deg=rise_az, set_azimuth_deg=set_az)


def compute_solar_transit(
    dt: datetime,
    lat_deg: float,
    lon_deg: float,
    tz: TzLike = None,
    *,
    step_minutes: int = SCAN_STEP_MINUTES,
    refine_half_window_minutes: int = TRANSIT_REFINE_HALF_WINDOW_MINUTES,
) -> Optional[datetime]:
    """
    Solar transit (meridian passage, "solar noon"): the time of minimum
    |hour angle| within the local day (in tz) containing dt.

    Latitude does not enter the hour angle; it is validated only.
    """
    coord = GeoCoordinate(lat_deg, lon_deg).normalized()
    try:
        start, end = local_day_window(dt, tz)
    except DayBoundaryError as e:
        logger.debug("transit: %s", e)
        return None

    def abs_hour_angle_deg(t: datetime) -> float:
        return abs(sun_hour_angle_deg(t, coord.longitude_deg))

    step = timedelta(minutes=step_minutes)
    coarse_samples = (start + i * step for i in range(1440 // step_minutes))
    coarse = argmin_scan(abs_hour_angle_deg, (t for t in coarse_samples if t < end))
    if coarse is None:
        return None
    coarse_t, _ = coarse

    # Refine +-15 minutes by 1 minute, staying inside the day.
    half = timedelta(minutes=refine_half_window_minutes)
    fine_samples = scan(coarse_t - half, coarse_t + half, timedelta(minutes=1))
    fine = argmin_scan(abs_hour_angle_deg, (t for t in fine_samples if start <= t < end))
    if fine is None:
        return coarse_t
    return fine[0]


def day_length(events: SunEventResult) -> Optional[timedelta]:
    """Sunset minus sunrise, when both exist and the rise comes first."""
    if events.rise is None or events.set is None or events.set <= events.rise:
        return None
    return events.set - events.rise
