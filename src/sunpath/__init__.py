"""sunpath public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    compute_sun_position,
    compute_sun_data,
    compute_sun_rise_set,
    compute_solar_transit,
    day_length,
    is_sun_up,
    sun_report,
)
from .core.errors import DayBoundaryError, InvalidCoordinateError, SunpathError
from .core.types import (
    EquatorialCoordinate,
    GeoCoordinate,
    HorizontalCoordinate,
    SunEventResult,
    SunPosition,
    SunReport,
)

__all__ = [
    "compute_sun_position",
    "compute_sun_data",
    "compute_sun_rise_set",
    "compute_solar_transit",
    "day_length",
    "is_sun_up",
    "sun_report",
    "GeoCoordinate",
    "EquatorialCoordinate",
    "HorizontalCoordinate",
    "SunPosition",
    "SunEventResult",
    "SunReport",
    "SunpathError",
    "InvalidCoordinateError",
    "DayBoundaryError",
]
