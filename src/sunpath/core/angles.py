from __future__ import annotations

from math import fmod, pi

TAU = 2.0 * pi


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod(-1e-17, 360) + 360 rounds to 360.0
    if y >= 360.0:
        y -= 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

def wrap_longitude(lon_deg: float) -> float:
    """Longitude east of Greenwich, wrapped to [-180, 180)."""
    return wrap180(lon_deg)

def normalize_2pi(r: float) -> float:
    """Wrap radians to [0, 2*pi)."""
    v = fmod(r, TAU)
    if v < 0:
        v += TAU
    if v >= TAU:
        v -= TAU
    return v

def normalize_pi(r: float) -> float:
    """Wrap radians to (-pi, pi]."""
    v = fmod(r, TAU)
    if v <= -pi:
        v += TAU
    if v > pi:
        v -= TAU
    return v
