"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries,
used to check the low-order model, never by the core itself.
Install with:
  pip install "sunpath[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "sunpath[ephemeris]"') from e
