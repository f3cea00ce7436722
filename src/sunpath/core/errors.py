class SunpathError(Exception):
    """Base error."""

class InvalidCoordinateError(SunpathError, ValueError):
    """Raised when a latitude/longitude cannot describe a point on Earth."""

class DayBoundaryError(SunpathError):
    """Raised when the local-day window for an instant cannot be represented."""

class EphemerisUnavailableError(SunpathError):
    """Raised when the optional reference ephemeris (skyfield) is not available."""
