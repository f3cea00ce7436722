"""Diagnostics package.

- diagnostics.sun_path: plot of altitude/azimuth over a local day (numpy, matplotlib)
- diagnostics.validate_reference: model vs. skyfield residuals (ephemeris extras)
"""

__all__ = ["sun_path", "validate_reference"]
