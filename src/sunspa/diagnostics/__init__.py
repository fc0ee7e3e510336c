"""Diagnostics package.

- day_profile: zenith over one day (needs numpy + matplotlib)
- validate_reference: residuals against a JPL ephemeris (needs skyfield)
"""

__all__ = ["day_profile", "validate_reference"]
