# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Shared constants for the solar ephemeris and the globe scene.

Time and solar values follow the NOAA low-precision solar series. Scene
values are in globe units where the rendered Earth has radius
GLOBE_RADIUS_FACTOR.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AstroConstants:
    """Calendar and solar constants."""
    JD_UNIX_EPOCH: float = 2440587.5          # Julian date of 1970-01-01T00:00Z
    JD_J2000: float = 2451545.0               # Julian date of 2000-01-01T12:00 TT
    SECONDS_PER_DAY: float = 86400.0
    DAYS_PER_JULIAN_CENTURY: float = 36525.0
    SECONDS_PER_HOUR: float = 3600.0
    MINUTES_PER_HOUR: float = 60.0
    DEGREES_PER_HOUR: float = 15.0            # longitude swept by the Sun per hour
    EARTH_TILT_RAD: float = math.radians(23.44)
    # Calibrated obliquity term of the equation of time, not re-derived.
    EOT_OBLIQUITY: float = 0.0430264916545165


@dataclass(frozen=True)
class GlobeConstants:
    """Scene scale of the rendered globe."""
    GLOBE_RADIUS_FACTOR: float = 0.555
    SURFACE_MULTIPLIER: float = 1.01          # lifts ground markers off the texture
    FOOTPRINT_DIAMETER: float = 0.4
    SUN_DISTANCE: float = 50.0
    TEXTURE_LONGITUDE_OFFSET_DEG: float = 90.0
    ORBIT_COORDINATE_OFFSET_DEG: float = 180.0


# Module-level singletons
AstroConstants = AstroConstants()
GlobeConstants = GlobeConstants()
