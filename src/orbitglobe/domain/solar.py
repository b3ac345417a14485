# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Low-precision solar ephemeris and the subsolar point.

Series are polynomials in Julian centuries since J2000.0 (NOAA solar
position formulas). Angles are degrees unless a name says otherwise;
trigonometric calls convert at the call site.

The subsolar longitude comes from the UTC clock corrected by the equation
of time rather than from sidereal time. Its constants are calibrated for the
rendered globe.

No external dependencies — only stdlib math/dataclasses/datetime.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from orbitglobe.domain.constants import AstroConstants, GlobeConstants
from orbitglobe.domain.spherical_projection import (
    CartesianPosition,
    marker_position,
)
from orbitglobe.domain.time_conversion import (
    julian_century,
    unix_seconds_from_datetime,
    utc_decimal_hours,
)


@dataclass(frozen=True)
class SubsolarPoint:
    """Where the Sun is at zenith."""
    lat_deg: float
    lon_deg: float


def orbit_eccentricity(t: float) -> float:
    """Eccentricity of Earth's orbit at Julian century t (dimensionless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def mean_anomaly(t: float) -> float:
    """Mean anomaly of the Sun (degrees, not normalized)."""
    return 357.52911 + t * 35999.05029 - t * t * 0.0001537


def geometric_mean_longitude(t: float) -> float:
    """Geometric mean longitude of the Sun, normalized to [0, 360)."""
    return (280.46646 + t * 36000.76983 + t * t * 0.0003032) % 360.0


def equation_of_center(t: float) -> float:
    """
    Sun's equation of center (degrees).

    Difference between true and mean anomaly, as a three-term sine series
    in the mean anomaly.
    """
    m_rad = math.radians(mean_anomaly(t))
    return (
        math.sin(m_rad) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2 * m_rad) * (0.019993 - 0.000101 * t)
        + math.sin(3 * m_rad) * 0.000289
    )


def sun_true_longitude(t: float) -> float:
    """Geometric mean longitude plus equation of center (degrees)."""
    return geometric_mean_longitude(t) + equation_of_center(t)


def equation_of_time(unix_seconds: float) -> float:
    """
    Equation of time in minutes.

    Args:
        unix_seconds: UTC instant.

    Returns:
        Apparent minus mean solar time. Negative in early January,
        about +16 minutes in early November.
    """
    t = julian_century(unix_seconds)
    l_rad = math.radians(geometric_mean_longitude(t))
    m_rad = math.radians(mean_anomaly(t))
    e = orbit_eccentricity(t)
    y = AstroConstants.EOT_OBLIQUITY

    term1 = y * math.sin(2 * l_rad)
    term2 = 2 * e * math.sin(m_rad)
    term3 = 4 * e * y * math.sin(m_rad) * math.cos(2 * l_rad)
    term4 = 0.5 * y * y * math.sin(4 * l_rad)
    term5 = 1.25 * e * e * math.sin(2 * m_rad)

    return math.degrees(4 * (term1 - term2 + term3 - term4 - term5))


def subsolar_latitude(unix_seconds: float) -> float:
    """Latitude of the subsolar point (degrees), bounded by the axial tilt."""
    t = julian_century(unix_seconds)
    true_longitude_rad = math.radians(sun_true_longitude(t))
    return math.degrees(
        math.asin(math.sin(true_longitude_rad) * math.sin(AstroConstants.EARTH_TILT_RAD))
    )


def subsolar_longitude(unix_seconds: float) -> float:
    """
    Longitude of the subsolar point (degrees, in [-180, 180]).

    Local solar noon is where apparent solar time reads 12h, so the Sun
    sits 15 deg west of Greenwich for every hour past 12:00 UTC, shifted by
    the equation of time.
    """
    c = AstroConstants
    hours = utc_decimal_hours(unix_seconds)
    eot_hours = equation_of_time(unix_seconds) / c.MINUTES_PER_HOUR

    longitude = (12.0 - hours - eot_hours) * c.DEGREES_PER_HOUR

    if longitude > 180.0:
        longitude -= 360.0
    elif longitude < -180.0:
        longitude += 360.0
    return longitude


def subsolar_point(unix_seconds: float) -> SubsolarPoint:
    return SubsolarPoint(
        lat_deg=subsolar_latitude(unix_seconds),
        lon_deg=subsolar_longitude(unix_seconds),
    )


def subsolar_point_at(dt: datetime) -> SubsolarPoint:
    """Subsolar point for an aware datetime."""
    return subsolar_point(unix_seconds_from_datetime(dt))


def sun_position(
    unix_seconds: float,
    distance: float = GlobeConstants.SUN_DISTANCE,
) -> CartesianPosition:
    """
    Scene position of the light source over the subsolar point.

    Args:
        unix_seconds: UTC instant.
        distance: Distance of the light from the globe centre (globe units).

    Returns:
        Position in the globe's frame, texture offset applied.
    """
    point = subsolar_point(unix_seconds)
    return marker_position(point.lat_deg, point.lon_deg, distance)
