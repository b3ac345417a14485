# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
orbitglobe

Geometry and astronomy core of a satellite-tracking globe: Julian dates and
the subsolar point, degrees/minutes/seconds formatting, projection of
geographic coordinates onto a Y-up scene sphere, and orientation of orbit
rings around the globe from live position samples.
"""

from orbitglobe.domain.constants import (
    AstroConstants,
    GlobeConstants,
)
from orbitglobe.domain.time_conversion import (
    julian_date,
    julian_century,
    unix_seconds_from_julian_date,
    unix_seconds_from_datetime,
    datetime_from_unix_seconds,
    julian_date_from_datetime,
    datetime_from_julian_date,
    utc_decimal_hours,
)
from orbitglobe.domain.solar import (
    SubsolarPoint,
    orbit_eccentricity,
    mean_anomaly,
    geometric_mean_longitude,
    equation_of_center,
    sun_true_longitude,
    equation_of_time,
    subsolar_latitude,
    subsolar_longitude,
    subsolar_point,
    subsolar_point_at,
    sun_position,
)
from orbitglobe.domain.coordinate_format import (
    DMS_FORMAT,
    DM_FORMAT,
    DMS_PAIR_FORMAT,
    DM_PAIR_FORMAT,
    DegMinSec,
    split_deg_min_sec,
    decimal_to_deg_min_sec,
    decimal_to_deg_min,
    format_coordinates_deg_min_sec,
    format_coordinates_deg_min,
    deg_min_sec_to_decimal,
)
from orbitglobe.domain.spherical_projection import (
    CartesianPosition,
    texture_longitude,
    lat_lon_alt_to_xyz,
    xyz_to_lat_lon_alt,
    marker_position,
    marker_euler_angles,
)
from orbitglobe.domain.sky_dome import (
    SkyPoint,
    sky_point_to_xyz,
    sample_sky_arc,
)
from orbitglobe.domain.satellites import (
    OrbitDescriptor,
    SATELLITES,
    get_descriptor,
)
from orbitglobe.domain.orbit_track import (
    OrbitTrackPlacement,
    adjust_coordinates,
    inclination_exponent,
    select_power,
    inclination_correction,
    corrected_inclination,
    rotation_matrix,
    compose_orbit_transform,
    transform_point,
    orbit_track_for_descriptor,
    compute_orbit_track,
)
from orbitglobe.domain.heading import (
    HeadingState,
    HeadingUpdate,
    update_heading,
)
from orbitglobe.domain.globe_scene import (
    TelemetrySample,
    MarkerPlacement,
    SatelliteFrame,
    GlobeFrame,
    parse_telemetry_coordinates,
    marker_placement,
    update_satellite,
    compose_globe_frame,
)
from orbitglobe.version import __version__

__all__ = [
    "AstroConstants",
    "GlobeConstants",
    "julian_date",
    "julian_century",
    "unix_seconds_from_julian_date",
    "unix_seconds_from_datetime",
    "datetime_from_unix_seconds",
    "julian_date_from_datetime",
    "datetime_from_julian_date",
    "utc_decimal_hours",
    "SubsolarPoint",
    "orbit_eccentricity",
    "mean_anomaly",
    "geometric_mean_longitude",
    "equation_of_center",
    "sun_true_longitude",
    "equation_of_time",
    "subsolar_latitude",
    "subsolar_longitude",
    "subsolar_point",
    "subsolar_point_at",
    "sun_position",
    "DMS_FORMAT",
    "DM_FORMAT",
    "DMS_PAIR_FORMAT",
    "DM_PAIR_FORMAT",
    "DegMinSec",
    "split_deg_min_sec",
    "decimal_to_deg_min_sec",
    "decimal_to_deg_min",
    "format_coordinates_deg_min_sec",
    "format_coordinates_deg_min",
    "deg_min_sec_to_decimal",
    "CartesianPosition",
    "texture_longitude",
    "lat_lon_alt_to_xyz",
    "xyz_to_lat_lon_alt",
    "marker_position",
    "marker_euler_angles",
    "SkyPoint",
    "sky_point_to_xyz",
    "sample_sky_arc",
    "OrbitDescriptor",
    "SATELLITES",
    "get_descriptor",
    "OrbitTrackPlacement",
    "adjust_coordinates",
    "inclination_exponent",
    "select_power",
    "inclination_correction",
    "corrected_inclination",
    "rotation_matrix",
    "compose_orbit_transform",
    "transform_point",
    "orbit_track_for_descriptor",
    "compute_orbit_track",
    "HeadingState",
    "HeadingUpdate",
    "update_heading",
    "TelemetrySample",
    "MarkerPlacement",
    "SatelliteFrame",
    "GlobeFrame",
    "parse_telemetry_coordinates",
    "marker_placement",
    "update_satellite",
    "compose_globe_frame",
    "__version__",
]
