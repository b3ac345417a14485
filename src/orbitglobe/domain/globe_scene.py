# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-cycle composition of the globe: markers, footprints, orbit rings, Sun.

Each telemetry refresh produces one GlobeFrame from the latest samples.
Nothing here touches a renderer; the frame is plain data a scene graph can
apply. Heading state lives with the caller and is advanced once per sample.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterable

from orbitglobe.domain.constants import GlobeConstants
from orbitglobe.domain.heading import (
    DEFAULT_MAX_LATITUDE_DELTA_DEG,
    HeadingState,
    update_heading,
)
from orbitglobe.domain.orbit_track import OrbitTrackPlacement, orbit_track_for_descriptor
from orbitglobe.domain.satellites import OrbitDescriptor, get_descriptor
from orbitglobe.domain.solar import SubsolarPoint, subsolar_point
from orbitglobe.domain.spherical_projection import (
    CartesianPosition,
    marker_euler_angles,
    marker_position,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetrySample:
    """One position report for a tracked satellite.

    altitude_km is carried through for callers; drawing uses the catalog
    altitude factor, so it never moves the marker.
    """
    satellite_id: str
    lat_deg: float
    lon_deg: float
    altitude_km: float
    timestamp: float        # UTC seconds


@dataclass(frozen=True)
class MarkerPlacement:
    """A square billboard on or above the globe."""
    satellite_id: str
    position: CartesianPosition
    euler_angles: tuple[float, float, float]
    width: float
    altitude: float
    in_orbit: bool


@dataclass(frozen=True)
class SatelliteFrame:
    """What to draw for one satellite this cycle."""
    satellite_id: str
    marker: MarkerPlacement | None
    footprint: MarkerPlacement | None
    orbit_track: OrbitTrackPlacement | None


@dataclass(frozen=True)
class GlobeFrame:
    """Everything drawn on the globe for one refresh."""
    timestamp: float
    subsolar: SubsolarPoint
    sun_position: CartesianPosition
    satellites: tuple[SatelliteFrame, ...]


def parse_telemetry_coordinates(
    lat_text: str | None,
    lon_text: str | None,
) -> tuple[float, float] | None:
    """
    Parse a coordinate pair from upstream text fields.

    Missing or unparsable fields read as 0. A pair summing to 0 is the
    upstream "no fix" value and yields None.
    """
    lat = _parse_float(lat_text)
    lon = _parse_float(lon_text)
    if lat + lon == 0.0:
        return None
    return lat, lon


def _parse_float(text: str | None) -> float:
    if text is None:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _footprint_geometry(descriptor: OrbitDescriptor) -> tuple[float, float]:
    g = GlobeConstants
    scaling = descriptor.footprint_scale
    if scaling == 1.0:
        height_adj = 1.0
    else:
        # scaled footprints sit just below the surface radius
        height_adj = 0.9 + (scaling / (math.pi / 2)) / 10
    width = g.FOOTPRINT_DIAMETER * scaling
    altitude = g.GLOBE_RADIUS_FACTOR * g.SURFACE_MULTIPLIER * height_adj
    return width, altitude


def marker_placement(
    satellite_id: str,
    lat_deg: float,
    lon_deg: float,
    in_orbit: bool,
    catalog: dict[str, OrbitDescriptor] | None = None,
) -> MarkerPlacement | None:
    """
    Place a satellite marker or its ground footprint.

    Args:
        satellite_id: Catalog key.
        lat_deg: Latitude (degrees).
        lon_deg: Longitude (degrees), without texture offset.
        in_orbit: True for the satellite icon at orbital altitude, False for
            the visibility footprint on the surface.
        catalog: Optional catalog override.

    Returns:
        MarkerPlacement, or None for an unknown satellite.
    """
    descriptor = get_descriptor(satellite_id, catalog)
    if descriptor is None:
        return None

    if in_orbit:
        width = descriptor.marker_width
        altitude = descriptor.altitude_factor
    else:
        width, altitude = _footprint_geometry(descriptor)

    return MarkerPlacement(
        satellite_id=satellite_id,
        position=marker_position(lat_deg, lon_deg, altitude),
        euler_angles=marker_euler_angles(lat_deg, lon_deg),
        width=width,
        altitude=altitude,
        in_orbit=in_orbit,
    )


def update_satellite(
    state: HeadingState,
    sample: TelemetrySample,
    max_delta_deg: float = DEFAULT_MAX_LATITUDE_DELTA_DEG,
    catalog: dict[str, OrbitDescriptor] | None = None,
) -> SatelliteFrame:
    """
    Advance one satellite by a sample and say what to draw.

    The heading state is advanced for every sample, including samples for
    satellites missing from the catalog, which draw nothing.
    """
    heading = update_heading(state, sample.lat_deg, max_delta_deg)

    descriptor = get_descriptor(sample.satellite_id, catalog)
    if descriptor is None:
        logger.debug("Unknown satellite %r, nothing to draw", sample.satellite_id)
        return SatelliteFrame(
            satellite_id=sample.satellite_id,
            marker=None,
            footprint=None,
            orbit_track=None,
        )

    orbit_track = None
    if heading.draw_orbit:
        orbit_track = orbit_track_for_descriptor(
            descriptor, sample.lat_deg, sample.lon_deg, heading.heading_sign,
        )
    else:
        logger.debug(
            "Skipping orbit track for %s at lat %.3f (heading not established)",
            sample.satellite_id, sample.lat_deg,
        )

    return SatelliteFrame(
        satellite_id=sample.satellite_id,
        marker=marker_placement(
            sample.satellite_id, sample.lat_deg, sample.lon_deg, True, catalog,
        ),
        footprint=marker_placement(
            sample.satellite_id, sample.lat_deg, sample.lon_deg, False, catalog,
        ),
        orbit_track=orbit_track,
    )


def compose_globe_frame(
    states: dict[str, HeadingState],
    samples: Iterable[TelemetrySample],
    unix_seconds: float,
    sun_distance: float = GlobeConstants.SUN_DISTANCE,
    max_delta_deg: float = DEFAULT_MAX_LATITUDE_DELTA_DEG,
    catalog: dict[str, OrbitDescriptor] | None = None,
) -> GlobeFrame:
    """
    Build the frame for one refresh cycle.

    Args:
        states: Heading state per satellite id; a state is created the
            first time an id is seen.
        samples: Latest telemetry, at most one per satellite.
        unix_seconds: Instant used for the Sun.
        sun_distance: Light distance from the globe centre.
        max_delta_deg: Heading continuity bound.
        catalog: Optional catalog override.

    Returns:
        GlobeFrame with satellite frames in sample order.
    """
    subsolar = subsolar_point(unix_seconds)
    sun = marker_position(subsolar.lat_deg, subsolar.lon_deg, sun_distance)

    frames = []
    for sample in samples:
        state = states.setdefault(sample.satellite_id, HeadingState())
        frames.append(update_satellite(state, sample, max_delta_deg, catalog))

    return GlobeFrame(
        timestamp=unix_seconds,
        subsolar=subsolar,
        sun_position=sun,
        satellites=tuple(frames),
    )
