# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orientation of a satellite's orbit ring around the rendered globe.

A torus of the satellite's ring radius is added as a child of the globe and
rotated so it passes through the satellite's current position at a
plausible inclination and heading. The rotation is an empirical model tuned
by eye, not orbital mechanics: it stays correct however the globe itself is
rotated because it is expressed in the globe's own frame.

Steps, for latitude lat, longitude lon and heading sign h (+1 northbound,
-1 southbound):

    adjusted  = (lat + 180, lon - 180)
    exponent  = pi / multiplier + |lat| (rad) / inclination
    power     = piecewise table lookup on |lat|
    corrected = inclination ** (exponent ** power) * h
    transform = Rz(corrected) @ (Rx(adjusted lat) @ Ry(adjusted lon))

Matrices are 4x4 in the row-vector layout of the consuming scene graph:
a point p maps to p @ M.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from orbitglobe.domain.constants import GlobeConstants
from orbitglobe.domain.satellites import OrbitDescriptor, get_descriptor
from orbitglobe.domain.spherical_projection import CartesianPosition

logger = logging.getLogger(__name__)

X_AXIS = (1.0, 0.0, 0.0)
Y_AXIS = (0.0, 1.0, 0.0)
Z_AXIS = (0.0, 0.0, 1.0)


@dataclass(frozen=True)
class OrbitTrackPlacement:
    """Everything a renderer needs to draw one orbit ring."""
    satellite_id: str
    ring_radius: float
    color: str
    inclination_rad: float          # corrected, signed by heading
    lon_rotation_rad: float
    lat_rotation_rad: float
    transform: np.ndarray = field(compare=False, repr=False)


def adjust_coordinates(lat_deg: float, lon_deg: float) -> tuple[float, float]:
    """Shift satellite coordinates into the ring's rotation frame (degrees)."""
    offset = GlobeConstants.ORBIT_COORDINATE_OFFSET_DEG
    return lat_deg + offset, lon_deg - offset


def inclination_exponent(abs_lat_deg: float, inclination_rad: float, multiplier: float) -> float:
    return math.pi / multiplier + math.radians(abs_lat_deg) / inclination_rad


def select_power(
    abs_lat_deg: float,
    thresholds_deg: Sequence[float],
    powers: Sequence[float],
) -> float:
    """
    Pick the correction power for a latitude.

    Uses the power at the first threshold >= abs_lat_deg. Latitudes above
    every threshold get the last power, so the lookup is total.
    """
    for index, threshold in enumerate(thresholds_deg):
        if abs_lat_deg <= threshold:
            return powers[index]
    return powers[-1]


def inclination_correction(descriptor: OrbitDescriptor, abs_lat_deg: float) -> float:
    """Exponent applied to the inclination at this latitude."""
    exponent = inclination_exponent(
        abs_lat_deg, descriptor.inclination_rad, descriptor.multiplier,
    )
    power = select_power(abs_lat_deg, descriptor.thresholds_deg, descriptor.powers)
    return exponent ** power


def corrected_inclination(
    descriptor: OrbitDescriptor,
    lat_deg: float,
    heading_sign: int,
) -> float:
    """Drawn ring inclination (radians), signed by heading."""
    _check_heading_sign(heading_sign)
    correction = inclination_correction(descriptor, abs(lat_deg))
    return descriptor.inclination_rad ** correction * heading_sign


def rotation_matrix(angle_rad: float, axis: Sequence[float]) -> np.ndarray:
    """
    4x4 rotation by angle_rad about axis, row-vector layout.

    Args:
        angle_rad: Right-handed rotation angle (radians).
        axis: Rotation axis; normalized here.

    Raises:
        ValueError: If axis has zero length.
    """
    u = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(u)
    if norm == 0.0:
        raise ValueError(f"Rotation axis must be non-zero, got {tuple(axis)}")
    ux, uy, uz = u / norm

    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    t = 1.0 - c

    # Rodrigues form for column vectors, transposed below.
    r = np.array([
        [t * ux * ux + c, t * ux * uy - s * uz, t * ux * uz + s * uy],
        [t * ux * uy + s * uz, t * uy * uy + c, t * uy * uz - s * ux],
        [t * ux * uz - s * uy, t * uy * uz + s * ux, t * uz * uz + c],
    ])

    m = np.identity(4)
    m[:3, :3] = r.T
    return m


def compose_orbit_transform(
    inclination_rad: float,
    lon_rotation_rad: float,
    lat_rotation_rad: float,
) -> np.ndarray:
    """Rz(inclination) @ (Rx(lat) @ Ry(lon)); the order is part of the model."""
    r1 = rotation_matrix(inclination_rad, Z_AXIS)
    r2 = rotation_matrix(lon_rotation_rad, Y_AXIS)
    r3 = rotation_matrix(lat_rotation_rad, X_AXIS)
    return r1 @ (r3 @ r2)


def transform_point(matrix: np.ndarray, point: CartesianPosition) -> CartesianPosition:
    """Apply a row-vector 4x4 transform to a point."""
    x, y, z, w = np.array([point.x, point.y, point.z, 1.0]) @ matrix
    return CartesianPosition(x=float(x / w), y=float(y / w), z=float(z / w))


def orbit_track_for_descriptor(
    descriptor: OrbitDescriptor,
    lat_deg: float,
    lon_deg: float,
    heading_sign: int,
) -> OrbitTrackPlacement:
    """
    Orient the orbit ring of a known satellite.

    Args:
        descriptor: Static satellite configuration.
        lat_deg: Current latitude (degrees).
        lon_deg: Current longitude (degrees).
        heading_sign: +1 if latitude is increasing, -1 if decreasing.

    Returns:
        OrbitTrackPlacement with the composite transform.

    Raises:
        ValueError: If heading_sign is not +1 or -1.
    """
    inclination = corrected_inclination(descriptor, lat_deg, heading_sign)
    adj_lat, adj_lon = adjust_coordinates(lat_deg, lon_deg)
    lon_rotation = math.radians(adj_lon)
    lat_rotation = math.radians(adj_lat)

    transform = compose_orbit_transform(inclination, lon_rotation, lat_rotation)
    transform.setflags(write=False)

    return OrbitTrackPlacement(
        satellite_id=descriptor.satellite_id,
        ring_radius=descriptor.ring_radius,
        color=descriptor.color,
        inclination_rad=inclination,
        lon_rotation_rad=lon_rotation,
        lat_rotation_rad=lat_rotation,
        transform=transform,
    )


def compute_orbit_track(
    satellite_id: str,
    lat_deg: float,
    lon_deg: float,
    heading_sign: int,
    catalog: dict[str, OrbitDescriptor] | None = None,
) -> OrbitTrackPlacement | None:
    """
    Orient the orbit ring for a satellite id.

    Returns None when the id is not in the catalog; callers skip drawing
    that ring for the cycle.
    """
    descriptor = get_descriptor(satellite_id, catalog)
    if descriptor is None:
        logger.debug("No orbit descriptor for %r, skipping orbit track", satellite_id)
        return None
    return orbit_track_for_descriptor(descriptor, lat_deg, lon_deg, heading_sign)


def _check_heading_sign(heading_sign: int) -> None:
    if heading_sign not in (1, -1):
        raise ValueError(f"Heading sign must be +1 or -1, got {heading_sign}")
