# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geographic to scene coordinates on a sphere.

The scene frame is Y-up: geographic (x, y, z) from the usual
spherical-to-Cartesian formulas maps to (-x, z, y). Globe textures are
centred on (0, 0), so anything drawn on the globe first has its longitude
shifted by +90 deg (texture_longitude).

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from orbitglobe.domain.constants import GlobeConstants


@dataclass(frozen=True)
class CartesianPosition:
    """A point in the globe's scene frame."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def texture_longitude(lon_deg: float) -> float:
    """Longitude shifted onto the texture-centred globe."""
    return lon_deg + GlobeConstants.TEXTURE_LONGITUDE_OFFSET_DEG


def lat_lon_alt_to_xyz(lat_deg: float, lon_deg: float, alt: float) -> CartesianPosition:
    """
    Convert latitude/longitude/radius to a scene position.

    Args:
        lat_deg: Latitude (degrees).
        lon_deg: Longitude (degrees), texture offset already applied.
        alt: Distance from the globe centre (scene units).

    Returns:
        CartesianPosition in the (-x, z, y) scene frame.
    """
    lat_rad = math.radians(lat_deg)
    lon_rad = math.radians(lon_deg)
    cos_lat = math.cos(lat_rad)

    x = alt * cos_lat * math.cos(lon_rad)
    y = alt * cos_lat * math.sin(lon_rad)
    z = alt * math.sin(lat_rad)

    return CartesianPosition(x=-x, y=z, z=y)


def xyz_to_lat_lon_alt(position: CartesianPosition) -> tuple[float, float, float]:
    """
    Inverse of lat_lon_alt_to_xyz.

    Returns:
        (lat_deg, lon_deg, alt). The origin maps to (0, 0, 0).
    """
    x = -position.x
    y = position.z
    z = position.y

    alt = math.sqrt(x * x + y * y + z * z)
    if alt == 0.0:
        return 0.0, 0.0, 0.0
    lat_deg = math.degrees(math.asin(z / alt))
    lon_deg = math.degrees(math.atan2(y, x))
    return lat_deg, lon_deg, alt


def marker_position(lat_deg: float, lon_deg: float, alt: float) -> CartesianPosition:
    """Scene position of a marker at a geographic location."""
    return lat_lon_alt_to_xyz(lat_deg, texture_longitude(lon_deg), alt)


def marker_euler_angles(lat_deg: float, lon_deg: float) -> tuple[float, float, float]:
    """
    Orientation of a flat marker facing outward from the globe.

    Returns:
        (pitch, yaw, roll) in radians: pitch about X, yaw about Y, roll about Z.
    """
    return -math.radians(lat_deg), math.radians(lon_deg), 0.0
