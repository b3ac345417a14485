# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sky-dome geometry for drawing a satellite pass overhead.

Azimuth/elevation points are placed on a hemisphere around the observer
(Y up, north toward -Z, east toward +X), and a pass is drawn as a
quadratic Bezier through rise, culmination and set points pushed back out
onto the dome.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from orbitglobe.domain.spherical_projection import CartesianPosition


@dataclass(frozen=True)
class SkyPoint:
    """A direction in the observer's sky."""
    azimuth_deg: float      # 0 = north, clockwise
    elevation_deg: float    # 0 = horizon, 90 = zenith


def sky_point_to_xyz(point: SkyPoint, radius: float) -> CartesianPosition:
    """Position of a sky direction on a dome of the given radius."""
    theta = math.radians(90.0 - point.elevation_deg)
    phi = math.radians(point.azimuth_deg)
    return CartesianPosition(
        x=radius * math.sin(theta) * math.sin(phi),
        y=radius * math.cos(theta),
        z=-radius * math.sin(theta) * math.cos(phi),
    )


def sample_sky_arc(
    start: SkyPoint,
    peak: SkyPoint,
    end: SkyPoint,
    samples: int,
    radius: float,
) -> list[CartesianPosition]:
    """
    Sample a pass arc across the dome.

    The control point cp = (4 p1 - p0 - p2) / 2 makes the curve pass through
    the peak at t = 0.5. B(t) = (1-t)^2 p0 + 2(1-t)t cp + t^2 p2 is then
    sampled and each point rescaled to the dome radius.

    Args:
        start: Rise point.
        peak: Culmination.
        end: Set point.
        samples: Number of intervals; samples + 1 points are returned.
        radius: Dome radius.

    Raises:
        ValueError: If samples < 1.
    """
    if samples < 1:
        raise ValueError(f"samples must be at least 1, got {samples}")

    p0 = sky_point_to_xyz(start, radius)
    p1 = sky_point_to_xyz(peak, radius)
    p2 = sky_point_to_xyz(end, radius)
    cp = CartesianPosition(
        x=(4 * p1.x - p0.x - p2.x) / 2,
        y=(4 * p1.y - p0.y - p2.y) / 2,
        z=(4 * p1.z - p0.z - p2.z) / 2,
    )

    points: list[CartesianPosition] = []
    for i in range(samples + 1):
        t = i / samples
        a = (1 - t) * (1 - t)
        b = 2 * (1 - t) * t
        c = t * t
        x = a * p0.x + b * cp.x + c * p2.x
        y = a * p0.y + b * cp.y + c * p2.y
        z = a * p0.z + b * cp.z + c * p2.z

        length = math.sqrt(x * x + y * y + z * z)
        if length != 0.0:
            scale = radius / length
            x, y, z = x * scale, y * scale, z * scale
        points.append(CartesianPosition(x=x, y=y, z=z))

    return points
