# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Catalog of tracked satellites and their orbit-track tuning.

Each OrbitDescriptor bundles the static data needed to draw one object:
identity, inclination, ring geometry and the piecewise table that bends the
drawn inclination with latitude. The tables are calibration data tuned by
eye against the rendered globe; their lengths differ per object on purpose.

Adding a tracked object is a data change: add a descriptor to SATELLITES.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class OrbitDescriptor:
    """Static configuration for one tracked satellite.

    satellite_id: short catalog key ("iss")
    name: display name
    norad_id: NORAD catalog number
    inclination_rad: orbital inclination (radians)
    multiplier: visual-scale divisor of the inclination exponent
    ring_radius: orbit ring radius (globe units)
    altitude_factor: marker distance from the globe centre (globe units)
    marker_width: marker billboard size (globe units)
    color: orbit ring colour as #RRGGBB
    speed_kmh: nominal orbital speed (km/h)
    thresholds_deg: ascending |latitude| thresholds (degrees)
    powers: correction powers, one more than thresholds
    footprint_scale: ground footprint size relative to the default
    """
    satellite_id: str
    name: str
    norad_id: int
    inclination_rad: float
    multiplier: float
    ring_radius: float
    altitude_factor: float
    marker_width: float
    color: str
    speed_kmh: float
    thresholds_deg: tuple[float, ...]
    powers: tuple[float, ...]
    footprint_scale: float = 1.0

    def __post_init__(self) -> None:
        if len(self.powers) != len(self.thresholds_deg) + 1:
            raise ValueError(
                f"{self.satellite_id}: expected {len(self.thresholds_deg) + 1} powers "
                f"for {len(self.thresholds_deg)} thresholds, got {len(self.powers)}"
            )
        for lower, upper in zip(self.thresholds_deg, self.thresholds_deg[1:]):
            if upper <= lower:
                raise ValueError(
                    f"{self.satellite_id}: thresholds must be strictly ascending, "
                    f"got {lower} then {upper}"
                )
        if self.multiplier <= 0:
            raise ValueError(f"{self.satellite_id}: multiplier must be positive, got {self.multiplier}")
        if self.inclination_rad <= 0:
            raise ValueError(
                f"{self.satellite_id}: inclination must be positive, got {self.inclination_rad}"
            )

    @property
    def inclination_deg(self) -> float:
        return math.degrees(self.inclination_rad)


ISS = OrbitDescriptor(
    satellite_id="iss",
    name="ISS",
    norad_id=25544,
    inclination_rad=math.radians(51.6),
    multiplier=2.5,
    ring_radius=0.578,
    altitude_factor=0.578,
    marker_width=0.16,
    color="#D62E2E",
    speed_kmh=27540.0,
    thresholds_deg=(12.0, 17.0, 25.0, 33.0, 40.0, 45.0, 49.0, 51.0),
    powers=(0.80, 0.85, 1.00, 1.25, 1.60, 2.00, 2.50, 3.20, 4.00),
)

TIANGONG = OrbitDescriptor(
    satellite_id="tss",
    name="Tiangong",
    norad_id=48274,
    inclination_rad=math.radians(41.5),
    multiplier=2.8,
    ring_radius=0.576,
    altitude_factor=0.576,
    marker_width=0.14,
    color="#E8B923",
    speed_kmh=27612.0,
    thresholds_deg=(15.0, 20.0, 25.0, 30.0, 35.0, 38.0, 40.0, 41.0, 41.5),
    powers=(0.75, 0.85, 1.00, 1.20, 1.45, 1.70, 2.00, 2.30, 2.50, 2.80),
)

HUBBLE = OrbitDescriptor(
    satellite_id="hst",
    name="Hubble",
    norad_id=20580,
    inclination_rad=math.radians(28.5),
    multiplier=3.1,
    ring_radius=0.595,
    altitude_factor=0.595,
    marker_width=0.14,
    color="#3B82F6",
    speed_kmh=27396.0,
    thresholds_deg=(10.0, 15.0, 18.0, 20.0, 22.0, 24.0, 26.0, 27.0),
    powers=(0.35, 0.50, 0.65, 0.80, 1.00, 1.30, 1.75, 2.10, 3.00),
    footprint_scale=1.2,
)

SATELLITES: dict[str, OrbitDescriptor] = {
    d.satellite_id: d for d in (ISS, TIANGONG, HUBBLE)
}


def get_descriptor(
    satellite_id: str,
    catalog: dict[str, OrbitDescriptor] | None = None,
) -> OrbitDescriptor | None:
    """Descriptor for a satellite id, or None if it is not tracked."""
    if catalog is None:
        catalog = SATELLITES
    return catalog.get(satellite_id)
