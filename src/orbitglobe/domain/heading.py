# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Northbound/southbound heading from successive latitude samples.

The orbit ring needs to know whether a satellite is climbing or falling in
latitude. That is read off the change between two telemetry samples, so the
caller keeps one HeadingState per satellite and passes it to every update.

A last latitude of exactly 0 means "no previous sample": the first update
never draws an orbit. A jump larger than the allowed delta is treated as a
stale or garbled sample and also skips the orbit for that cycle. The
latitude is recorded in every case.
"""
from dataclasses import dataclass

# Largest plausible latitude change between samples, per refresh cadence.
IOS_MAX_LATITUDE_DELTA_DEG = 0.5
WATCH_MAX_LATITUDE_DELTA_DEG = 10.0
DEFAULT_MAX_LATITUDE_DELTA_DEG = WATCH_MAX_LATITUDE_DELTA_DEG


@dataclass
class HeadingState:
    """Per-satellite heading memory, owned and mutated by one update path."""
    last_latitude: float = 0.0
    heading_sign: int = 1

    def reset(self) -> None:
        self.last_latitude = 0.0
        self.heading_sign = 1


@dataclass(frozen=True)
class HeadingUpdate:
    """Outcome of one heading update."""
    draw_orbit: bool
    heading_sign: int


def update_heading(
    state: HeadingState,
    current_lat: float,
    max_delta_deg: float = DEFAULT_MAX_LATITUDE_DELTA_DEG,
) -> HeadingUpdate:
    """
    Advance a satellite's heading state with a new latitude.

    Args:
        state: The satellite's HeadingState; updated in place.
        current_lat: Latitude of the new sample (degrees).
        max_delta_deg: Largest latitude change accepted as continuous.

    Returns:
        HeadingUpdate. heading_sign is the state's sign after the update;
        it only changes when draw_orbit is True.

    Raises:
        ValueError: If max_delta_deg is not positive.
    """
    if max_delta_deg <= 0:
        raise ValueError(f"max_delta_deg must be positive, got {max_delta_deg}")

    delta = current_lat - state.last_latitude
    draw_orbit = state.last_latitude != 0 and abs(delta) < max_delta_deg
    if draw_orbit:
        state.heading_sign = -1 if delta < 0 else 1
    state.last_latitude = current_lat

    return HeadingUpdate(draw_orbit=draw_orbit, heading_sign=state.heading_sign)
