# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for per-cycle globe composition.
"""
import math

import pytest

from orbitglobe.domain.constants import GlobeConstants
from orbitglobe.domain.heading import HeadingState
from orbitglobe.domain.globe_scene import (
    GlobeFrame,
    TelemetrySample,
    compose_globe_frame,
    marker_placement,
    parse_telemetry_coordinates,
    update_satellite,
)
from orbitglobe.domain.satellites import HUBBLE, ISS
from orbitglobe.domain.solar import subsolar_point
from orbitglobe.domain.spherical_projection import marker_position

NEW_YEAR_2025 = 1735689600.0


def _sample(satellite_id: str, lat: float, lon: float = 20.0) -> TelemetrySample:
    return TelemetrySample(
        satellite_id=satellite_id,
        lat_deg=lat,
        lon_deg=lon,
        altitude_km=420.0,
        timestamp=NEW_YEAR_2025,
    )


class TestParseTelemetryCoordinates:
    """Upstream text fields to a coordinate pair."""

    @pytest.mark.parametrize("lat_text, lon_text, expected", [
        ("12.5", "-40.1", (12.5, -40.1)),
        (" 7.5 ", "1", (7.5, 1.0)),
        ("abc", "10", (0.0, 10.0)),
        ("nan", "5", (0.0, 5.0)),
        ("inf", "3", (0.0, 3.0)),
        (None, "-8", (0.0, -8.0)),
    ])
    def test_parsed(self, lat_text, lon_text, expected):
        assert parse_telemetry_coordinates(lat_text, lon_text) == expected

    @pytest.mark.parametrize("lat_text, lon_text", [
        ("0", "0"),
        (None, None),
        ("", ""),
        ("10", "-10"),
    ])
    def test_no_fix(self, lat_text, lon_text):
        assert parse_telemetry_coordinates(lat_text, lon_text) is None


class TestMarkerPlacement:
    """Satellite icons and ground footprints."""

    def test_in_orbit_marker(self):
        m = marker_placement("iss", 0.0, 0.0, True)
        assert m.in_orbit is True
        assert m.width == ISS.marker_width
        assert m.altitude == ISS.altitude_factor
        assert m.position.z == pytest.approx(0.578)
        assert m.position.y == pytest.approx(0.0, abs=1e-12)

    def test_position_uses_texture_offset(self):
        m = marker_placement("tss", 30.0, 45.0, True)
        assert m.position == marker_position(30.0, 45.0, m.altitude)

    def test_euler_angles(self):
        m = marker_placement("iss", 30.0, 45.0, True)
        assert m.euler_angles == pytest.approx((-math.radians(30.0), math.radians(45.0), 0.0))

    def test_default_footprint(self):
        m = marker_placement("iss", 10.0, 10.0, False)
        assert m.in_orbit is False
        assert m.width == pytest.approx(GlobeConstants.FOOTPRINT_DIAMETER)
        assert m.altitude == pytest.approx(0.555 * 1.01)

    def test_scaled_footprint(self):
        m = marker_placement("hst", 10.0, 10.0, False)
        height_adj = 0.9 + (HUBBLE.footprint_scale / (math.pi / 2)) / 10
        assert m.width == pytest.approx(0.48)
        assert m.altitude == pytest.approx(0.555 * 1.01 * height_adj)
        assert m.altitude < 0.555 * 1.01

    def test_unknown(self):
        assert marker_placement("mir", 1.0, 1.0, True) is None


class TestUpdateSatellite:
    """One satellite across successive samples."""

    def test_first_sample_has_no_orbit(self):
        state = HeadingState()
        frame = update_satellite(state, _sample("iss", 10.0))
        assert frame.marker is not None
        assert frame.footprint is not None
        assert frame.orbit_track is None
        assert state.last_latitude == 10.0

    def test_orbit_follows_heading(self):
        state = HeadingState()
        update_satellite(state, _sample("iss", 10.0))
        north = update_satellite(state, _sample("iss", 11.0))
        south = update_satellite(state, _sample("iss", 10.5))
        assert north.orbit_track.inclination_rad > 0
        assert south.orbit_track.inclination_rad < 0

    def test_reported_altitude_does_not_move_marker(self):
        low = update_satellite(HeadingState(), _sample("iss", 10.0))
        high_sample = TelemetrySample("iss", 10.0, 20.0, 9000.0, NEW_YEAR_2025)
        high = update_satellite(HeadingState(), high_sample)
        assert high_sample.altitude_km == 9000.0
        assert high.marker == low.marker
        assert high.marker.altitude == ISS.altitude_factor

    def test_jump_skips_orbit(self):
        state = HeadingState(last_latitude=10.0)
        frame = update_satellite(state, _sample("iss", 11.0), max_delta_deg=0.5)
        assert frame.orbit_track is None
        assert frame.marker is not None

    def test_unknown_satellite(self):
        state = HeadingState()
        frame = update_satellite(state, _sample("mir", 10.0))
        assert (frame.marker, frame.footprint, frame.orbit_track) == (None, None, None)
        assert frame.satellite_id == "mir"
        assert state.last_latitude == 10.0


class TestComposeGlobeFrame:
    """A full refresh cycle."""

    def test_states_created(self):
        states = {}
        compose_globe_frame(states, [_sample("iss", 10.0), _sample("hst", -5.0)], NEW_YEAR_2025)
        assert set(states) == {"iss", "hst"}
        assert states["hst"].last_latitude == -5.0

    def test_second_cycle_draws_orbits(self):
        states = {}
        compose_globe_frame(states, [_sample("iss", 10.0), _sample("tss", 20.0)], NEW_YEAR_2025)
        frame = compose_globe_frame(
            states, [_sample("iss", 10.4), _sample("tss", 19.6)], NEW_YEAR_2025 + 5,
        )
        assert [s.satellite_id for s in frame.satellites] == ["iss", "tss"]
        assert frame.satellites[0].orbit_track.inclination_rad > 0
        assert frame.satellites[1].orbit_track.inclination_rad < 0

    def test_sun(self):
        frame = compose_globe_frame({}, [], NEW_YEAR_2025, sun_distance=20.0)
        assert isinstance(frame, GlobeFrame)
        assert frame.timestamp == NEW_YEAR_2025
        assert frame.subsolar == subsolar_point(NEW_YEAR_2025)
        sun = frame.sun_position
        assert math.sqrt(sun.x ** 2 + sun.y ** 2 + sun.z ** 2) == pytest.approx(20.0)
        assert frame.satellites == ()

    def test_default_sun_distance(self):
        frame = compose_globe_frame({}, [], NEW_YEAR_2025)
        sun = frame.sun_position
        assert math.sqrt(sun.x ** 2 + sun.y ** 2 + sun.z ** 2) == pytest.approx(
            GlobeConstants.SUN_DISTANCE
        )

    def test_sun_below_equator_in_january(self):
        frame = compose_globe_frame({}, [], NEW_YEAR_2025)
        assert frame.sun_position.y < 0
