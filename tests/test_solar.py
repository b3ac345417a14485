# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the solar ephemeris and subsolar point.

Reference values: NOAA solar position calculator for 2025-01-01T00:00Z gives
a declination of about -23.0 deg and an equation of time of about -3.4 min.
"""
import math
from datetime import datetime, timezone

import pytest

from orbitglobe.domain.solar import (
    SubsolarPoint,
    equation_of_center,
    equation_of_time,
    geometric_mean_longitude,
    mean_anomaly,
    orbit_eccentricity,
    subsolar_latitude,
    subsolar_longitude,
    subsolar_point,
    subsolar_point_at,
    sun_position,
    sun_true_longitude,
)

NEW_YEAR_2025 = 1735689600.0
DAY = 86400.0
YEAR_SAMPLES = [NEW_YEAR_2025 + k * DAY * 1.37 for k in range(267)]


def _utc(*args) -> float:
    return datetime(*args, tzinfo=timezone.utc).timestamp()


class TestSeriesAtJ2000:
    """Series constants at t = 0."""

    def test_eccentricity(self):
        assert orbit_eccentricity(0.0) == 0.016708634

    def test_eccentricity_decreasing(self):
        assert orbit_eccentricity(1.0) < orbit_eccentricity(0.0)

    def test_mean_anomaly(self):
        assert mean_anomaly(0.0) == 357.52911

    def test_mean_anomaly_quadratic_term(self):
        assert mean_anomaly(1.0) == pytest.approx(357.52911 + 35999.05029 - 0.0001537)

    def test_geometric_mean_longitude(self):
        assert geometric_mean_longitude(0.0) == pytest.approx(280.46646)

    def test_equation_of_center(self):
        assert equation_of_center(0.0) == pytest.approx(-0.0843, abs=1e-3)

    def test_true_longitude(self):
        assert sun_true_longitude(0.0) == pytest.approx(280.46646 + equation_of_center(0.0))


class TestGeometricMeanLongitudeRange:
    """Normalized into [0, 360) for any century."""

    @pytest.mark.parametrize("t", [-1.0, -0.37, 0.0, 0.25, 0.5, 1.0, 3.3])
    def test_in_range(self, t):
        assert 0.0 <= geometric_mean_longitude(t) < 360.0


class TestEquationOfTime:
    """Equation of time in minutes."""

    def test_new_year_2025(self):
        assert equation_of_time(NEW_YEAR_2025) == pytest.approx(-3.45, abs=0.1)

    def test_february_minimum(self):
        assert equation_of_time(_utc(2025, 2, 11, 12)) < -13.0

    def test_november_maximum(self):
        assert equation_of_time(_utc(2025, 11, 3, 12)) > 15.0

    def test_bounded(self):
        for t in YEAR_SAMPLES:
            assert abs(equation_of_time(t)) < 17.0


class TestSubsolarLatitude:
    """Subsolar latitude follows the seasons, bounded by the axial tilt."""

    def test_bounded_by_tilt(self):
        for t in YEAR_SAMPLES:
            for hour in (0, 7, 13, 19):
                assert abs(subsolar_latitude(t + hour * 3600)) <= 23.45

    def test_june_solstice(self):
        assert subsolar_latitude(_utc(2025, 6, 21, 2, 42)) > 23.3

    def test_december_solstice(self):
        assert subsolar_latitude(_utc(2025, 12, 21, 15, 3)) < -23.3

    def test_march_equinox(self):
        assert abs(subsolar_latitude(_utc(2025, 3, 20, 9, 1))) < 0.2

    def test_september_equinox(self):
        assert abs(subsolar_latitude(_utc(2025, 9, 22, 18, 19))) < 0.2


class TestSubsolarLongitude:
    """Subsolar longitude from the UTC clock and the equation of time."""

    def test_in_range(self):
        for t in YEAR_SAMPLES:
            for minute in range(0, 24 * 60, 97):
                lon = subsolar_longitude(t + minute * 60)
                assert -180.0 <= lon <= 180.0

    def test_noon_utc_offset_by_equation_of_time(self):
        t = _utc(2025, 11, 3, 12)
        assert subsolar_longitude(t) == pytest.approx(-equation_of_time(t) / 4.0)

    def test_moves_west(self):
        t = _utc(2025, 5, 5, 6)
        assert subsolar_longitude(t + 3600) == pytest.approx(subsolar_longitude(t) - 15.0, abs=0.01)

    def test_wraps_past_antimeridian(self):
        # Near midnight UTC in January the Sun is just past 180 deg.
        lon = subsolar_longitude(NEW_YEAR_2025)
        assert lon < -179.0


class TestSubsolarPoint:
    """End-to-end subsolar point."""

    def test_new_year_2025(self):
        point = subsolar_point(NEW_YEAR_2025)
        assert point.lat_deg == pytest.approx(-23.0, abs=0.05)
        assert point.lon_deg == pytest.approx(-179.14, abs=0.05)

    def test_matches_components(self):
        t = _utc(2025, 7, 14, 16, 20, 5)
        point = subsolar_point(t)
        assert point == SubsolarPoint(subsolar_latitude(t), subsolar_longitude(t))

    def test_frozen(self):
        point = subsolar_point(NEW_YEAR_2025)
        with pytest.raises(AttributeError):
            point.lat_deg = 0.0

    def test_from_datetime(self):
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert subsolar_point_at(dt) == subsolar_point(NEW_YEAR_2025)

    def test_naive_datetime_raises(self):
        with pytest.raises(ValueError):
            subsolar_point_at(datetime(2025, 1, 1))


class TestSunPosition:
    """Light placed over the subsolar point."""

    def test_distance(self):
        pos = sun_position(NEW_YEAR_2025, distance=50.0)
        assert math.sqrt(pos.x ** 2 + pos.y ** 2 + pos.z ** 2) == pytest.approx(50.0)

    def test_southern_summer_below_equator(self):
        # Y is up in the scene frame, so a southern subsolar point has y < 0.
        pos = sun_position(NEW_YEAR_2025, distance=10.0)
        assert pos.y == pytest.approx(10.0 * math.sin(math.radians(subsolar_latitude(NEW_YEAR_2025))))
        assert pos.y < 0
