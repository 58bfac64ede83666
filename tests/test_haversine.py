"""
Unit tests for Haversine distance and initial azimuth.
"""

import math

import pytest

from vesselcalc import (
    GeoCoordinate,
    azimuth_between,
    calculate_azimuth,
    calculate_distance,
    distance_between,
)
from vesselcalc.constants import EARTH_RADIUS

METERS_PER_DEGREE = EARTH_RADIUS * math.pi / 180

SAMPLE_POINTS = [
    (37.13461, 126.88848, 37.5011, 127.67278),
    (0.0, 0.0, 10.0, 10.0),
    (-33.9, 18.4, 51.5, -0.1),
    (60.0, -179.5, 60.0, 179.5),
    (-89.0, 45.0, 89.0, -135.0),
]


class TestCalculateDistance:
    """Great-circle distance on the sphere."""

    def test_golden_value(self):
        distance = calculate_distance(37.13461, 126.88848, 37.5011, 127.67278)
        assert distance == pytest.approx(80_443, abs=10)

    def test_deterministic(self):
        args = (37.13461, 126.88848, 37.5011, 127.67278)
        assert calculate_distance(*args) == calculate_distance(*args)

    @pytest.mark.parametrize("lat, lon", [(0, 0), (37.5, 127.0), (-90, 180), (89.9, -179.9)])
    def test_same_point_is_zero(self, lat, lon):
        assert calculate_distance(lat, lon, lat, lon) == 0.0

    @pytest.mark.parametrize("points", SAMPLE_POINTS)
    def test_symmetry(self, points):
        lat1, lon1, lat2, lon2 = points
        assert calculate_distance(lat1, lon1, lat2, lon2) == pytest.approx(
            calculate_distance(lat2, lon2, lat1, lon1), rel=1e-12
        )

    @pytest.mark.parametrize("points", SAMPLE_POINTS)
    def test_non_negative(self, points):
        assert calculate_distance(*points) >= 0.0

    def test_one_degree_along_equator(self):
        assert calculate_distance(0, 0, 0, 1) == pytest.approx(METERS_PER_DEGREE, rel=1e-9)

    def test_one_degree_along_meridian(self):
        assert calculate_distance(10, 30, 11, 30) == pytest.approx(METERS_PER_DEGREE, rel=1e-9)

    def test_across_antimeridian_is_short_way(self):
        distance = calculate_distance(0, 179.5, 0, -179.5)
        assert distance == pytest.approx(METERS_PER_DEGREE, rel=1e-9)

    @pytest.mark.parametrize("points", [(0, 0, 0, 180), (90, 0, -90, 0), (45, -90, -45, 90)])
    def test_antipodal_points_half_circumference(self, points):
        distance = calculate_distance(*points)
        assert not math.isnan(distance)
        assert distance == pytest.approx(math.pi * EARTH_RADIUS, rel=1e-7)

    def test_geo_coordinate_wrapper(self):
        origin = GeoCoordinate(latitude=37.13461, longitude=126.88848)
        destination = GeoCoordinate(latitude=37.5011, longitude=127.67278)

        assert distance_between(origin, destination) == calculate_distance(
            37.13461, 126.88848, 37.5011, 127.67278
        )


class TestCalculateAzimuth:
    """Initial bearing, 0=North, clockwise."""

    @pytest.mark.parametrize(
        "destination, expected",
        [
            ((1, 0), 0.0),
            ((0, 1), 90.0),
            ((-1, 0), 180.0),
            ((0, -1), 270.0),
        ],
    )
    def test_cardinal_directions(self, destination, expected):
        assert calculate_azimuth(0, 0, *destination) == pytest.approx(expected, abs=1e-9)

    def test_same_point_returns_zero(self):
        assert calculate_azimuth(37.5, 127.0, 37.5, 127.0) == 0.0

    @pytest.mark.parametrize("points", SAMPLE_POINTS)
    def test_range(self, points):
        azimuth = calculate_azimuth(*points)
        assert 0.0 <= azimuth < 360.0

    def test_north_east_sample(self):
        azimuth = calculate_azimuth(37.13461, 126.88848, 37.5011, 127.67278)
        assert 0.0 < azimuth < 90.0

    def test_westward_across_antimeridian(self):
        # 179.5E -> 179.5W is a short hop east
        azimuth = calculate_azimuth(0, 179.5, 0, -179.5)
        assert azimuth == pytest.approx(90.0, abs=1e-9)

    def test_geo_coordinate_wrapper(self):
        origin = GeoCoordinate(0.0, 0.0)
        destination = GeoCoordinate(0.0, -1.0)
        assert azimuth_between(origin, destination) == pytest.approx(270.0, abs=1e-9)
