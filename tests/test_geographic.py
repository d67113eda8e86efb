import math

import pytest

from nodemobility.geographic import (
    EARTH_RADIUS,
    EARTH_SEMIMAJOR_AXIS,
    EarthSpheroidType,
    cartesian_to_geographic,
    geographic_to_cartesian,
    rand_cartesian_points_around_geographic_point,
)
from nodemobility.geometry import Vector
from nodemobility.random_allocators import UniformVariable

ALL_TYPES = list(EarthSpheroidType)


def _surface_angle(a: Vector, b: Vector) -> float:
    dot = (a.x * b.x + a.y * b.y + a.z * b.z) / (a.length() * b.length())
    return math.acos(max(-1.0, min(1.0, dot)))


def test_sphere_equator_prime_meridian():
    pos = geographic_to_cartesian(0.0, 0.0, 0.0, EarthSpheroidType.SPHERE)
    assert pos.x == pytest.approx(EARTH_RADIUS)
    assert pos.y == pytest.approx(0.0, abs=1e-6)
    assert pos.z == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "sph_type", [EarthSpheroidType.GRS80, EarthSpheroidType.WGS84]
)
def test_ellipsoid_equator_uses_semimajor_axis(sph_type):
    pos = geographic_to_cartesian(0.0, 0.0, 0.0, sph_type)
    assert pos.x == pytest.approx(EARTH_SEMIMAJOR_AXIS)


def test_sphere_north_pole():
    pos = geographic_to_cartesian(90.0, 0.0, 0.0, EarthSpheroidType.SPHERE)
    assert pos.z == pytest.approx(EARTH_RADIUS)
    assert math.hypot(pos.x, pos.y) == pytest.approx(0.0, abs=1e-6)


def test_altitude_adds_to_radius_on_sphere():
    pos = geographic_to_cartesian(30.0, 45.0, 1000.0, EarthSpheroidType.SPHERE)
    assert pos.length() == pytest.approx(EARTH_RADIUS + 1000.0)


def test_ellipsoid_pole_is_closer_than_equator():
    pole = geographic_to_cartesian(90.0, 0.0, 0.0, EarthSpheroidType.WGS84)
    equator = geographic_to_cartesian(0.0, 0.0, 0.0, EarthSpheroidType.WGS84)
    assert pole.length() < equator.length()


@pytest.mark.parametrize("sph_type", ALL_TYPES)
@pytest.mark.parametrize(
    "lat,lon,alt",
    [
        (0.0, 0.0, 0.0),
        (45.0, 45.0, 100.0),
        (-33.5, 151.2, 50.0),
        (60.0, -120.0, 10000.0),
        (-80.0, -170.0, 0.0),
        (12.3, 179.0, 500.0),
    ],
)
def test_round_trip(sph_type, lat, lon, alt):
    pos = geographic_to_cartesian(lat, lon, alt, sph_type)
    back = cartesian_to_geographic(pos, sph_type)
    assert back.x == pytest.approx(lat, abs=1e-5)
    assert back.y == pytest.approx(lon, abs=1e-9)
    assert back.z == pytest.approx(alt, abs=1.0)


def test_longitude_180_is_canonicalized():
    result = cartesian_to_geographic(
        Vector(-EARTH_RADIUS, 0.0, 0.0), EarthSpheroidType.SPHERE
    )
    assert result.y == -180.0
    assert result.x == pytest.approx(0.0)
    assert result.z == pytest.approx(0.0, abs=1e-6)


def test_generated_points_respect_distance_and_altitude():
    rng = UniformVariable(stream=7)
    origin = geographic_to_cartesian(40.0, -75.0, 0.0, EarthSpheroidType.SPHERE)
    max_dist = 50_000.0
    max_alt = 2_000.0
    points = rand_cartesian_points_around_geographic_point(
        40.0, -75.0, max_alt, 200, max_dist, rng
    )
    assert len(points) == 200
    for point in points:
        assert EARTH_RADIUS - 1e-3 <= point.length() <= EARTH_RADIUS + max_alt + 1e-3
        arc = _surface_angle(origin, point) * EARTH_RADIUS
        assert arc <= max_dist + 1.0


def test_generated_points_are_reproducible_with_same_stream():
    first = rand_cartesian_points_around_geographic_point(
        10.0, 20.0, 100.0, 5, 1000.0, UniformVariable(stream=3)
    )
    second = rand_cartesian_points_around_geographic_point(
        10.0, 20.0, 100.0, 5, 1000.0, UniformVariable(stream=3)
    )
    assert first == second


def test_zero_points_gives_empty_list():
    assert (
        rand_cartesian_points_around_geographic_point(
            0.0, 0.0, 10.0, 0, 1000.0, UniformVariable(stream=1)
        )
        == []
    )


def test_negative_max_altitude_keeps_points_on_surface():
    points = rand_cartesian_points_around_geographic_point(
        -20.0, 30.0, -50.0, 30, 10_000.0, UniformVariable(stream=11)
    )
    for point in points:
        assert point.length() == pytest.approx(EARTH_RADIUS)


def test_polar_origin_is_clamped_and_points_stay_near_pole():
    max_dist = 20_000.0
    points = rand_cartesian_points_around_geographic_point(
        95.0, 0.0, 0.0, 50, max_dist, UniformVariable(stream=5)
    )
    pole = Vector(0.0, 0.0, EARTH_RADIUS)
    for point in points:
        arc = _surface_angle(pole, point) * EARTH_RADIUS
        assert arc <= max_dist + 200.0


def test_generated_points_convert_to_canonical_geographic():
    points = rand_cartesian_points_around_geographic_point(
        0.0, 179.9, 0.0, 50, 100_000.0, UniformVariable(stream=13)
    )
    for point in points:
        geo = cartesian_to_geographic(point, EarthSpheroidType.SPHERE)
        assert -90.0 <= geo.x <= 90.0
        assert -180.0 <= geo.y < 180.0
        assert geo.z == pytest.approx(0.0, abs=1.0)