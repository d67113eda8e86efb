import math

import pytest

from nodemobility.geometry import Rectangle, Side, Vector, calculate_distance


def test_vector_defaults_to_origin():
    assert Vector() == Vector(0.0, 0.0, 0.0)


def test_vector_add_and_sub_are_inverse():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a + b == Vector(2.0, 2.0, 2.0)


def test_vector_length():
    assert Vector(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_calculate_distance_symmetric_and_matches_length():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 7.0)
    assert calculate_distance(a, b) == pytest.approx(calculate_distance(b, a))
    assert calculate_distance(a, b) == pytest.approx((a - b).length())
    assert calculate_distance(a, a) == 0.0


def test_vector_str_and_parse_round_trip():
    v = Vector(1.0, 2.5, -3.0)
    assert str(v) == "1:2.5:-3"
    assert Vector.parse(str(v)) == v


def test_vector_parse_rejects_bad_input():
    with pytest.raises(ValueError):
        Vector.parse("1:2")
    with pytest.raises(ValueError):
        Vector.parse("a:b:c")


def test_rectangle_default_is_degenerate():
    r = Rectangle()
    assert r.is_inside(Vector())
    assert not r.is_inside(Vector(0.1, 0.0, 0.0))


@pytest.mark.parametrize(
    "point, inside",
    [
        (Vector(0.0, 0.0, 0.0), True),
        (Vector(10.0, 10.0, 99.0), True),
        (Vector(5.0, 5.0, 0.0), True),
        (Vector(-0.1, 5.0, 0.0), False),
        (Vector(5.0, 10.1, 0.0), False),
    ],
)
def test_rectangle_is_inside(point, inside):
    assert Rectangle(0.0, 10.0, 0.0, 10.0).is_inside(point) is inside


@pytest.mark.parametrize(
    "point, side",
    [
        (Vector(1.0, 5.0), Side.LEFT),
        (Vector(9.0, 5.0), Side.RIGHT),
        (Vector(5.0, 1.0), Side.BOTTOM),
        (Vector(5.0, 9.0), Side.TOP),
        (Vector(5.0, 5.0), Side.TOP),
        (Vector(-1.0, 5.0), Side.LEFT),
        (Vector(11.0, 5.0), Side.RIGHT),
        (Vector(5.0, -1.0), Side.BOTTOM),
        (Vector(5.0, 11.0), Side.TOP),
        (Vector(-5.0, -1.0), Side.LEFT),
        (Vector(-1.0, -5.0), Side.BOTTOM),
        (Vector(-5.0, 11.0), Side.LEFT),
        (Vector(-1.0, 15.0), Side.TOP),
    ],
)
def test_rectangle_closest_side(point, side):
    assert Rectangle(0.0, 10.0, 0.0, 10.0).closest_side(point) is side


@pytest.mark.parametrize(
    "speed, expected",
    [
        (Vector(1.0, 0.0), Vector(10.0, 5.0, 0.0)),
        (Vector(-1.0, 0.0), Vector(0.0, 5.0, 0.0)),
        (Vector(0.0, 1.0), Vector(5.0, 10.0, 0.0)),
        (Vector(0.0, -1.0), Vector(5.0, 0.0, 0.0)),
        (Vector(1.0, 1.0), Vector(10.0, 10.0, 0.0)),
    ],
)
def test_rectangle_intersection(speed, expected):
    r = Rectangle(0.0, 10.0, 0.0, 10.0)
    assert r.intersection(Vector(5.0, 5.0, 3.0), speed) == expected


def test_intersection_lies_on_boundary_for_oblique_speed():
    r = Rectangle(0.0, 10.0, 0.0, 10.0)
    hit = r.intersection(Vector(2.0, 3.0), Vector(0.7, 0.3))
    assert r.is_inside(hit)
    assert math.isclose(hit.x, 10.0) or math.isclose(hit.y, 10.0)


def test_intersection_requires_inside_position():
    with pytest.raises(ValueError):
        Rectangle(0.0, 10.0, 0.0, 10.0).intersection(Vector(20.0, 5.0), Vector(1.0, 0.0))


def test_intersection_with_zero_speed_fails():
    with pytest.raises(ValueError):
        Rectangle(0.0, 10.0, 0.0, 10.0).intersection(Vector(5.0, 5.0), Vector())


def test_rectangle_str_and_parse_round_trip():
    r = Rectangle(-100.0, 100.0, -50.5, 50.0)
    assert str(r) == "-100|100|-50.5|50"
    assert Rectangle.parse(str(r)) == r


def test_rectangle_parse_rejects_wrong_separator():
    with pytest.raises(ValueError):
        Rectangle.parse("0,10,0,10")