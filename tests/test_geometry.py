import math

import pytest

from cubcaster.geometry import (
    FOV,
    TILE_SIZE,
    WINDOW_WIDTH,
    Point,
    cos_deg,
    degree_to_radian,
    distance,
    normalize_angle,
    projected_wall_height,
    projection_plane_distance,
    sin_deg,
    tan_deg,
)


def test_degree_to_radian_half_turn():
    assert degree_to_radian(180) == pytest.approx(math.pi)


def test_degree_to_radian_zero():
    assert degree_to_radian(0) == 0


def test_distance_pythagorean():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5)


def test_distance_symmetric_and_zero():
    a, b = Point(12.5, -3.0), Point(-7.0, 40.25)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0


@pytest.mark.parametrize("angle", [-720, -450, -90, -1, 0, 45, 359, 360, 540, 1000.5])
def test_normalize_angle_range_and_equivalence(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= 360
    assert cos_deg(result) == pytest.approx(cos_deg(angle), abs=1e-9)
    assert sin_deg(result) == pytest.approx(sin_deg(angle), abs=1e-9)


def test_normalize_angle_negative_quarter():
    assert normalize_angle(-90) == pytest.approx(270)


def test_normalize_angle_full_turn_is_zero():
    assert normalize_angle(360) == 0


@pytest.mark.parametrize("angle", [0, 17, 90, 123.4, 270, 333])
def test_trig_identity(angle):
    assert sin_deg(angle) ** 2 + cos_deg(angle) ** 2 == pytest.approx(1)


@pytest.mark.parametrize("angle", [10, 45, 135, 200, 300])
def test_tan_is_sin_over_cos(angle):
    assert tan_deg(angle) == pytest.approx(sin_deg(angle) / cos_deg(angle))


def test_projection_plane_matches_half_fov():
    assert projection_plane_distance() * tan_deg(FOV / 2) == pytest.approx(WINDOW_WIDTH / 2)


def test_wall_at_tile_distance_fills_plane_distance():
    assert projected_wall_height(TILE_SIZE) == pytest.approx(projection_plane_distance())


@pytest.mark.parametrize("d", [1, 10, 64, 500.5])
def test_wall_height_inverse_to_distance(d):
    assert projected_wall_height(d) * d == pytest.approx(TILE_SIZE * projection_plane_distance())


def test_wall_height_at_zero_distance_is_infinite():
    assert projected_wall_height(0) == math.inf