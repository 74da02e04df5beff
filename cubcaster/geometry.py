"""Angles, distances and the projection plane used by the ray caster."""

from __future__ import annotations

import math
from dataclasses import dataclass

TILE_SIZE = 64
WINDOW_WIDTH = 720
WINDOW_HEIGHT = 720
FOV = 60
NUM_RAYS = WINDOW_WIDTH
PLAYER_SPEED = 10
TO_LEFT = -1
TO_RIGHT = 1


@dataclass(frozen=True)
class Point:
    """A point in world coordinates (pixels, y growing downwards)."""

    x: float
    y: float


def degree_to_radian(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180.0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize_angle(angle: float) -> float:
    """Bring an angle in degrees into the range [0, 360]."""
    angle = math.remainder(angle, 360)
    if angle < 0:
        angle += 360
    return angle


def cos_deg(angle: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(degree_to_radian(angle))


def sin_deg(angle: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(degree_to_radian(angle))


def tan_deg(angle: float) -> float:
    """Tangent of an angle given in degrees."""
    return math.tan(degree_to_radian(angle))


def projection_plane_distance() -> float:
    """Distance from the player to the projection plane."""
    return (WINDOW_WIDTH // 2) / tan_deg(FOV // 2)


def projected_wall_height(ray_distance: float) -> float:
    """On-screen height of a wall slice seen at the given distance."""
    if ray_distance == 0:
        return math.inf
    return TILE_SIZE * projection_plane_distance() / ray_distance