"""Grid ray casting: find where a ray first meets a wall."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubcaster.geometry import TILE_SIZE, Point, distance, tan_deg

WALL = "1"


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped and which kind of grid line it crossed."""

    point: Point
    distance: float
    vertical: bool
    is_right: bool
    is_up: bool


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def is_open(point: Point, grid: Sequence[str]) -> bool:
    """True when the point lies inside the grid and not inside a wall."""
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        return False
    col = int(point.x / TILE_SIZE)
    row = int(point.y / TILE_SIZE)
    if not 0 <= row < len(grid):
        return False
    if not 0 <= col < len(grid[row]):
        return False
    return grid[row][col] != WALL


def facing(direction: float) -> tuple[bool, bool]:
    """Return (is_right, is_up) for a normalized direction in degrees."""
    is_up = 180 < direction < 360
    is_right = direction > 270 or direction < 90
    return is_right, is_up


def _march(start: Point, xstep: float, ystep: float, grid: Sequence[str]) -> Point:
    x, y = start.x, start.y
    while is_open(Point(x, y), grid):
        x += xstep
        y += ystep
    return Point(x, y)


def vertical_hit(origin: Point, direction: float, grid: Sequence[str]) -> Point:
    """First wall point met while crossing vertical grid lines."""
    is_right, is_up = facing(direction)
    tangent = tan_deg(direction)
    x = math.floor(origin.x / TILE_SIZE) * TILE_SIZE
    if is_right:
        x += TILE_SIZE
    y = origin.y + tangent * (x - origin.x)
    if not is_right:
        x -= 1
    xstep = TILE_SIZE if is_right else -TILE_SIZE
    ystep = TILE_SIZE * tangent
    if (is_up and ystep > 0) or (not is_up and ystep < 0):
        ystep = -ystep
    return _march(Point(x, y), xstep, ystep, grid)


def horizontal_hit(origin: Point, direction: float, grid: Sequence[str]) -> Point:
    """First wall point met while crossing horizontal grid lines."""
    is_right, is_up = facing(direction)
    tangent = tan_deg(direction)
    y = math.floor(origin.y / TILE_SIZE) * TILE_SIZE
    if not is_up:
        y += TILE_SIZE
    x = origin.x + _divide(y - origin.y, tangent)
    if is_up:
        y -= 1
    ystep = -TILE_SIZE if is_up else TILE_SIZE
    xstep = _divide(TILE_SIZE, tangent)
    if (not is_right and xstep > 0) or (is_right and xstep < 0):
        xstep = -xstep
    return _march(Point(x, y), xstep, ystep, grid)


def cast_ray(origin: Point, direction: float, grid: Sequence[str]) -> RayHit:
    """Cast one ray and return the nearer of its two wall hits."""
    is_right, is_up = facing(direction)
    vertical_point = vertical_hit(origin, direction, grid)
    horizontal_point = horizontal_hit(origin, direction, grid)
    horizontal_distance = distance(origin, horizontal_point)
    vertical_distance = distance(origin, vertical_point)
    if horizontal_distance < vertical_distance:
        return RayHit(horizontal_point, horizontal_distance, False, is_right, is_up)
    return RayHit(vertical_point, vertical_distance, True, is_right, is_up)