"""Textures, the frame buffer and projection of the scene onto it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from cubcaster.geometry import (
    FOV,
    NUM_RAYS,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    cos_deg,
    normalize_angle,
    projected_wall_height,
)
from cubcaster.player import Player
from cubcaster.raycast import RayHit, cast_ray
from cubcaster.scene import Scene

# Caps the height of a wall seen from (almost) zero distance.
_MAX_WALL_HEIGHT = 1e9


def rgb(r: int, g: int, b: int) -> int:
    """Pack three colour components into one 0xRRGGBB integer."""
    return r << 16 | g << 8 | b


@dataclass(frozen=True)
class Texture:
    """A wall texture: row-major 0xRRGGBB pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture must not be empty")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    @classmethod
    def load(cls, path: str | Path) -> Texture:
        """Read an image file (XPM, PNG, ...) into a texture."""
        with Image.open(path) as image:
            converted = image.convert("RGB")
            width, height = converted.size
            data = converted.tobytes()
        channels = iter(data)
        pixels = tuple(rgb(r, g, b) for r, g, b in zip(channels, channels, channels))
        return cls(width, height, pixels)

    def pixel(self, x: int, y: int) -> int:
        """Colour at (x, y); coordinates outside the texture are clamped."""
        x = min(max(int(x), 0), self.width - 1)
        y = min(max(int(y), 0), self.height - 1)
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures, one per compass direction."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture

    def pick(self, hit: RayHit) -> Texture:
        """The texture of the wall face a ray hit."""
        if hit.vertical:
            return self.east if hit.is_right else self.west
        return self.north if hit.is_up else self.south


@dataclass
class Frame:
    """A frame buffer of row-major 0xRRGGBB pixels."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match frame size")

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def _fill_rows(self, start: int, stop: int, color: int) -> None:
        start = max(start, 0)
        stop = min(stop, self.height)
        if start < stop:
            count = (stop - start) * self.width
            self.pixels[start * self.width:stop * self.width] = [color] * count


def texture_column(hit: RayHit) -> int:
    """Texture column for a hit: its offset along the wall tile."""
    coordinate = hit.point.y if hit.vertical else hit.point.x
    if not math.isfinite(coordinate):
        return 0
    return int(math.fmod(int(coordinate), TILE_SIZE))


def draw_texture_line(
    frame: Frame,
    x: int,
    top: float,
    hit: RayHit,
    height: float,
    textures: TextureSet,
) -> None:
    """Draw one textured wall slice of the given height from row top down."""
    if height <= 0:
        return
    texture = textures.pick(hit)
    column = texture_column(hit)
    bottom = int(top + height)
    start = max(int(top), 0)
    stop = min(bottom, frame.height)
    scale = texture.height / height
    half = frame.height // 2
    for y in range(start, stop):
        offset = int(int(y - half + height / 2) * scale)
        frame.put(x, y, texture.pixel(column, offset))


def paint_background(
    frame: Frame,
    ceiling: tuple[int, int, int],
    floor: tuple[int, int, int],
) -> None:
    """Fill the upper half with the ceiling colour and the rest with the floor."""
    half = frame.height // 2
    frame._fill_rows(0, half, rgb(*ceiling))
    frame._fill_rows(half, frame.height, rgb(*floor))


def project_3d(
    frame: Frame, player: Player, scene: Scene, textures: TextureSet
) -> None:
    """Render the player's view of the scene into the frame."""
    paint_background(frame, scene.ceiling, scene.floor)
    ray_angle = player.direction - FOV // 2
    end = player.direction + FOV // 2
    step = FOV / NUM_RAYS
    index = 0
    while ray_angle <= end:
        ray_angle += step
        direction = normalize_angle(ray_angle)
        hit = cast_ray(player.position, direction, scene.grid)
        wall_height = projected_wall_height(
            hit.distance * cos_deg(direction - player.direction)
        )
        wall_height = min(wall_height, _MAX_WALL_HEIGHT)
        top = int(frame.height / 2 - wall_height / 2)
        draw_texture_line(frame, index, top, hit, wall_height, textures)
        index += 1