"""Player state, held movement buttons and their effect on the player."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from cubcaster.geometry import (
    PLAYER_SPEED,
    TO_LEFT,
    TO_RIGHT,
    Point,
    cos_deg,
    normalize_angle,
    sin_deg,
)
from cubcaster.raycast import is_open


class Key(IntEnum):
    """Key codes the game reacts to."""

    MOVE_LEFT = 0
    MOVE_BACK = 1
    MOVE_RIGHT = 2
    MOVE_FRONT = 13
    ESC = 53
    TURN_LEFT = 123
    TURN_RIGHT = 124


_PRESS = {
    Key.MOVE_LEFT: ("strafe", -1),
    Key.MOVE_RIGHT: ("strafe", 1),
    Key.MOVE_FRONT: ("walk", 1),
    Key.MOVE_BACK: ("walk", -1),
    Key.TURN_LEFT: ("rotate", -1),
    Key.TURN_RIGHT: ("rotate", 1),
}


@dataclass
class Buttons:
    """Which movement keys are held: each axis is -1, 0 or 1."""

    strafe: int = 0
    walk: int = 0
    rotate: int = 0

    def press(self, key: int) -> bool:
        """Record a key press; return True when the key asks to quit."""
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESC:
            return True
        axis, value = _PRESS[key]
        setattr(self, axis, value)
        return False

    def release(self, key: int) -> None:
        """Record a key release."""
        try:
            key = Key(key)
        except ValueError:
            return
        if key in _PRESS:
            setattr(self, _PRESS[key][0], 0)

    def reset(self) -> None:
        """Release every button."""
        self.strafe = 0
        self.walk = 0
        self.rotate = 0


@dataclass
class Player:
    """Position in world pixels and facing direction in degrees."""

    position: Point
    direction: float

    def rotate(self, direction: int, angle: float) -> None:
        """Turn by angle degrees, to the right for 1 and the left for -1."""
        self.direction = normalize_angle(self.direction + direction * angle)

    def turn_left(self) -> None:
        self.rotate(TO_LEFT, PLAYER_SPEED // 2)

    def turn_right(self) -> None:
        self.rotate(TO_RIGHT, PLAYER_SPEED // 2)

    def _step(self, angle: float, amount: int, grid: Sequence[str]) -> None:
        if not amount:
            return
        step = PLAYER_SPEED * amount
        target = Point(
            self.position.x + cos_deg(angle) * step,
            self.position.y + sin_deg(angle) * step,
        )
        if is_open(target, grid):
            self.position = target

    def update(self, buttons: Buttons, grid: Sequence[str]) -> None:
        """Apply one frame of held buttons: turn, then strafe, then walk."""
        self.direction = normalize_angle(
            self.direction + (PLAYER_SPEED // 4) * buttons.rotate
        )
        self._step(self.direction + 90, buttons.strafe, grid)
        self._step(self.direction, buttons.walk, grid)