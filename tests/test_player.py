import pytest

from cubcaster.geometry import PLAYER_SPEED, TILE_SIZE, TO_LEFT, TO_RIGHT, Point
from cubcaster.player import Buttons, Key, Player

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]

CENTER = Point(2.5 * TILE_SIZE, 2.5 * TILE_SIZE)


@pytest.mark.parametrize(
    "code, axis, value",
    [
        (0, "strafe", -1),
        (2, "strafe", 1),
        (13, "walk", 1),
        (1, "walk", -1),
        (123, "rotate", -1),
        (124, "rotate", 1),
    ],
)
def test_key_codes_match_source(code, axis, value):
    buttons = Buttons()
    assert buttons.press(code) is False
    assert getattr(buttons, axis) == value


def test_escape_code_matches_source():
    buttons = Buttons()
    assert buttons.press(53) is True


@pytest.mark.parametrize(
    "key, axis, value",
    [
        (Key.MOVE_LEFT, "strafe", -1),
        (Key.MOVE_RIGHT, "strafe", 1),
        (Key.MOVE_FRONT, "walk", 1),
        (Key.MOVE_BACK, "walk", -1),
        (Key.TURN_LEFT, "rotate", -1),
        (Key.TURN_RIGHT, "rotate", 1),
    ],
)
def test_press_and_release(key, axis, value):
    buttons = Buttons()
    assert buttons.press(key) is False
    assert getattr(buttons, axis) == value
    buttons.release(key)
    assert getattr(buttons, axis) == 0


def test_press_accepts_raw_codes():
    buttons = Buttons()
    buttons.press(13)
    assert buttons.walk == 1


def test_escape_requests_quit():
    buttons = Buttons()
    assert buttons.press(Key.ESC) is True
    assert buttons == Buttons()


def test_unknown_key_ignored():
    buttons = Buttons(walk=1)
    assert buttons.press(99) is False
    buttons.release(99)
    assert buttons == Buttons(walk=1)


def test_reset():
    buttons = Buttons(strafe=1, walk=-1, rotate=1)
    buttons.reset()
    assert buttons == Buttons()


def test_turns_cancel_out():
    player = Player(CENTER, 90)
    player.turn_right()
    assert player.direction == pytest.approx(90 + PLAYER_SPEED // 2)
    player.turn_left()
    assert player.direction == pytest.approx(90)


def test_rotate_wraps():
    player = Player(CENTER, 0)
    player.rotate(TO_LEFT, PLAYER_SPEED // 2)
    assert player.direction == pytest.approx(360 - PLAYER_SPEED // 2)
    player.rotate(TO_RIGHT, 360)
    assert player.direction == pytest.approx(360 - PLAYER_SPEED // 2)


def test_walk_forward():
    player = Player(CENTER, 0)
    player.update(Buttons(walk=1), GRID)
    assert player.position.x == pytest.approx(CENTER.x + PLAYER_SPEED)
    assert player.position.y == pytest.approx(CENTER.y)


def test_walk_backward():
    player = Player(CENTER, 0)
    player.update(Buttons(walk=-1), GRID)
    assert player.position.x == pytest.approx(CENTER.x - PLAYER_SPEED)


def test_strafe_right_moves_perpendicular():
    player = Player(CENTER, 0)
    player.update(Buttons(strafe=1), GRID)
    assert player.position.x == pytest.approx(CENTER.x)
    assert player.position.y == pytest.approx(CENTER.y + PLAYER_SPEED)


def test_wall_blocks_movement():
    start = Point(4 * TILE_SIZE - 2, CENTER.y)
    player = Player(start, 0)
    player.update(Buttons(walk=1), GRID)
    assert player.position == start


def test_rotate_button_turns_each_frame():
    player = Player(CENTER, 90)
    player.update(Buttons(rotate=1), GRID)
    assert player.direction == pytest.approx(90 + PLAYER_SPEED // 4)
    assert player.position == CENTER


def test_idle_update_changes_nothing():
    player = Player(CENTER, 45)
    player.update(Buttons(), GRID)
    assert player == Player(CENTER, 45)