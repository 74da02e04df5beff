"""The game: window, input handling and the frame loop."""

from __future__ import annotations

import os
import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass, field

from cubcaster.geometry import TO_LEFT, TO_RIGHT
from cubcaster.player import Buttons, Key, Player
from cubcaster.render import Frame, Texture, TextureSet, project_3d
from cubcaster.scene import Scene, SceneError, check_arguments, load_scene

TITLE = "cub3d"
_MOUSE_TURN = 3
_FRAMES_PER_SECOND = 60


@dataclass
class Game:
    """A running scene: the player, held buttons and the frame being drawn."""

    scene: Scene
    textures: TextureSet
    player: Player = field(init=False)
    buttons: Buttons = field(init=False, default_factory=Buttons)
    frame: Frame = field(init=False, default_factory=Frame)
    _mouse_last: int = field(init=False, default=-1, repr=False)

    def __post_init__(self) -> None:
        self.player = Player(self.scene.start, self.scene.direction)

    def _on_mouse(self, x: int, y: int) -> None:
        if not (0 <= x <= self.frame.width and 0 <= y <= self.frame.height):
            return
        if x < self._mouse_last:
            self.player.rotate(TO_LEFT, _MOUSE_TURN)
        elif x > self._mouse_last:
            self.player.rotate(TO_RIGHT, _MOUSE_TURN)
        self._mouse_last = x

    def tick(self) -> Frame:
        """Advance one frame: move the player, then redraw the view."""
        self.player.update(self.buttons, self.scene.grid)
        self.frame = Frame(self.frame.width, self.frame.height)
        project_3d(self.frame, self.player, self.scene, self.textures)
        return self.frame

    def _frame_bytes(self) -> tuple[bytes, str]:
        data = array("I", (color | 0xFF000000 for color in self.frame.pixels))
        layout = "BGRA" if sys.byteorder == "little" else "ARGB"
        return data.tobytes(), layout

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        keymap = {
            pygame.K_a: Key.MOVE_LEFT,
            pygame.K_d: Key.MOVE_RIGHT,
            pygame.K_w: Key.MOVE_FRONT,
            pygame.K_s: Key.MOVE_BACK,
            pygame.K_LEFT: Key.TURN_LEFT,
            pygame.K_RIGHT: Key.TURN_RIGHT,
            pygame.K_ESCAPE: Key.ESC,
        }
        pygame.init()
        try:
            size = (self.frame.width, self.frame.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key in keymap:
                        if self.buttons.press(keymap[event.key]):
                            running = False
                    elif event.type == pygame.KEYUP and event.key in keymap:
                        self.buttons.release(keymap[event.key])
                    elif event.type == pygame.MOUSEMOTION:
                        self._on_mouse(*event.pos)
                if not running:
                    break
                self.tick()
                data, layout = self._frame_bytes()
                surface = pygame.image.frombuffer(data, size, layout).convert()
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(_FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def _load_textures(scene: Scene) -> TextureSet:
    return TextureSet(
        north=Texture.load(scene.north),
        south=Texture.load(scene.south),
        west=Texture.load(scene.west),
        east=Texture.load(scene.east),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named by the single argument."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        scene = load_scene(check_arguments(argv))
    except SceneError as exc:
        print(f"Error\n {exc}", file=sys.stderr)
        return 1
    try:
        textures = _load_textures(scene)
    except (OSError, ValueError) as exc:
        print(f"Error\n texture file error: {exc}", file=sys.stderr)
        return 1
    Game(scene, textures).run()
    return 0